"""Competitive programming toolkit: bit and number theory helpers, modular integers, union-find, Fenwick and segment trees, token input and formatted output."""

__version__ = "0.1.0"