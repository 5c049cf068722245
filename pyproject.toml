[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kyopro"
version = "0.1.0"
description = "Competitive programming toolkit: modular arithmetic, primes, union-find, Fenwick and segment trees, token input and formatted output"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "data-structures",
    "modular-arithmetic",
    "segment-tree",
    "fenwick-tree",
    "union-find",
    "prime-factorization",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kyopro = "kyopro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kyopro"]

[tool.hatch.build.targets.sdist]
include = ["kyopro", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
