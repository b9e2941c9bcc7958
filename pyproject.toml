[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cutil"
version = "0.1.0"
description = "Small utilities: string helpers, argument parsing, logging, synchronisation primitives and file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "argument-parser", "logging", "threading", "rcu", "strings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
