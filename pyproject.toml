[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iniconf"
version = "4.17.0"
description = "Order- and comment-preserving INI file reader and writer with multi-key and multi-line values"
requires-python = ">=3.10"
dependencies = []
keywords = ["ini", "configuration", "config", "parser", "settings"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iniconf"]

[tool.pytest.ini_options]
addopts = "-ra"
