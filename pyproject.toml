[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anyconv"
version = "0.1.0"
description = "Lenient conversion of arbitrary values into integers, lists and string-keyed dictionaries"
requires-python = ">=3.10"
keywords = ["conversion", "casting", "coercion", "json", "protobuf", "dataclasses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "protobuf",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["anyconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
