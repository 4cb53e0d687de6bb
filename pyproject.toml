[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zipkit"
version = "0.1.0"
description = "Zip entry headers, byte-order helpers and small utilities in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "zip",
    "archive",
    "alignment",
    "local file header",
    "central directory",
    "utf-16",
    "bitset",
    "tokenizer",
]
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
    "Topic :: System :: Archiving :: Packaging",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zipkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
