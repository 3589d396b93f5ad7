[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datastruct"
version = "0.1.0"
description = "Classic data structures and algorithms: vectors, stacks, queues, lists, bitmaps, binary trees, BSTs and hash tables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "binary search tree",
    "hash table",
    "bitmap",
    "sieve",
    "stack",
    "queue",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["datastruct"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
