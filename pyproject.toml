[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nbtree"
version = "0.1.0"
description = "Array-backed non-binary tree with traversals, search and an interactive menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "non-binary tree", "traversal", "data structures", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nbtree = "nbtree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nbtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
