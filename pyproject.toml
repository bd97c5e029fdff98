[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arbor"
version = "0.1.0"
description = "Abstract hierarchies and explicit multi-way, k-way and binary trees with pre-, post-, level- and in-order traversal."
requires-python = ">=3.10"
dependencies = []
keywords = ["tree", "hierarchy", "data structures", "traversal", "binary tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arbor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
