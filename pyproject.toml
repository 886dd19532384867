[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adtkit"
version = "0.1.0"
description = "Small abstract data types: counters, array and linked lists, a sorted list, a queue, a stack, a calendar date and complex numbers."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "abstract data types", "linked list", "stack", "queue", "complex numbers", "date"]
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
packages = ["adtkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
