[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tasklist"
version = "0.1.0"
description = "A simple command-line ToDo list stored as CSV in your home directory"
requires-python = ">=3.10"
keywords = ["todo", "tasks", "csv", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "portalocker",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tasks = "tasklist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tasklist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
