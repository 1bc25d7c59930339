[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipeline_runner"
version = "0.1.0"
description = "Building blocks for shell-style pipelines: here-document input, chunked line reading, a small printf and string, character, buffer and list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["here-doc", "line reader", "printf", "strings", "linked list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pipeline_runner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
