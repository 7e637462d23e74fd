[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edhistory"
version = "0.14.0"
description = "Revert-style undo history of buffer snapshots for ed-like editors"
requires-python = ">=3.10"
dependencies = []
keywords = ["ed", "editor", "undo", "history", "snapshot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edhistory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
