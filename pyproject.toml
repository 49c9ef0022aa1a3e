[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "s3al"
version = "0.1.0"
description = "Building blocks for a simulated shell: command-line parsing, an in-memory file system with JSON snapshots, shell commands and terminal line editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "simulator", "virtual filesystem", "command line", "parser", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["s3al"]

[tool.hatch.build.targets.sdist]
include = ["s3al", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
