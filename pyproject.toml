[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "findmyflags"
version = "0.1.0"
description = "A small capture-the-flag puzzle: find the flags and enter them one by one."
requires-python = ">=3.10"
dependencies = []
keywords = ["ctf", "puzzle", "flags", "base64", "md5"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
findmyflags = "findmyflags.flags:main"

[tool.hatch.build.targets.wheel]
packages = ["findmyflags"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
