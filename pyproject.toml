[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blastsolver"
version = "0.1.0"
description = "Finds orders and placements that fit three pieces onto an 8x8 block puzzle board"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "solver", "block", "grid", "backtracking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
blastsolver = "blastsolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blastsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
