[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolver"
version = "0.1.0"
description = "Solvers for a selection of Advent of Code puzzles from 2022 and 2023"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["adventsolver"]

[tool.pytest.ini_options]
addopts = "-ra"
