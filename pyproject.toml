[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubestate"
version = "0.1.0"
description = "3x3 Rubik's cube state models: flat list, nested grid and bitboard representations with face turns and corner encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubiks-cube", "puzzle", "bitboard", "cube"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["cubestate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
