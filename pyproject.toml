[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towntycoon"
version = "0.1.0"
description = "Building blocks for a turn-based town-building game on a text terminal: map, status bar, lot picker and a rock-scissors-paper side job."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "city-builder", "terminal", "tycoon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["towntycoon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
