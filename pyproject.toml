[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "halligalli"
version = "0.1.0"
description = "Game state for the card game Halli Galli: cards, decks, the bell and turn tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["halli galli", "card game", "board game", "game logic"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["halligalli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
