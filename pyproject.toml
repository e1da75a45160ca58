[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonrun"
version = "0.1.0"
description = "Game logic for a top-down roguelike: tile levels, entities, monsters, waves, rooms and player profiles"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "roguelike", "tilemap", "monsters", "waves", "collision"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dungeonrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
