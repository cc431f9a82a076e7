[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "urogue"
version = "0.1.0"
description = "Game rules and save-file tools for an UltraRogue-style dungeon crawler"
requires-python = ">=3.10"
dependencies = []
keywords = ["rogue", "roguelike", "dungeon", "game", "score file"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
urogue-charfile = "urogue.charfile:main"
urogue-scorefile = "urogue.scorefile:main"

[tool.hatch.build.targets.wheel]
packages = ["urogue"]

[tool.pytest.ini_options]
addopts = "-ra"
