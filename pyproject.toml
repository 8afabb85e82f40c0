[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexxagon"
version = "1.0.0"
description = "Hexxagon board game with a computer opponent, hot-seat play, save files and a leaderboard"
requires-python = ">=3.10"
keywords = ["hexxagon", "game", "board-game", "hexagon", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hexxagon = "hexxagon.window:main"

[tool.hatch.build.targets.wheel]
packages = ["hexxagon"]

[tool.pytest.ini_options]
addopts = "-ra"
