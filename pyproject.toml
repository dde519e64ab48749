[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "konsolgame"
version = "0.1.0"
description = "Terminal mini-games (Diner Dash, Tic Tac Toe) and the small containers they are built on"
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "console", "terminal", "diner-dash", "tictactoe", "data-structures"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
konsolgame-dinerdash = "konsolgame.dinerdash:main"
konsolgame-tictactoe = "konsolgame.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["konsolgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
