[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "torres"
version = "1.0.0"
description = "Towers of Hanoi in the terminal: the recursive solution and a manual game mode."
requires-python = ">=3.10"
dependencies = []
keywords = ["hanoi", "towers", "puzzle", "recursion", "game", "terminal", "tic-tac-toe"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
torres = "torres.game:main"

[tool.hatch.build.targets.wheel]
packages = ["torres"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
