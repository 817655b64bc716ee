[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codebits"
version = "0.1.0"
description = "Small classic algorithms, puzzles and terminal games"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "sorting",
    "dynamic-programming",
    "puzzles",
    "games",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codebits-lengths = "codebits.lengths:main"
codebits-caesar = "codebits.caesar:main"
codebits-hangman = "codebits.hangman:main"
codebits-tictactoe = "codebits.tic_tac_toe:main"
codebits-guess = "codebits.guess:main"

[tool.hatch.build.targets.wheel]
packages = ["codebits"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
