"""Small classic algorithms, puzzles and terminal games."""

__version__ = "0.1.0"