"""Classic data structures and algorithms for study: containers, trees, hashing, sorting, searching and puzzles."""

__version__ = "0.1.0"