"""Solutions to classic algorithm puzzles on trees, lists, strings, arrays and numbers."""

__version__ = "0.1.0"