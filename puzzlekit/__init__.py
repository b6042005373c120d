"""Solutions to classic programming puzzles, one plain function per puzzle."""

__version__ = "0.1.0"