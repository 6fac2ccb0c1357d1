"""A sudoku game played with coloured discs, with its board logic usable on its own."""

__version__ = "1.0.1"