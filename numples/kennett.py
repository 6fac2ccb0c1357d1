"""Puzzle generation through the external ``sudoku`` command."""

from __future__ import annotations

import subprocess
from typing import Union

from numples.level import Level

_BOARD_CELLS = 81


class KennettError(OSError):
    """The generator produced something that is not a puzzle."""


def parse_puzzle(data: Union[bytes, str]) -> list[int]:
    """Read 81 cells from generator output: digits as values, '.' as empty.

    Every other character is ignored.
    """
    text = data.decode("latin-1") if isinstance(data, bytes) else data
    cells = [0 if ch == "." else int(ch) for ch in text if ch == "." or "0" <= ch <= "9"]
    if len(cells) != _BOARD_CELLS:
        raise KennettError("wrong size")
    return cells


def generate(level: Level) -> list[int]:
    """Run the generator for a level and return its 81 cells."""
    result = subprocess.run(
        ["sudoku", "-g", level.kennett_flag()],
        capture_output=True,
        check=False,
    )
    return parse_puzzle(result.stdout)