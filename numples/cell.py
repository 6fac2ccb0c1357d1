"""A single sudoku cell: a value and a set of pencilled candidates."""

from __future__ import annotations

from dataclasses import dataclass

_VALUE_MASK = 0b0000_0000_0000_1111
_CANDIDATES_MASK = 0b0001_1111_1111_0000
_ALL_MASK = 0b0001_1111_1111_1111


def _bit(value: int) -> int:
    return 1 << (value + 3)


def _is_digit(value: int) -> bool:
    return 1 <= value <= 9


@dataclass
class Cell:
    """Packs the value in the low four bits and candidates 1-9 above them."""

    bits: int = _CANDIDATES_MASK

    def value(self) -> int:
        """The placed value, or 0 when the cell is empty."""
        return self.bits & _VALUE_MASK

    def set_value(self, value: int) -> bool:
        """Place or clear (with 0) a value; return whether the cell changed.

        A value can only be placed in an empty cell that still lists it
        as a candidate.
        """
        current = self.value()
        if value < 0 or value > 9 or value == current:
            return False
        if value == 0:
            self.bits &= _CANDIDATES_MASK
            return True
        if current == 0 and self.is_candidate_set(value):
            self.bits |= value
            return True
        return False

    def toggle_candidate(self, value: int) -> bool:
        if not _is_digit(value):
            return False
        self.bits ^= _bit(value)
        return True

    def is_candidate_set(self, value: int) -> bool:
        return _is_digit(value) and bool(self.bits & _bit(value))

    def clean_candidate(self, value: int) -> bool:
        """Remove a candidate; return whether it was present."""
        if not self.is_candidate_set(value):
            return False
        self.bits &= _ALL_MASK ^ _bit(value)
        return True

    def candidates(self) -> list[int]:
        return [digit for digit in range(1, 10) if self.is_candidate_set(digit)]

    def copy(self) -> "Cell":
        return Cell(self.bits)