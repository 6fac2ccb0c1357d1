"""Difficulty levels."""

from __future__ import annotations

from enum import IntEnum

_NAMES = {
    1: "Extremely Easy",
    2: "Easy",
    3: "Medium",
    4: "Hard",
    5: "Fiendish",
}

_FLAGS = {
    1: "-cvery easy",
    2: "-ceasy",
    3: "-cmedium",
    4: "-chard",
    5: "-cfiendish",
}


class Level(IntEnum):
    """Puzzle difficulty, numbered from 1."""

    EXTREMELY_EASY = 1
    EASY = 2
    MEDIUM = 3
    HARD = 4
    FIENDISH = 5

    @classmethod
    def from_number(cls, value: int) -> "Level":
        """Map a number to a level; 0 and below give the easiest, above 5 the hardest."""
        if value <= 1:
            return cls.EXTREMELY_EASY
        if value >= 5:
            return cls.FIENDISH
        return cls(value)

    @classmethod
    def levels(cls) -> list["Level"]:
        return list(cls)

    def kennett_flag(self) -> str:
        """The difficulty option understood by the puzzle generator."""
        return _FLAGS[int(self)]

    def __str__(self) -> str:
        return _NAMES[int(self)]