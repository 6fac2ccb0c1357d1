"""The game's colour palette: digit colours 1-9 plus a few named extras."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from numples.consts import BACKGROUND_COLOR, WIN_COLOR

RGBA = tuple[int, int, int, int]


def _rgba(red: float, green: float, blue: float, alpha: float = 1.0) -> RGBA:
    return (
        round(red * 255),
        round(green * 255),
        round(blue * 255),
        round(alpha * 255),
    )


def _opaque(rgb: tuple[int, int, int]) -> RGBA:
    return (*rgb, 255)


COLORS: tuple[RGBA, ...] = (
    _rgba(0.0, 0.0, 0.0),
    _rgba(1.0, 0.0, 0.0),
    _rgba(1.0, 0.5, 0.0),
    _rgba(1.0, 1.0, 0.0),
    _rgba(0.0, 1.0, 0.0),
    _rgba(0.0, 1.0, 1.0),
    _rgba(0.0, 0.0, 1.0),
    _rgba(0.8, 0.2, 1.0),
    _rgba(1.0, 0.0, 1.0),
    _rgba(0.5, 0.5, 0.5),
    _rgba(1.0, 1.0, 1.0),
    _opaque(BACKGROUND_COLOR),
    _rgba(1.0, 0.75, 0.875, 0.5),
    _opaque(WIN_COLOR),
)

_BLACK = 0
_WHITE = 10
_BACKGROUND = 11
_HIGHLIGHT = 12
_WIN = 13


@dataclass(frozen=True)
class Colors:
    """Indexed colours; an index out of range falls back to the first colour."""

    colors: Sequence[RGBA] = field(default=COLORS)

    def get(self, index: int) -> RGBA:
        if not self.colors:
            raise ValueError("Colors asset is empty")
        if 0 <= index < len(self.colors):
            return self.colors[index]
        return self.colors[0]

    def black(self) -> RGBA:
        return self.get(_BLACK)

    def white(self) -> RGBA:
        return self.get(_WHITE)

    def background(self) -> RGBA:
        return self.get(_BACKGROUND)

    def highlight(self) -> RGBA:
        return self.get(_HIGHLIGHT)

    def win(self) -> RGBA:
        return self.get(_WIN)