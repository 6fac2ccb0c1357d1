"""Game states and the events that move the game between them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from numples.level import Level


class GameState(Enum):
    """The scene the game is currently in."""

    LOADING = auto()
    TITLE = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()

    @classmethod
    def default(cls) -> "GameState":
        return cls.LOADING


class EventKind(Enum):
    """Kinds of game events."""

    START_GAME = auto()
    ABORT_GAME = auto()
    PAUSE_GAME = auto()
    RENDER_BOARD = auto()


@dataclass(frozen=True)
class NumplesEvent:
    """A game event; ``level`` is set only for ``START_GAME``."""

    kind: EventKind
    level: Optional[Level] = None

    def __post_init__(self) -> None:
        if self.kind is EventKind.START_GAME and self.level is None:
            raise ValueError("START_GAME needs a level")