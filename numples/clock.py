"""The game's elapsed-time clock."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Clock:
    """Seconds elapsed in the current game."""

    elapsed: float = 0.0

    def reset(self) -> None:
        self.elapsed = 0.0

    def update(self, delta: float) -> None:
        self.elapsed += delta

    def __str__(self) -> str:
        minutes, seconds = divmod(int(self.elapsed), 60)
        return f"{minutes:02}:{seconds:02}"