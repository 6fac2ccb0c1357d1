"""The game's scenes: title menu, play, pause and the winning screen.

Each scene takes pygame events in ``handle_event``, advances in ``update``
and paints itself in ``draw``. ``handle_event`` and ``update`` return what
should happen next: a ``GameState`` to switch to, a ``NumplesEvent`` for
the application to handle, ``QUIT``, or ``None``.
"""

from __future__ import annotations

import functools
from typing import Optional, Union

import pygame

from numples.board import Board
from numples.clock import Clock
from numples.consts import (
    BACKGROUND_COLOR,
    CANDIDATE_SIZE,
    CELL_SIZE,
    MAGICAL_ADJUSTMENT_NUMBER,
    RESOLUTION,
    SELECTED_COLOR,
    TITLE,
    TITLE_COLOR,
    UNSELECTED_COLOR,
    WIN_COLOR,
)
from numples.controls import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    ESCAPE,
    PAUSE,
    QUIT,
    KeyPress,
    board_key,
    cell_at,
    clock_visible,
    error_blink,
    gameover_key,
    pause_key,
    title_key,
)
from numples.level import Level
from numples.palette import Colors
from numples.states import EventKind, GameState, NumplesEvent

Transition = Union[NumplesEvent, GameState, str, None]

# Mesh sizes.
_CELL_RADIUS = CELL_SIZE / 2.0 - 4.0
_CANDIDATE_RADIUS = CANDIDATE_SIZE / 2.0 - 4.0
_LINE_WIDTH = 9.0
_LINE_LENGTH = CELL_SIZE * 9.0 + 4.5
_SHADOW_OFFSET = 4

_KEY_NAMES = {
    pygame.K_ESCAPE: ESCAPE,
    pygame.K_PAUSE: PAUSE,
    pygame.K_UP: ARROW_UP,
    pygame.K_DOWN: ARROW_DOWN,
    pygame.K_LEFT: ARROW_LEFT,
    pygame.K_RIGHT: ARROW_RIGHT,
}

_DIGIT_KEYS = {
    **{pygame.K_0 + digit: digit for digit in range(10)},
    pygame.K_KP0: 0,
    pygame.K_KP1: 1,
    pygame.K_KP2: 2,
    pygame.K_KP3: 3,
    pygame.K_KP4: 4,
    pygame.K_KP5: 5,
    pygame.K_KP6: 6,
    pygame.K_KP7: 7,
    pygame.K_KP8: 8,
    pygame.K_KP9: 9,
}


def _key_press(event: pygame.event.Event) -> Optional[tuple[KeyPress, bool]]:
    """Turn a pygame keyboard event into a key press and the Ctrl state."""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return None
    text = getattr(event, "unicode", "") or ""
    key = _KEY_NAMES.get(event.key, text)
    press = KeyPress(
        key=key,
        digit=_DIGIT_KEYS.get(event.key),
        text=text or None,
        pressed=event.type == pygame.KEYDOWN,
    )
    ctrl = bool(getattr(event, "mod", 0) & pygame.KMOD_CTRL)
    return press, ctrl


def _is_left_click(event: pygame.event.Event) -> bool:
    return event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", 0) == 1


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _rgb(color: tuple[int, ...]) -> tuple[int, int, int]:
    return color[0], color[1], color[2]


def _to_screen(surface: pygame.Surface, wx: float, wy: float) -> tuple[float, float]:
    """Convert centre-origin, y-up coordinates to surface pixels."""
    width, height = surface.get_size()
    return width / 2.0 + wx, height / 2.0 - wy


def _paint_rect(
    surface: pygame.Surface,
    color: tuple[int, ...],
    wx: float,
    wy: float,
    width: float,
    height: float,
) -> None:
    rect = pygame.Rect(0, 0, round(width), round(height))
    sx, sy = _to_screen(surface, wx, wy)
    rect.center = (round(sx), round(sy))
    if len(color) == 4 and color[3] < 255:
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        layer.fill(color)
        surface.blit(layer, rect.topleft)
    else:
        pygame.draw.rect(surface, _rgb(color), rect)


def _paint_circle(
    surface: pygame.Surface, color: tuple[int, ...], wx: float, wy: float, radius: float
) -> None:
    sx, sy = _to_screen(surface, wx, wy)
    pygame.draw.circle(surface, _rgb(color), (round(sx), round(sy)), round(radius))


def _render_text(
    text: str, size: int, color: tuple[int, int, int], shadow: bool = False
) -> pygame.Surface:
    font = _font(size)
    face = font.render(text, True, color)
    if not shadow:
        return face
    width, height = face.get_size()
    combined = pygame.Surface(
        (width + _SHADOW_OFFSET, height + _SHADOW_OFFSET), pygame.SRCALPHA
    )
    shade = font.render(text, True, (0, 0, 0))
    shade.set_alpha(191)
    combined.blit(shade, (_SHADOW_OFFSET, _SHADOW_OFFSET))
    combined.blit(face, (0, 0))
    return combined


class TitleScene:
    """The level menu: type 1-5 or click a level to start, Escape to quit."""

    def __init__(self, size: tuple[float, float] = RESOLUTION) -> None:
        self.size = size
        self.elapsed = 0.0
        self._mouse_y: Optional[float] = None

    def _rows(self) -> list[tuple[Level, float, float]]:
        """Each level with the top and height of its menu row."""
        height = self.size[1]
        return [
            (level, height * number / 6.0, height * 0.12)
            for number, level in enumerate(Level.levels(), start=1)
        ]

    @property
    def selected(self) -> Optional[Level]:
        """The level under the mouse, if any."""
        if self._mouse_y is None:
            return None
        for level, top, height in self._rows():
            half = height / 2.0
            centre = top + half
            if centre - half < self._mouse_y < centre + half:
                return level
        return None

    def handle_event(self, event: pygame.event.Event) -> Transition:
        converted = _key_press(event)
        if converted is not None:
            press, _ = converted
            return title_key(press)
        if event.type == pygame.MOUSEMOTION:
            self._mouse_y = event.pos[1]
            return None
        if _is_left_click(event):
            self._mouse_y = event.pos[1]
            level = self.selected
            if level is not None:
                return NumplesEvent(EventKind.START_GAME, level)
        return None

    def update(self, dt: float) -> Transition:
        """Count the time spent on the menu; the menu never leaves by itself."""
        self.elapsed += dt
        return None

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        width, height = surface.get_size()
        scale = height / self.size[1]

        title = _render_text(TITLE, 48, TITLE_COLOR, shadow=True)
        surface.blit(title, title.get_rect(midtop=(width // 2, 0)))

        selected = self.selected
        for level, top, row_height in self._rows():
            top *= scale
            row_height *= scale
            is_selected = level is selected
            if is_selected:
                pygame.draw.rect(
                    surface,
                    (255, 255, 255),
                    pygame.Rect(0, round(top), width, round(row_height)),
                )
            color = SELECTED_COLOR if is_selected else UNSELECTED_COLOR
            label = _render_text(f"{int(level)}. {level}", 32, color)
            surface.blit(
                label,
                label.get_rect(center=(width // 2, round(top + row_height / 2.0))),
            )


class GameplayScene:
    """A game in progress: the board, its clock and the player's input."""

    def __init__(
        self,
        level: Level,
        board: Optional[Board] = None,
        colors: Optional[Colors] = None,
    ) -> None:
        self.level = level
        self.board = Board.from_level(level) if board is None else board
        self.colors = Colors() if colors is None else colors
        self.clock = Clock()
        self.paused = False
        self.focused = True
        self.clock_visible = True
        self._elapsed = 0.0

    def _apply(self, game_event: Optional[NumplesEvent]) -> Transition:
        if game_event is None:
            return None
        if game_event.kind is EventKind.ABORT_GAME:
            return GameState.TITLE
        if game_event.kind is EventKind.PAUSE_GAME:
            self.paused = True
            return GameState.PAUSED
        if game_event.kind is EventKind.RENDER_BOARD and self.board.is_done():
            return GameState.GAME_OVER
        return None

    def handle_event(self, event: pygame.event.Event) -> Transition:
        converted = _key_press(event)
        if converted is not None:
            press, ctrl = converted
            return self._apply(board_key(self.board, press, ctrl))
        if event.type == pygame.WINDOWFOCUSLOST:
            self.focused = False
        elif event.type == pygame.WINDOWFOCUSGAINED:
            self.focused = True
        elif event.type == pygame.MOUSEMOTION:
            self.clock_visible = clock_visible(event.pos[1])
        elif _is_left_click(event):
            x, y = event.pos
            self.clock_visible = clock_visible(y)
            cell = cell_at(x, y)
            if cell is not None:
                self.board.set_highlight(*cell)
        return None

    def update(self, dt: float) -> Transition:
        self.clock.update(dt)
        self._elapsed += dt
        if not self.focused:
            self.paused = True
            return GameState.PAUSED
        self.paused = False
        if self.board.is_done():
            return GameState.GAME_OVER
        return None

    def draw(self, surface: pygame.Surface) -> None:
        self._draw(surface, won=False)

    def _draw(self, surface: pygame.Surface, won: bool) -> None:
        colors = self.colors
        win = colors.win()
        surface.fill(_rgb(win if won else colors.black()))

        box = CELL_SIZE * 3.0
        for by in range(3):
            for bx in range(3):
                _paint_rect(
                    surface,
                    win if won else colors.white(),
                    (bx - 1) * box,
                    (by - 1) * box + MAGICAL_ADJUSTMENT_NUMBER,
                    box,
                    box,
                )

        for y in range(9):
            for x in range(9):
                _paint_rect(
                    surface,
                    win if won else colors.background(),
                    (x - 4) * CELL_SIZE,
                    (y - 4) * CELL_SIZE + MAGICAL_ADJUSTMENT_NUMBER,
                    CELL_SIZE * 0.9,
                    CELL_SIZE * 0.9,
                )

        line_color = win if won else colors.get(0)
        size_x, size_y = self.board.size()
        for i in range(4):
            _paint_rect(
                surface,
                line_color,
                0.0,
                box * i - size_y / 2.0 + MAGICAL_ADJUSTMENT_NUMBER,
                _LINE_LENGTH,
                _LINE_WIDTH,
            )
            _paint_rect(
                surface,
                line_color,
                box * i - size_x / 2.0,
                MAGICAL_ADJUSTMENT_NUMBER,
                _LINE_WIDTH,
                _LINE_LENGTH,
            )

        current = self.board.current()
        if not won:
            cx, cy = current.cursor_position()
            _paint_rect(surface, colors.highlight(), cx, cy, CELL_SIZE, CELL_SIZE)

        for y in range(9):
            for x in range(9):
                self._draw_cell(
                    surface,
                    current.cell(x, y),
                    (x - 4) * CELL_SIZE,
                    (y - 4) * CELL_SIZE + MAGICAL_ADJUSTMENT_NUMBER,
                )

        width, height = surface.get_size()
        level_label = _render_text(str(self.level), 32, TITLE_COLOR)
        surface.blit(level_label, level_label.get_rect(bottomleft=(8, height - 8)))
        if won or self.clock_visible:
            clock_label = _render_text(str(self.clock), 32, TITLE_COLOR)
            surface.blit(
                clock_label, clock_label.get_rect(bottomright=(width - 8, height - 16))
            )

    def _draw_cell(self, surface: pygame.Surface, cell, wx: float, wy: float) -> None:
        value = cell.value()
        if value:
            _paint_circle(surface, self.colors.get(value), wx, wy, _CELL_RADIUS)
            return
        candidates = cell.candidates()
        if not candidates:
            _paint_rect(
                surface,
                self.colors.get(error_blink(self._elapsed)),
                wx,
                wy,
                CELL_SIZE,
                CELL_SIZE,
            )
            return
        for digit in candidates:
            row, column = divmod(digit - 1, 3)
            _paint_circle(
                surface,
                self.colors.get(digit),
                wx + (column - 1) * CANDIDATE_SIZE,
                wy + (row - 1) * CANDIDATE_SIZE,
                _CANDIDATE_RADIUS,
            )


class PauseScene:
    """Shown while a game is paused; Escape or Pause resumes it."""

    def __init__(self) -> None:
        self.elapsed = 0.0

    def handle_event(self, event: pygame.event.Event) -> Transition:
        converted = _key_press(event)
        if converted is None:
            return None
        press, _ = converted
        return pause_key(press)

    def update(self, dt: float) -> Transition:
        """Count the time spent paused; only a key press resumes the game."""
        self.elapsed += dt
        return None

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND_COLOR)
        width, height = surface.get_size()
        label = _render_text("Paused", 48, TITLE_COLOR, shadow=True)
        surface.blit(label, label.get_rect(midtop=(width // 2, height // 2)))


class GameOverScene:
    """The solved board in winning colours; Escape returns to the title."""

    background = WIN_COLOR

    def __init__(self, gameplay: GameplayScene) -> None:
        self.gameplay = gameplay
        self.elapsed = 0.0

    def handle_event(self, event: pygame.event.Event) -> Transition:
        converted = _key_press(event)
        if converted is None:
            return None
        press, _ = converted
        return gameover_key(press)

    def update(self, dt: float) -> Transition:
        """Count the time the winning screen has been shown; the game clock stays stopped."""
        self.elapsed += dt
        return None

    def draw(self, surface: pygame.Surface) -> None:
        self.gameplay._draw(surface, won=True)


__all__ = [
    "GameOverScene",
    "GameplayScene",
    "PauseScene",
    "QUIT",
    "TitleScene",
    "Transition",
]