"""Input rules: what each key press or mouse position does in each scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from numples.board import Board
from numples.consts import CELL_SIZE
from numples.level import Level
from numples.states import EventKind, GameState, NumplesEvent

ESCAPE = "Escape"
PAUSE = "Pause"
ARROW_UP = "ArrowUp"
ARROW_DOWN = "ArrowDown"
ARROW_LEFT = "ArrowLeft"
ARROW_RIGHT = "ArrowRight"
CONTROL = "Control"

QUIT = "quit"

_MOVES = {
    ARROW_UP: (0, 1),
    ARROW_DOWN: (0, -1),
    ARROW_LEFT: (-1, 0),
    ARROW_RIGHT: (1, 0),
}

_LEVEL_TEXTS = {str(int(level)): level for level in Level.levels()}

_BLINK_PERIOD = 0.125
_BLINK_ON = 0.0625
_BLINK_FIRST = 1
_BLINK_SECOND = 3


@dataclass(frozen=True)
class KeyPress:
    """One keyboard event.

    ``key`` is the logical key (a name such as ``"Escape"`` or the typed
    character), ``digit`` the digit of a number-row or keypad key, and
    ``text`` the text the key produced, if any.
    """

    key: str
    digit: Optional[int] = None
    text: Optional[str] = None
    pressed: bool = True
    repeat: bool = False

    @property
    def fresh(self) -> bool:
        """Pressed now, not an auto-repeat."""
        return self.pressed and not self.repeat


def _render() -> NumplesEvent:
    return NumplesEvent(EventKind.RENDER_BOARD)


def board_key(board: Board, press: KeyPress, ctrl: bool) -> Optional[NumplesEvent]:
    """Apply a key press to the board during play and return the event it raises.

    Digits place values, or with Ctrl toggle candidates; 0 clears the cell.
    """
    if not press.fresh:
        return None

    if press.key == ESCAPE:
        return NumplesEvent(EventKind.ABORT_GAME)
    if press.key == PAUSE:
        return NumplesEvent(EventKind.PAUSE_GAME)
    if press.key in _MOVES:
        dx, dy = _MOVES[press.key]
        x, y = board.highlight()
        board.set_highlight(x + dx, y + dy)
    elif press.key in ("u", "U") and board.undo():
        return _render()

    digit = press.digit
    if digit is None or not 0 <= digit <= 9:
        return None
    if digit != 0 and ctrl:
        changed = board.toggle_candidate(digit)
    else:
        changed = board.set_value(digit)
    return _render() if changed else None


def title_key(press: KeyPress) -> Union[NumplesEvent, str, None]:
    """On the title screen: Escape quits, typing 1-5 starts that level."""
    if not press.pressed:
        return None
    if not press.repeat and press.key == ESCAPE:
        return QUIT
    if press.text is not None and press.text in _LEVEL_TEXTS:
        return NumplesEvent(EventKind.START_GAME, _LEVEL_TEXTS[press.text])
    return None


def pause_key(press: KeyPress) -> Optional[GameState]:
    """While paused, Escape or Pause resumes play."""
    if press.fresh and press.key in (ESCAPE, PAUSE):
        return GameState.PLAYING
    return None


def gameover_key(press: KeyPress) -> Optional[GameState]:
    """After a win, Escape goes back to the title."""
    if press.fresh and press.key == ESCAPE:
        return GameState.TITLE
    return None


def is_quit(press: KeyPress, ctrl: bool) -> bool:
    """Ctrl+Q quits from anywhere."""
    return ctrl and press.pressed and press.key in ("q", "Q")


def _row(y: float) -> int:
    return 9 - int(y / CELL_SIZE + 0.75)


def cell_at(x: float, y: float) -> Optional[tuple[int, int]]:
    """The board cell under a window position, or None outside the board."""
    column = int(x / CELL_SIZE - 0.5)
    row = _row(y)
    if 0 <= column < 9 and 0 <= row < 9:
        return column, row
    return None


def clock_visible(y: float) -> bool:
    """The clock shows only while the mouse is below the board."""
    return _row(y) < 0


def error_blink(elapsed: float) -> int:
    """Palette index for a cell with no candidates left, blinking over time.

    The colour alternates every half of an eighth of a second between red
    and yellow.
    """
    phase = elapsed % _BLINK_PERIOD
    if phase < _BLINK_ON:
        return _BLINK_FIRST
    return _BLINK_SECOND