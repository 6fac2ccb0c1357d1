import pytest

from numples.board import Board, InnerBoard
from numples.consts import CELL_SIZE
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
    is_quit,
    pause_key,
    title_key,
)
from numples.level import Level
from numples.states import EventKind, GameState


@pytest.fixture
def board():
    return Board([InnerBoard()])


def _digit(d):
    return KeyPress(key=str(d), digit=d, text=str(d))


def test_escape_aborts(board):
    event = board_key(board, KeyPress(ESCAPE), ctrl=False)
    assert event.kind is EventKind.ABORT_GAME


def test_pause_pauses(board):
    event = board_key(board, KeyPress(PAUSE), ctrl=False)
    assert event.kind is EventKind.PAUSE_GAME


def test_released_or_repeat_ignored(board):
    x, y = board.highlight()
    assert board_key(board, KeyPress(ARROW_UP, pressed=False), ctrl=False) is None
    assert board_key(board, KeyPress(ARROW_UP, repeat=True), ctrl=False) is None
    assert board.highlight() == (x, y)


@pytest.mark.parametrize(
    "key, dx, dy",
    [(ARROW_UP, 0, 1), (ARROW_DOWN, 0, -1), (ARROW_LEFT, -1, 0), (ARROW_RIGHT, 1, 0)],
)
def test_arrows_move_highlight(board, key, dx, dy):
    x, y = board.highlight()
    assert board_key(board, KeyPress(key), ctrl=False) is None
    assert board.highlight() == (x + dx, y + dy)


def test_arrow_wraps_around(board):
    board.set_highlight(0, 0)
    board_key(board, KeyPress(ARROW_LEFT), ctrl=False)
    assert board.highlight() == (8, 0)


def test_digit_places_value(board):
    x, y = board.highlight()
    event = board_key(board, _digit(5), ctrl=False)
    assert event.kind is EventKind.RENDER_BOARD
    assert board.current().cell(x, y).value() == 5


def test_ctrl_digit_toggles_candidate(board):
    x, y = board.highlight()
    event = board_key(board, _digit(5), ctrl=True)
    assert event.kind is EventKind.RENDER_BOARD
    cell = board.current().cell(x, y)
    assert not cell.is_candidate_set(5)
    assert cell.value() == 0


def test_zero_on_empty_cell_does_nothing(board):
    assert board_key(board, _digit(0), ctrl=True) is None
    assert board.undo() is False


def test_undo_reverts_move(board):
    x, y = board.highlight()
    board_key(board, _digit(7), ctrl=False)
    event = board_key(board, KeyPress("u", text="u"), ctrl=False)
    assert event.kind is EventKind.RENDER_BOARD
    assert board.current().cell(x, y).value() == 0


def test_undo_without_history_does_nothing(board):
    assert board_key(board, KeyPress("U", text="U"), ctrl=False) is None


def test_title_escape_quits():
    assert title_key(KeyPress(ESCAPE)) == QUIT


def test_title_escape_repeat_ignored():
    assert title_key(KeyPress(ESCAPE, repeat=True)) is None


@pytest.mark.parametrize("level", list(Level))
def test_title_digit_starts_level(level):
    event = title_key(KeyPress(str(int(level)), text=str(int(level))))
    assert event.kind is EventKind.START_GAME
    assert event.level is level


def test_title_other_text_ignored():
    assert title_key(KeyPress("6", text="6")) is None
    assert title_key(KeyPress("3", text="3", pressed=False)) is None


@pytest.mark.parametrize("key", [ESCAPE, PAUSE])
def test_pause_resumes(key):
    assert pause_key(KeyPress(key)) is GameState.PLAYING


def test_pause_ignores_others():
    assert pause_key(KeyPress("x", text="x")) is None
    assert pause_key(KeyPress(ESCAPE, repeat=True)) is None


def test_gameover_escape_to_title():
    assert gameover_key(KeyPress(ESCAPE)) is GameState.TITLE
    assert gameover_key(KeyPress(PAUSE)) is None


def test_ctrl_q_quits():
    assert is_quit(KeyPress("q"), ctrl=True) is True
    assert is_quit(KeyPress("Q"), ctrl=True) is True
    assert is_quit(KeyPress("q"), ctrl=False) is False
    assert is_quit(KeyPress("q", pressed=False), ctrl=True) is False
    assert is_quit(KeyPress("w"), ctrl=True) is False


def test_cell_at_centre():
    assert cell_at(450, 450) == (4, 4)


def test_cell_at_outside_board():
    assert cell_at(-CELL_SIZE, CELL_SIZE * 5) is None
    assert cell_at(CELL_SIZE * 5, CELL_SIZE * 20) is None


def test_cell_at_always_in_range():
    for px in range(-100, 1100, 37):
        for py in range(-100, 1100, 37):
            found = cell_at(px, py)
            if found is not None:
                assert 0 <= found[0] < 9 and 0 <= found[1] < 9


def test_cell_at_row_increases_upwards():
    lower = cell_at(CELL_SIZE * 5, CELL_SIZE * 8)
    upper = cell_at(CELL_SIZE * 5, CELL_SIZE * 2)
    assert upper[1] > lower[1]


def test_clock_visible_only_below_board():
    assert clock_visible(0) is False
    assert clock_visible(CELL_SIZE * 5) is False
    assert clock_visible(CELL_SIZE * 11) is True


def test_error_blink_alternates():
    assert error_blink(0.0) == 1
    assert error_blink(0.1) == 3
    assert error_blink(0.125 + 0.01) == error_blink(0.01)