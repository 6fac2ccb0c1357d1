from types import SimpleNamespace
from unittest import mock

import pytest

from numples.kennett import KennettError, generate, parse_puzzle
from numples.level import Level

ROW = "12345678."
PUZZLE_TEXT = "\n".join([ROW] * 9) + "\n"
PUZZLE_VALUES = [1, 2, 3, 4, 5, 6, 7, 8, 0] * 9


def test_parse_text():
    assert parse_puzzle(PUZZLE_TEXT) == PUZZLE_VALUES


def test_parse_bytes():
    assert parse_puzzle(PUZZLE_TEXT.encode()) == PUZZLE_VALUES


def test_parse_ignores_other_characters():
    noisy = " | ".join(PUZZLE_TEXT)
    assert parse_puzzle(noisy) == PUZZLE_VALUES


def test_parse_all_empty():
    assert parse_puzzle("." * 81) == [0] * 81


@pytest.mark.parametrize("text", ["", "." * 80, "." * 82, "x" * 81])
def test_parse_wrong_size(text):
    with pytest.raises(KennettError):
        parse_puzzle(text)


def test_kennett_error_is_os_error():
    with pytest.raises(OSError):
        parse_puzzle("123")


def test_generate_runs_generator_with_level_flag():
    completed = SimpleNamespace(stdout=PUZZLE_TEXT.encode(), returncode=0)
    with mock.patch("numples.kennett.subprocess.run", return_value=completed) as run:
        assert generate(Level.MEDIUM) == PUZZLE_VALUES
    args = run.call_args.args[0]
    assert args == ["sudoku", "-g", "-cmedium"]


def test_generate_bad_output():
    completed = SimpleNamespace(stdout=b"oops", returncode=1)
    with mock.patch("numples.kennett.subprocess.run", return_value=completed):
        with pytest.raises(KennettError):
            generate(Level.EASY)


def test_generate_missing_command():
    with mock.patch("numples.kennett.subprocess.run", side_effect=FileNotFoundError):
        with pytest.raises(FileNotFoundError):
            generate(Level.HARD)