# numples

Yet another sudoku playing game, played with coloured discs in place of digits.

## Requirements

- Python 3.10 or later
- pygame
- The `sudoku` puzzle generator command on your `PATH`. Each new board
  comes from running `sudoku -g -c<difficulty>`, whose output must hold
  exactly 81 cells (digits, with `.` for an empty cell). Output of any
  other size raises `numples.kennett.KennettError`.

## Installing and running

```
pip install .
numples
```

The `numples` command takes no options besides `--help`.

## Playing

On the title screen, pick a difficulty by clicking it or by pressing its
number key:

1. Extremely Easy
2. Easy
3. Medium
4. Hard
5. Fiendish

Press Escape on the title screen to quit.

During a game:

| Key                   | Action                                          |
|-----------------------|-------------------------------------------------|
| Arrow keys, click     | Move the cursor. The arrow keys wrap at the edges. |
| 1–9                   | Place a value in the highlighted cell           |
| Ctrl + 1–9            | Toggle a candidate in the highlighted cell      |
| 0                     | Clear the highlighted cell                      |
| U                     | Undo the last change                            |
| Pause                 | Pause the game (Escape or Pause resumes)        |
| Escape                | Abandon the game and go back to the title       |
| Ctrl + Q              | Quit at any time                                |

Each digit has its own colour. A value can only be placed in an empty cell
that still lists it as a candidate. When you place a value, that candidate
is removed from every other cell in the same row, column and 3×3 box. An
empty cell that has no candidates left blinks red and yellow to warn you
that the board cannot be solved from there.

The game also pauses when its window loses focus. The elapsed time is shown
when the mouse pointer is below the board. Once every cell is filled, the
board changes to its winning colours. Press Escape to go back to the title
screen.

## Using the pieces directly

The game logic does not need a window:

- `numples.board.InnerBoard` is one snapshot of the board;
  `InnerBoard.from_values` builds one from 81 numbers, row by row, with 0
  for an empty cell. Moves (`set_value`, `toggle_candidate`) return a new
  snapshot, or `None` when the move is not allowed.
- `numples.board.Board` keeps the history of snapshots and offers `undo`.
- `numples.cell.Cell` holds a cell's value and candidates.
- `numples.kennett.parse_puzzle` reads generator output; `generate` runs
  the generator for a `numples.level.Level`.
- `numples.app.NumplesApp` runs the game; pass `board_factory` to supply
  boards without the external generator.

## What it does not do

numples does not generate puzzles itself: without the `sudoku` command no
game can start. It does not check placed values against a solution, offer
hints, or save and restore games.