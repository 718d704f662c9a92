# skippity

Skippity for the terminal. Players take turns jumping a piece over an
adjacent piece, horizontally or vertically, onto an empty square two cells
away. The piece that is jumped over is captured and counts towards the
player's tally for that kind (A to E). After a jump a player may jump again
with the same piece (when it still can), pass the turn, undo the jump, save
and leave, or leave without saving.

When no piece on the board can jump, the game ends. The winner is the player
with more complete sets, where a set is one piece of each of the five kinds.
If both players have the same number of sets, the player with more captured
pieces wins. If that is equal too, the game is a draw.

## Installing

```
pip install .
```

## Playing

```
skippity
```

Options:

- `--save PATH`: the save file to write and read (default `save.dat` in the
  current directory).
- `--seed N`: seed for dealing the board, so the same layout can be dealt
  again.

The main menu offers:

1. Human vs Human game
2. Human vs Computer game
3. Load game
4. Exit

A new game asks for the board size (a positive whole number). The pieces are
dealt at random with the five kinds kept as even as possible, and the centre
of the board is left empty: four cells on even-sized boards and on boards
whose cell count is a multiple of five, otherwise the single middle cell.
Rows and columns are numbered from 1 and are typed as two numbers; anything
that is not a number is skipped. Invalid pieces or targets are asked for
again. Ending the input leaves the game.

In the game against the computer you are player 1. The computer looks first
for a capture of the kind it holds fewest of, then for any kind from A to E,
and moves the first piece (in row order) that can make that capture.

"save & exit" writes the game to the save file. If the piece that just moved
can still jump, the save remembers it, and after loading you continue jumping
with that piece; otherwise the turn passes to the other player. "Load game"
reads the file back and reports whether it succeeded; then choose option 1 or
2 to continue the loaded game. A missing or damaged save file is reported and
the menu is shown again.

The screen is not cleared between turns; each board is printed below the
previous one.

## Using it as a library

```python
import random
from skippity.board import Board, Move, Position
from skippity.computer import computer_move
from skippity.render import render_board, decide_winner

board = Board.create(6, random.Random(1))
print(render_board(board, vs_computer=True))

move = computer_move(board)
if move is not None:
    played = board.play_move(move)   # returns the move with its captured piece
    board.undo_move(played)          # takes it back again
print(board.is_game_over(), decide_winner(board))
```

- `skippity.board`: `Position`, `Move`, `Player` and `Board` with the move
  rules (`can_move_to`, `can_move`, `capturable_skippers`,
  `landing_for_skipper`, `is_game_over`, `play_move`, `undo_move`,
  `switch_turn`, `current_player`).
- `skippity.render`: `render_board`, `render_winner` and `decide_winner`
  (1 or 2 for the winning player, 0 for a draw).
- `skippity.computer`: `computer_move`, which returns a `Move` or `None`.
- `skippity.savefile`: `save_game`, `load_game` (returns the board and the
  position of a pending jump, or `None`) and `load_board_size`. Missing or
  damaged save files raise `SaveFileError`.
- `skippity.game`: the interactive loops `run_vs_human` and
  `run_vs_computer`, `Prompt` for terminal input and output, and `main`.

## Tests

```
pip install .[test]
pytest
```