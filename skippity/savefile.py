"""Saving and loading a game in progress."""

from __future__ import annotations

from pathlib import Path

from .board import EMPTY, SKIPPERS, Board, Move, Player, Position

DEFAULT_SAVE_PATH = Path("save.dat")

_HEADER_LINES = 14
_CELLS = frozenset(SKIPPERS + EMPTY)


class SaveFileError(Exception):
    """The save file cannot be opened or does not hold a valid game."""


def _read(path: str | Path) -> str:
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise SaveFileError("Error opening file!") from exc


def save_game(board: Board, move: Move | None, path: str | Path = DEFAULT_SAVE_PATH) -> None:
    """Write the board, the turn and the pending jump origin to a file."""
    origin = move.origin if move is not None else Position(-1, -1)
    values = [
        board.size,
        board.turn,
        origin.row,
        origin.col,
        *board.player1.counts,
        *board.player2.counts,
    ]
    lines = [str(value) for value in values] + ["".join(row) for row in board.grid]
    try:
        Path(path).write_text("".join(f"{line}\n" for line in lines))
    except OSError as exc:
        raise SaveFileError("Error opening file!") from exc


def load_game(path: str | Path = DEFAULT_SAVE_PATH) -> tuple[Board, Position | None]:
    """Read a saved game; return the board and the origin of a pending jump, if any."""
    lines = _read(path).split("\n")
    if len(lines) < _HEADER_LINES:
        raise SaveFileError("Broken save file!")
    try:
        header = [int(line) for line in lines[:_HEADER_LINES]]
    except ValueError as exc:
        raise SaveFileError("Broken save file!") from exc
    size, turn, row, col = header[:4]
    if size < 1 or turn not in (1, 2):
        raise SaveFileError("Broken save file!")

    rows = lines[_HEADER_LINES:]
    while rows and rows[-1] == "":
        rows.pop()
    if len(rows) != size or any(len(r) != size or not set(r) <= _CELLS for r in rows):
        raise SaveFileError("Broken save file!")

    board = Board(
        grid=[list(r) for r in rows],
        player1=Player(header[4:9]),
        player2=Player(header[9:14]),
        turn=turn,
    )
    pending = None if row == -1 else Position(row, col)
    return board, pending


def load_board_size(path: str | Path = DEFAULT_SAVE_PATH) -> int:
    """Read only the board size from a save file."""
    first = _read(path).split("\n", 1)[0]
    try:
        return int(first)
    except ValueError as exc:
        raise SaveFileError("Broken save file!") from exc