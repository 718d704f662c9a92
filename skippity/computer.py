"""The computer opponent's choice of move."""

from __future__ import annotations

from .board import EMPTY, SKIPPERS, Board, Move, Position


def computer_move(board: Board) -> Move | None:
    """Choose a jump for player 2, or return None when no jump exists.

    The kind player 2 holds fewest of is sought first, then A to E in turn;
    the first piece in row order that can capture that kind is moved.
    """
    for wanted in (board.player2.min_skipper(), *SKIPPERS):
        for row in range(board.size):
            for col in range(board.size):
                if board.grid[row][col] == EMPTY:
                    continue
                piece = Position(row, col)
                if wanted in board.capturable_skippers(piece):
                    landing = board.landing_for_skipper(piece, wanted)
                    if landing is not None:
                        return Move(piece, landing)
    return None