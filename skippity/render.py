"""Text rendering of the board and of the final result."""

from __future__ import annotations

from .board import Board, Player

BLUE = "\033[0;34m"
YELLOW = "\033[0;33m"
GREEN = "\033[0;32m"
PURPLE = "\033[0;35m"
RED = "\033[0;31m"
RESET = "\033[0m"

CORNER = "\u25a0"

_COLOURS = {"A": BLUE, "B": YELLOW, "C": GREEN, "D": PURPLE, "E": RED}
_KINDS_HEADER = "A B C D E     A B C D E  \n"


def _counts_line(board: Board) -> str:
    left = " ".join(str(n) for n in board.player1.counts)
    right = " ".join(str(n) for n in board.player2.counts)
    return f"{left}     {right}\n"


def _cell(value: str) -> str:
    colour = _COLOURS.get(value)
    if colour is None:
        return "  "
    return f"{colour}{value} {RESET}"


def _border(size: int) -> str:
    inner = "".join(f"{col % 10} " for col in range(1, size + 1))
    return f"{CORNER} {inner}{CORNER} \n"


def render_board(board: Board, vs_computer: bool) -> str:
    """Return the scoreboard and the coloured grid as printable text."""
    turn_char = "<" if board.turn == 1 else ">"
    parts = ["         Turn\n"]
    if vs_computer:
        parts.append(f"Player    {turn_char}   Computer\n")
    else:
        parts.append(f"Player1   {turn_char}   Player2\n")
    parts.append(_KINDS_HEADER)
    parts.append(_counts_line(board))
    parts.append("\n")

    border = _border(board.size)
    parts.append(border)
    for number, row in enumerate(board.grid, start=1):
        label = f"{number % 10} "
        parts.append(label + "".join(_cell(value) for value in row) + label + "\n")
    parts.append(border)
    parts.append("\n")
    return "".join(parts)


def decide_winner(board: Board) -> int:
    """Return 1 or 2 for the winning player, or 0 for a draw.

    More complete sets wins; on equal sets, more captured skippers wins.
    """

    def key(player: Player) -> tuple[int, int]:
        return player.set_score(), player.total()

    first, second = key(board.player1), key(board.player2)
    if first > second:
        return 1
    if first < second:
        return 2
    return 0


def render_winner(board: Board, vs_computer: bool) -> str:
    """Return the final score screen and the announcement of the result."""
    p1, p2 = board.player1, board.player2
    parts = ["Player       Computer\n" if vs_computer else "player1       player2\n"]
    parts.append(_KINDS_HEADER)
    parts.append(_counts_line(board))
    parts.append("\n")

    first_name, second_name = ("Player's", "Computer's") if vs_computer else ("Player 1's", "Player 2's")
    parts.append(f"{first_name} set score: {p1.set_score()}  Total skipper: {p1.total()}\n")
    parts.append(f"{second_name} set score: {p2.set_score()}  Total skipper: {p2.total()}\n")
    parts.append("\n")

    winner = decide_winner(board)
    if winner == 0:
        parts.append("IT IS A DRAW\n")
    elif vs_computer:
        parts.append("WINNER IS PLAYER\n" if winner == 1 else "WINNER IS COMPUTER\n")
    else:
        parts.append(f"WINNER IS PLAYER{winner}\n")
    return "".join(parts)