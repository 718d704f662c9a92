"""Board, pieces and move rules for Skippity."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Iterator

SKIPPERS = "ABCDE"
EMPTY = " "

_SKIPPER_SET = frozenset(SKIPPERS)
# Jump directions in the order they are examined: top, bottom, left, right.
_JUMPS = ((-2, 0), (2, 0), (0, -2), (0, 2))
# Neighbour directions used when looking for a landing: left, right, top, bottom.
_NEIGHBOURS = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(frozen=True)
class Position:
    """A cell on the board, zero based."""

    row: int
    col: int

    def _shifted(self, drow: int, dcol: int) -> Position:
        return Position(self.row + drow, self.col + dcol)


def middle_between(a: Position, b: Position) -> Position:
    """Return the cell halfway between two cells."""
    return Position((a.row + b.row) // 2, (a.col + b.col) // 2)


def is_pos_valid(pos: Position, size: int) -> bool:
    """Tell whether a position lies on a board of the given size."""
    return 0 <= pos.row < size and 0 <= pos.col < size


@dataclass(frozen=True)
class Move:
    """A jump from one cell to another; ``captured`` is the piece jumped over."""

    origin: Position
    target: Position
    captured: str = EMPTY


@dataclass
class Player:
    """Captured skippers of one player, counted per kind A to E."""

    counts: list[int] = field(default_factory=lambda: [0] * len(SKIPPERS))

    def set_score(self) -> int:
        """Number of complete A-E sets the player holds."""
        return min(self.counts)

    def total(self) -> int:
        """Total number of captured skippers."""
        return sum(self.counts)

    def min_skipper(self) -> str:
        """The first skipper kind the player holds the fewest of."""
        return SKIPPERS[self.counts.index(min(self.counts))]


@dataclass
class Board:
    """The square board, both players' captures and whose turn it is."""

    grid: list[list[str]]
    player1: Player = field(default_factory=Player)
    player2: Player = field(default_factory=Player)
    turn: int = 1

    @property
    def size(self) -> int:
        return len(self.grid)

    def __getitem__(self, pos: Position) -> str:
        return self.grid[pos.row][pos.col]

    def __setitem__(self, pos: Position, value: str) -> None:
        self.grid[pos.row][pos.col] = value

    @classmethod
    def create(cls, size: int, rng: random.Random | None = None) -> Board:
        """Fill a new board at random, keeping the kinds balanced, and clear its middle."""
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        rng = rng or random.Random()
        cells = size * size
        cap = cells // 5 + (1 if cells % 5 else 0)
        counts = [0] * len(SKIPPERS)

        def draw() -> str:
            kind = rng.randrange(len(SKIPPERS))
            while counts[kind] == cap:
                kind = rng.randrange(len(SKIPPERS))
            counts[kind] += 1
            return SKIPPERS[kind]

        grid = [[draw() for _ in range(size)] for _ in range(size)]
        mid = size // 2
        if size % 2 == 0 or cells % 5 == 0:
            for row in (mid - 1, mid):
                for col in (mid - 1, mid):
                    grid[row][col] = EMPTY
        else:
            grid[mid][mid] = EMPTY
        return cls(grid=grid)

    def current_player(self) -> Player:
        """The player whose turn it is."""
        return self.player1 if self.turn == 1 else self.player2

    def switch_turn(self) -> None:
        """Hand the turn to the other player."""
        self.turn = 2 if self.turn == 1 else 1

    def _jump_targets(self, piece: Position) -> Iterator[Position]:
        for drow, dcol in _JUMPS:
            yield piece._shifted(drow, dcol)

    def can_move_to(self, piece: Position, target: Position) -> bool:
        """Tell whether the piece can jump straight over one skipper onto an empty target."""
        if not is_pos_valid(target, self.size) or self[target] != EMPTY:
            return False
        if (abs(target.row - piece.row), abs(target.col - piece.col)) not in ((2, 0), (0, 2)):
            return False
        return self[middle_between(piece, target)] != EMPTY

    def can_move(self, piece: Position) -> bool:
        """Tell whether there is a skipper at the position with at least one jump."""
        if not is_pos_valid(piece, self.size) or self[piece] == EMPTY:
            return False
        return any(self.can_move_to(piece, target) for target in self._jump_targets(piece))

    def capturable_skippers(self, piece: Position) -> list[str]:
        """The skippers the piece could capture, in top, bottom, left, right order."""
        if not is_pos_valid(piece, self.size) or self[piece] == EMPTY:
            return []
        return [
            self[middle_between(piece, target)]
            for target in self._jump_targets(piece)
            if self.can_move_to(piece, target)
        ]

    def landing_for_skipper(self, piece: Position, skipper: str) -> Position | None:
        """Where the piece lands when capturing an adjacent skipper of the given kind."""
        for drow, dcol in _NEIGHBOURS:
            neighbour = piece._shifted(drow, dcol)
            landing = piece._shifted(2 * drow, 2 * dcol)
            if (
                is_pos_valid(neighbour, self.size)
                and self[neighbour] == skipper
                and is_pos_valid(landing, self.size)
                and self[landing] == EMPTY
            ):
                return landing
        return None

    def is_game_over(self) -> bool:
        """Tell whether no skipper on the board can move."""
        return not any(
            self.can_move(Position(row, col))
            for row in range(self.size)
            for col in range(self.size)
            if self.grid[row][col] != EMPTY
        )

    def play_move(self, move: Move) -> Move:
        """Carry out a jump, credit the capture, and return the move with its capture."""
        mid = middle_between(move.origin, move.target)
        captured = self[mid]
        if captured not in _SKIPPER_SET:
            raise ValueError(f"no skipper to capture at {mid}")
        self.current_player().counts[SKIPPERS.index(captured)] += 1
        self[move.target] = self[move.origin]
        self[move.origin] = EMPTY
        self[mid] = EMPTY
        return replace(move, captured=captured)

    def undo_move(self, move: Move) -> None:
        """Take back a jump made by :meth:`play_move`; a move without capture is ignored."""
        if move.captured not in _SKIPPER_SET:
            return
        mid = middle_between(move.origin, move.target)
        self.current_player().counts[SKIPPERS.index(move.captured)] -= 1
        self[move.origin] = self[move.target]
        self[move.target] = EMPTY
        self[mid] = move.captured