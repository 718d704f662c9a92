"""Interactive play: the main menu, human turns and the two game loops."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque
from enum import IntEnum
from pathlib import Path
from typing import Callable, TextIO

from .board import Board, Move, Position
from .computer import computer_move
from .render import render_board, render_winner
from .savefile import DEFAULT_SAVE_PATH, SaveFileError, load_game, save_game

MENU_TEXT = (
    "Welcome to the game of Skippity!\n\n"
    "Please select an option:\n"
    "1) Human vs Human game\n"
    "2) Human vs Computer game\n"
    "3) Load game\n"
    "4) Exit\n\n"
)


class MenuChoice(IntEnum):
    VS_HUMAN = 1
    VS_COMPUTER = 2
    LOAD_GAME = 3
    EXIT = 4


class Choice(IntEnum):
    """What a player may do after a jump."""

    NEW_MOVE = 0
    PASS_TURN = 1
    UNDO = 2
    SAVE_EXIT = 3
    EXIT = 4


class Prompt:
    """Reads whitespace separated integers and writes text to a terminal."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin
        self._out = stdout
        self._tokens: deque[str] = deque()

    def show(self, text: str) -> None:
        """Write text as it is, without adding a newline."""
        out = self._out if self._out is not None else sys.stdout
        out.write(text)
        out.flush()

    def read_int(self, message: str = "") -> int:
        """Show a message, then return the next integer typed; other words are skipped."""
        if message:
            self.show(message)
        stream = self._in if self._in is not None else sys.stdin
        while True:
            while not self._tokens:
                line = stream.readline()
                if not line:
                    raise EOFError("no more input")
                self._tokens.extend(line.split())
            token = self._tokens.popleft()
            try:
                return int(token)
            except ValueError:
                continue


def _read_position(prompt: Prompt, message: str) -> Position:
    row = prompt.read_int(message)
    col = prompt.read_int(",\n")
    return Position(row - 1, col - 1)


def new_board(prompt: Prompt, rng: random.Random | None = None) -> Board:
    """Ask for a board size and fill a fresh board."""
    while True:
        size = prompt.read_int("\nEnter the size of the board: ")
        try:
            return Board.create(size, rng)
        except ValueError:
            prompt.show("Invalid board size!\n")


def ask_target(board: Board, move: Move, prompt: Prompt) -> Move:
    """Ask where the piece at ``move.origin`` jumps to until a legal target is given."""
    while True:
        target = _read_position(prompt, "where to move (row, col):\n")
        if board.can_move_to(move.origin, target):
            return Move(move.origin, target)
        prompt.show("Invalid position!\n")


def human_turn(
    board: Board,
    move: Move | None,
    first_move: bool,
    vs_computer: bool,
    prompt: Prompt,
) -> tuple[int, Move]:
    """Let a human make one jump; return the follow-up choice and the jump played.

    On a first move the piece is asked for; otherwise ``move.origin`` is the
    piece that continues jumping.
    """
    if first_move:
        while True:
            origin = _read_position(prompt, "select your piece (row, col):\n")
            if board.can_move(origin):
                break
            prompt.show("Invalid position!\n")
    else:
        if move is None:
            raise ValueError("a continued jump needs the piece it continues from")
        origin = move.origin

    played = board.play_move(ask_target(board, Move(origin, origin), prompt))
    prompt.show(render_board(board, vs_computer))

    if board.can_move(played.target):
        message = "Final Choice: 0) new move 1) pass turn 2) undo 3) save & exit 4) exit\n"
        allowed = set(Choice)
    else:
        message = "Final Choice: 1) pass turn 2) undo 3) save & exit 4) exit\n"
        allowed = set(Choice) - {Choice.NEW_MOVE}
    while True:
        choice = prompt.read_int(message)
        if choice in allowed:
            return Choice(choice), played


def _undo(board: Board, last: Move, vs_computer: bool, prompt: Prompt) -> bool:
    """Take back the last jump and offer to replay it; return True if replayed."""
    board.undo_move(last)
    prompt.show(render_board(board, vs_computer))
    choice = prompt.read_int("what do you want to do: 0) redo 1) continue\n")
    if choice == 0:
        board.play_move(last)
        return True
    return False


def _save_and_leave(
    board: Board, last: Move, save_path: str | Path, hand_over: Callable[[], None]
) -> None:
    if board.can_move(last.target):
        save_game(board, Move(last.target, last.target), save_path)
    else:
        hand_over()
        save_game(board, None, save_path)


def run_vs_human(
    board: Board,
    pending: Position | None,
    prompt: Prompt,
    save_path: str | Path = DEFAULT_SAVE_PATH,
) -> None:
    """Play two humans against each other until the game ends or they leave."""
    origin = pending
    while True:
        prompt.show(render_board(board, False))
        start = None if origin is None else Move(origin, origin)
        choice, last = human_turn(board, start, origin is None, False, prompt)

        if choice == Choice.NEW_MOVE:
            origin = last.target
        elif choice == Choice.PASS_TURN:
            origin = None
            if board.is_game_over():
                prompt.show(render_winner(board, False))
                return
            board.switch_turn()
        elif choice == Choice.UNDO:
            origin = None
            if _undo(board, last, False, prompt):
                if board.is_game_over():
                    prompt.show(render_winner(board, False))
                    return
                board.switch_turn()
        elif choice == Choice.SAVE_EXIT:
            _save_and_leave(board, last, save_path, board.switch_turn)
            return
        else:
            return


def run_vs_computer(
    board: Board,
    pending: Position | None,
    prompt: Prompt,
    save_path: str | Path = DEFAULT_SAVE_PATH,
) -> None:
    """Play a human (player 1) against the computer (player 2)."""
    origin = pending
    players_turn = board.turn != 2

    def hand_to_computer() -> None:
        board.turn = 2

    while True:
        prompt.show(render_board(board, True))
        if players_turn:
            start = None if origin is None else Move(origin, origin)
            choice, last = human_turn(board, start, origin is None, True, prompt)

            if choice == Choice.NEW_MOVE:
                origin = last.target
            elif choice == Choice.PASS_TURN:
                origin = None
                if board.is_game_over():
                    prompt.show(render_winner(board, True))
                    return
                hand_to_computer()
                players_turn = False
            elif choice == Choice.UNDO:
                origin = None
                if _undo(board, last, True, prompt):
                    if board.is_game_over():
                        prompt.show(render_winner(board, True))
                        return
                    hand_to_computer()
                    players_turn = False
            elif choice == Choice.SAVE_EXIT:
                _save_and_leave(board, last, save_path, hand_to_computer)
                return
            else:
                return
        else:
            move = computer_move(board)
            if move is not None:
                board.play_move(move)
            if board.is_game_over():
                prompt.show(render_board(board, True))
                prompt.show(render_winner(board, True))
                return
            if move is None:
                prompt.show("Computer has no move.\n")
            origin = None
            board.switch_turn()
            players_turn = True


def main_menu(prompt: Prompt) -> int:
    """Show the main menu and return the option typed."""
    prompt.show(MENU_TEXT)
    return prompt.read_int("Your choice: ")


def main(argv: list[str] | None = None) -> int:
    """Run the game from the main menu until the player exits."""
    parser = argparse.ArgumentParser(prog="skippity", description="Play Skippity in the terminal.")
    parser.add_argument("--save", default=str(DEFAULT_SAVE_PATH), help="save file to use")
    parser.add_argument("--seed", type=int, default=None, help="seed for dealing the board")
    args = parser.parse_args(argv)

    prompt = Prompt()
    rng = random.Random(args.seed)
    save_path = Path(args.save)
    board: Board | None = None
    pending: Position | None = None

    try:
        while True:
            choice = main_menu(prompt)
            if choice in (MenuChoice.VS_HUMAN, MenuChoice.VS_COMPUTER):
                if board is None:
                    board = new_board(prompt, rng)
                    pending = None
                runner = run_vs_human if choice == MenuChoice.VS_HUMAN else run_vs_computer
                runner(board, pending, prompt, save_path)
                board, pending = None, None
            elif choice == MenuChoice.LOAD_GAME:
                try:
                    board, pending = load_game(save_path)
                except SaveFileError as exc:
                    prompt.show(f"{exc}\n")
                    prompt.show("Failed to load game!\n")
                else:
                    prompt.show("Game loaded successfully!\n")
            elif choice == MenuChoice.EXIT:
                return 0
    except EOFError:
        return 0