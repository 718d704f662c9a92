import pytest

from skippity.board import Board, Move, Player, Position
from skippity.savefile import SaveFileError, load_board_size, load_game, save_game

ROWS = [
    "ABCD",
    "EA B",
    " D E",
    "ABCD",
]


def make(turn=1):
    return Board(
        grid=[list(r) for r in ROWS],
        player1=Player([1, 0, 2, 0, 3]),
        player2=Player([0, 4, 0, 1, 0]),
        turn=turn,
    )


def test_round_trip_with_pending_jump(tmp_path):
    path = tmp_path / "save.dat"
    board = make(turn=2)
    origin = Position(1, 0)
    save_game(board, Move(origin, Position(1, 2)), path)
    loaded, pending = load_game(path)
    assert loaded.grid == board.grid
    assert loaded.turn == board.turn
    assert loaded.player1.counts == board.player1.counts
    assert loaded.player2.counts == board.player2.counts
    assert pending == origin


def test_round_trip_without_pending_jump(tmp_path):
    path = tmp_path / "save.dat"
    save_game(make(), None, path)
    loaded, pending = load_game(path)
    assert pending is None
    assert loaded.grid[2][0] == " "


def test_file_layout(tmp_path):
    path = tmp_path / "save.dat"
    board = make()
    save_game(board, None, path)
    lines = path.read_text().split("\n")
    assert lines[0] == str(board.size)
    assert lines[1] == str(board.turn)
    assert lines[2:4] == ["-1", "-1"]
    assert lines[4:14] == [str(n) for n in board.player1.counts + board.player2.counts]
    assert lines[14:18] == ROWS


def test_load_board_size(tmp_path):
    path = tmp_path / "save.dat"
    board = make()
    save_game(board, None, path)
    assert load_board_size(path) == board.size


def test_missing_file_raises(tmp_path):
    missing = tmp_path / "nothing.dat"
    with pytest.raises(SaveFileError):
        load_game(missing)
    with pytest.raises(SaveFileError):
        load_board_size(missing)


def test_extra_row_is_broken(tmp_path):
    path = tmp_path / "save.dat"
    save_game(make(), None, path)
    path.write_text(path.read_text() + "ABCD\n")
    with pytest.raises(SaveFileError):
        load_game(path)


def test_long_row_is_broken(tmp_path):
    path = tmp_path / "save.dat"
    save_game(make(), None, path)
    text = path.read_text().replace("ABCD\n", "ABCDE\n", 1)
    path.write_text(text)
    with pytest.raises(SaveFileError):
        load_game(path)


def test_garbage_header_is_broken(tmp_path):
    path = tmp_path / "save.dat"
    path.write_text("four\n")
    with pytest.raises(SaveFileError):
        load_game(path)
    with pytest.raises(SaveFileError):
        load_board_size(path)