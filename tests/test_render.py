from skippity.board import Board, Player
from skippity.render import BLUE, CORNER, RED, RESET, decide_winner, render_board, render_winner


def _board(rows, turn=1, p1=None, p2=None):
    return Board(
        grid=[list(r) for r in rows],
        player1=Player(list(p1 or [0] * 5)),
        player2=Player(list(p2 or [0] * 5)),
        turn=turn,
    )


def test_render_board_header_and_turn_marker():
    board = _board(["AB ", "CDE", "   "], turn=1)
    lines = render_board(board, False).split("\n")
    assert lines[0] == "         Turn"
    assert lines[1] == "Player1   <   Player2"
    assert lines[2] == "A B C D E     A B C D E  "


def test_render_board_computer_turn_two():
    board = _board(["AB ", "CDE", "   "], turn=2)
    lines = render_board(board, True).split("\n")
    assert lines[1] == "Player    >   Computer"


def test_render_board_counts_line_uses_player_counts():
    board = _board(["A"], p1=[1, 2, 3, 4, 5], p2=[5, 4, 3, 2, 1])
    lines = render_board(board, False).split("\n")
    left = [int(x) for x in lines[3][:9].split()]
    right = [int(x) for x in lines[3][9:].split()]
    assert left == board.player1.counts
    assert right == board.player2.counts


def test_render_board_line_count_matches_size():
    for size in (1, 3, 6):
        board = Board.create(size)
        lines = render_board(board, False).splitlines()
        assert len(lines) == 5 + size + 2 + 1
        assert lines[5].startswith(CORNER)
        assert lines[5 + size + 1] == lines[5]


def test_render_board_colours_pieces_and_blanks_empty():
    board = _board(["A E", "   ", "   "])
    grid_row = render_board(board, False).split("\n")[6]
    assert f"{BLUE}A {RESET}" in grid_row
    assert f"{RED}E {RESET}" in grid_row
    assert grid_row.startswith("1 ")
    assert grid_row.endswith("1 ")


def test_decide_winner_by_sets():
    board = _board(["A"], p1=[1, 1, 1, 1, 1], p2=[0, 9, 9, 9, 9])
    assert decide_winner(board) == 1
    board = _board(["A"], p1=[0, 9, 9, 9, 9], p2=[1, 1, 1, 1, 1])
    assert decide_winner(board) == 2


def test_decide_winner_by_total_then_draw():
    board = _board(["A"], p1=[0, 1, 0, 0, 0], p2=[0, 2, 0, 0, 0])
    assert decide_winner(board) == 2
    board = _board(["A"], p1=[0, 2, 0, 0, 0], p2=[0, 0, 0, 0, 2])
    assert decide_winner(board) == 0


def test_render_winner_draw():
    board = _board(["A"])
    text = render_winner(board, False)
    assert text.endswith("IT IS A DRAW\n")
    assert text.startswith("player1       player2\n")


def test_render_winner_announcements():
    board = _board(["A"], p1=[1, 1, 1, 1, 1])
    assert render_winner(board, False).endswith("WINNER IS PLAYER1\n")
    assert render_winner(board, True).endswith("WINNER IS PLAYER\n")
    board = _board(["A"], p2=[1, 1, 1, 1, 1])
    assert render_winner(board, False).endswith("WINNER IS PLAYER2\n")
    assert render_winner(board, True).endswith("WINNER IS COMPUTER\n")


def test_render_winner_reports_scores():
    board = _board(["A"], p1=[2, 2, 3, 2, 2], p2=[0, 1, 0, 0, 0])
    text = render_winner(board, True)
    assert "Player's set score: 2  Total skipper: 11\n" in text
    assert "Computer's set score: 0  Total skipper: 1\n" in text