from __future__ import annotations

import pytest

from ataxx import Board, Evaluator, PieceColor
from ataxx.evaluator import INFTY, WINNING_VALUE

RED, BLUE = PieceColor.RED, PieceColor.BLUE


def blocked_board(top: str, bottom: str) -> Board:
    """A finished board: everything blocked except the given first and last rows."""
    return Board.from_layout([top] + ["XXXXXXX"] * 5 + [bottom])


def test_terminal_scores_are_exact_magnitudes():
    red_win = blocked_board("rrXXXXX", "XXXXXXb")
    blue_win = blocked_board("rXXXXXX", "XXXXXbb")
    tie = blocked_board("rXXXXXX", "XXXXXXb")
    assert Evaluator().evaluate(red_win, 1000) == 1000
    assert Evaluator().evaluate(blue_win, 1000) == -1000
    assert Evaluator().evaluate(tie, 1000) == 0
    # Same positions seen from blue as maximizer
    assert Evaluator(BLUE).evaluate(red_win, 1000) == -1000
    assert Evaluator(BLUE).evaluate(blue_win, 1000) == 1000


def test_terminal_score_ignores_heuristic():
    # Red wins with many clustered pieces; only the magnitude counts
    red_win = blocked_board("rrrrrrX", "XXXXXXb")
    assert Evaluator().evaluate(red_win, 7) == 7


def test_heuristic_counts_and_adjacency():
    b = Board.from_layout([
        "rr-----",
        "-------",
        "-------",
        "-------",
        "-------",
        "-------",
        "------b",
    ])
    assert b.get_winner() is None
    # red: 2 pieces + 4 (radius 1) + 4 (radius 2); blue: 1 + 1 + 1
    assert Evaluator().evaluate(b, WINNING_VALUE) == 10 - 3
    assert Evaluator(BLUE).evaluate(b, WINNING_VALUE) == 3 - 10


def test_radius_two_window_includes_radius_one():
    b = Board.from_layout([
        "r-r----",
        "-r-----",
        "-------",
        "-------",
        "-------",
        "-------",
        "------b",
    ])
    cells = b.get_1d_board()
    # a7 sees a7,b6; c7 sees c7,b6; b6 sees all three
    assert Evaluator.pieces_with_border(cells, RED, 1) == 2 + 2 + 3
    # radius 2 covers everything radius 1 does, plus a7<->c7
    assert Evaluator.pieces_with_border(cells, RED, 2) == 3 * 3


def test_symmetric_start_is_even():
    assert Evaluator().evaluate(Board(), WINNING_VALUE) == 0


def test_winning_value_plus_depth_stays_below_infinity():
    assert WINNING_VALUE + 19 < INFTY


def test_maximizer_must_be_a_side():
    with pytest.raises(ValueError):
        Evaluator(PieceColor.EMPTY)


def test_evaluate_takes_one_board_snapshot(monkeypatch):
    b = Board()
    calls = []
    snapshot = Board.get_1d_board

    def counting(self):
        calls.append(self)
        return snapshot(self)

    monkeypatch.setattr(Board, "get_1d_board", counting)
    Evaluator().evaluate(b, WINNING_VALUE)
    assert len(calls) == 1
