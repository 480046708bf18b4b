from __future__ import annotations

import pytest

from ataxx import Board, Move, PieceColor
from ataxx.board import JUMP_LIMIT

RED, BLUE, EMPTY, BLOCKED = PieceColor.RED, PieceColor.BLUE, PieceColor.EMPTY, PieceColor.BLOCKED


def test_initial_position():
    b = Board()
    assert str(b).splitlines() == [
        "r-----b",
        "-------",
        "-------",
        "-------",
        "-------",
        "-------",
        "b-----r",
    ]
    assert b.whose_move() is RED
    assert b.red_pieces() == 2 and b.blue_pieces() == 2
    assert b.get_winner() is None


def test_move_parsing():
    m = Move.parse("a1-b2")
    assert str(m) == "a1-b2"
    assert m.is_extend and not m.is_jump
    assert Move.parse("a1-c3").is_jump
    assert Move.parse(" - ") is Move.PASS
    assert Move.PASS.is_pass
    assert Move.from_indices(Board.index("a", "1"), Board.index("b", "2")) == m
    for bad in ("a1-a4", "z9-a1", "a1b2", ""):
        with pytest.raises(ValueError):
            Move.parse(bad)


def test_neighbor_offsets():
    a1 = Board.index("a", "1")
    assert Board.neighbor(a1, 1, 1) == Board.index("b", "2")
    assert Board.neighbor(a1, 2, 0) == Board.index("c", "1")
    assert Board().get_1d_board()[Board.neighbor(a1, -1, 0)] is BLOCKED


def test_extend_keeps_origin():
    b = Board()
    b.make_move(Move.parse("a7-b6"))
    assert b.get("a", "7") is RED and b.get("b", "6") is RED
    assert b.red_pieces() == 3
    assert b.whose_move() is BLUE
    assert b.num_jumps() == 0


def test_jump_vacates_origin():
    b = Board()
    b.make_move(Move.parse("a7-c5"))
    assert b.get("a", "7") is EMPTY and b.get("c", "5") is RED
    assert b.red_pieces() == 2
    assert b.num_jumps() == 1


def test_capture_flips_adjacent_opponents():
    b = Board.from_layout([
        "-------",
        "-------",
        "-------",
        "--b----",
        "-------",
        "-r-----",
        "------b",
    ])
    b.make_move(Move.parse("b2-c3"))
    assert b.get("c", "4") is RED
    assert b.red_pieces() == 3 and b.blue_pieces() == 1
    assert b.get("g", "1") is BLUE


def test_capturing_last_piece_wins():
    b = Board.from_layout([
        "-------",
        "-------",
        "-------",
        "--b----",
        "-------",
        "-r-----",
        "-------",
    ])
    assert b.get_winner() is None
    b.make_move(Move.parse("b2-c3"))
    assert b.blue_pieces() == 0
    assert b.get_winner() is RED


def test_illegal_moves_raise():
    b = Board()
    with pytest.raises(ValueError):
        b.make_move(Move.parse("b2-c3"))  # no piece there
    with pytest.raises(ValueError):
        b.make_move(Move.parse("a1-b2"))  # blue piece, red to move
    with pytest.raises(ValueError):
        b.pass_turn()


def test_forced_pass():
    b = Board.from_layout([
        "-------",
        "-------",
        "-------",
        "-------",
        "bbb----",
        "bbb----",
        "rbb----",
    ])
    assert not b.can_move(RED)
    assert b.legal_move(Move.PASS)
    b.make_move(Move.PASS)
    assert b.whose_move() is BLUE


def test_set_block_reflects():
    b = Board()
    b.set_block("c", "3")
    for col, row in (("c", "3"), ("e", "3"), ("c", "5"), ("e", "5")):
        assert b.get(col, row) is BLOCKED
    with pytest.raises(ValueError):
        b.set_block("a", "1")
    b.make_move(Move.parse("a7-b7"))
    with pytest.raises(ValueError):
        b.set_block("d", "4")


def test_copy_is_independent():
    b = Board()
    c = b.copy()
    c.make_move(Move.parse("a7-b6"))
    assert b.get("b", "6") is EMPTY
    assert b.red_pieces() == 2
    assert b.whose_move() is RED


def test_no_moves_for_either_side_ends_game():
    tie = Board.from_layout(["rXXXXXX"] + ["XXXXXXX"] * 5 + ["XXXXXXb"])
    assert tie.get_winner() is EMPTY
    red_win = Board.from_layout(["rrXXXXX"] + ["XXXXXXX"] * 5 + ["XXXXXXb"])
    assert red_win.get_winner() is RED


def test_jump_limit_ends_game():
    b = Board()
    shuttle = {
        RED: ["a7-c7", "c7-a7"],
        BLUE: ["a1-c1", "c1-a1"],
    }
    for i in range(JUMP_LIMIT):
        mover = b.whose_move()
        assert b.get_winner() is None
        b.make_move(Move.parse(shuttle[mover][(i // 2) % 2]))
    assert b.num_jumps() == JUMP_LIMIT
    assert b.get_winner() is EMPTY


def test_layout_round_trip_and_validation():
    rows = ["r--X--b", "-------", "-------", "---X---", "-------", "-------", "b--X--r"]
    assert str(Board.from_layout(rows)).splitlines() == rows
    with pytest.raises(ValueError):
        Board.from_layout(rows[:-1])
    with pytest.raises(ValueError):
        Board.from_layout(["r-----q"] + rows[1:])
