from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Sequence

# Playable squares per side, and the side of the padded grid (two cells of
# BLOCKED sentinels on every edge so 5x5 windows never leave the list).
SIDE = 7
EXTENDED_SIDE = SIDE + 4
# Consecutive jumps after which the game ends.
JUMP_LIMIT = 25

# Indices of the playable squares, row 1 first.
PLAYABLE = [
    (r + 2) * EXTENDED_SIDE + (c + 2) for r in range(SIDE) for c in range(SIDE)
]

_MOVE_RE = re.compile(r"^([a-g])([1-7])-([a-g])([1-7])$")


class PieceColor(Enum):
    EMPTY = "-"
    RED = "r"
    BLUE = "b"
    BLOCKED = "X"

    def opposite(self) -> "PieceColor":
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def is_piece(self) -> bool:
        return self in (PieceColor.RED, PieceColor.BLUE)

    def __str__(self) -> str:
        return self.name.lower()


def index(col: str, row: str) -> int:
    """Linearized index of square (col, row), e.g. ("a", "1")."""
    return (ord(row) - ord("1") + 2) * EXTENDED_SIDE + (ord(col) - ord("a") + 2)


def square_name(sq: int) -> str:
    return chr(ord("a") - 2 + sq % EXTENDED_SIDE) + chr(ord("1") - 2 + sq // EXTENDED_SIDE)


@dataclass(frozen=True)
class Move:
    """A clone/jump from (col0, row0) to (col1, row1), or the pass move.

    Coordinates are algebraic: columns "a"-"g", rows "1"-"7".
    """

    col0: str = ""
    row0: str = ""
    col1: str = ""
    row1: str = ""

    PASS: ClassVar["Move"]

    def __post_init__(self) -> None:
        if self.is_pass:
            return
        text = f"{self.col0}{self.row0}-{self.col1}{self.row1}"
        if not _MOVE_RE.match(text):
            raise ValueError(f"Malformed move: {text}")
        if self.distance not in (1, 2):
            raise ValueError(f"Move too long or too short: {text}")

    @classmethod
    def parse(cls, text: str) -> "Move":
        text = text.strip()
        if text == "-":
            return cls.PASS
        m = _MOVE_RE.match(text)
        if not m:
            raise ValueError(f"Malformed move: {text!r}")
        return cls(*m.groups())

    @classmethod
    def from_indices(cls, from_sq: int, to_sq: int) -> "Move":
        src, dst = square_name(from_sq), square_name(to_sq)
        return cls(src[0], src[1], dst[0], dst[1])

    @property
    def is_pass(self) -> bool:
        return not self.col0

    @property
    def distance(self) -> int:
        return max(abs(ord(self.col0) - ord(self.col1)), abs(ord(self.row0) - ord(self.row1)))

    @property
    def is_extend(self) -> bool:
        return not self.is_pass and self.distance == 1

    @property
    def is_jump(self) -> bool:
        return not self.is_pass and self.distance == 2

    @property
    def from_index(self) -> int:
        return index(self.col0, self.row0)

    @property
    def to_index(self) -> int:
        return index(self.col1, self.row1)

    def __str__(self) -> str:
        if self.is_pass:
            return "-"
        return f"{self.col0}{self.row0}-{self.col1}{self.row1}"


Move.PASS = Move()


class Board:
    """An Ataxx board: 7x7 squares inside a BLOCKED border.

    Cells live in a flat list of EXTENDED_SIDE**2 entries; see ``index``.
    The board owns turn, piece counts, jump count and the winner, and
    ``make_move`` performs captures in place. Use ``copy`` for an
    independent clone.
    """

    def __init__(self) -> None:
        self._cells: List[PieceColor] = []
        self._to_move = PieceColor.RED
        self._counts: Dict[PieceColor, int] = {}
        self._num_jumps = 0
        self._num_moves = 0
        self._winner: Optional[PieceColor] = None
        self.clear()

    def clear(self) -> None:
        """Reset to the starting position: red on a7 and g1, blue on a1 and g7."""
        self._cells = [PieceColor.BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        for sq in PLAYABLE:
            self._cells[sq] = PieceColor.EMPTY
        self._counts = {PieceColor.RED: 0, PieceColor.BLUE: 0}
        self._to_move = PieceColor.RED
        self._num_jumps = 0
        self._num_moves = 0
        self._set(index("a", "7"), PieceColor.RED)
        self._set(index("g", "1"), PieceColor.RED)
        self._set(index("a", "1"), PieceColor.BLUE)
        self._set(index("g", "7"), PieceColor.BLUE)
        self._winner = self._compute_winner()

    @classmethod
    def from_layout(cls, rows: Sequence[str], to_move: PieceColor = PieceColor.RED) -> "Board":
        """Build a position from seven strings, row 7 first.

        Characters are ``r`` (red), ``b`` (blue), ``X`` (block), ``-`` (empty).
        """
        if len(rows) != SIDE or any(len(r) != SIDE for r in rows):
            raise ValueError(f"Layout must be {SIDE} rows of {SIDE} cells")
        if not to_move.is_piece():
            raise ValueError(f"Invalid side to move: {to_move}")
        board = cls()
        board._counts = {PieceColor.RED: 0, PieceColor.BLUE: 0}
        for r, line in enumerate(rows):
            row = chr(ord("1") + SIDE - 1 - r)
            for c, ch in enumerate(line):
                try:
                    color = PieceColor(ch)
                except ValueError:
                    raise ValueError(f"Unknown cell {ch!r} in layout") from None
                board._cells[index(chr(ord("a") + c), row)] = PieceColor.EMPTY
                board._set(index(chr(ord("a") + c), row), color)
        board._to_move = to_move
        board._winner = board._compute_winner()
        return board

    def copy(self) -> "Board":
        clone = Board.__new__(Board)
        clone._cells = list(self._cells)
        clone._to_move = self._to_move
        clone._counts = dict(self._counts)
        clone._num_jumps = self._num_jumps
        clone._num_moves = self._num_moves
        clone._winner = self._winner
        return clone

    # Queries

    @staticmethod
    def neighbor(sq: int, dc: int, dr: int) -> int:
        """Index of the square DC columns and DR rows away from SQ."""
        return sq + dc + dr * EXTENDED_SIDE

    @staticmethod
    def index(col: str, row: str) -> int:
        return index(col, row)

    def whose_move(self) -> PieceColor:
        return self._to_move

    def get(self, col: str, row: str) -> PieceColor:
        return self._cells[index(col, row)]

    def get_1d_board(self) -> List[PieceColor]:
        """Snapshot of every cell, padding included."""
        return list(self._cells)

    def pieces(self, color: PieceColor) -> int:
        return self._counts.get(color, 0)

    def red_pieces(self) -> int:
        return self._counts[PieceColor.RED]

    def blue_pieces(self) -> int:
        return self._counts[PieceColor.BLUE]

    def num_jumps(self) -> int:
        return self._num_jumps

    def num_moves(self) -> int:
        return self._num_moves

    def get_winner(self) -> Optional[PieceColor]:
        """None while the game goes on; RED, BLUE, or EMPTY for a tie."""
        return self._winner

    def can_move(self, color: PieceColor) -> bool:
        cells = self._cells
        for sq in PLAYABLE:
            if cells[sq] is not color:
                continue
            for dr in range(-2, 3):
                for dc in range(-2, 3):
                    if cells[sq + dc + dr * EXTENDED_SIDE] is PieceColor.EMPTY:
                        return True
        return False

    def legal_move(self, move: Move) -> bool:
        if self._winner is not None:
            return False
        if move.is_pass:
            return not self.can_move(self._to_move)
        return (self._cells[move.from_index] is self._to_move
                and self._cells[move.to_index] is PieceColor.EMPTY)

    # Commands

    def make_move(self, move: Move) -> None:
        """Apply MOVE for the side to move, capturing adjacent opposing pieces."""
        if move.is_pass:
            self.pass_turn()
            return
        if not self.legal_move(move):
            raise ValueError(f"Illegal move: {move}")
        mover = self._to_move
        if move.is_jump:
            self._set(move.from_index, PieceColor.EMPTY)
            self._num_jumps += 1
        else:
            self._num_jumps = 0
        dest = move.to_index
        self._set(dest, mover)
        opponent = mover.opposite()
        for dr in range(-1, 2):
            for dc in range(-1, 2):
                sq = self.neighbor(dest, dc, dr)
                if self._cells[sq] is opponent:
                    self._set(sq, mover)
        self._to_move = opponent
        self._num_moves += 1
        self._winner = self._compute_winner()

    def pass_turn(self) -> None:
        if self._winner is not None:
            raise ValueError("Game is over")
        if self.can_move(self._to_move):
            raise ValueError(f"Illegal pass: {self._to_move} has legal moves")
        self._to_move = self._to_move.opposite()
        self._num_moves += 1

    def set_block(self, col: str, row: str) -> None:
        """Block (col, row) and its reflections across both board axes."""
        if self._num_moves > 0:
            raise ValueError("Blocks may only be placed before the first move")
        rcol = chr(ord("a") + ord("g") - ord(col))
        rrow = chr(ord("1") + ord("7") - ord(row))
        squares = {index(col, row), index(rcol, row), index(col, rrow), index(rcol, rrow)}
        for sq in squares:
            if self._cells[sq] is not PieceColor.EMPTY:
                raise ValueError(f"Cannot block occupied square {square_name(sq)}")
        for sq in squares:
            self._set(sq, PieceColor.BLOCKED)
        self._winner = self._compute_winner()

    def _set(self, sq: int, color: PieceColor) -> None:
        old = self._cells[sq]
        if old.is_piece():
            self._counts[old] -= 1
        if color.is_piece():
            self._counts[color] += 1
        self._cells[sq] = color

    def _compute_winner(self) -> Optional[PieceColor]:
        red, blue = self.red_pieces(), self.blue_pieces()
        over = (red == 0 or blue == 0
                or self._num_jumps >= JUMP_LIMIT
                or not (self.can_move(PieceColor.RED) or self.can_move(PieceColor.BLUE)))
        if not over:
            return None
        if red > blue:
            return PieceColor.RED
        if blue > red:
            return PieceColor.BLUE
        return PieceColor.EMPTY

    def __str__(self) -> str:
        lines = []
        for r in range(SIDE - 1, -1, -1):
            row = chr(ord("1") + r)
            lines.append("".join(self.get(chr(ord("a") + c), row).value for c in range(SIDE)))
        return "\n".join(lines)

