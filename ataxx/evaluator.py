from __future__ import annotations

from typing import List

from .board import PLAYABLE, Board, PieceColor

# Magnitude of a won position. The search adds the remaining depth, so
# depths above MAX_SEARCH_DEPTH would reach INFTY.
WINNING_VALUE = 2**31 - 1 - 20
INFTY = 2**31 - 1
MAX_SEARCH_DEPTH = INFTY - WINNING_VALUE - 1


class Evaluator:
    """Static evaluation for Ataxx positions.

    Positive scores favor ``maximizer`` (red unless told otherwise),
    negative scores favor its opponent.
    """

    def __init__(self, maximizer: PieceColor = PieceColor.RED) -> None:
        if not maximizer.is_piece():
            raise ValueError(f"Maximizing side must be red or blue, not {maximizer}")
        self.maximizer = maximizer
        self.minimizer = maximizer.opposite()

    def evaluate(self, board: Board, winning_value: int) -> int:
        """Score BOARD; +-WINNING_VALUE for won positions and 0 for ties."""
        winner = board.get_winner()
        if winner is not None:
            if winner is self.maximizer:
                return winning_value
            if winner is self.minimizer:
                return -winning_value
            return 0
        cells = board.get_1d_board()
        return (self._side_score(board, cells, self.maximizer)
                - self._side_score(board, cells, self.minimizer))

    @classmethod
    def _side_score(cls, board: Board, cells: List[PieceColor], color: PieceColor) -> int:
        return (board.pieces(color)
                + cls.pieces_with_border(cells, color, 1)
                + cls.pieces_with_border(cells, color, 2))

    @staticmethod
    def pieces_with_border(cells: List[PieceColor], color: PieceColor, border: int) -> int:
        """Sum over COLOR's pieces of COLOR cells in the window of radius BORDER.

        The window includes the piece itself, and radius 2 covers radius 1.
        """
        total = 0
        for sq in PLAYABLE:
            if cells[sq] is not color:
                continue
            for dc in range(-border, border + 1):
                for dr in range(-border, border + 1):
                    if cells[Board.neighbor(sq, dc, dr)] is color:
                        total += 1
        return total
