from __future__ import annotations

from typing import List

from .board import PLAYABLE, Board, Move, PieceColor


def possible_moves(board: Board) -> List[Move]:
    """All clone and jump moves for the side to move.

    A move runs from each of the mover's pieces to every empty square in
    the 5x5 window around it. Padding cells are BLOCKED, so the window
    never yields an off-board destination. An empty list means the mover
    has to pass.
    """
    cells = board.get_1d_board()
    mover = board.whose_move()
    moves: List[Move] = []
    for sq in PLAYABLE:
        if cells[sq] is not mover:
            continue
        for dc in range(-2, 3):
            for dr in range(-2, 3):
                dest = Board.neighbor(sq, dc, dr)
                if cells[dest] is PieceColor.EMPTY:
                    moves.append(Move.from_indices(sq, dest))
    return moves
