from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .board import SIDE, Board, Move, PieceColor
from .movegen import possible_moves

logger = logging.getLogger(__name__)


class Game:
    """Owns the live board and applies the moves players report.

    Players never change the board directly: the AI and the web layer both
    go through ``report_move``, which checks turn order and keeps the
    history.
    """

    def __init__(self, blocks: Iterable[str] = ()) -> None:
        self.board: Board
        self.history: List[Tuple[PieceColor, Move]]
        self.reset(blocks)

    def reset(self, blocks: Iterable[str] = ()) -> None:
        """Start a new game, blocking each square in BLOCKS (e.g. "c3") and its reflections.

        On a bad square the current game is left as it was.
        """
        board = Board()
        for name in blocks:
            name = name.strip() if isinstance(name, str) else ""
            if (len(name) != 2 or not "a" <= name[0] < chr(ord("a") + SIDE)
                    or not "1" <= name[1] < chr(ord("1") + SIDE)):
                raise ValueError(f"Invalid block square: {name!r}")
            board.set_block(name[0], name[1])
        self.board = board
        self.history = []

    def report_move(self, move: Move, color: PieceColor) -> None:
        if self.board.get_winner() is not None:
            raise ValueError("Game is over")
        if self.board.whose_move() is not color:
            raise ValueError(f"It is not {color}'s turn")
        self.board.make_move(move)
        self.history.append((color, move))
        logger.info("%s moves %s", color, move)
        if self.is_game_over():
            logger.info("Game over: %s", self.get_result())

    def push(self, text: str) -> None:
        """Apply a move in text form ("a1-b2", or "-" to pass) for the side to move."""
        self.report_move(Move.parse(text), self.board.whose_move())

    def get_turn_color(self) -> str:
        return str(self.board.whose_move())

    def get_legal_moves(self) -> List[str]:
        if self.is_game_over():
            return []
        moves = [str(m) for m in possible_moves(self.board)]
        return moves or [str(Move.PASS)]

    def is_game_over(self) -> bool:
        return self.board.get_winner() is not None

    def get_result(self) -> Optional[str]:
        winner = self.board.get_winner()
        if winner is None:
            return None
        if winner is PieceColor.EMPTY:
            return "tie"
        return str(winner)

    def snapshot(self) -> Dict[str, object]:
        last_move: Optional[str] = None
        if self.history:
            last_move = str(self.history[-1][1])

        return {
            "board": str(self.board).splitlines(),
            "turn": self.get_turn_color(),
            "legal_moves": self.get_legal_moves(),
            "game_over": self.is_game_over(),
            "result": self.get_result(),
            "red_pieces": self.board.red_pieces(),
            "blue_pieces": self.board.blue_pieces(),
            "last_move": last_move,
        }
