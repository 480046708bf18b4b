"""Ataxx engine package providing the board, evaluation, and AI search.

Modules:
- board: Board, pieces and moves, with the rules of play
- movegen: Legal move enumeration for the side to move
- evaluator: Heuristic evaluation function for positions
- ai: Minimax with alpha-beta pruning and seeded tie-breaking
- game: Turn orchestration over a live board
"""

from .board import Board, Move, PieceColor
from .game import Game
from .ai import AIPlayer, SearchEngine, SearchResult
from .evaluator import Evaluator
from .movegen import possible_moves

__all__ = [
    "Board", "Move", "PieceColor", "Game", "AIPlayer",
    "SearchEngine", "SearchResult", "Evaluator", "possible_moves",
]
