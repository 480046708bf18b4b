from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

import logging
import random
import time

from .board import Board, Move, PieceColor
from .config import CONFIG
from .evaluator import INFTY, MAX_SEARCH_DEPTH, WINNING_VALUE, Evaluator
from .movegen import possible_moves

if TYPE_CHECKING:
    from .game import Game

logger = logging.getLogger(__name__)

MoveGenerator = Callable[[Board], List[Move]]


@dataclass
class SearchResult:
    best_move: Optional[Move]
    score: int
    nodes: int


class SearchEngine:
    """Depth-bounded minimax with alpha-beta pruning.

    Children of every node are visited in an order shuffled by ``rng``, so
    which of several equally valued moves wins is decided by the seed.
    Every child is searched on its own copy of the board; the board handed
    to ``min_max`` is never modified.
    """

    def __init__(
        self,
        evaluator: Evaluator,
        rng: Optional[random.Random] = None,
        move_generator: MoveGenerator = possible_moves,
    ) -> None:
        self.evaluator = evaluator
        self.rng = rng if rng is not None else random.Random()
        self.move_generator = move_generator
        self.last_found_move: Optional[Move] = None
        self.nodes = 0

    def search(self, board: Board, depth: int, sense: int) -> SearchResult:
        """Search BOARD to DEPTH plies; SENSE is 1 to maximize, -1 to minimize."""
        if not 1 <= depth <= MAX_SEARCH_DEPTH:
            raise ValueError(f"Search depth must be between 1 and {MAX_SEARCH_DEPTH}, got {depth}")
        if sense not in (1, -1):
            raise ValueError(f"Sense must be 1 or -1, got {sense}")
        mover = board.whose_move()
        if board.get_winner() is not None or not board.can_move(mover):
            raise ValueError(f"{mover} has no legal move to search")
        self.last_found_move = None
        self.nodes = 0
        score = self.min_max(board, depth, True, sense, -INFTY, INFTY)
        return SearchResult(best_move=self.last_found_move, score=score, nodes=self.nodes)

    def min_max(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: int,
        beta: int,
    ) -> int:
        """Value of BOARD searched DEPTH plies deep within (ALPHA, BETA).

        With SAVE_MOVE, the best move found is stored in ``last_found_move``.
        Depth 0 and finished games return the static score and record
        nothing.
        """
        self.nodes += 1
        # WINNING_VALUE + depth: wins nearer the root score higher.
        if depth == 0 or board.get_winner() is not None:
            return self.evaluator.evaluate(board, WINNING_VALUE + depth)

        # A side with no moves in an unfinished game must pass.
        moves = self.move_generator(board) or [Move.PASS]
        order = list(range(len(moves)))
        self.rng.shuffle(order)

        best: Optional[Move] = None
        if sense == 1:
            best_score = -INFTY
            for i in order:
                child = board.copy()
                child.make_move(moves[i])
                score = self.min_max(child, depth - 1, False, -1, alpha, beta)
                if best is None or score > best_score:
                    best_score = score
                    best = moves[i]
                alpha = max(alpha, score)
                if beta <= alpha:
                    break
        else:
            best_score = INFTY
            for i in order:
                child = board.copy()
                child.make_move(moves[i])
                score = self.min_max(child, depth - 1, False, 1, alpha, beta)
                if best is None or score < best_score:
                    best_score = score
                    best = moves[i]
                beta = min(beta, score)
                if beta <= alpha:
                    break

        if save_move:
            self.last_found_move = best
        return best_score


class AIPlayer:
    """A player for GAME that computes its own moves as COLOR.

    SEED initializes the random generator used to order moves; identical
    seeds produce identical play. MAXIMIZER is the side the evaluation
    favors with positive scores, which fixes this player's search sense.
    """

    def __init__(
        self,
        game: "Game",
        color: PieceColor,
        seed: Optional[int] = None,
        depth: Optional[int] = None,
        maximizer: PieceColor = PieceColor.RED,
    ) -> None:
        if not color.is_piece():
            raise ValueError(f"AI must play red or blue, not {color}")
        self.game = game
        self.color = color
        self.depth = depth if depth is not None else CONFIG.search.depth
        if not 1 <= self.depth <= MAX_SEARCH_DEPTH:
            raise ValueError(f"Search depth must be between 1 and {MAX_SEARCH_DEPTH}, got {self.depth}")
        self.sense = 1 if color is maximizer else -1
        seed = seed if seed is not None else CONFIG.search.seed
        self.engine = SearchEngine(Evaluator(maximizer), random.Random(seed))
        self.last_result: Optional[SearchResult] = None

    def get_move(self) -> str:
        """Choose, report and return a move for this turn ("-" for a pass)."""
        if not self.game.board.can_move(self.color):
            self.game.report_move(Move.PASS, self.color)
            return "-"
        move = self.find_move()
        self.game.report_move(move, self.color)
        return str(move)

    def find_move(self) -> Move:
        """Return a move from the current position, assuming there is one."""
        board = self.game.board.copy()
        start = time.perf_counter()
        result = self.engine.search(board, self.depth, self.sense)
        logger.debug(
            "%s searched depth %d: %s score %d, %d nodes in %.3fs",
            self.color, self.depth, result.best_move, result.score,
            result.nodes, time.perf_counter() - start,
        )
        self.last_result = result
        return result.best_move
