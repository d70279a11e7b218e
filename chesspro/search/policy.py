"""
Rating-Scaled Search Policy

Maps an opponent rating to one of four move-selection strategies. The
mapping is a pure function of the rating, recomputed on every request.

    rating < 600           RANDOM   uniformly random legal move
    600 <= rating < 1200   DEPTH_1  best move at depth 1 (greedy)
    1200 <= rating < 2000  DEPTH_2  best move at depth 2
    rating >= 2000         DEPTH_3  best move at depth 3
"""

import enum
import logging
import random
from typing import Optional

import chess

from chesspro import rules
from chesspro.evaluation.base import Evaluator
from chesspro.search.minimax import get_best_move

logger = logging.getLogger(__name__)


class SearchPolicy(enum.Enum):
    """Move-selection strategy; the value is the search depth (0 = random)."""

    RANDOM = 0
    DEPTH_1 = 1
    DEPTH_2 = 2
    DEPTH_3 = 3

    @property
    def depth(self) -> int:
        return self.value

    @classmethod
    def for_rating(cls, rating: float) -> "SearchPolicy":
        """
        Policy for a rating. Each band includes its lower bound, so 600,
        1200 and 2000 already select the stronger policy.
        """
        if rating < 600:
            return cls.RANDOM
        elif rating < 1200:
            return cls.DEPTH_1
        elif rating < 2000:
            return cls.DEPTH_2
        else:
            return cls.DEPTH_3

    def choose(
        self,
        board: chess.Board,
        rng: Optional[random.Random] = None,
        evaluator: Optional[Evaluator] = None,
    ) -> Optional[chess.Move]:
        """
        Pick a move for the side to move under this policy.

        Returns:
            The chosen move, or None if there is no legal move
        """
        moves = rules.legal_moves(board)
        if not moves:
            return None

        if self is SearchPolicy.RANDOM:
            return (rng or random).choice(moves)
        return get_best_move(board, self.depth, evaluator)


def get_move_by_rating(
    board: chess.Board,
    rating: float,
    rng: Optional[random.Random] = None,
    evaluator: Optional[Evaluator] = None,
) -> Optional[chess.Move]:
    """
    Choose the computer's move at a given difficulty.

    Args:
        board: Current position (restored before returning)
        rating: Opponent rating
        rng: Random source for the random policy (default: module ``random``)
        evaluator: Position evaluation function (default: MaterialEvaluator)

    Returns:
        A legal move, or None if the side to move has no legal move
    """
    policy = SearchPolicy.for_rating(rating)
    logger.debug(f"Rating {rating} -> {policy.name}")
    return policy.choose(board, rng=rng, evaluator=evaluator)
