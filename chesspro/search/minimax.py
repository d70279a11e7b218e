"""
Minimax Search with Alpha-Beta Pruning

This module implements the search behind every depth-based difficulty level.
Minimax explores the game tree to a fixed depth, and alpha-beta pruning
skips branches that cannot change the result at the root.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Fail-hard cutoffs; non-root values may only be bounds,
      which is enough because the root only compares them
    - No move ordering, transposition table or quiescence: moves are searched
      in python-chess generation order, so results are deterministic

Score Framing:
    The evaluator scores from White's perspective. Leaves orient that score
    for ``perspective`` (Black by default, so a leaf returns
    ``-evaluate(board)``). find_best_move searches with the root mover as
    ``perspective``: a larger score is always better for the side that
    just moved at the root.

Board Ownership:
    The board is borrowed for the duration of the call. Every trial move is
    wrapped in ``rules.trial_move``, so the board is restored on every exit
    path, including cutoffs.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import chess

from chesspro import rules
from chesspro.evaluation.base import Evaluator
from chesspro.evaluation.material import MaterialEvaluator

logger = logging.getLogger(__name__)

# Legitimate scores are bounded by the material on the board (two kings at
# 20000 plus at most ~8000 of other material and PST bonus per side), so
# these two values are never reached by a real evaluation.
SEARCH_SENTINEL = 99999
"""Initial best value of a node: -SEARCH_SENTINEL when maximizing, +SEARCH_SENTINEL when minimizing"""

ROOT_WINDOW = 100000
"""Half-width of the alpha-beta window opened at the root"""

_default_evaluator = MaterialEvaluator()


@dataclass
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        move: Best move found (None if the side to move has no legal move)
        score: Score of the best move, larger = better for the mover
        nodes: Number of search calls made below the root
        scores: (move, score) for every root move, in search order
    """
    move: Optional[chess.Move]
    score: int
    nodes: int = 0
    scores: List[Tuple[chess.Move, int]] = field(default_factory=list)


def search(
    board: chess.Board,
    depth: int,
    alpha: int,
    beta: int,
    maximizing: bool,
    evaluator: Optional[Evaluator] = None,
    perspective: chess.Color = chess.BLACK,
    nodes_searched: Optional[List[int]] = None,
) -> int:
    """
    Minimax search with alpha-beta pruning.

    Args:
        board: Current chess position (mutated during the call, restored on return)
        depth: Remaining search depth (decrements each recursive call)
        alpha: Best score already guaranteed to the maximizer
        beta: Best score already guaranteed to the minimizer
        maximizing: True if the side to move is the maximizing side
        evaluator: Position evaluation function (default: MaterialEvaluator)
        perspective: Colour whose point of view leaf scores are given in
        nodes_searched: Optional mutable list [count] to track search calls

    Returns:
        int: Score of the position for ``perspective``

    Notes:
        A position without legal moves at non-zero depth is not treated as
        checkmate or stalemate: the loop does not run and the node returns
        its initial sentinel (-SEARCH_SENTINEL or +SEARCH_SENTINEL).
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    if evaluator is None:
        evaluator = _default_evaluator

    # Base case: Reached leaf node (depth = 0)
    if depth == 0:
        score = evaluator.evaluate(board)
        return score if perspective == chess.WHITE else -score

    if maximizing:
        best_eval = -SEARCH_SENTINEL
        for move in rules.legal_moves(board):
            try:
                with rules.trial_move(board, move, validate=False):
                    child = search(
                        board, depth - 1, alpha, beta, False,
                        evaluator, perspective, nodes_searched,
                    )
            except chess.IllegalMoveError as e:
                logger.debug(f"Skipping rejected move {move}: {e}")
                continue

            best_eval = max(best_eval, child)
            alpha = max(alpha, best_eval)

            # Beta cutoff: Minimizing player won't allow this branch
            if beta <= alpha:
                break
        return best_eval

    else:
        best_eval = SEARCH_SENTINEL
        for move in rules.legal_moves(board):
            try:
                with rules.trial_move(board, move, validate=False):
                    child = search(
                        board, depth - 1, alpha, beta, True,
                        evaluator, perspective, nodes_searched,
                    )
            except chess.IllegalMoveError as e:
                logger.debug(f"Skipping rejected move {move}: {e}")
                continue

            best_eval = min(best_eval, child)
            beta = min(beta, best_eval)

            # Alpha cutoff: Maximizing player won't allow this branch
            if beta <= alpha:
                break
        return best_eval


def find_best_move(
    board: chess.Board,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> SearchResult:
    """
    Find the best move in the current position.

    Every legal move is tried in generation order and searched to
    ``depth - 1`` with the opponent to move. The move with the strictly
    greatest score wins, so ties go to the first move generated.

    Args:
        board: Current chess position (restored before returning)
        depth: Search depth in plies, at least 1
        evaluator: Position evaluation function (default: MaterialEvaluator)

    Returns:
        SearchResult; ``move`` is None when there is no legal move

    Raises:
        ValueError: If depth is less than 1
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")

    mover = rules.side_to_move(board)
    result = SearchResult(move=None, score=-SEARCH_SENTINEL)

    legal_moves = rules.legal_moves(board)
    if not legal_moves:
        logger.debug(f"No legal moves in {board.fen()}")
        return result

    nodes = [0]
    for move in legal_moves:
        try:
            with rules.trial_move(board, move, validate=False):
                score = search(
                    board,
                    depth - 1,
                    -ROOT_WINDOW,
                    ROOT_WINDOW,
                    False,
                    evaluator,
                    perspective=mover,
                    nodes_searched=nodes,
                )
        except chess.IllegalMoveError as e:
            logger.debug(f"Skipping rejected root move {move}: {e}")
            continue

        result.scores.append((move, score))
        logger.debug(f"Move: {move.uci()}, Score: {score}")

        if score > result.score:
            result.score = score
            result.move = move

    # Every move scored at the sentinel: still a legal move to play
    if result.move is None and result.scores:
        result.move, result.score = result.scores[0]

    result.nodes = nodes[0]
    logger.info(
        f"Search depth={depth}: best_move={result.move.uci() if result.move else 'None'}, "
        f"score={result.score}, nodes={result.nodes}"
    )
    return result


def get_best_move(
    board: chess.Board,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> Optional[chess.Move]:
    """
    Best move for the side to move, or None if it has no legal move.

    See find_best_move for the selection rule.
    """
    return find_best_move(board, depth, evaluator).move
