"""
Move-Quality Feedback

A played move is compared with the engine's best move from the same
position. Both resulting positions are searched to the same depth from the
player's point of view, and the score lost by the played move decides its
grade:

    loss <= inaccuracy_threshold       GOOD
    loss <= blunder_threshold          INACCURATE
    loss >  blunder_threshold          BAD

Default thresholds are 40 and 100 centipawns (see EngineConfig).
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import chess

from chesspro import rules
from chesspro.config import EngineConfig
from chesspro.search.minimax import find_best_move, search

logger = logging.getLogger(__name__)


class MoveQuality(enum.Enum):
    GOOD = "good"
    INACCURATE = "inaccurate"
    BAD = "bad"


MESSAGES = {
    MoveQuality.GOOD: "Excellent move!",
    MoveQuality.INACCURATE: "Inaccuracy. There were better options.",
    MoveQuality.BAD: "Dangerous move! You lost a significant advantage.",
}


@dataclass(frozen=True)
class MoveFeedback:
    """
    Tutor verdict on a single move.

    Attributes:
        quality: Grade of the played move
        message: Human-readable verdict
        loss: Score given up compared with the engine's move (>= 0)
        played: The move that was graded
        played_san: SAN of the played move
        best_move: Engine's move in the same position
        best_san: SAN of the engine's move
        suggestion: Engine's move for the side to move after the played move
            (None if the game is over)
        suggestion_san: SAN of the suggestion
    """
    quality: MoveQuality
    message: str
    loss: int
    played: chess.Move
    played_san: str
    best_move: chess.Move
    best_san: str
    suggestion: Optional[chess.Move] = None
    suggestion_san: Optional[str] = None


def classify_loss(loss: int, config: Optional[EngineConfig] = None) -> MoveQuality:
    """Grade a score loss against the configured thresholds."""
    config = config or EngineConfig()
    if loss > config.blunder_threshold:
        return MoveQuality.BAD
    if loss > config.inaccuracy_threshold:
        return MoveQuality.INACCURATE
    return MoveQuality.GOOD


def analyze_move(
    board: chess.Board,
    move: rules.MoveLike,
    config: Optional[EngineConfig] = None,
) -> MoveFeedback:
    """
    Grade ``move`` played in ``board``.

    The board is not modified; all searching happens on copies.

    Args:
        board: Position before the move
        move: Move to grade (chess.Move, UCI or SAN)
        config: Tutor depth, window and thresholds (default: EngineConfig())

    Returns:
        MoveFeedback

    Raises:
        chess.IllegalMoveError: If the move is not legal in ``board``
        ValueError: If ``board`` has no legal move to grade
    """
    config = config or EngineConfig()
    depth = config.tutor_depth
    window = config.tutor_window
    player = rules.side_to_move(board)

    played = rules.parse_move(board, move)
    best = find_best_move(board.copy(), depth).move
    if best is None:
        raise ValueError(f"No legal moves to grade in {board.fen()}")

    after_played = board.copy()
    played_san = after_played.san(played)
    after_played.push(played)
    user_eval = search(after_played, depth, -window, window, False, perspective=player)

    after_best = board.copy()
    best_san = after_best.san(best)
    after_best.push(best)
    best_eval = search(after_best, depth, -window, window, False, perspective=player)

    loss = max(0, best_eval - user_eval)
    quality = classify_loss(loss, config)
    logger.info(
        f"Graded {played_san}: {quality.name} (loss={loss}, best={best_san}, "
        f"user_eval={user_eval}, best_eval={best_eval})"
    )

    suggestion = find_best_move(after_played, depth).move
    suggestion_san = after_played.san(suggestion) if suggestion else None

    return MoveFeedback(
        quality=quality,
        message=MESSAGES[quality],
        loss=loss,
        played=played,
        played_san=played_san,
        best_move=best,
        best_san=best_san,
        suggestion=suggestion,
        suggestion_san=suggestion_san,
    )
