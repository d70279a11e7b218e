"""
Opening Trainer

Walks the player through an opening from the catalogue, one move at a time.
Correct moves are played on the board; legal but wrong moves are refused
and the expected move is named.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import chess

from chesspro import rules
from chesspro.errors import TrainerError
from chesspro.openings.catalogue import Opening, normalize_san

logger = logging.getLogger(__name__)


class TrainerStatus(enum.Enum):
    NEUTRAL = "neutral"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    COMPLETED = "completed"


@dataclass(frozen=True)
class TrainerResult:
    status: TrainerStatus
    message: str
    expected: Optional[str] = None


class OpeningTrainer:
    """
    Step-by-step drill of a single opening.

    Attributes:
        board: Position reached so far in the selected line
        opening: Opening being trained (None until select() is called)
        index: Number of moves of the line already played
    """

    def __init__(self, opening: Optional[Opening] = None):
        self.board = chess.Board()
        self.opening: Optional[Opening] = None
        self.index = 0
        self.last_result = TrainerResult(TrainerStatus.NEUTRAL, "Select an opening.")
        if opening is not None:
            self.select(opening)

    def select(self, opening: Opening) -> TrainerResult:
        """Start training ``opening`` from the initial position."""
        self.opening = opening
        self.board = chess.Board()
        self.index = 0
        self.last_result = TrainerResult(
            TrainerStatus.NEUTRAL, f"Training: {opening.name}", self.expected_move
        )
        logger.info(f"Opening trainer: {opening.name} ({len(opening)} moves)")
        return self.last_result

    @property
    def expected_move(self) -> Optional[str]:
        """SAN of the next move in the line, or None when the line is done."""
        if self.opening is None or self.index >= len(self.opening):
            return None
        return self.opening.moves[self.index]

    @property
    def is_complete(self) -> bool:
        return self.opening is not None and self.index >= len(self.opening)

    def try_move(self, move: rules.MoveLike) -> TrainerResult:
        """
        Attempt the next move of the line.

        Args:
            move: chess.Move, UCI or SAN

        Returns:
            TrainerResult with CORRECT, COMPLETED or INCORRECT status

        Raises:
            TrainerError: If no opening is selected or the line is finished
            chess.IllegalMoveError: If the move is not legal on the board
        """
        if self.opening is None:
            raise TrainerError("No opening selected")
        expected = self.expected_move
        if expected is None:
            raise TrainerError(f"{self.opening.name} is already complete")

        parsed = rules.parse_move(self.board, move)
        san = self.board.san(parsed)

        if normalize_san(san) != normalize_san(expected):
            logger.debug(f"Trainer: expected {expected}, got {san}")
            self.last_result = TrainerResult(
                TrainerStatus.INCORRECT, f"Incorrect. Expected {expected}.", expected
            )
            return self.last_result

        self.board.push(parsed)
        self.index += 1

        if self.is_complete:
            self.last_result = TrainerResult(TrainerStatus.COMPLETED, "Sequence complete!")
        else:
            self.last_result = TrainerResult(
                TrainerStatus.CORRECT, f"Correct! Next: {self.expected_move}", self.expected_move
            )
        return self.last_result
