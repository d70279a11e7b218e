"""
Abstract Evaluator Interface

This module defines the abstract base class for position evaluators.
The search takes an evaluator as a parameter, so a different scoring
function can be dropped in without touching the search code.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() returns an integer score from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. Evaluators never push or pop moves on the board they are given

Convention:
    - Material values in centipawns (pawn = 100, queen = 900)
    - Game-end positions are not special-cased: a checkmate is scored by the
      material still on the board
"""

from abc import ABC, abstractmethod

import chess


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Methods:
        evaluate(board): Returns position evaluation in centipawns
    """

    @abstractmethod
    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate a chess position from White's perspective.

        Args:
            board: python-chess Board object to evaluate

        Returns:
            int: Evaluation in centipawns
        """

    def __call__(self, board: chess.Board) -> int:
        return self.evaluate(board)

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
