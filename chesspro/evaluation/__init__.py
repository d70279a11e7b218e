"""
Evaluation Module

Position evaluation for the search. Evaluators are swappable: the search
works with any object implementing the ``Evaluator`` interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - MaterialEvaluator: Material plus pawn/knight piece-square tables
    - evaluate: Module-level shortcut bound to a shared MaterialEvaluator

Data Flow:
    chess.Board → evaluate() → int (centipawns)
                               Positive = White advantage
                               Negative = Black advantage
"""

from chesspro.evaluation.base import Evaluator
from chesspro.evaluation.material import (
    MaterialEvaluator,
    PIECE_VALUES,
    PIECE_SQUARE_TABLES,
    evaluate,
)

__all__ = ['Evaluator', 'MaterialEvaluator', 'PIECE_VALUES', 'PIECE_SQUARE_TABLES', 'evaluate']
