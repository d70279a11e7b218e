"""
Material and Piece-Square Table Evaluation

The evaluator behind every ChessPro difficulty level:
    1. Material counting (piece values)
    2. Piece-Square Tables for pawns and knights (positional bonuses)

It is deliberately small. It runs once per leaf of the search tree, so at
depth 3 it is called thousands of times per move and dominates search cost.

Evaluation Components:
    - Material: P=100, N=320, B=330, R=500, Q=900, K=20000
    - Position: PST bonuses for pawns and knights; other pieces have none

Reference:
    Simplified Evaluation Function
    https://www.chessprogramming.org/Simplified_Evaluation_Function
"""

import chess
import numpy as np

from chesspro.evaluation.base import Evaluator

#fmt: off
# ============================================================================
# Material Values (centipawns)
# ============================================================================
# The king carries a large value so that any line losing it dwarfs every
# other term.

PIECE_VALUES = {
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 20000,
}


# ============================================================================
# Piece-Square Tables (PSTs)
# ============================================================================
# Values are from White's perspective (row 0 = rank 8, row 7 = rank 1).
# Black pieces read the table at row 7 - row, so "forward" means each side's
# own direction of advance.
#
# Units: Centipawns (added to material value)
# ============================================================================

# Pawn PST: Encourage central pawns, reward advanced pawns
PAWN_TABLE = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 8 (promotion)
    [ 50,  50,  50,  50,  50,  50,  50,  50],  # Rank 7
    [ 10,  10,  20,  30,  30,  20,  10,  10],  # Rank 6
    [  5,   5,  10,  25,  25,  10,   5,   5],  # Rank 5
    [  0,   0,   0,  20,  20,   0,   0,   0],  # Rank 4
    [  5,  -5, -10,   0,   0, -10,  -5,   5],  # Rank 3
    [  5,  10,  10, -20, -20,  10,  10,   5],  # Rank 2
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 1
], dtype=np.int32)

# Knight PST: "Knights on the rim are dim"
KNIGHT_TABLE = np.array([
    [-50, -40, -30, -30, -30, -30, -40, -50],
    [-40, -20,   0,   0,   0,   0, -20, -40],
    [-30,   0,  10,  15,  15,  10,   0, -30],
    [-30,   5,  15,  20,  20,  15,   5, -30],
    [-30,   0,  15,  20,  20,  15,   0, -30],
    [-30,   5,  10,  15,  15,  10,   5, -30],
    [-40, -20,   0,   5,   5,   0, -20, -40],
    [-50, -40, -30, -30, -30, -30, -40, -50],
], dtype=np.int32)
#fmt: on

PAWN_TABLE.setflags(write=False)
KNIGHT_TABLE.setflags(write=False)

PIECE_SQUARE_TABLES = {
    chess.PAWN: PAWN_TABLE,
    chess.KNIGHT: KNIGHT_TABLE,
}


class MaterialEvaluator(Evaluator):
    """
    Evaluation using material and piece-square tables.

    Attributes:
        piece_values: Mapping from piece type to centipawn value
        piece_tables: Mapping from piece type to an 8x8 PST; piece types
            without an entry get no positional bonus
    """

    def __init__(self, piece_values=None, piece_tables=None):
        self.piece_values = PIECE_VALUES if piece_values is None else piece_values
        self.piece_tables = PIECE_SQUARE_TABLES if piece_tables is None else piece_tables

    def evaluate(self, board: chess.Board) -> int:
        """
        Evaluate position using material + PST.

        Args:
            board: Chess board to evaluate

        Returns:
            int: Evaluation in centipawns (White's perspective)
        """
        score = 0

        for square in chess.SQUARES:
            piece = board.piece_at(square)
            if piece is None:
                continue

            value = self.piece_values.get(piece.piece_type, 0)

            pst_table = self.piece_tables.get(piece.piece_type)
            if pst_table is not None:
                row = 7 - chess.square_rank(square)
                col = chess.square_file(square)
                if piece.color == chess.BLACK:
                    row = 7 - row
                value += int(pst_table[row, col])

            if piece.color == chess.WHITE:
                score += value
            else:
                score -= value

        return score


_default_evaluator = MaterialEvaluator()


def evaluate(board: chess.Board) -> int:
    """Score ``board`` from White's perspective with the default evaluator."""
    return _default_evaluator.evaluate(board)
