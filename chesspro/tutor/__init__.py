"""
Tutor Module

Grades a move the human just played against the engine's choice in the same
position and suggests a move for the next turn.

Key Components:
    - analyze_move: Grade one move and build a MoveFeedback
    - MoveQuality: GOOD / INACCURATE / BAD
"""

from chesspro.tutor.feedback import MoveFeedback, MoveQuality, analyze_move, classify_loss

__all__ = ['MoveFeedback', 'MoveQuality', 'analyze_move', 'classify_loss']
