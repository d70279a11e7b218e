"""
Game Module

Headless state of a game between the human and the computer.
"""

from chesspro.game.session import GameSession

__all__ = ['GameSession']
