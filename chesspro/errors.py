"""
Exception hierarchy for ChessPro.

The search core never raises for an ordinary game-over position: "no legal
move" is reported as ``None``. Exceptions are reserved for the outer layers
(play session, opening trainer, configuration), where they signal misuse.

Move parsing errors come straight from python-chess
(``chess.InvalidMoveError``, ``chess.IllegalMoveError``,
``chess.AmbiguousMoveError``). Like everything below, they are ``ValueError``
subclasses, so a front end can catch ``ValueError`` once.
"""


class ChessProError(ValueError):
    """Base class for all ChessPro errors."""


class ConfigError(ChessProError):
    """Invalid configuration value."""


class GameError(ChessProError):
    """Action not allowed in the current state of a play session."""


class TrainerError(ChessProError):
    """Opening trainer used without a selected opening or past its end."""
