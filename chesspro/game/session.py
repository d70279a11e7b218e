"""
Play Session

One game of the human against the computer. The session owns the board;
the engine only ever sees it for the duration of a single search.
"""

import logging
import random
from typing import List, Optional

import chess

from chesspro import rules
from chesspro.config import EngineConfig, COLOR_NAMES
from chesspro.errors import GameError
from chesspro.search.policy import SearchPolicy, get_move_by_rating

logger = logging.getLogger(__name__)


class GameSession:
    """
    Human vs computer game.

    Attributes:
        board: Current position
        config: Session configuration (rating, colour, seed)
        history: SAN of every move played, in order
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.rng = random.Random(self.config.random_seed)
        self.board = chess.Board()
        self.history: List[str] = []
        self.reset()

    @property
    def player_color(self) -> chess.Color:
        return self.config.color

    @property
    def rating(self) -> int:
        return self.config.rating

    @rating.setter
    def rating(self, value: int):
        if value < 0:
            raise GameError(f"rating must be non-negative, got {value}")
        self.config.rating = value
        logger.info(f"Rating set to {value} ({SearchPolicy.for_rating(value).name})")

    @property
    def is_over(self) -> bool:
        return rules.is_game_over(self.board)

    @property
    def is_player_turn(self) -> bool:
        return rules.side_to_move(self.board) == self.player_color

    def reset(self, player_color: Optional[str] = None) -> Optional[chess.Move]:
        """
        Start a new game.

        Args:
            player_color: "white" or "black" (default: keep the current side)

        Returns:
            The computer's opening move if the human plays Black, else None
        """
        if player_color is not None:
            player_color = player_color.lower()
            if player_color not in COLOR_NAMES:
                raise GameError(f"player_color should be 'white' or 'black', got {player_color!r}")
            self.config.player_color = player_color

        self.board = chess.Board()
        self.history = []
        logger.info(f"New game: human plays {self.config.player_color}, rating {self.rating}")

        if not self.is_player_turn:
            return self.engine_move()
        return None

    def _push(self, move: chess.Move) -> str:
        san = self.board.san(move)
        self.board.push(move)
        self.history.append(san)
        return san

    def player_move(self, move: rules.MoveLike) -> chess.Move:
        """
        Play the human's move.

        Args:
            move: chess.Move, UCI ("e2e4", "e7e8" promotes to a queen) or SAN

        Returns:
            The move played

        Raises:
            GameError: If the game is over or it is the computer's turn
            chess.IllegalMoveError / chess.InvalidMoveError: Bad move input
        """
        if self.is_over:
            raise GameError("Game is over")
        if not self.is_player_turn:
            raise GameError("Not your turn")

        parsed = rules.parse_move(self.board, move)
        san = self._push(parsed)
        logger.info(f"Human played {san}")
        return parsed

    def engine_move(self) -> Optional[chess.Move]:
        """
        Let the computer play for the side to move.

        Returns:
            The move played, or None if the game is over
        """
        if self.is_player_turn and not self.is_over:
            raise GameError("It is the human's turn")

        move = get_move_by_rating(self.board, self.rating, rng=self.rng)
        if move is None:
            logger.info("Engine has no legal move")
            return None

        san = self._push(move)
        logger.info(f"Engine played {san}")
        return move

    def status(self) -> str:
        """Short description of the game state."""
        if rules.is_checkmate(self.board):
            winner = "Black" if rules.side_to_move(self.board) == chess.WHITE else "White"
            return f"Checkmate! {winner} wins."
        if self.is_over or rules.is_draw(self.board):
            return "Draw!"
        if rules.is_check(self.board):
            return "Check!"
        side = "White" if rules.side_to_move(self.board) == chess.WHITE else "Black"
        return f"{side} to move"

    def numbered_history(self) -> List[str]:
        """History as "1. e4 e5" style lines."""
        lines = []
        for i in range(0, len(self.history), 2):
            lines.append(f"{i // 2 + 1}. {' '.join(self.history[i:i + 2])}")
        return lines
