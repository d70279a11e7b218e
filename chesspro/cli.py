"""
Console Front End

A line-oriented interface for playing against the engine, getting tutor
feedback and drilling openings, all from a terminal.

Commands:
    - move <uci|san>: Play a move (trainer move while an opening is drilled)
    - hint: Engine suggestion for the side to move
    - new [white|black]: Start a new game, optionally switching sides
    - rating <n>: Change the opponent rating
    - board: Print the board and game status
    - history: Print the moves played so far
    - openings: List the opening catalogue
    - train <name|number>: Drill an opening from the catalogue
    - tutor on|off: Toggle move-quality feedback
    - help: List commands
    - quit: Exit

Usage:
    python -m chesspro --rating 1500 --color black --tutor
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from chesspro.config import EngineConfig
from chesspro.errors import ChessProError
from chesspro.game.session import GameSession
from chesspro.log import setup_logger
from chesspro.openings import OPENINGS, OpeningTrainer, TrainerStatus, find_opening
from chesspro.search.minimax import get_best_move
from chesspro.search.policy import SearchPolicy
from chesspro.tutor import analyze_move

logger = logging.getLogger(__name__)


class ConsoleApp:
    """
    Interactive console over a GameSession.

    Attributes:
        config: Engine configuration
        session: Current game
        tutor: If True, every human move is graded before the engine replies
        trainer: Active opening drill, or None while playing a game
    """

    def __init__(self, config: Optional[EngineConfig] = None, tutor: bool = False):
        self.config = config or EngineConfig()
        self.tutor = tutor
        self.trainer: Optional[OpeningTrainer] = None
        self.session = GameSession(self.config)

        self.handlers = {
            "move": self.handle_move,
            "hint": self.handle_hint,
            "new": self.handle_new,
            "rating": self.handle_rating,
            "board": self.handle_board,
            "history": self.handle_history,
            "openings": self.handle_openings,
            "train": self.handle_train,
            "tutor": self.handle_tutor,
            "help": self.handle_help,
        }

    def say(self, text: str = ""):
        print(text)
        sys.stdout.flush()

    def run(self):
        """
        Main command loop.

        Reads commands from stdin until 'quit' or EOF. Bad input is reported
        on stderr and the loop keeps going.
        """
        self.say("ChessPro console. Type 'help' for commands.")
        self.handle_board([])

        while True:
            try:
                command = input().strip()

                if not command:
                    continue

                logger.debug(f">>> {command}")

                tokens = command.split()
                cmd = tokens[0].lower()

                if cmd == "quit":
                    logger.info("Quit received")
                    break

                handler = self.handlers.get(cmd)
                if handler is None:
                    logger.debug(f"Unknown command ignored: {command}")
                    self.say(f"Unknown command: {cmd}")
                    continue

                handler(tokens[1:])

            except EOFError:
                logger.info("EOF received, shutting down")
                break
            except ValueError as e:
                logger.error(f"Command error: {e}", exc_info=True)
                print(f"# Error: {e}", file=sys.stderr)

    def handle_move(self, args: List[str]):
        if not args:
            raise ChessProError("usage: move <uci|san>")
        move_text = args[0]

        if self.trainer is not None:
            self._trainer_move(move_text)
            return

        board_before = self.session.board.copy()
        move = self.session.player_move(move_text)

        if self.tutor:
            feedback = analyze_move(board_before, move, self.config)
            self.say(f"[{feedback.quality.name}] {feedback.message}")
            if feedback.best_move != move:
                self.say(f"Engine preferred {feedback.best_san}.")

        if not self.session.is_over:
            reply = self.session.engine_move()
            if reply is not None:
                self.say(f"Engine plays {self.session.history[-1]}")

        self.handle_board([])

    def _trainer_move(self, move_text: str):
        result = self.trainer.try_move(move_text)
        self.say(result.message)
        if result.status is TrainerStatus.COMPLETED:
            self.say(str(self.trainer.board))
            self.trainer = None
            self.say("Back to the game.")
        elif result.status is TrainerStatus.CORRECT:
            self.say(str(self.trainer.board))

    def handle_hint(self, args: List[str]):
        if self.trainer is not None:
            self.say(f"Next in line: {self.trainer.expected_move}")
            return

        board = self.session.board
        move = get_best_move(board.copy(), self.config.tutor_depth)
        if move is None:
            self.say("No legal moves.")
        else:
            self.say(f"Suggestion: {board.san(move)}")

    def handle_new(self, args: List[str]):
        self.trainer = None
        reply = self.session.reset(args[0] if args else None)
        if reply is not None:
            self.say(f"Engine plays {self.session.history[-1]}")
        self.handle_board([])

    def handle_rating(self, args: List[str]):
        if not args:
            self.say(f"Rating: {self.session.rating}")
            return
        try:
            rating = int(args[0])
        except ValueError:
            raise ChessProError(f"rating must be an integer, got {args[0]!r}")
        self.session.rating = rating
        policy = SearchPolicy.for_rating(rating)
        self.say(f"Rating: {rating} ({policy.name})")

    def handle_board(self, args: List[str]):
        self.say(str(self.session.board))
        self.say(self.session.status())

    def handle_history(self, args: List[str]):
        for line in self.session.numbered_history():
            self.say(line)

    def handle_openings(self, args: List[str]):
        for i, opening in enumerate(OPENINGS, start=1):
            self.say(f"{i:2d}. {opening.name}: {' '.join(opening.moves)}")

    def handle_train(self, args: List[str]):
        if not args:
            raise ChessProError("usage: train <name|number>")

        name = " ".join(args)
        if name.isdigit() and 1 <= int(name) <= len(OPENINGS):
            opening = OPENINGS[int(name) - 1]
        else:
            opening = find_opening(name)
        if opening is None:
            raise ChessProError(f"Unknown opening: {name}")

        self.trainer = OpeningTrainer(opening)
        self.say(self.trainer.last_result.message)
        self.say(f"First move: {self.trainer.expected_move}")

    def handle_tutor(self, args: List[str]):
        if args:
            self.tutor = args[0].lower() in ("on", "1", "true", "yes")
        self.say(f"Tutor: {'on' if self.tutor else 'off'}")

    def handle_help(self, args: List[str]):
        self.say(__doc__.split("Usage:")[0].strip())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesspro",
        description="Play chess against a rating-scaled engine in the terminal",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="TOML file with EngineConfig settings",
    )
    parser.add_argument(
        "--rating",
        type=int,
        default=None,
        help="Opponent rating (overrides the config file)",
    )
    parser.add_argument(
        "--color",
        choices=["white", "black"],
        default=None,
        help="Side played by the human (overrides the config file)",
    )
    parser.add_argument(
        "--tutor",
        action="store_true",
        help="Grade every move and show the engine's preference",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = EngineConfig.from_toml(args.config) if args.config else EngineConfig()
        overrides = {}
        if args.rating is not None:
            overrides["rating"] = args.rating
        if args.color is not None:
            overrides["player_color"] = args.color
        if args.debug:
            overrides["debug"] = True
        config = dataclasses.replace(config, **overrides)
    except ChessProError as e:
        print(f"# Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logger(debug=config.debug, log_file=config.log_file)
    logger.info("=== ChessPro Console Started ===")
    logger.info(repr(config))

    ConsoleApp(config, tutor=args.tutor).run()

    logger.info("=== ChessPro Console Stopped ===")
    return 0
