"""
Configuration for the ChessPro engine, tutor and console.
"""

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import chess

from chesspro.errors import ConfigError

logger = logging.getLogger(__name__)

COLOR_NAMES = {"white": chess.WHITE, "black": chess.BLACK}

INT_FIELDS = ("rating", "tutor_depth", "tutor_window", "inaccuracy_threshold", "blunder_threshold")


@dataclass
class EngineConfig:
    """Configuration for a play or tutor session.

    Every setting lives here so the console, the session and the tests build
    engines the same way. Values can be overridden from a TOML file with
    ``EngineConfig.from_toml``.
    """

    # Opponent
    rating: int = 1200
    """Opponent strength; mapped to a search policy by SearchPolicy.for_rating"""

    player_color: str = "white"
    """Side played by the human: "white" or "black" """

    random_seed: Optional[int] = None
    """Seed for the random policy (None for nondeterministic play)"""

    # Tutor
    tutor_depth: int = 2
    """Search depth used to grade moves and to suggest the next one"""

    tutor_window: int = 10000
    """Half-width of the alpha-beta window used when grading a move"""

    inaccuracy_threshold: int = 40
    """Score loss (centipawns) above which a move is an inaccuracy"""

    blunder_threshold: int = 100
    """Score loss (centipawns) above which a move is a bad move"""

    # Logging
    debug: bool = False
    """Log at DEBUG level"""

    log_file: Optional[Path] = None
    """Log destination (None for ~/.chesspro/chesspro.log)"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.log_file is not None:
            self.log_file = Path(self.log_file)

        self.player_color = str(self.player_color).lower()
        if self.player_color not in COLOR_NAMES:
            raise ConfigError(
                f"player_color should be 'white' or 'black', got {self.player_color!r}"
            )

        for name in INT_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")

        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise ConfigError(f"random_seed must be an integer or None, got {self.random_seed!r}")

        if self.rating < 0:
            raise ConfigError(f"rating must be non-negative, got {self.rating}")

        if self.tutor_depth < 1:
            raise ConfigError(f"tutor_depth must be at least 1, got {self.tutor_depth}")

        if self.tutor_window <= 0:
            raise ConfigError(f"tutor_window must be positive, got {self.tutor_window}")

        if not 0 <= self.inaccuracy_threshold <= self.blunder_threshold:
            raise ConfigError(
                "thresholds must satisfy 0 <= inaccuracy_threshold <= blunder_threshold, "
                f"got {self.inaccuracy_threshold} and {self.blunder_threshold}"
            )

    @property
    def color(self) -> chess.Color:
        """The human's side as a python-chess colour."""
        return COLOR_NAMES[self.player_color]

    @classmethod
    def from_toml(cls, path) -> "EngineConfig":
        """
        Load configuration from a TOML file.

        Keys may sit at the top level or under a ``[chesspro]`` table.
        A missing file yields the defaults.

        Args:
            path: Path to the TOML file

        Returns:
            EngineConfig instance

        Raises:
            ConfigError: If the file holds unknown keys or invalid values
        """
        path = Path(path)
        if not path.exists():
            logger.debug(f"Config file {path} not found, using defaults")
            return cls()

        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        data = data.get("chesspro", data)
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")

        logger.info(f"Loaded config from {path}")
        return cls(**data)

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(\n"
            f"  Opponent: rating={self.rating}, player_color={self.player_color}\n"
            f"  Tutor: depth={self.tutor_depth}, thresholds="
            f"{self.inaccuracy_threshold}/{self.blunder_threshold}\n"
            f"  Logging: debug={self.debug}, file={self.log_file}\n"
            f")"
        )
