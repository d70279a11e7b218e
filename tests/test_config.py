"""
Unit Tests for Configuration
"""

from pathlib import Path

import chess
import pytest

from chesspro.config import EngineConfig
from chesspro.errors import ChessProError, ConfigError


class TestEngineConfig:

    def test_defaults(self):
        config = EngineConfig()

        assert config.rating == 1200
        assert config.player_color == "white"
        assert config.color == chess.WHITE
        assert config.tutor_depth == 2
        assert config.tutor_window == 10000
        assert (config.inaccuracy_threshold, config.blunder_threshold) == (40, 100)

    def test_color_is_normalized(self):
        config = EngineConfig(player_color="Black")

        assert config.player_color == "black"
        assert config.color == chess.BLACK

    @pytest.mark.parametrize("kwargs", [
        {"player_color": "red"},
        {"rating": -5},
        {"tutor_depth": 0},
        {"tutor_window": 0},
        {"inaccuracy_threshold": 200, "blunder_threshold": 100},
        {"inaccuracy_threshold": -1},
        {"rating": "1500"},
        {"rating": True},
        {"tutor_depth": 2.0},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigError):
            EngineConfig(**kwargs)

    def test_error_hierarchy(self):
        assert issubclass(ConfigError, ChessProError)
        assert issubclass(ConfigError, ValueError)

    def test_log_file_becomes_path(self):
        config = EngineConfig(log_file="logs/chesspro.log")

        assert config.log_file == Path("logs/chesspro.log")

    def test_repr(self):
        assert "rating=1200" in repr(EngineConfig())


class TestFromToml:

    def test_missing_file_gives_defaults(self, tmp_path):
        config = EngineConfig.from_toml(tmp_path / "absent.toml")

        assert config == EngineConfig()

    def test_top_level_keys(self, tmp_path):
        path = tmp_path / "chesspro.toml"
        path.write_text('rating = 2100\nplayer_color = "black"\n')

        config = EngineConfig.from_toml(path)

        assert config.rating == 2100
        assert config.color == chess.BLACK

    def test_chesspro_table(self, tmp_path):
        path = tmp_path / "chesspro.toml"
        path.write_text('[chesspro]\ntutor_depth = 3\nrandom_seed = 9\n')

        config = EngineConfig.from_toml(str(path))

        assert config.tutor_depth == 3
        assert config.random_seed == 9

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "chesspro.toml"
        path.write_text('depth = 4\n')

        with pytest.raises(ConfigError):
            EngineConfig.from_toml(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "chesspro.toml"
        path.write_text('rating = -1\n')

        with pytest.raises(ConfigError):
            EngineConfig.from_toml(path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "chesspro.toml"
        path.write_text('rating = \n')

        with pytest.raises(ConfigError):
            EngineConfig.from_toml(path)

    @pytest.mark.parametrize("line", [
        'rating = "1500"',
        'tutor_depth = "2"',
        'tutor_window = 1.5',
        'blunder_threshold = true',
        'random_seed = "seven"',
    ])
    def test_wrong_value_type(self, tmp_path, line):
        path = tmp_path / "chesspro.toml"
        path.write_text(line + "\n")

        with pytest.raises(ConfigError):
            EngineConfig.from_toml(path)
