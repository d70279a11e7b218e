"""
Unit Tests for the Play Session
"""

import chess
import pytest

from chesspro.config import EngineConfig
from chesspro.errors import GameError
from chesspro.game import GameSession

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


@pytest.fixture
def session():
    """Quick opponent: random moves with a fixed seed."""
    return GameSession(EngineConfig(rating=100, random_seed=3))


class TestGameSession:

    def test_initial_state(self, session):
        assert session.board.fen() == chess.STARTING_FEN
        assert session.history == []
        assert session.is_player_turn
        assert session.status() == "White to move"

    def test_player_and_engine_moves(self, session):
        session.player_move("e2e4")
        reply = session.engine_move()

        assert reply is not None
        assert session.history[0] == "e4"
        assert len(session.history) == 2
        assert session.is_player_turn

    def test_san_input(self, session):
        move = session.player_move("Nf3")

        assert move == chess.Move.from_uci("g1f3")

    def test_not_players_turn(self, session):
        session.player_move("e4")

        with pytest.raises(GameError):
            session.player_move("e5")

    def test_engine_refuses_human_turn(self, session):
        with pytest.raises(GameError):
            session.engine_move()

    def test_illegal_move(self, session):
        with pytest.raises(chess.IllegalMoveError):
            session.player_move("e2e5")
        assert session.history == []

    def test_engine_moves_first_for_black(self):
        session = GameSession(EngineConfig(rating=100, random_seed=3, player_color="black"))

        assert len(session.history) == 1
        assert session.board.turn == chess.BLACK
        assert session.is_player_turn

    def test_reset_switches_side(self, session):
        session.player_move("e4")

        reply = session.reset("black")

        assert reply is not None
        assert session.player_color == chess.BLACK
        assert len(session.history) == 1

    def test_reset_invalid_color(self, session):
        with pytest.raises(GameError):
            session.reset("green")

    def test_promotion_defaults_to_queen(self, session):
        session.board = chess.Board("8/P6k/8/8/8/8/8/K7 w - - 0 1")

        move = session.player_move("a7a8")

        assert move.promotion == chess.QUEEN
        assert session.history == ["a8=Q"]

    def test_explicit_underpromotion(self, session):
        session.board = chess.Board("8/P6k/8/8/8/8/8/K7 w - - 0 1")

        move = session.player_move("a7a8n")

        assert move.promotion == chess.KNIGHT

    def test_moves_rejected_after_game_over(self, session):
        session.board = chess.Board(FOOLS_MATE)

        with pytest.raises(GameError):
            session.player_move("e2e4")
        assert session.engine_move() is None

    def test_status_checkmate(self, session):
        session.board = chess.Board(FOOLS_MATE)

        assert session.is_over
        assert session.status() == "Checkmate! Black wins."

    def test_status_stalemate(self, session):
        session.board = chess.Board("k7/2Q5/1K6/8/8/8/8/8 b - - 0 1")

        assert session.status() == "Draw!"

    def test_status_check(self, session):
        session.board = chess.Board("4k3/8/8/8/8/8/8/4R1K1 b - - 0 1")

        assert session.status() == "Check!"

    def test_rating_setter(self, session):
        session.rating = 1500

        assert session.rating == 1500
        assert session.config.rating == 1500

        with pytest.raises(GameError):
            session.rating = -1

    def test_seeded_games_repeat(self):
        first = GameSession(EngineConfig(rating=100, random_seed=11, player_color="black"))
        second = GameSession(EngineConfig(rating=100, random_seed=11, player_color="black"))

        assert first.history == second.history

    def test_engine_plays_search_move(self):
        session = GameSession(EngineConfig(rating=900, player_color="black"))
        session.board = chess.Board(
            "rnb1kbnr/pppppppp/8/3q4/8/2N5/PPPPPPPP/R1BQKBNR w KQkq - 0 1"
        )

        move = session.engine_move()

        assert move == chess.Move.from_uci("c3d5")

    def test_numbered_history(self, session):
        session.player_move("e4")
        session.engine_move()
        session.player_move("d4")

        lines = session.numbered_history()

        assert lines[0].startswith("1. e4 ")
        assert lines[1].startswith("2. d4")
