"""
Unit Tests for the Rating Policy

Tests that ratings map to the right strategy and that get_move_by_rating
routes to it.
"""

import random

import chess
import pytest

from chesspro.search import SearchPolicy, get_best_move, get_move_by_rating
from chesspro.search import policy as policy_module

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class TestSearchPolicy:

    @pytest.mark.parametrize("rating, expected", [
        (0, SearchPolicy.RANDOM),
        (500, SearchPolicy.RANDOM),
        (599, SearchPolicy.RANDOM),
        (599.9, SearchPolicy.RANDOM),
        (600, SearchPolicy.DEPTH_1),
        (900, SearchPolicy.DEPTH_1),
        (1199, SearchPolicy.DEPTH_1),
        (1200, SearchPolicy.DEPTH_2),
        (1500, SearchPolicy.DEPTH_2),
        (1999, SearchPolicy.DEPTH_2),
        (2000, SearchPolicy.DEPTH_3),
        (2500, SearchPolicy.DEPTH_3),
        (3000, SearchPolicy.DEPTH_3),
    ])
    def test_for_rating(self, rating, expected):
        assert SearchPolicy.for_rating(rating) is expected

    def test_depths(self):
        assert [p.depth for p in SearchPolicy] == [0, 1, 2, 3]


class TestGetMoveByRating:

    @pytest.fixture
    def recorded_depths(self, monkeypatch):
        """Replace the depth-limited search with a recorder."""
        depths = []

        def fake_get_best_move(board, depth, evaluator=None):
            depths.append(depth)
            return next(iter(board.legal_moves))

        monkeypatch.setattr(policy_module, "get_best_move", fake_get_best_move)
        return depths

    @pytest.mark.parametrize("rating, depth", [
        (900, 1),
        (600, 1),
        (1500, 2),
        (1200, 2),
        (2500, 3),
        (2000, 3),
    ])
    def test_routes_to_depth(self, recorded_depths, rating, depth):
        move = get_move_by_rating(chess.Board(), rating)

        assert recorded_depths == [depth]
        assert move in chess.Board().legal_moves

    def test_low_rating_does_not_search(self, recorded_depths):
        move = get_move_by_rating(chess.Board(), 500, rng=random.Random(0))

        assert recorded_depths == []
        assert move in chess.Board().legal_moves

    def test_low_rating_is_random(self):
        """Many draws at rating 500 spread over the 20 opening moves."""
        board = chess.Board()
        rng = random.Random(1234)

        seen = {get_move_by_rating(board, 500, rng=rng) for _ in range(400)}

        assert seen <= set(board.legal_moves)
        assert len(seen) >= 10

    def test_seeded_random_is_reproducible(self):
        board = chess.Board()

        first = [get_move_by_rating(board, 100, rng=random.Random(7)) for _ in range(5)]
        second = [get_move_by_rating(board, 100, rng=random.Random(7)) for _ in range(5)]

        assert first == second

    def test_depth_one_matches_best_move(self):
        board = chess.Board("rnb1kbnr/pppppppp/8/3q4/8/2N5/PPPPPPPP/R1BQKBNR w KQkq - 0 1")

        move = get_move_by_rating(board, 900)

        assert move == get_best_move(board, 1) == chess.Move.from_uci("c3d5")

    @pytest.mark.parametrize("rating", [0, 500, 900, 1500, 2500])
    def test_no_legal_moves(self, recorded_depths, rating):
        board = chess.Board(FOOLS_MATE)

        assert get_move_by_rating(board, rating) is None
        assert recorded_depths == []

    def test_board_restored(self):
        board = chess.Board()
        board.push_san("e4")
        fen = board.fen()

        get_move_by_rating(board, 1500)

        assert board.fen() == fen
        assert len(board.move_stack) == 1
