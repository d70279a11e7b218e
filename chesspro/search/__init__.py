"""
Search Module

Minimax with alpha-beta pruning over python-chess boards, and the
rating-scaled policy that picks the computer's move.

Key Components:
    - search: Core search algorithm with alpha-beta pruning
    - find_best_move / get_best_move: Root-level search
    - SearchPolicy / get_move_by_rating: Difficulty scaling by rating
"""

from chesspro.search.minimax import (
    ROOT_WINDOW,
    SEARCH_SENTINEL,
    SearchResult,
    find_best_move,
    get_best_move,
    search,
)
from chesspro.search.policy import SearchPolicy, get_move_by_rating

__all__ = [
    'ROOT_WINDOW',
    'SEARCH_SENTINEL',
    'SearchResult',
    'find_best_move',
    'get_best_move',
    'search',
    'SearchPolicy',
    'get_move_by_rating',
]
