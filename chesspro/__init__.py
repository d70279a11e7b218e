"""
ChessPro

Play chess against a rating-scaled computer opponent and get move-quality
feedback. Chess rules come from python-chess; ChessPro supplies the engine.

## Architecture

1. **rules**: The python-chess calls the engine relies on
   - Legal moves, apply/undo, game-end predicates
   - trial_move: scoped apply/undo used by the search

2. **evaluation**: Position evaluation
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: material + pawn/knight piece-square tables

3. **search**: Move search
   - Minimax with alpha-beta pruning
   - SearchPolicy: rating → random / depth 1 / depth 2 / depth 3

4. **tutor**: Move-quality feedback (good / inaccurate / bad)

5. **openings**: Opening catalogue and trainer

6. **game**: Headless play session (colour, rating, history, status)

7. **cli**: Terminal front end (`python -m chesspro`)

## Quick Start

```python
import chess
from chesspro import get_best_move, get_move_by_rating

board = chess.Board()
print(get_best_move(board, depth=2))
print(get_move_by_rating(board, rating=1500))
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from chesspro.evaluation import Evaluator, MaterialEvaluator, evaluate
from chesspro.search import SearchPolicy, find_best_move, get_best_move, get_move_by_rating, search

__all__ = [
    'Evaluator',
    'MaterialEvaluator',
    'evaluate',
    'search',
    'find_best_move',
    'get_best_move',
    'get_move_by_rating',
    'SearchPolicy',
]
