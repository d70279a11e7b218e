"""
Openings Module

Key Components:
    - OPENINGS: Catalogue of named opening lines (SAN)
    - find_opening / openings_matching: Catalogue lookups
    - OpeningTrainer: Move-by-move drill of one opening
"""

from chesspro.openings.catalogue import OPENINGS, Opening, find_opening, openings_matching
from chesspro.openings.trainer import OpeningTrainer, TrainerResult, TrainerStatus

__all__ = [
    'OPENINGS',
    'Opening',
    'find_opening',
    'openings_matching',
    'OpeningTrainer',
    'TrainerResult',
    'TrainerStatus',
]
