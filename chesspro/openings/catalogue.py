"""
Opening Catalogue

Named opening lines as SAN sequences from the standard starting position.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import chess


@dataclass(frozen=True)
class Opening:
    """
    A named opening line.

    Attributes:
        name: Display name
        moves: SAN moves from the starting position
        description: One-line summary of the idea behind the opening
    """
    name: str
    moves: Tuple[str, ...]
    description: str = ""

    def __len__(self) -> int:
        return len(self.moves)


OPENINGS: Tuple[Opening, ...] = (
    Opening("Italian Game", ("e4", "e5", "Nf3", "Nc6", "Bc4"),
            "Focused on fast development and control of the centre."),
    Opening("Sicilian Defence", ("e4", "c5"),
            "An aggressive, asymmetrical reply to 1.e4."),
    Opening("Ruy Lopez", ("e4", "e5", "Nf3", "Nc6", "Bb5"),
            "One of the oldest and deepest classical openings."),
    Opening("French Defence", ("e4", "e6"),
            "Solid and counter-attacking, built around the pawn chain."),
    Opening("Caro-Kann Defence", ("e4", "c6"),
            "Extremely solid, aiming for a favourable endgame."),
    Opening("Queen's Gambit", ("d4", "d5", "c4"),
            "A temporary pawn sacrifice for central control."),
    Opening("King's Indian Defence", ("d4", "Nf6", "c4", "g6"),
            "Hypermodern: concede the centre now, strike at it later."),
    Opening("English Opening", ("c4",),
            "Flexible and positional, controlling d5 from a distance."),
    Opening("Scandinavian Defence", ("e4", "d5"),
            "Challenges the central pawn immediately."),
    Opening("Pirc Defence", ("e4", "d6", "d4", "Nf6"),
            "Close to the King's Indian, but against the king's pawn."),
    Opening("Alekhine's Defence", ("e4", "Nf6"),
            "Provocative: invites White's pawns forward."),
    Opening("Stonewall Attack", ("d4", "d5", "e3", "Nf6", "Bd3", "c6", "f4"),
            "A rigid defensive pawn formation."),
    Opening("London System", ("d4", "Nf6", "Bf4"),
            "A universal, solid set-up for White."),
    Opening("Bird's Opening", ("f4",),
            "An aggressive flank opening aimed at the king's side."),
    Opening("Vienna Game", ("e4", "e5", "Nc3"),
            "Develops the queen's knight before pushing f4."),
)


def find_opening(name: str) -> Optional[Opening]:
    """Look up an opening by name, ignoring case and surrounding spaces."""
    wanted = name.strip().lower()
    for opening in OPENINGS:
        if opening.name.lower() == wanted:
            return opening
    return None


def normalize_san(san: str) -> str:
    """Strip check and mate markers so "Bb5+" matches "Bb5"."""
    return san.rstrip("+#")


def played_san(board: chess.Board) -> Optional[List[str]]:
    """
    SAN of every move played on ``board``, or None if the game did not
    start from the standard position.
    """
    root = board.root()
    if root.fen() != chess.STARTING_FEN:
        return None

    sans = []
    for move in board.move_stack:
        sans.append(normalize_san(root.san(move)))
        root.push(move)
    return sans


def openings_matching(board: chess.Board) -> List[Opening]:
    """
    Openings whose line is consistent with the moves played so far.

    An opening matches while the game is still inside its line or has just
    completed it; deviating from the line drops it.
    """
    sans = played_san(board)
    if sans is None:
        return []

    matches = []
    for opening in OPENINGS:
        line = [normalize_san(san) for san in opening.moves]
        if len(sans) <= len(line) and line[:len(sans)] == sans:
            matches.append(opening)
    return matches
