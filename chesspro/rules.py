"""
Rules Engine Adapter

ChessPro never implements chess rules itself. Everything it needs to know
about a position (legal moves, piece placement, game end) comes from
python-chess through the small set of functions below, and every mutation
goes through ``apply``/``undo`` or ``trial_move``.

Contract:
    legal_moves(board[, square]) → list of chess.Move (empty at game end)
    apply(board, move)           → chess.Move, board mutated in place
    undo(board)                  → reverts the most recent apply
    piece_at(board, square)      → chess.Piece or None
    side_to_move(board)          → chess.WHITE / chess.BLACK
    is_game_over(board)          → bool (plus is_checkmate/is_draw/is_check)

Search code uses ``trial_move`` instead of calling ``apply``/``undo`` by hand:
the board is restored when the ``with`` block exits, whatever the exit path.
Moves taken straight from ``legal_moves`` skip the second legality check
with ``validate=False``.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Union

import chess

MoveLike = Union[chess.Move, str]


def legal_moves(board: chess.Board, square: Optional[chess.Square] = None) -> List[chess.Move]:
    """
    Enumerate legal moves in python-chess generation order.

    Args:
        board: Position to query
        square: If given, only moves of the piece standing on this square

    Returns:
        List of legal moves (empty for checkmate or stalemate)
    """
    if square is None:
        return list(board.legal_moves)
    return list(board.generate_legal_moves(from_mask=chess.BB_SQUARES[square]))


def parse_move(board: chess.Board, move: MoveLike) -> chess.Move:
    """
    Turn user input into a legal move.

    Accepts a ``chess.Move``, a UCI string ("e2e4", "e7e8q") or a SAN string
    ("Nf3", "exd5"). A bare from/to pair that needs a promotion piece is
    promoted to a queen.

    Raises:
        chess.InvalidMoveError: Text is neither UCI nor SAN
        chess.IllegalMoveError: Move is not legal in this position
        chess.AmbiguousMoveError: SAN matches more than one move
    """
    if isinstance(move, chess.Move):
        if not board.is_legal(move):
            raise chess.IllegalMoveError(f"illegal move: {move.uci()} in {board.fen()}")
        return move

    text = move.strip()
    try:
        parsed = chess.Move.from_uci(text)
    except chess.InvalidMoveError:
        return board.parse_san(text)

    if parsed.promotion is None and board.is_legal(
        chess.Move(parsed.from_square, parsed.to_square, promotion=chess.QUEEN)
    ):
        parsed = chess.Move(parsed.from_square, parsed.to_square, promotion=chess.QUEEN)

    if not board.is_legal(parsed):
        raise chess.IllegalMoveError(f"illegal uci: {text!r} in {board.fen()}")
    return parsed


def apply(board: chess.Board, move: MoveLike) -> chess.Move:
    """
    Apply a move to the board in place.

    Returns:
        The move that was pushed; exactly one ``undo`` reverts it
    """
    move = parse_move(board, move)
    board.push(move)
    return move


def undo(board: chess.Board) -> chess.Move:
    """Revert the most recent ``apply``."""
    return board.pop()


@contextmanager
def trial_move(
    board: chess.Board, move: MoveLike, validate: bool = True
) -> Iterator[chess.Move]:
    """
    Apply a move for the duration of a ``with`` block.

    The move is undone when the block exits, including on early ``return``,
    ``break`` or an exception. If the rules engine rejects the move, the
    board is left untouched and the error propagates before the block runs.

    Args:
        board: Position to mutate
        move: Move to try
        validate: Parse and legality-check ``move`` first. Pass False only
            for a chess.Move taken from ``legal_moves`` on this same board.
    """
    if validate:
        move = apply(board, move)
    else:
        board.push(move)
    try:
        yield move
    finally:
        undo(board)


def piece_at(board: chess.Board, square: chess.Square) -> Optional[chess.Piece]:
    return board.piece_at(square)


def side_to_move(board: chess.Board) -> chess.Color:
    return board.turn


def is_game_over(board: chess.Board) -> bool:
    return board.is_game_over()


def is_checkmate(board: chess.Board) -> bool:
    return board.is_checkmate()


def is_draw(board: chess.Board) -> bool:
    """
    Draw by rule: stalemate, insufficient material, fifty moves, or a
    repetition that can be claimed.
    """
    return (
        board.is_stalemate()
        or board.is_insufficient_material()
        or board.is_fifty_moves()
        or board.can_claim_threefold_repetition()
    )


def is_check(board: chess.Board) -> bool:
    return board.is_check()
