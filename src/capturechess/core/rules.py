"""Move validation: per-piece geometry, path occlusion and capture targets.

Every rule is a pure function of the board; nothing here mutates state.
Illegality is an ordinary ``False`` result, never an exception.

The rules deliberately ignore king safety: a move that leaves or puts the
mover's own king in check is still accepted.
"""

from __future__ import annotations

from collections.abc import Callable

from capturechess.core.board import Board
from capturechess.core.enums import Color, PieceType
from capturechess.core.piece import Piece
from capturechess.core.types import Square

RuleFn = Callable[[Board, Piece, Square, Square], bool]

# Pawns advance toward rank 0 for white, rank 7 for black.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_HOME_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def can_land_on(board: Board, piece: Piece, to_sq: Square) -> bool:
    """Destination gate shared by every piece: empty or an enemy piece."""
    target = board[to_sq]
    return target is None or target.color != piece.color


# ── Per-piece rules ──────────────────────────────────────────────────────────


def pawn_rule(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    direction = _PAWN_DIRECTION[piece.color]
    d_rank = to_sq.rank - from_sq.rank
    d_file = to_sq.file - from_sq.file
    target = board[to_sq]

    if d_file == 0 and target is None:
        if d_rank == direction:
            return True
        if from_sq.rank == _PAWN_HOME_RANK[piece.color] and d_rank == 2 * direction:
            return board.is_empty(Square(from_sq.rank + direction, from_sq.file))

    # Diagonal steps only capture; no en passant.
    if abs(d_file) == 1 and d_rank == direction and target is not None:
        return target.color != piece.color
    return False


def rook_rule(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    if from_sq == to_sq:
        return False
    if from_sq.rank != to_sq.rank and from_sq.file != to_sq.file:
        return False
    step_rank = _sign(to_sq.rank - from_sq.rank)
    step_file = _sign(to_sq.file - from_sq.file)
    rank, file = from_sq.rank + step_rank, from_sq.file + step_file
    while rank != to_sq.rank or file != to_sq.file:
        if board[Square(rank, file)] is not None:
            return False
        rank += step_rank
        file += step_file
    return can_land_on(board, piece, to_sq)


def bishop_rule(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    d_rank = to_sq.rank - from_sq.rank
    d_file = to_sq.file - from_sq.file
    if d_rank == 0 or abs(d_rank) != abs(d_file):
        return False
    step_rank = _sign(d_rank)
    step_file = _sign(d_file)
    rank, file = from_sq.rank + step_rank, from_sq.file + step_file
    # Both coordinates move in lockstep, so stopping on either axis is exact.
    while rank != to_sq.rank and file != to_sq.file:
        if board[Square(rank, file)] is not None:
            return False
        rank += step_rank
        file += step_file
    return can_land_on(board, piece, to_sq)


def knight_rule(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    d_rank = abs(to_sq.rank - from_sq.rank)
    d_file = abs(to_sq.file - from_sq.file)
    if (d_rank, d_file) not in ((1, 2), (2, 1)):
        return False
    return can_land_on(board, piece, to_sq)


def queen_rule(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return rook_rule(board, piece, from_sq, to_sq) or bishop_rule(
        board, piece, from_sq, to_sq
    )


def king_rule(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    # A null move passes the geometry and is refused by the destination gate,
    # because the origin still holds the king itself.
    d_rank = abs(to_sq.rank - from_sq.rank)
    d_file = abs(to_sq.file - from_sq.file)
    return d_rank <= 1 and d_file <= 1 and can_land_on(board, piece, to_sq)


RULES: dict[PieceType, RuleFn] = {
    PieceType.PAWN: pawn_rule,
    PieceType.KNIGHT: knight_rule,
    PieceType.BISHOP: bishop_rule,
    PieceType.ROOK: rook_rule,
    PieceType.QUEEN: queen_rule,
    PieceType.KING: king_rule,
}


# ── Entry points ─────────────────────────────────────────────────────────────


def is_valid_move(board: Board, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    """Whether *piece* standing on *from_sq* may move to *to_sq*."""
    return RULES[piece.piece_type](board, piece, from_sq, to_sq)


def legal_destinations(board: Board, from_sq: Square) -> list[Square]:
    """All squares the occupant of *from_sq* may move to (empty if none)."""
    from_sq = Square(*from_sq)
    piece = board[from_sq]
    if piece is None:
        return []
    rule = RULES[piece.piece_type]
    return [
        Square(rank, file)
        for rank in range(8)
        for file in range(8)
        if rule(board, piece, from_sq, Square(rank, file))
    ]
