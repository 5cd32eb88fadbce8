"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from capturechess.core import Board, is_valid_move, parse_square

    board = Board.initial()
    e2, e4 = parse_square("e2"), parse_square("e4")
    is_valid_move(board, board[e2], e2, e4)  # True
"""

from capturechess.core.board import Board
from capturechess.core.enums import Color, PieceType
from capturechess.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from capturechess.core.piece import Piece
from capturechess.core.rules import (
    bishop_rule,
    can_land_on,
    is_valid_move,
    king_rule,
    knight_rule,
    legal_destinations,
    pawn_rule,
    queen_rule,
    rook_rule,
)
from capturechess.core.types import (
    Square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
    # Rules
    "bishop_rule",
    "can_land_on",
    "is_valid_move",
    "king_rule",
    "knight_rule",
    "legal_destinations",
    "pawn_rule",
    "queen_rule",
    "rook_rule",
]
