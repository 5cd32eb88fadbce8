"""Board placement text (the piece-placement field of FEN)."""

from __future__ import annotations

from capturechess.core.board import Board
from capturechess.core.piece import Piece
from capturechess.core.types import Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse ranks 8..1 separated by ``/``; digits count empty squares."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
    board = Board()
    for rank, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board[Square(rank, file)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    parts: list[str] = []
    for row in board.symbol_grid():
        text = ""
        empty = 0
        for symbol in row:
            if symbol is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += symbol
        if empty:
            text += str(empty)
        parts.append(text)
    return "/".join(parts)
