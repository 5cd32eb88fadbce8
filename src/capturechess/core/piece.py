"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from capturechess.core.enums import Color, PieceType

# Symbol character ↔ PieceType (uppercase = white, lowercase = black)
_TYPE_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_CHAR_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_CHARS.items()}

_GLYPHS: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True, eq=False)
class Piece:
    """Immutable chess piece.

    Equality is identity: two white pawns are distinct pieces, so a captured
    piece can be traced from the board into a capture list and never
    duplicated.  Use :meth:`same_kind` to compare color and type.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Symbol character (uppercase = white, lowercase = black)."""
        char = _TYPE_CHARS[self.piece_type]
        return char if self.color == Color.WHITE else char.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from symbol character, e.g. 'n' → black knight."""
        try:
            ptype = _CHAR_TYPES[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def is_white(self) -> bool:
        return self.color == Color.WHITE

    @property
    def glyph(self) -> str:
        """Unicode chess figurine, e.g. ♞."""
        return _GLYPHS[(self.color, self.piece_type)]

    def same_kind(self, other: Piece | None) -> bool:
        return (
            other is not None
            and other.color == self.color
            and other.piece_type == self.piece_type
        )
