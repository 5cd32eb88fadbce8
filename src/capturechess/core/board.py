"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from capturechess.core.enums import Color, PieceType
from capturechess.core.piece import Piece
from capturechess.core.types import Square, is_valid_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional piece references.

    No rule enforcement happens here; the move validator and game controller
    decide what may be written.  Coordinates outside the board raise
    :class:`IndexError`.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    @staticmethod
    def _check(rank: int, file: int) -> None:
        if not is_valid_square(rank, file):
            raise IndexError(f"Square out of range: ({rank}, {file})")

    # -- Element access -----------------------------------------------------

    def get(self, sq: Square) -> Piece | None:
        rank, file = sq
        self._check(rank, file)
        return self._grid[rank][file]

    def set(self, sq: Square, piece: Piece | None) -> None:
        rank, file = sq
        self._check(rank, file)
        self._grid[rank][file] = piece

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get(sq)

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self.set(sq, piece)

    def is_empty(self, sq: Square) -> bool:
        return self.get(sq) is None

    def squares(self) -> list[tuple[Square, Piece]]:
        """Every occupied square with its piece, in rank-then-file order."""
        return [
            (Square(rank, file), piece)
            for rank, row in enumerate(self._grid)
            for file, piece in enumerate(row)
            if piece is not None
        ]

    # -- Setup / copying ----------------------------------------------------

    def initialize(self) -> None:
        """Place the standard starting position on an empty board."""
        self.clear()
        for file in range(8):
            self._grid[1][file] = Piece(Color.BLACK, PieceType.PAWN)
            self._grid[6][file] = Piece(Color.WHITE, PieceType.PAWN)
        for file, pt in enumerate(_BACK_RANK):
            self._grid[0][file] = Piece(Color.BLACK, pt)
            self._grid[7][file] = Piece(Color.WHITE, pt)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.initialize()
        return b

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    def copy(self) -> Board:
        """Shallow copy: the grid is new, the pieces are shared."""
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Rendering ----------------------------------------------------------

    def symbol_grid(self) -> list[list[str | None]]:
        """Piece symbol per cell (None for empty), rank index 0 first."""
        return [[str(p) if p else None for p in row] for row in self._grid]

    def render(self, empty: str = "-") -> str:
        """Console diagram with ranks 8..1 down the left and files below."""
        rows: list[str] = []
        for rank, row in enumerate(self._grid):
            cells = " ".join(str(p) if p else empty for p in row)
            rows.append(f"{8 - rank} {cells}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        # Pieces compare by identity; boards compare by layout.
        return self.symbol_grid() == other.symbol_grid()

    def __repr__(self) -> str:
        return self.render(".")
