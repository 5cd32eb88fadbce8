"""Square coordinate type and helpers.

Board layout (rank index 0 is the black side)::

    (0, 0)=a8 ... (0, 7)=h8
    ...
    (7, 0)=a1 ... (7, 7)=h1
"""

from __future__ import annotations

from typing import NamedTuple


class Square(NamedTuple):
    """Internal board coordinate: rank index and file index, both 0–7."""

    rank: int
    file: int


def is_valid_square(rank: int, file: int) -> bool:
    """Check whether both indexes are on the board."""
    return 0 <= rank < 8 and 0 <= file < 8


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. (6, 4) → 'e2'."""
    return chr(ord("a") + sq.file) + str(8 - sq.rank)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e2' → (6, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(8 - int(name[1]), ord(name[0]) - ord("a"))
