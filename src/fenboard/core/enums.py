"""Core enumerations for board cells."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color; ``NONE`` only belongs to an empty cell."""

    WHITE = 0
    BLACK = 1
    NONE = 2

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds ordered by conventional value, with ``EMPTY`` first."""

    EMPTY = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()
