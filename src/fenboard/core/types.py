"""Square type alias, layout constants and coordinate helpers.

Board layout (row-major, top row first, as written in FEN):
    a8=0,  b8=1,  ..., h8=7
    a7=8,  b7=9,  ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63
"""

from __future__ import annotations

from typing import Final, TypeAlias

Square: TypeAlias = int  # 0–63

ROW_WIDTH: Final = 8
ROW_COUNT: Final = 8
BOARD_SIZE: Final = ROW_WIDTH * ROW_COUNT
ROW_SEPARATOR: Final = "/"
MAX_RUN: Final = ROW_WIDTH

_FILES: Final = "abcdefgh"
_RANKS: Final = "12345678"


def row_of(sq: Square) -> int:
    """Row index 0–7, counted from the top (rank 8) down."""
    return sq // ROW_WIDTH


def column_of(sq: Square) -> int:
    """Column index 0–7 (a–h)."""
    return sq % ROW_WIDTH


def make_square(row: int, column: int) -> Square:
    """Create square from row (0–7, top first) and column (0–7)."""
    return row * ROW_WIDTH + column


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a8', 63 → 'h1'."""
    if not is_valid_square(sq):
        raise ValueError(f"Invalid square index: {sq!r}")
    return _FILES[column_of(sq)] + str(ROW_COUNT - row_of(sq))


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e1' → 60."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(ROW_COUNT - int(name[1]), _FILES.index(name[0]))


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < BOARD_SIZE


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = range(0, 8)
A7, B7, C7, D7, E7, F7, G7, H7 = range(8, 16)
A6, B6, C6, D6, E6, F6, G6, H6 = range(16, 24)
A5, B5, C5, D5, E5, F5, G5, H5 = range(24, 32)
A4, B4, C4, D4, E4, F4, G4, H4 = range(32, 40)
A3, B3, C3, D3, E3, F3, G3, H3 = range(40, 48)
A2, B2, C2, D2, E2, F2, G2, H2 = range(48, 56)
A1, B1, C1, D1, E1, F1, G1, H1 = range(56, 64)
