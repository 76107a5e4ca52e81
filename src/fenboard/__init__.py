"""fenboard: lossless conversion between FEN piece placement and a 64-cell board."""

from fenboard.core import (
    STARTING_PLACEMENT,
    Board,
    Cell,
    Color,
    InvalidBoardLength,
    InvalidCharacter,
    PieceKind,
    PlacementError,
    decode_placement,
    encode_placement,
)

__version__ = "0.1.0"

__all__ = [
    "STARTING_PLACEMENT",
    "Board",
    "Cell",
    "Color",
    "InvalidBoardLength",
    "InvalidCharacter",
    "PieceKind",
    "PlacementError",
    "decode_placement",
    "encode_placement",
]
