"""Core domain layer: board cells and FEN placement with zero external dependencies.

Quick start::

    from fenboard.core import decode_placement, encode_placement

    board = decode_placement("rnbqkbnr/pp1ppppp/8/2p5/4P3/5N2/PPPP1PPP/RNBQKB1R")
    print(board)
    assert encode_placement(board) == "rnbqkbnr/pp1ppppp/8/2p5/4P3/5N2/PPPP1PPP/RNBQKB1R"
"""

from fenboard.core.board import Board
from fenboard.core.cell import EMPTY_CELL, Cell
from fenboard.core.enums import Color, PieceKind
from fenboard.core.errors import InvalidBoardLength, InvalidCharacter, PlacementError
from fenboard.core.notation import (
    STARTING_PLACEMENT,
    decode_placement,
    encode_placement,
    is_valid_placement,
    placement_field,
)
from fenboard.core.symbols import char_of, piece_of
from fenboard.core.types import (
    BOARD_SIZE,
    ROW_COUNT,
    ROW_WIDTH,
    Square,
    column_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    # Types / helpers
    "BOARD_SIZE",
    "ROW_COUNT",
    "ROW_WIDTH",
    "Square",
    "column_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Cell",
    "EMPTY_CELL",
    # Symbol table
    "char_of",
    "piece_of",
    # Errors
    "InvalidBoardLength",
    "InvalidCharacter",
    "PlacementError",
    # Notation
    "STARTING_PLACEMENT",
    "decode_placement",
    "encode_placement",
    "is_valid_placement",
    "placement_field",
]
