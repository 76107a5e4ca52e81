"""Notation package: FEN piece-placement parsing and serialization."""

from fenboard.core.notation.placement import (
    STARTING_PLACEMENT,
    decode_placement,
    encode_placement,
    is_valid_placement,
    placement_field,
)

__all__ = [
    "STARTING_PLACEMENT",
    "decode_placement",
    "encode_placement",
    "is_valid_placement",
    "placement_field",
]
