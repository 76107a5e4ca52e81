"""FEN symbol table: (Color, PieceKind) ↔ piece letter."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from fenboard.core.enums import Color, PieceKind

# FEN character ↔ (Color, PieceKind); uppercase = white, lowercase = black
_CHAR_MAP: Final = MappingProxyType(
    {
        "P": (Color.WHITE, PieceKind.PAWN),
        "N": (Color.WHITE, PieceKind.KNIGHT),
        "B": (Color.WHITE, PieceKind.BISHOP),
        "R": (Color.WHITE, PieceKind.ROOK),
        "Q": (Color.WHITE, PieceKind.QUEEN),
        "K": (Color.WHITE, PieceKind.KING),
        "p": (Color.BLACK, PieceKind.PAWN),
        "n": (Color.BLACK, PieceKind.KNIGHT),
        "b": (Color.BLACK, PieceKind.BISHOP),
        "r": (Color.BLACK, PieceKind.ROOK),
        "q": (Color.BLACK, PieceKind.QUEEN),
        "k": (Color.BLACK, PieceKind.KING),
    }
)

_FEN_CHARS: Final = MappingProxyType({v: k for k, v in _CHAR_MAP.items()})

PIECE_CHARS: Final = frozenset(_CHAR_MAP)


def char_of(color: Color, kind: PieceKind) -> str:
    """FEN letter for an occupied cell, e.g. (WHITE, KNIGHT) → 'N'."""
    try:
        return _FEN_CHARS[(color, kind)]
    except KeyError:
        raise ValueError(f"No FEN symbol for {color!s} {kind!s}") from None


def piece_of(char: str) -> tuple[Color, PieceKind] | None:
    """Inverse lookup, e.g. 'q' → (BLACK, QUEEN); ``None`` if not a piece letter."""
    return _CHAR_MAP.get(char)
