"""Cell value object."""

from __future__ import annotations

from dataclasses import dataclass

from fenboard.core.enums import Color, PieceKind
from fenboard.core.symbols import char_of, piece_of

_UNICODE: dict[tuple[Color, PieceKind], str] = {
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.BLACK, PieceKind.PAWN): "♟",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.KING): "♚",
    (Color.NONE, PieceKind.EMPTY): "·",
}


@dataclass(frozen=True, slots=True)
class Cell:
    """Immutable (kind, color) pair for one board square.

    ``color`` is ``Color.NONE`` exactly when ``kind`` is ``PieceKind.EMPTY``.
    """

    kind: PieceKind
    color: Color

    def __post_init__(self) -> None:
        if (self.kind == PieceKind.EMPTY) != (self.color == Color.NONE):
            raise ValueError(f"Inconsistent cell: {self.kind!s} with color {self.color!s}")

    @property
    def is_empty(self) -> bool:
        return self.kind == PieceKind.EMPTY

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black), '.' if empty."""
        if self.is_empty:
            return "."
        return char_of(self.color, self.kind)

    @classmethod
    def from_char(cls, char: str) -> Cell:
        """Create an occupied cell from a FEN character, e.g. 'N' → white knight."""
        found = piece_of(char)
        if found is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        color, kind = found
        return cls(kind, color)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]


EMPTY_CELL = Cell(PieceKind.EMPTY, Color.NONE)
