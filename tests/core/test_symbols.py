"""Tests for the FEN symbol table."""

import pytest

from fenboard.core.enums import Color, PieceKind
from fenboard.core.symbols import PIECE_CHARS, char_of, piece_of


class TestSymbolTable:
    @pytest.mark.parametrize(
        ("char", "color", "kind"),
        [
            ("P", Color.WHITE, PieceKind.PAWN),
            ("N", Color.WHITE, PieceKind.KNIGHT),
            ("B", Color.WHITE, PieceKind.BISHOP),
            ("R", Color.WHITE, PieceKind.ROOK),
            ("Q", Color.WHITE, PieceKind.QUEEN),
            ("K", Color.WHITE, PieceKind.KING),
            ("p", Color.BLACK, PieceKind.PAWN),
            ("n", Color.BLACK, PieceKind.KNIGHT),
            ("b", Color.BLACK, PieceKind.BISHOP),
            ("r", Color.BLACK, PieceKind.ROOK),
            ("q", Color.BLACK, PieceKind.QUEEN),
            ("k", Color.BLACK, PieceKind.KING),
        ],
    )
    def test_canonical_mapping(self, char: str, color: Color, kind: PieceKind) -> None:
        assert char_of(color, kind) == char
        assert piece_of(char) == (color, kind)

    def test_twelve_distinct_letters(self) -> None:
        assert len(PIECE_CHARS) == 12
        assert PIECE_CHARS == set("PNBRQKpnbrqk")

    @pytest.mark.parametrize("char", ["x", "X", "1", "/", "", "PP", "."])
    def test_unknown_char_is_none(self, char: str) -> None:
        assert piece_of(char) is None

    def test_empty_has_no_symbol(self) -> None:
        with pytest.raises(ValueError, match="No FEN symbol"):
            char_of(Color.NONE, PieceKind.EMPTY)

    def test_mismatched_pair_has_no_symbol(self) -> None:
        with pytest.raises(ValueError, match="No FEN symbol"):
            char_of(Color.NONE, PieceKind.KING)

    def test_plain_ints_without_symbol_raise_value_error(self) -> None:
        with pytest.raises(ValueError, match="No FEN symbol for 2 0"):
            char_of(2, 0)  # type: ignore[arg-type]
