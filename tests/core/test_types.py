"""Tests for square helpers and layout constants."""

import pytest

from fenboard.core.types import (
    A1,
    A8,
    BOARD_SIZE,
    E1,
    E8,
    H1,
    H8,
    column_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)


class TestSquares:
    def test_layout(self) -> None:
        assert BOARD_SIZE == 64
        assert (A8, H8, A1, H1) == (0, 7, 56, 63)
        assert (E8, E1) == (4, 60)

    def test_row_and_column(self) -> None:
        assert row_of(E1) == 7
        assert column_of(E1) == 4
        assert make_square(7, 4) == E1

    def test_names(self) -> None:
        assert square_name(A8) == "a8"
        assert square_name(H1) == "h1"
        assert square_name(E8) == "e8"

    def test_parse_roundtrip(self) -> None:
        for sq in range(BOARD_SIZE):
            assert parse_square(square_name(sq)) == sq

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e10", "E1"])
    def test_parse_invalid_raises(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_name_invalid_index_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid square index"):
            square_name(64)

    def test_valid_square(self) -> None:
        assert is_valid_square(0)
        assert is_valid_square(63)
        assert not is_valid_square(-1)
        assert not is_valid_square(64)
