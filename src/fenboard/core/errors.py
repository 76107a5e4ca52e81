"""Exceptions raised by the placement codec."""

from __future__ import annotations

from fenboard.core.types import BOARD_SIZE


class PlacementError(ValueError):
    """Base class for piece-placement decode/encode failures."""


class InvalidCharacter(PlacementError):
    """A character is neither a piece letter, a run digit 1–8 nor ``/``."""

    def __init__(self, char: str, offset: int) -> None:
        super().__init__(f"Invalid placement character {char!r} at offset {offset}")
        self.char = char
        self.offset = offset


class InvalidBoardLength(PlacementError):
    """A board, or the cells a placement string describes, has the wrong size.

    ``length`` is always the observed cell count. When the total is right but
    the rows are not 8 by 8, ``detail`` names the offending row layout.
    """

    def __init__(
        self,
        length: int,
        expected: int = BOARD_SIZE,
        *,
        detail: str | None = None,
    ) -> None:
        if detail is None:
            message = f"Invalid board length: {length} cells, expected {expected}"
        else:
            message = f"Invalid board layout: {detail}"
        super().__init__(message)
        self.length = length
        self.expected = expected
        self.detail = detail
