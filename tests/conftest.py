"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from fenboard.core.board import Board
from fenboard.core.cell import EMPTY_CELL, Cell
from fenboard.core.enums import Color, PieceKind
from fenboard.core.types import BOARD_SIZE

SICILIAN_PLACEMENT = "rnbqkbnr/pp1ppppp/8/2p5/4P3/5N2/PPPP1PPP/RNBQKB1R"

_OCCUPIED_CELLS = tuple(
    Cell(kind, color)
    for color in (Color.WHITE, Color.BLACK)
    for kind in PieceKind
    if kind != PieceKind.EMPTY
)


@pytest.fixture
def sicilian_placement() -> str:
    """Placement after 1. e4 c5 2. Nf3."""
    return SICILIAN_PLACEMENT


@pytest.fixture
def random_board() -> Callable[[int], Board]:
    """Factory for reproducible pseudo-random boards, keyed by seed."""

    def _make(seed: int) -> Board:
        rng = random.Random(seed)
        density = rng.random()
        cells = [
            rng.choice(_OCCUPIED_CELLS) if rng.random() < density else EMPTY_CELL
            for _ in range(BOARD_SIZE)
        ]
        return Board(cells)

    return _make
