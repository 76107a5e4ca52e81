"""FEN piece-placement parsing and serialization.

Only the first FEN field is handled here; side to move, castling rights,
en passant and the move clocks belong to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from fenboard.core.board import Board
from fenboard.core.cell import EMPTY_CELL, Cell
from fenboard.core.errors import InvalidBoardLength, InvalidCharacter, PlacementError
from fenboard.core.symbols import char_of, piece_of
from fenboard.core.types import (
    BOARD_SIZE,
    MAX_RUN,
    ROW_COUNT,
    ROW_SEPARATOR,
    ROW_WIDTH,
    column_of,
)

_LOGGER = logging.getLogger(__name__)

STARTING_PLACEMENT: Final = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

_DIGIT_VALUES: Final = {str(d): d for d in range(10)}


def _run_length(token: str) -> int | None:
    """Numeric value of a single-digit token, ``None`` for anything else."""
    return _DIGIT_VALUES.get(token)


def _is_open_run(token: str) -> bool:
    run = _run_length(token)
    return run is not None and 0 < run <= MAX_RUN


# ── Decoding ─────────────────────────────────────────────────────────────


def decode_placement(text: str) -> Board:
    """Parse a FEN piece-placement field into a :class:`Board`.

    Raises :class:`InvalidCharacter` on the first character that is not a
    piece letter, a run digit 1–8 or ``/`` (including a digit directly after
    another digit), and :class:`InvalidBoardLength` when the described cells
    do not form 8 rows of 8.
    """
    try:
        cells, row_widths = _scan(text)
        _check_layout(len(cells), row_widths)
    except PlacementError as exc:
        _LOGGER.debug("Rejected piece placement %r: %s", text, exc)
        raise
    return Board(cells)


def _scan(text: str) -> tuple[list[Cell], list[int]]:
    cells: list[Cell] = []
    row_widths: list[int] = [0]
    after_run = False

    for offset, char in enumerate(text):
        if char == ROW_SEPARATOR:
            row_widths.append(0)
            after_run = False
            continue

        run = _run_length(char)
        if run is not None:
            # A run digit never directly follows another one.
            if after_run or not 1 <= run <= MAX_RUN:
                raise InvalidCharacter(char, offset)
            remaining = run
            while remaining:
                cells.append(EMPTY_CELL)
                remaining -= 1
            row_widths[-1] += run
            after_run = True
            continue

        found = piece_of(char)
        if found is None:
            raise InvalidCharacter(char, offset)
        color, kind = found
        cells.append(Cell(kind, color))
        row_widths[-1] += 1
        after_run = False

    return cells, row_widths


def _check_layout(total: int, row_widths: list[int]) -> None:
    if total != BOARD_SIZE:
        raise InvalidBoardLength(total)
    if len(row_widths) != ROW_COUNT:
        raise InvalidBoardLength(
            total, detail=f"{len(row_widths)} rows, expected {ROW_COUNT}"
        )
    for index, width in enumerate(row_widths):
        if width != ROW_WIDTH:
            raise InvalidBoardLength(
                total, detail=f"row {index + 1} covers {width} cells, expected {ROW_WIDTH}"
            )


# ── Encoding ─────────────────────────────────────────────────────────────


def encode_placement(board: Sequence[Cell]) -> str:
    """Serialise 64 cells (normally a :class:`Board`) to a FEN piece-placement field.

    Scans the cells in index order holding one pending token, either a piece
    letter or an open empty-run digit. A run keeps growing while empty cells
    follow it and is flushed when a piece, a row boundary or the end of the
    board closes it.
    """
    if len(board) != BOARD_SIZE:
        _LOGGER.debug("Refusing to encode a board of %d cells", len(board))
        raise InvalidBoardLength(len(board))

    parts: list[str] = []
    pending = ""
    for sq, cell in enumerate(board):
        if sq and column_of(sq) == 0:
            parts.append(pending)
            parts.append(ROW_SEPARATOR)
            pending = _next_token(cell, "")
            continue

        token = _next_token(cell, pending)
        if not (_is_open_run(pending) and _run_length(token) is not None):
            parts.append(pending)
        pending = token

    parts.append(pending)
    return "".join(parts)


def _next_token(cell: Cell, pending: str) -> str:
    if not cell.is_empty:
        return char_of(cell.color, cell.kind)
    run = _run_length(pending)
    if run is not None and 0 < run <= MAX_RUN:
        return str(run + 1)
    return "1"


# ── Helpers ──────────────────────────────────────────────────────────────


def is_valid_placement(text: str) -> bool:
    """Whether *text* decodes to a board."""
    try:
        decode_placement(text)
    except PlacementError:
        return False
    return True


def placement_field(fen: str) -> str:
    """Extract the piece-placement field from a full FEN record."""
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (no fields): {fen!r}")
    return parts[0]
