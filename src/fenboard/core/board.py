"""Board - immutable 64-cell piece placement."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from fenboard.core.cell import EMPTY_CELL, Cell
from fenboard.core.enums import Color, PieceKind
from fenboard.core.errors import InvalidBoardLength
from fenboard.core.types import BOARD_SIZE, ROW_COUNT, ROW_WIDTH, Square, make_square

_BACK_ROW = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board(Sequence[Cell]):
    """Immutable sequence of exactly 64 cells, top row first.

    Every "modification" returns a new :class:`Board`; instances are safe to
    share between threads.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Cell]) -> None:
        cells = tuple(cells)
        if len(cells) != BOARD_SIZE:
            raise InvalidBoardLength(len(cells))
        self._cells: tuple[Cell, ...] = cells

    # -- Element access -----------------------------------------------------

    @overload
    def __getitem__(self, sq: Square) -> Cell: ...

    @overload
    def __getitem__(self, sq: slice) -> tuple[Cell, ...]: ...

    def __getitem__(self, sq: Square | slice) -> Cell | tuple[Cell, ...]:
        return self._cells[sq]

    def __len__(self) -> int:
        return BOARD_SIZE

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq].is_empty

    # -- Query helpers ------------------------------------------------------

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        """The 8 rows from top (rank 8) to bottom (rank 1)."""
        for row in range(ROW_COUNT):
            start = row * ROW_WIDTH
            yield self._cells[start : start + ROW_WIDTH]

    def occupied(self) -> list[tuple[Square, Cell]]:
        """``(square, cell)`` pairs for every non-empty square, in index order."""
        return [(sq, cell) for sq, cell in enumerate(self._cells) if not cell.is_empty]

    # -- Derivation ---------------------------------------------------------

    def replace(self, sq: Square, cell: Cell) -> Board:
        """Return a new board with *cell* placed on *sq*."""
        cells = list(self._cells)
        cells[sq] = cell
        return Board(cells)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls([EMPTY_CELL] * BOARD_SIZE)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        cells = [EMPTY_CELL] * BOARD_SIZE
        for column, kind in enumerate(_BACK_ROW):
            cells[make_square(0, column)] = Cell(kind, Color.BLACK)
            cells[make_square(1, column)] = Cell(PieceKind.PAWN, Color.BLACK)
            cells[make_square(6, column)] = Cell(PieceKind.PAWN, Color.WHITE)
            cells[make_square(7, column)] = Cell(kind, Color.WHITE)
        return cls(cells)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        lines: list[str] = []
        for index, row in enumerate(self.rows()):
            lines.append(f"{ROW_COUNT - index} {' '.join(str(cell) for cell in row)}")
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
