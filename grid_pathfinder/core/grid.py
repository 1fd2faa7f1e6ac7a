"""Rectangular grid that owns every search cell."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Sequence

from ..errors import GridConfigurationError
from .cell import Cell, CellState, Coord


class Grid:
    """Row-major holder of :class:`Cell` objects (``cells[y][x]``)."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise GridConfigurationError(
                f"grid dimensions must be positive, got {width}x{height}"
            )
        self.width: int = width
        self.height: int = height
        self.cells: List[List[Cell]] = [
            [Cell(x, y) for x in range(width)] for y in range(height)
        ]

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_rows(cls, rows: Sequence[str], blocked: str = "#") -> "Grid":
        """Build a grid from equal-length strings; ``blocked`` chars are walls."""

        if not rows or not rows[0]:
            raise GridConfigurationError("grid literal has no rows")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise GridConfigurationError(
                    f"row {y} has length {len(row)}, expected {width}"
                )
        grid = cls(width, len(rows))
        grid.disable_many(
            (x, y)
            for y, row in enumerate(rows)
            for x, ch in enumerate(row)
            if ch in blocked
        )
        return grid

    def disable(self, x: int, y: int) -> None:
        """Mark ``(x, y)`` as a permanent obstacle."""

        self.cell_at(x, y).state = CellState.DISABLED

    def disable_many(self, coords: Iterable[Coord]) -> None:
        for x, y in coords:
            self.disable(x, y)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; raise ``IndexError`` when outside."""

        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        return self.cells[y][x]

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def path_cells(self) -> List[Coord]:
        """Return coordinates currently marked ``PATH`` in row-major order."""

        return [c.coord for c in self.iter_cells() if c.state is CellState.PATH]

    # ------------------------------------------------------------------
    # Search state
    # ------------------------------------------------------------------
    def prepare(self, target: Coord, heuristic: Callable[[Coord, Coord], int]) -> None:
        """Reset search state and fix every cell's ``h`` against ``target``.

        Obstacles are left untouched.
        """

        for cell in self.iter_cells():
            if cell.disabled:
                continue
            cell.state = CellState.UNSEEN
            cell.g = 0
            cell.parent = None
            cell.h = heuristic(cell.coord, target)


__all__ = ["Grid"]
