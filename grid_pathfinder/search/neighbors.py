"""Adjacent-cell generation with movement costs."""

from __future__ import annotations

from typing import List, Tuple

from ..core.cell import Cell
from ..core.grid import Grid
from .heuristic import DIAGONAL_COST, STRAIGHT_COST


# (name, dx, dy) in emission order. "Upper" is +y, matching row index growth.
DIRECTIONS: Tuple[Tuple[str, int, int], ...] = (
    ("left", -1, 0),
    ("upper_left", -1, 1),
    ("top", 0, 1),
    ("top_right", 1, 1),
    ("right", 1, 0),
    ("bottom_right", 1, -1),
    ("bottom", 0, -1),
    ("bottom_left", -1, -1),
)


def _cuts_corner(grid: Grid, cell: Cell, dx: int, dy: int) -> bool:
    """Return ``True`` if a diagonal step squeezes past an obstacle."""

    return grid.cells[cell.y][cell.x + dx].disabled or grid.cells[cell.y + dy][cell.x].disabled


def neighbours(
    grid: Grid,
    cell: Cell,
    straight_cost: int = STRAIGHT_COST,
    diagonal_cost: int = DIAGONAL_COST,
    allow_diagonal: bool = True,
    allow_corner_cutting: bool = True,
) -> List[Tuple[Cell, int]]:
    """Return walkable ``(neighbour, step_cost)`` pairs around ``cell``.

    Every direction derives its bounds check, walkability check and result
    from the same ``(nx, ny)`` so no direction can gate another.
    """

    out: List[Tuple[Cell, int]] = []
    for _, dx, dy in DIRECTIONS:
        diagonal = dx != 0 and dy != 0
        if diagonal and not allow_diagonal:
            continue
        nx, ny = cell.x + dx, cell.y + dy
        if not grid.in_bounds(nx, ny):
            continue
        candidate = grid.cells[ny][nx]
        if not candidate.walkable:
            continue
        if diagonal and not allow_corner_cutting and _cuts_corner(grid, cell, dx, dy):
            continue
        out.append((candidate, diagonal_cost if diagonal else straight_cost))
    return out


__all__ = ["DIRECTIONS", "neighbours"]
