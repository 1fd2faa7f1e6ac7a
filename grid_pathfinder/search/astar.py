"""A* search over a :class:`~grid_pathfinder.core.grid.Grid`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import CONFIG, SearchConfig
from ..core.cell import Cell, CellState, Coord
from ..core.grid import Grid
from ..errors import GridConfigurationError
from .heuristic import get_heuristic
from .neighbors import neighbours
from .open_set import OpenSet

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of one :func:`find_path` call."""

    start: Coord
    target: Coord
    found: bool = False
    path: List[Coord] = field(default_factory=list)  # start -> target
    cost: Optional[int] = None
    expanded: int = 0

    def __bool__(self) -> bool:
        return self.found


def _validate_endpoint(grid: Grid, coord: Coord, label: str) -> None:
    x, y = coord
    if not grid.in_bounds(x, y):
        raise GridConfigurationError(
            f"{label} {coord} is outside the {grid.width}x{grid.height} grid"
        )
    if grid.cells[y][x].disabled:
        raise GridConfigurationError(f"{label} {coord} is an obstacle")


def _reconstruct(target: Cell) -> List[Coord]:
    """Mark the route ``PATH`` and return it ordered start -> target."""

    path: List[Coord] = []
    current: Optional[Cell] = target
    while current is not None:
        current.state = CellState.PATH
        path.append(current.coord)
        current = current.parent
    path.reverse()
    return path


def _expand(current: Cell, grid: Grid, open_set: OpenSet, cfg: SearchConfig) -> None:
    for neighbour, step in neighbours(
        grid,
        current,
        straight_cost=cfg.straight_cost,
        diagonal_cost=cfg.diagonal_cost,
        allow_diagonal=cfg.allow_diagonal,
        allow_corner_cutting=cfg.allow_corner_cutting,
    ):
        new_g = current.g + step
        if neighbour.state is CellState.OPEN and new_g < neighbour.g:
            neighbour.g = new_g
            neighbour.parent = current
            open_set.update(neighbour)
        elif neighbour.state is CellState.UNSEEN:
            neighbour.g = new_g
            neighbour.parent = current
            neighbour.state = CellState.OPEN
            open_set.push(neighbour)


def find_path(
    grid: Grid,
    start: Coord,
    target: Coord,
    config: SearchConfig | None = None,
) -> SearchResult:
    """Return the A* route from ``start`` to ``target`` on ``grid``.

    The grid is reset first and mutated in place: closed cells end up
    ``CLOSED`` and the winning route ``PATH``. When the target cannot be
    reached the result has ``found=False`` and no cell is marked ``PATH``.

    Raises :class:`GridConfigurationError` if an endpoint is out of bounds or
    on an obstacle, or if the configured heuristic is unknown.
    """

    cfg = config or CONFIG.search
    start, target = tuple(start), tuple(target)
    _validate_endpoint(grid, start, "start")
    _validate_endpoint(grid, target, "target")
    heuristic = get_heuristic(cfg.heuristic, cfg.straight_cost, cfg.diagonal_cost)

    grid.prepare(target, heuristic)
    logger.info(
        "Searching %sx%s grid from %s to %s (heuristic=%s)",
        grid.width,
        grid.height,
        start,
        target,
        cfg.heuristic,
    )

    result = SearchResult(start=start, target=target)
    start_cell = grid.cells[start[1]][start[0]]
    start_cell.state = CellState.OPEN
    start_cell.g = 0

    open_set = OpenSet()
    open_set.push(start_cell)

    while open_set:
        current = open_set.pop_min()
        current.state = CellState.CLOSED
        result.expanded += 1
        logger.debug("Closed %s g=%s h=%s", current.coord, current.g, current.h)

        if current.coord == target:
            result.found = True
            result.cost = current.g
            result.path = _reconstruct(current)
            logger.info(
                "Path found: %s steps, cost %s, %s cells expanded",
                len(result.path) - 1,
                result.cost,
                result.expanded,
            )
            return result

        _expand(current, grid, open_set, cfg)

    logger.info("No path from %s to %s after %s expansions", start, target, result.expanded)
    return result


__all__ = ["SearchResult", "find_path"]
