"""Distance estimates from a cell to the search target."""

from __future__ import annotations

from typing import Callable, Dict

from ..core.cell import Coord
from ..errors import GridConfigurationError


STRAIGHT_COST = 10
DIAGONAL_COST = 14


def manhattan(x: int, y: int, target_x: int, target_y: int, unit: int = STRAIGHT_COST) -> int:
    """Return Manhattan distance scaled by ``unit``.

    Exact for a 4-neighbour grid. With diagonal steps enabled it can exceed
    the true remaining cost, so the returned path is not guaranteed optimal.
    """

    return unit * (abs(x - target_x) + abs(y - target_y))


def octile(
    x: int,
    y: int,
    target_x: int,
    target_y: int,
    straight: int = STRAIGHT_COST,
    diagonal: int = DIAGONAL_COST,
) -> int:
    """Return the cost of the cheapest obstacle-free 8-neighbour route."""

    dx = abs(x - target_x)
    dy = abs(y - target_y)
    return straight * (dx + dy) + (diagonal - 2 * straight) * min(dx, dy)


def chebyshev(x: int, y: int, target_x: int, target_y: int, straight: int = STRAIGHT_COST) -> int:
    return straight * max(abs(x - target_x), abs(y - target_y))


HEURISTICS: Dict[str, Callable[..., int]] = {
    "manhattan": manhattan,
    "octile": octile,
    "chebyshev": chebyshev,
}


def get_heuristic(
    name: str,
    straight: int = STRAIGHT_COST,
    diagonal: int = DIAGONAL_COST,
) -> Callable[[Coord, Coord], int]:
    """Return a ``(cell, target) -> cost`` estimator bound to the given costs."""

    key = name.lower()
    if key not in HEURISTICS:
        raise GridConfigurationError(
            f"unknown heuristic {name!r}; expected one of {sorted(HEURISTICS)}"
        )

    if key == "octile":
        return lambda a, b: octile(a[0], a[1], b[0], b[1], straight, diagonal)
    fn = HEURISTICS[key]
    return lambda a, b: fn(a[0], a[1], b[0], b[1], straight)


__all__ = [
    "STRAIGHT_COST",
    "DIAGONAL_COST",
    "HEURISTICS",
    "manhattan",
    "octile",
    "chebyshev",
    "get_heuristic",
]
