from heapq import heappop, heappush
from typing import Callable, Optional, Tuple

import pytest

from grid_pathfinder.config import SearchConfig
from grid_pathfinder.core.grid import Grid
from grid_pathfinder.scenarios.wall_scenarios import WallScenario


Coord = Tuple[int, int]


def _dijkstra_cost(
    grid: Grid,
    start: Coord,
    target: Coord,
    straight: int = 10,
    diagonal: int = 14,
    allow_diagonal: bool = True,
) -> Optional[int]:
    """Plain Dijkstra over non-obstacle cells, independent of the engine."""

    steps = [(-1, 0), (1, 0), (0, -1), (0, 1)]
    if allow_diagonal:
        steps += [(-1, -1), (-1, 1), (1, -1), (1, 1)]
    best = {start: 0}
    heap = [(0, start)]
    while heap:
        cost, (x, y) = heappop(heap)
        if (x, y) == target:
            return cost
        if cost > best[(x, y)]:
            continue
        for dx, dy in steps:
            nx, ny = x + dx, y + dy
            if not (0 <= nx < grid.width and 0 <= ny < grid.height):
                continue
            if grid.cells[ny][nx].disabled:
                continue
            new_cost = cost + (diagonal if dx and dy else straight)
            if new_cost < best.get((nx, ny), float("inf")):
                best[(nx, ny)] = new_cost
                heappush(heap, (new_cost, (nx, ny)))
    return None


@pytest.fixture
def reference_cost() -> Callable[..., Optional[int]]:
    return _dijkstra_cost


@pytest.fixture
def wall_setup():
    return WallScenario().build()


@pytest.fixture
def octile_config() -> SearchConfig:
    return SearchConfig(heuristic="octile")
