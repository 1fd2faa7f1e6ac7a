"""Built-in demonstration grids."""

from __future__ import annotations

from typing import Dict, Tuple, Type

from ..core.cell import Coord
from ..core.grid import Grid
from ..errors import GridConfigurationError
from .base_scenario import BaseScenario


DEMO_WIDTH = 7
DEMO_HEIGHT = 5
DEMO_START: Coord = (1, 2)
DEMO_TARGET: Coord = (5, 2)
WALL_X = 3


class WallScenario(BaseScenario):
    """7x5 grid with a three-cell wall between start and target."""

    def get_name(self) -> str:
        return "Wall Detour"

    def build(self) -> Tuple[Grid, Coord, Coord]:
        grid = Grid(DEMO_WIDTH, DEMO_HEIGHT)
        grid.disable_many((WALL_X, y) for y in (1, 2, 3))
        return grid, DEMO_START, DEMO_TARGET


class SealedWallScenario(BaseScenario):
    """Same grid with the wall spanning every row, so no path exists."""

    def get_name(self) -> str:
        return "Sealed Wall"

    def build(self) -> Tuple[Grid, Coord, Coord]:
        grid = Grid(DEMO_WIDTH, DEMO_HEIGHT)
        grid.disable_many((WALL_X, y) for y in range(DEMO_HEIGHT))
        return grid, DEMO_START, DEMO_TARGET


class SameCellScenario(BaseScenario):
    """Start and target coincide."""

    def get_name(self) -> str:
        return "Same Cell"

    def build(self) -> Tuple[Grid, Coord, Coord]:
        return Grid(DEMO_WIDTH, DEMO_HEIGHT), DEMO_START, DEMO_START


SCENARIOS: Dict[str, Type[BaseScenario]] = {
    "wall": WallScenario,
    "sealed": SealedWallScenario,
    "same_cell": SameCellScenario,
}


def get_scenario(name: str) -> BaseScenario:
    """Return a new instance of the built-in scenario called ``name``."""

    try:
        return SCENARIOS[name.lower()]()
    except KeyError:
        raise GridConfigurationError(
            f"unknown scenario {name!r}; expected one of {sorted(SCENARIOS)}"
        ) from None


__all__ = [
    "WallScenario",
    "SealedWallScenario",
    "SameCellScenario",
    "SCENARIOS",
    "get_scenario",
]
