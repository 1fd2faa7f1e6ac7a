from abc import ABC, abstractmethod
from typing import Tuple

from ..core.cell import Coord
from ..core.grid import Grid


class BaseScenario(ABC):
    """Abstract base class for search scenarios."""

    @abstractmethod
    def build(self) -> Tuple[Grid, Coord, Coord]:
        """Return a freshly built grid plus its start and target."""
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Return a human readable name for the scenario."""
        pass
