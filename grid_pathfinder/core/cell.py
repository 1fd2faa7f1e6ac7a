"""Search node stored in every grid position."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


Coord = Tuple[int, int]


class CellState(Enum):
    """Enumerate the states a cell moves through during one search."""

    UNSEEN = 0
    OPEN = 1
    CLOSED = 2
    DISABLED = 3
    PATH = 4


@dataclass(eq=False)
class Cell:
    """Position plus the A* bookkeeping for that position.

    ``parent`` points back into the owning :class:`Grid`; it is never an
    ownership link.
    """

    x: int
    y: int
    g: int = 0
    h: int = 0
    state: CellState = CellState.UNSEEN
    parent: Optional["Cell"] = field(default=None, repr=False)

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    @property
    def walkable(self) -> bool:
        """Return ``True`` if search may still step onto this cell."""

        return self.state in (CellState.UNSEEN, CellState.OPEN)

    @property
    def disabled(self) -> bool:
        return self.state is CellState.DISABLED


__all__ = ["Cell", "CellState", "Coord"]
