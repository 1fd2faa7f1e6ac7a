"""core package."""

from .cell import Cell, CellState, Coord
from .grid import Grid

__all__ = ["Cell", "CellState", "Coord", "Grid"]
