"""ASCII terminal renderer for searched grids."""

from __future__ import annotations

import sys
from typing import List, TextIO

from ...core.cell import Cell, CellState, Coord
from ...core.grid import Grid


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

START_GLYPH = "[O]"
TARGET_GLYPH = "[X]"
PATH_GLYPH = "[*]"
OBSTACLE_GLYPH = "[|]"
BLANK_GLYPH = "[ ]"


class TerminalView:
    """Draw one text row per grid row, optionally with ANSI colours."""

    def __init__(self, colour: bool = False) -> None:
        self.colour = colour

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_lines(self, grid: Grid, start: Coord, target: Coord) -> List[str]:
        lines: List[str] = []
        for row in grid.cells:
            glyphs = [self._glyph(cell, start, target) for cell in row]
            lines.append(" ".join(glyphs))
        return lines

    def render(
        self,
        grid: Grid,
        start: Coord,
        target: Coord,
        stream: TextIO | None = None,
    ) -> None:
        """Write the grid to ``stream`` (``stdout`` by default)."""

        out = stream if stream is not None else sys.stdout
        out.write("\n".join(self.render_lines(grid, start, target)) + "\n")
        out.flush()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _glyph(self, cell: Cell, start: Coord, target: Coord) -> str:
        glyph, colour = _cell_to_glyph_colour(cell, start, target)
        if not self.colour or colour is None:
            return glyph
        return f"{_COLOURS[colour]}{glyph}{_COLOURS['reset']}"


def _cell_to_glyph_colour(cell: Cell, start: Coord, target: Coord) -> tuple[str, str | None]:
    if cell.coord == tuple(start):
        return START_GLYPH, "green"
    if cell.coord == tuple(target):
        return TARGET_GLYPH, "red"
    if cell.state is CellState.PATH:
        return PATH_GLYPH, "yellow"
    if cell.state is CellState.DISABLED:
        return OBSTACLE_GLYPH, "blue"
    return BLANK_GLYPH, None


__all__ = [
    "TerminalView",
    "START_GLYPH",
    "TARGET_GLYPH",
    "PATH_GLYPH",
    "OBSTACLE_GLYPH",
    "BLANK_GLYPH",
]
