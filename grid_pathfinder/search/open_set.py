"""Frontier of open cells ordered by ``f`` with a stable tie-break."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Tuple

from ..core.cell import Cell, Coord
from ..errors import OpenSetEmptyError


class OpenSet:
    """Binary-heap priority queue of ``OPEN`` cells.

    Entries are ``(f, seq, cell)`` where ``seq`` is the cell's first
    insertion number, so among equal ``f`` the earliest-inserted cell wins.
    A re-prioritised cell gets a fresh entry with its original ``seq``;
    the outdated entry is skipped when it surfaces.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, Cell]] = []
        self._seq: Dict[Coord, int] = {}
        self._members: set[Coord] = set()
        self._counter = count()

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        return bool(self._members)

    def __contains__(self, cell: object) -> bool:
        return isinstance(cell, Cell) and cell.coord in self._members

    def push(self, cell: Cell) -> None:
        """Insert ``cell``; it must already be in the ``OPEN`` state."""

        seq = self._seq.setdefault(cell.coord, next(self._counter))
        self._members.add(cell.coord)
        heappush(self._heap, (cell.f, seq, cell))

    def update(self, cell: Cell) -> None:
        """Reflect a lowered ``g`` for a cell already in the set."""

        if cell.coord not in self._members:
            raise KeyError(cell.coord)
        heappush(self._heap, (cell.f, self._seq[cell.coord], cell))

    def pop_min(self) -> Cell:
        """Remove and return the cell with the smallest ``f``."""

        while self._heap:
            f, _, cell = heappop(self._heap)
            if cell.coord not in self._members or f != cell.f:
                continue
            self._members.discard(cell.coord)
            return cell
        raise OpenSetEmptyError("pop from an empty open set")


__all__ = ["OpenSet"]
