"""Exception hierarchy for the pathfinder."""

from __future__ import annotations


class PathfinderError(Exception):
    """Base error for grid construction and search."""


class GridConfigurationError(PathfinderError, ValueError):
    """Raised when a grid, map file or search request is malformed."""


class OpenSetEmptyError(PathfinderError, RuntimeError):
    """Raised when the engine pops from an empty open set."""


__all__ = ["PathfinderError", "GridConfigurationError", "OpenSetEmptyError"]
