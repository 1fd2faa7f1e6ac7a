"""Scenarios loaded from YAML grid literals."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Tuple

import yaml

from ..core.cell import Coord
from ..core.grid import Grid
from ..errors import GridConfigurationError
from .base_scenario import BaseScenario

logger = logging.getLogger(__name__)


def _coord(data: dict[str, Any], key: str, source: Path) -> Coord:
    value = data.get(key)
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise GridConfigurationError(f"{source}: '{key}' must be an [x, y] pair")
    try:
        return (int(value[0]), int(value[1]))
    except (TypeError, ValueError):
        raise GridConfigurationError(f"{source}: '{key}' must hold integers") from None


class MapScenario(BaseScenario):
    """Grid described by a YAML file.

    Expected keys: ``rows`` (list of equal-length strings), ``start`` and
    ``target`` (``[x, y]``), optional ``blocked`` (obstacle characters,
    default ``#``) and ``name``.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        if not self.path.is_file():
            raise GridConfigurationError(f"map file not found: {self.path}")
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise GridConfigurationError(f"{self.path}: invalid YAML: {e}") from e
        if not isinstance(data, dict):
            raise GridConfigurationError(f"{self.path}: expected a mapping")
        rows = data.get("rows")
        if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
            raise GridConfigurationError(f"{self.path}: 'rows' must be a list of strings")
        self.rows: list[str] = rows
        self.blocked = str(data.get("blocked", "#"))
        self.start = _coord(data, "start", self.path)
        self.target = _coord(data, "target", self.path)
        self.name = str(data.get("name", self.path.stem))
        logger.debug("Loaded map %s from %s", self.name, self.path)

    def get_name(self) -> str:
        return self.name

    def build(self) -> Tuple[Grid, Coord, Coord]:
        return Grid.from_rows(self.rows, blocked=self.blocked), self.start, self.target


__all__ = ["MapScenario"]
