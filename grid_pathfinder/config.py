"""Simple configuration loader for grid_pathfinder."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Movement costs and heuristic used by :func:`find_path`."""

    straight_cost: int = 10
    diagonal_cost: int = 14
    heuristic: str = "manhattan"
    allow_diagonal: bool = True
    allow_corner_cutting: bool = True


@dataclass
class RenderConfig:
    """Terminal rendering options."""

    colour: bool = False


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    render: RenderConfig
    logging: LoggingConfig
    paths: Dict[str, str] = field(default_factory=dict)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search", {}) or {}
    search = SearchConfig(
        straight_cost=int(search_data.get("straight_cost", 10)),
        diagonal_cost=int(search_data.get("diagonal_cost", 14)),
        heuristic=str(search_data.get("heuristic", "manhattan")),
        allow_diagonal=bool(search_data.get("allow_diagonal", True)),
        allow_corner_cutting=bool(search_data.get("allow_corner_cutting", True)),
    )

    render_data = data.get("render", {}) or {}
    render = RenderConfig(colour=bool(render_data.get("colour", False)))

    logging_data = data.get("logging", {}) or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    paths = dict(data.get("paths") or {})
    paths.setdefault("maps", "maps")

    return Config(search=search, render=render, logging=log_cfg, paths=paths)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "SearchConfig",
    "RenderConfig",
    "LoggingConfig",
    "load_config",
]
