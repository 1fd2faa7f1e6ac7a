"""Implementations of pathfinder CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, TextIO
import logging

from ...config import CONFIG
from ...core.cell import Coord
from ...errors import GridConfigurationError
from ...scenarios.base_scenario import BaseScenario
from ...scenarios.map_scenario import MapScenario
from ...scenarios.wall_scenarios import SCENARIOS, get_scenario
from ...search.astar import SearchResult, find_path
from ..profiling import profile_searches
from .terminal_view import TerminalView

logger = logging.getLogger(__name__)


DEFAULT_PROFILE_PATH = Path("profile.prof")


def new_state(stream: TextIO | None = None) -> Dict[str, Any]:
    """Return an empty command state."""

    return {
        "running": True,
        "grid": None,
        "start": None,
        "target": None,
        "result": None,
        "view": TerminalView(colour=CONFIG.render.colour),
        "stream": stream,
    }


def _load(state: Dict[str, Any], source: BaseScenario) -> None:
    grid, start, target = source.build()
    state.update(grid=grid, start=start, target=target, result=None)
    logger.info(
        "Loaded %s: %sx%s grid, start %s, target %s",
        source.get_name(),
        grid.width,
        grid.height,
        start,
        target,
    )


def _report(result: SearchResult) -> None:
    if result.found:
        logger.info("Path (%s cells, cost %s): %s", len(result.path), result.cost, result.path)
    else:
        logger.info("No path from %s to %s.", result.start, result.target)


def run_search(
    state: Dict[str, Any],
    start: Coord | None = None,
    target: Coord | None = None,
) -> SearchResult | None:
    """Search the loaded grid and render it.

    ``start``/``target`` replace the stored endpoints only once the search
    has accepted them.
    """

    if state.get("grid") is None:
        logger.error("No grid loaded. Use /scenario or /map first.")
        return None
    start = start if start is not None else state["start"]
    target = target if target is not None else state["target"]
    result = find_path(state["grid"], start, target)
    state.update(start=result.start, target=result.target, result=result)
    _report(result)
    render(state)
    return result


def scenario(state: Dict[str, Any], name: str) -> SearchResult | None:
    """Load a built-in scenario by name and search it."""

    _load(state, get_scenario(name))
    return run_search(state)


def load_map(state: Dict[str, Any], path: str) -> SearchResult | None:
    """Load a YAML map; relative paths also resolve against the maps directory."""

    candidate = Path(path)
    if not candidate.is_file():
        maps_dir = Path(CONFIG.paths.get("maps", "maps"))
        for alt in (maps_dir / path, maps_dir / f"{path}.yaml"):
            if alt.is_file():
                candidate = alt
                break
    _load(state, MapScenario(candidate))
    return run_search(state)


def _parse_coord(x_str: str, y_str: str) -> Coord:
    try:
        return (int(x_str), int(y_str))
    except ValueError:
        raise GridConfigurationError(f"Invalid coordinates: {x_str} {y_str}") from None


def search(state: Dict[str, Any], args: list[str]) -> SearchResult | None:
    """Search the loaded grid, optionally with new ``sx sy tx ty`` endpoints."""

    if args:
        if len(args) != 4:
            logger.error("Usage: /search <sx> <sy> <tx> <ty>")
            return None
        start = _parse_coord(args[0], args[1])
        target = _parse_coord(args[2], args[3])
        return run_search(state, start, target)
    return run_search(state)


def render(state: Dict[str, Any]) -> None:
    if state.get("grid") is None:
        logger.error("No grid loaded. Use /scenario or /map first.")
        return
    state["view"].render(state["grid"], state["start"], state["target"], state.get("stream"))


def profile(state: Dict[str, Any], count_str: str | None = None) -> None:
    """Repeat the current search under cProfile."""

    if state.get("grid") is None:
        logger.error("No grid loaded. Use /scenario or /map first.")
        return
    try:
        count = int(count_str) if count_str is not None else 100
    except ValueError:
        logger.error("Invalid search count: %s", count_str)
        return
    if count <= 0:
        logger.error("Search count must be positive: %s", count)
        return

    grid, start, target = state["grid"], state["start"], state["target"]
    stats = profile_searches(count, lambda: find_path(grid, start, target), DEFAULT_PROFILE_PATH)
    logger.info(
        "Profiled %s searches in %.3fs, stats written to %s",
        count,
        stats.total_tt,
        DEFAULT_PROFILE_PATH,
    )


def list_scenarios() -> None:
    for key, cls in SCENARIOS.items():
        logger.info("  %-10s %s", key, cls().get_name())


def help_command(state: Dict[str, Any]) -> None:
    help_lines = [
        "\nAvailable commands:",
        "  /help                        - Show this help message.",
        "  /scenarios                   - List built-in scenarios.",
        "  /scenario <name>             - Load and search a built-in scenario (e.g., wall).",
        "  /map <path>                  - Load and search a YAML map file.",
        "  /search [sx sy tx ty]        - Search the loaded grid, optionally with new endpoints.",
        "  /render                      - Print the loaded grid.",
        "  /profile [n]                 - Profile n searches of the loaded grid. Default: 100",
        "  /quit                        - Exit.\n",
    ]
    for line in help_lines:
        logger.info(line)


def execute(command: str, args: list[str], state: Dict[str, Any]) -> Any:
    logger.debug("commands.execute called: %s %s", command, args)

    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    try:
        if cmd_lower == "help":
            help_command(state)
        elif cmd_lower == "scenarios":
            list_scenarios()
        elif cmd_lower == "scenario":
            if args:
                return_value = scenario(state, args[0])
            else:
                logger.error("Usage: /scenario <name>. Type /scenarios for the list.")
        elif cmd_lower == "map":
            if args:
                return_value = load_map(state, args[0])
            else:
                logger.error("Usage: /map <path>")
        elif cmd_lower == "search":
            return_value = search(state, args)
        elif cmd_lower == "render":
            render(state)
        elif cmd_lower == "profile":
            profile(state, args[0] if args else None)
        elif cmd_lower == "quit":
            state["running"] = False
            logger.info("Quit command received.")
        else:
            logger.error("Unknown command: /%s. Type /help for available commands.", command)
    except GridConfigurationError as e:
        logger.error("Command /%s failed: %s", command, e)

    return return_value


__all__ = [
    "new_state",
    "run_search",
    "scenario",
    "load_map",
    "search",
    "render",
    "profile",
    "list_scenarios",
    "help_command",
    "execute",
]
