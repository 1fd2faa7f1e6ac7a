"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import logging
import pstats
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


def profile_searches(
    n: int,
    search_callback: Callable[[], object],
    out_path: str | Path | None = "profile.prof",
) -> pstats.Stats:
    """Run ``search_callback`` ``n`` times under cProfile.

    The profiler is always disabled on return, including when a search
    raises, so a later call can start a new profile. Stats are sorted by
    cumulative time and dumped to ``out_path`` unless it is ``None``.
    """

    if n <= 0:
        raise ValueError(f"search count must be positive, got {n}")

    profiler = cProfile.Profile()
    profiler.enable()
    try:
        for _ in range(n):
            search_callback()
    finally:
        profiler.disable()

    if out_path is not None:
        profiler.dump_stats(str(Path(out_path)))
        logger.debug("Wrote profile of %s searches to %s", n, out_path)
    return pstats.Stats(profiler).sort_stats(pstats.SortKey.CUMULATIVE)


__all__ = ["profile_searches"]
