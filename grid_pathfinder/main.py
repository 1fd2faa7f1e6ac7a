"""Logging bootstrap and command-line entry point."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Sequence, TextIO

from dotenv import load_dotenv

from .config import CONFIG, Config, load_config
from .utils.cli.command_parser import parse_command, read_commands
from .utils.cli.commands import execute, new_state

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GRID_PATHFINDER_CONFIG"


def configure_logging(cfg: Config = CONFIG) -> None:
    """Apply the root level and per-module levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap() -> Config:
    """Load ``.env`` and the configuration file, then configure logging."""

    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    cfg = CONFIG
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        cfg = load_config(Path(override))
        # Commands and search read the module-level CONFIG.
        CONFIG.search = cfg.search
        CONFIG.render = cfg.render
        CONFIG.logging = cfg.logging
        CONFIG.paths = cfg.paths
        logger.debug("Using configuration from %s", override)

    configure_logging(cfg)
    return cfg


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    """Run one command from ``argv`` or read commands from ``stdin``.

    Returns the process exit status.
    """

    bootstrap()
    args = list(sys.argv[1:] if argv is None else argv)
    state = new_state()

    if args:
        cmd = parse_command(" ".join(args))
        if cmd is None:
            logger.error("Commands must start with '/'. Try: /help")
            return 2
        execute(cmd.name, cmd.args, state)
        return 0

    logger.info("Type commands prefixed with '/', e.g. /scenario wall. /help lists them.")
    for cmd in read_commands(stdin if stdin is not None else sys.stdin):
        execute(cmd.name, cmd.args, state)
        if not state["running"]:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
