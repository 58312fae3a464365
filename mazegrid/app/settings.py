# mazegrid/app/settings.py
#!/usr/bin/env python3
"""
Runtime settings for the maze viewer.

Resolution order (last wins):
- module defaults below
- ENV: MAZE_SIZE, MAZE_SEED, MAZE_GENERATOR, MAZE_SOLVER, MAZE_STEPS_PER_SEC, MAZE_LOG_LEVEL
- CLI: --size=, --seed=, --generator=, --solver=, --speed=, --log-level=
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 15          # cells per side before walls are interleaved
DEFAULT_GENERATOR = "dfs"
DEFAULT_SOLVER = "bfs"
DEFAULT_STEPS_PER_SEC = 240
DEFAULT_LOG_LEVEL = "INFO"

ENV_KEYS = {
    "size": "MAZE_SIZE",
    "seed": "MAZE_SEED",
    "generator": "MAZE_GENERATOR",
    "solver": "MAZE_SOLVER",
    "speed": "MAZE_STEPS_PER_SEC",
    "log-level": "MAZE_LOG_LEVEL",
}


@dataclass
class Settings:
    size: int = DEFAULT_SIZE
    seed: Optional[int] = None
    generator: str = DEFAULT_GENERATOR
    solver: str = DEFAULT_SOLVER
    steps_per_sec: int = DEFAULT_STEPS_PER_SEC
    log_level: str = DEFAULT_LOG_LEVEL


def _raw_values(environ: Mapping[str, str], argv: List[str]) -> Dict[str, str]:
    raw: Dict[str, str] = {}
    for key, env in ENV_KEYS.items():
        if env in environ:
            raw[key] = environ[env]
    for arg in argv:
        if arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            if key in ENV_KEYS:
                raw[key] = value
    return raw


def _as_int(raw: Dict[str, str], key: str, default: Optional[int], minimum: int) -> Optional[int]:
    if key not in raw:
        return default
    try:
        value = int(raw[key])
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", key, raw[key])
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%d: must be at least %d", key, value, minimum)
        return default
    return value


def resolve_settings(environ: Optional[Mapping[str, str]] = None,
                     argv: Optional[List[str]] = None) -> Settings:
    environ = os.environ if environ is None else environ
    argv = sys.argv[1:] if argv is None else argv
    raw = _raw_values(environ, argv)

    return Settings(
        size=_as_int(raw, "size", DEFAULT_SIZE, 1),
        seed=_as_int(raw, "seed", None, -sys.maxsize),
        generator=raw.get("generator", DEFAULT_GENERATOR).lower(),
        solver=raw.get("solver", DEFAULT_SOLVER).lower(),
        steps_per_sec=_as_int(raw, "speed", DEFAULT_STEPS_PER_SEC, 1),
        log_level=raw.get("log-level", DEFAULT_LOG_LEVEL).upper(),
    )
