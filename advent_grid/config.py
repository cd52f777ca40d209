from __future__ import annotations

import logging
import os

TURN_PENALTY_VAR = "ADVENT_GRID_TURN_PENALTY"
LOG_LEVEL_VAR = "ADVENT_GRID_LOG_LEVEL"


def default_turn_penalty() -> int:
    """Turn penalty used when none is given, read from the environment."""
    raw = os.environ.get(TURN_PENALTY_VAR, "0")
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{TURN_PENALTY_VAR} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{TURN_PENALTY_VAR} must be non-negative, got {value}")
    return value


def log_level() -> int:
    name = os.environ.get(LOG_LEVEL_VAR, "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_VAR} is not a logging level: {name!r}")
    return level


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else log_level()
    logging.basicConfig(format="%(levelname)s: %(name)s: %(message)s")
    logging.getLogger().setLevel(level)
