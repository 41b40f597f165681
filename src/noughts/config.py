"""Environment-driven defaults for the command line.

Flags always win; environment variables fill in when a flag is omitted.
"""

from __future__ import annotations

import logging
import os

MODES = ("hvh", "hvc")


def default_mode() -> str | None:
    """Game mode from NOUGHTS_MODE, or None to show the menu.

    Unknown values are ignored with a warning.
    """
    env = os.getenv("NOUGHTS_MODE")
    if not env:
        return None
    mode = env.strip().lower()
    if mode not in MODES:
        logging.getLogger(__name__).warning("Ignoring NOUGHTS_MODE=%r; expected one of %s", env, MODES)
        return None
    return mode


def log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    env = os.getenv("NOUGHTS_LOG_LEVEL")
    if env:
        level = logging.getLevelName(env.strip().upper())
        if isinstance(level, int):
            return level
    return logging.INFO
