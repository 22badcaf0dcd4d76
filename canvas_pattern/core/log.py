"""Logging setup for command-line entry points.

Library modules only call logging.getLogger(__name__); handlers are
attached here, once, by the CLI.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def resolve_level(level: int | str) -> int:
    """Map a level name or number to a logging level. Unknown names give WARNING."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_default_logging(level: int | str = 'WARNING') -> None:
    """Send canvas_pattern logs to stderr unless the root logger is already configured."""
    if logging.getLogger().handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=resolve_level(level), handlers=[handler])
