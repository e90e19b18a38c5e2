"""
Logging helpers.

Library modules only create module-level loggers; the process-wide handler
setup happens once, from an entry point, through configure_logging().
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """
    Configure root logging once for the whole process.

    Args:
        level: Level name ("DEBUG", "info", ...) or numeric level.
            Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = level

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("pkgschema").setLevel(resolved)
