"""Logging setup for the hookline web server.

The server, the game core and uvicorn all log through the stdlib root
handler at one shared level, taken from ``HOOKLINE_LOG_LEVEL`` unless the
caller passes one.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable

from hookline.exceptions import ConfigurationError

LOG_LEVEL_ENV_VAR = "HOOKLINE_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(threadName)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Loggers that follow the configured level in addition to the backend's own
ALIGNED_LOGGERS = ("hookline", "uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_log_level(raw: str | None) -> int:
    """Turn a level name (any case) or number into a logging level.

    Raises:
        ConfigurationError: If the name is not a standard logging level
    """
    name = (raw or DEFAULT_LEVEL).strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level {raw!r} (set via {LOG_LEVEL_ENV_VAR})")
    return level


def configure_logging(
    *,
    level: str | None = None,
    extra_loggers: Iterable[str] = (),
) -> logging.Logger:
    """Configure logging for the server process.

    The format includes the thread name so lines from the game loop thread
    (``hookline-game-loop``) can be told apart from request handling.

    Args:
        level: Level name; defaults to ``HOOKLINE_LOG_LEVEL`` or INFO.
        extra_loggers: Further logger names to set to the same level.

    Returns:
        The ``hookline.backend`` logger.
    """
    resolved = resolve_log_level(level if level is not None else os.getenv(LOG_LEVEL_ENV_VAR))
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    for name in (*ALIGNED_LOGGERS, *extra_loggers):
        logging.getLogger(name).setLevel(resolved)

    app_logger = logging.getLogger("hookline.backend")
    app_logger.setLevel(resolved)
    app_logger.debug("Logging configured at %s", logging.getLevelName(resolved))
    return app_logger
