"""Logging setup for command line use."""

import logging
import os
import sys

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"
LEVEL_ENV_VAR = "STEPGRAPH_LOG_LEVEL"

_configured = False


def configure_logging(level: str | None = None, force: bool = False) -> None:
    """Send log records to stderr.

    Subsequent calls are ignored unless force=True.

    Args:
        level: Log level name. Defaults to STEPGRAPH_LOG_LEVEL or "WARNING".
        force: Force reconfiguration even if already configured.
    """
    global _configured
    if _configured and not force:
        return

    level = level or os.environ.get(LEVEL_ENV_VAR, "WARNING")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    _configured = True
