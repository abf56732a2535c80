"""Logging setup shared by the app and the CLI entry point."""

from __future__ import annotations

import logging
import sys

from .config import LOG_LEVEL

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Route application logs to stdout."""

    logging.basicConfig(
        level=level or LOG_LEVEL,
        format=_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


__all__ = ["configure_logging"]
