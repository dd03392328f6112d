"""Logging setup for the generator.

Standard output carries the rendered Secret, so diagnostics go to stderr.
An optional log file records every pipeline stage at DEBUG regardless of
``--verbose``; only keys and paths are ever logged, never secret values.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO

_ROOT = "sopsgen"
_CONSOLE_FORMAT = "[sopsgen] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the logger for a pipeline component, e.g. ``sopsgen.resolver``."""
    return logging.getLogger(f"{_ROOT}.{component}" if component else _ROOT)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Install the stderr handler and, when requested, a DEBUG file sink.

    Calling this again replaces the handlers of the previous call.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_ROOT)
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["configure_logging", "get_logger"]
