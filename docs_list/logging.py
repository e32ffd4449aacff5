"""Logging utilities for docs-list commands.

Library modules only log at DEBUG, so the stdout report and an empty stderr
are unaffected unless ``--verbose`` is given.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOGGER_NAME = "docs_list"
_FORMAT = "[docs-list] %(levelname)s %(component)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the docs_list hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


class _ComponentFilter(logging.Filter):
    """Expose the logger name without the package prefix as ``component``."""

    def filter(self, record: logging.LogRecord) -> bool:
        prefix = f"{_LOGGER_NAME}."
        name = record.name
        record.component = name[len(prefix):] if name.startswith(prefix) else name
        return True


def configure_logging(*, verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Send docs_list records to stderr; DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI runs more than once.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.addFilter(_ComponentFilter())
    stream_handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(stream_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
