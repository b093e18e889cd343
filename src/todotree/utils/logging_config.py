"""Logging setup shared by the command line and the API server."""

from __future__ import annotations

import logging
import sys

from todotree.config import TODOTREE_LOG_LEVEL

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends ``extra=`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extras = {
            key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
        }
        if not extras:
            return message
        fields = " ".join(f"{key}={value!r}" for key, value in sorted(extras.items()))
        return f"{message} [{fields}]"


def configure_logging(level: str = TODOTREE_LOG_LEVEL) -> None:
    """Install a stream handler on the root logger for the entry points.

    Like :func:`logging.basicConfig` this does nothing when the root logger
    already has handlers. Package loggers keep propagating to the root.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ExtraFieldsFormatter(_FORMAT))
    root.addHandler(handler)
    for name in ("todotree", "server"):
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; handlers are left to :func:`configure_logging`."""
    return logging.getLogger(name)
