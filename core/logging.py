"""Logging setup shared by the engine, the CLI and the web app."""

import logging
import sys
from functools import lru_cache

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_NOISY_LOGGERS = ("httpx", "httpcore", "httpcore.http11", "httpcore.connection")


def configure_logging(level: str | int = "INFO", handler: logging.Handler | None = None) -> None:
    """Attach a single console handler to the root logger.

    Calling it again is a no-op unless an explicit ``handler`` is given, in
    which case existing handlers are replaced (the CLI uses this to swap in
    a Rich handler).
    """
    root = logging.getLogger()
    if root.handlers and handler is None:
        return

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    else:
        for existing in list(root.handlers):
            root.removeHandler(existing)

    root.addHandler(handler)
    root.setLevel(level)


@lru_cache(maxsize=128)
def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring the root logger on first use.

    Usage:
        from core.logging import get_logger
        logger = get_logger(__name__)
    """
    from core.config import get_settings

    configure_logging(get_settings().log_level)
    return logging.getLogger(name)
