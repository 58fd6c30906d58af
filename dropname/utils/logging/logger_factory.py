"""Module: logger_factory.py.

Author: Michael Economou
Date: 2026-10-02

logger_factory.py
Cached logger factory. Every module asks for its logger once at import time
with get_cached_logger(__name__); records propagate to the root logger where
ConfigureLogger installs the console and file handlers.
"""

import logging
import re
import threading
from functools import partial

_REPLACEMENTS = {
    "\u2192": "->",  # right arrow
    "\u2014": "--",  # em dash
    "\u2013": "-",  # en dash
    "\u2026": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS.keys())))


def safe_text(text: str) -> str:
    """Replace problematic Unicode symbols and drop anything non-ASCII.

    Used as a fallback when a console cannot encode a log message
    (dropped filenames often carry Japanese or other non-Latin text).
    """
    text = _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)
    return text.encode("ascii", errors="backslashreplace").decode("ascii")


def safe_log(logger_func, message, *args, **kwargs):
    """Log through logger_func, retrying with ASCII-safe text on UnicodeEncodeError."""
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        safe_args = tuple(safe_text(str(arg)) for arg in args)
        logger_func(safe_text(message), *safe_args, **kwargs)


def _patch_logger_safe_methods(logger: logging.Logger) -> None:
    for method_name in ("debug", "info", "warning", "error", "critical", "exception"):
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a propagating logger with Unicode-safe logging methods.

    Args:
        name: Logger name, usually the calling module's __name__

    Returns:
        logging.Logger: Logger delegating output to the root logger

    """
    logger = logging.getLogger(name or "dropname")
    logger.propagate = True

    if not getattr(logger, "_patched_for_safe_log", False):
        _patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True  # type: ignore[attr-defined]

    return logger


class LoggerFactory:
    """Thread-safe logger cache, one logger instance per module name."""

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create the cached logger for name."""
        key = name or "dropname"
        with cls._lock:
            if key not in cls._loggers:
                logger = get_logger(key)
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[key] = logger
            return cls._loggers[key]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set the logging level on every cached logger and on loggers created later."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Names of all cached loggers."""
        with cls._lock:
            return list(cls._loggers.keys())

    @classmethod
    def clear_cache(cls) -> None:
        """Forget all cached loggers (the loggers themselves stay registered with logging)."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience wrapper around LoggerFactory.get_logger."""
    return LoggerFactory.get_logger(name)
