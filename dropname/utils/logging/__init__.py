"""Logging utilities package.

Logger factory and root logger setup.
"""

from dropname.utils.logging.logger_factory import get_cached_logger

__all__ = [
    "get_cached_logger",
]
