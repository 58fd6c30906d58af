"""Module: logger_setup.py.

Author: Michael Economou
Date: 2026-10-02

logger_setup.py
ConfigureLogger installs the application's handlers on the root logger:
console output (INFO and up by default, dev-only records filtered) plus
optional rotating log files for the activity log and a debug log.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

from dropname import config


class DevOnlyFilter(logging.Filter):
    """Hide records logged with extra={"dev_only": True} from the console."""

    def __init__(self, show_dev_only: bool | None = None):
        super().__init__()
        self.show_dev_only = (
            config.SHOW_DEV_ONLY_IN_CONSOLE if show_dev_only is None else show_dev_only
        )

    def filter(self, record: logging.LogRecord) -> bool:
        if self.show_dev_only:
            return True
        return not getattr(record, "dev_only", False)


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> RotatingFileHandler:
    """Attach a rotating UTF-8 file handler to logger.

    Args:
        logger: The logger to attach the handler to.
        log_path: Path to the log file; parent directories are created.
        level: Level for this handler.
        max_bytes: Maximum file size before rotating.
        backup_count: Number of rotated files to keep.

    Returns:
        RotatingFileHandler: The attached handler.

    """
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(
        logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    )
    logger.addHandler(file_handler)
    return file_handler


class ConfigureLogger:
    """Configure application-wide logging on the root logger.

    Handlers are only installed once; a second ConfigureLogger on an already
    configured root logger just adjusts the console level.
    """

    def __init__(
        self,
        log_name: str = config.APP_NAME,
        log_dir: str | None = None,
        console_level: int | None = None,
        log_to_file: bool | None = None,
        debug_file: bool | None = None,
    ):
        """Initialize and configure the root logger.

        Args:
            log_name: Base name for log files.
            log_dir: Directory for log files (defaults to the user logs dir).
            console_level: Console level (defaults to LOG_CONSOLE_LEVEL).
            log_to_file: Write the activity log (defaults to LOG_TO_FILE).
            debug_file: Write the DEBUG log (defaults to LOG_DEBUG_FILE_ENABLED).

        """
        if console_level is None:
            console_level = getattr(logging, config.LOG_CONSOLE_LEVEL, logging.WARNING)
        if log_to_file is None:
            log_to_file = config.LOG_TO_FILE
        if debug_file is None:
            debug_file = config.LOG_DEBUG_FILE_ENABLED

        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # handlers filter levels
        self.console_handler: logging.Handler | None = None

        existing = [h for h in self.logger.handlers if getattr(h, "_dropname_console", False)]
        if existing:
            self.console_handler = existing[0]
            self.console_handler.setLevel(console_level)
            return

        if config.LOG_TO_CONSOLE:
            self._setup_console_handler(console_level)

        if log_to_file or debug_file:
            if log_dir is None:
                from dropname.utils.paths import AppPaths

                log_dir = str(AppPaths.get_logs_dir())
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

            if log_to_file:
                add_file_handler(
                    self.logger,
                    os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                    level=getattr(logging, config.LOG_FILE_LEVEL, logging.INFO),
                    max_bytes=config.LOG_FILE_MAX_BYTES,
                    backup_count=config.LOG_FILE_BACKUP_COUNT,
                )
            if debug_file:
                add_file_handler(
                    self.logger,
                    os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                    level=logging.DEBUG,
                    max_bytes=config.LOG_DEBUG_FILE_MAX_BYTES,
                    backup_count=config.LOG_DEBUG_FILE_BACKUP_COUNT,
                )

    def _setup_console_handler(self, level: int) -> None:
        """Console handler on stderr with UTF-8 output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stderr)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter(config.LOG_CONSOLE_FORMAT))
        console_handler._dropname_console = True  # type: ignore[attr-defined]
        self.logger.addHandler(console_handler)
        self.console_handler = console_handler
