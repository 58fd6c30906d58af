"""Module: paths.py.

Author: Michael Economou
Date: 2026-10-02

Where dropname keeps its files.

    <data dir>/config.json       persisted sequence settings
    <data dir>/config.json.bak   previous config.json
    <data dir>/logs/             rotating log files

The data dir is $DROPNAME_DATA_DIR when set, otherwise the platform's
per-user application data location.
"""

import os
import platform
from pathlib import Path

from dropname.config import APP_NAME, DATA_DIR_ENV_VAR
from dropname.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def platform_data_dir(app_name: str = APP_NAME) -> Path:
    """Per-user data directory for app_name, honouring DROPNAME_DATA_DIR."""
    override = os.environ.get(DATA_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()

    home = Path.home()
    system = platform.system()
    if system == "Windows":
        base = os.environ.get("LOCALAPPDATA") or str(home / "AppData" / "Local")
    elif system == "Darwin":
        base = str(home / "Library" / "Application Support")
    else:
        base = os.environ.get("XDG_DATA_HOME") or str(home / ".local" / "share")
    return Path(base) / app_name


class AppPaths:
    """Resolved once per process; reset() forgets the cached location."""

    _data_dir: Path | None = None

    @classmethod
    def get_user_data_dir(cls) -> Path:
        if cls._data_dir is None:
            data_dir = platform_data_dir()
            data_dir.mkdir(parents=True, exist_ok=True)
            logger.debug("[AppPaths] Data dir: %s", data_dir, extra={"dev_only": True})
            cls._data_dir = data_dir
        return cls._data_dir

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_user_data_dir() / "config.json"

    @classmethod
    def get_logs_dir(cls) -> Path:
        path = cls.get_user_data_dir() / "logs"
        path.mkdir(exist_ok=True)
        return path

    @classmethod
    def reset(cls) -> None:
        cls._data_dir = None
