"""Module: json_config_manager.py

Author: Michael Economou
Date: 2026-10-02

Persistent settings stored as JSON.

Settings live in named categories, each with its defaults and value types.
JSONConfigManager writes every registered category to config.json in one
document; the previous file is copied to config.json.bak first, and a
corrupt config.json is recovered from that backup on load.
"""

import json
import os
import shutil
import tempfile
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from dropname.config import (
    APP_NAME,
    APP_VERSION,
    DEBUG_RESET_CONFIG,
    DEFAULT_MANUAL_INCREMENT,
    DEFAULT_SERIAL_START,
)
from dropname.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

METADATA_KEY = "_metadata"


class ConfigCategory:
    """A named group of settings with defaults.

    Args:
        name: Key of the category in config.json
        defaults: Default value per setting
        types: Optional expected type per setting; stored values that do not
            fit are replaced by the default when loading

    """

    def __init__(self, name: str, defaults: dict[str, Any], types: dict[str, type] | None = None):
        self.name = name
        self.defaults = dict(defaults)
        self.types = dict(types or {})
        self._values = dict(defaults)

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._values:
            return self._values[key]
        return self.defaults.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def update(self, values: dict[str, Any]) -> None:
        for key, value in values.items():
            self.set(key, value)

    def reset(self) -> None:
        self._values = dict(self.defaults)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def from_dict(self, stored: dict[str, Any]) -> None:
        """Replace the values with stored ones; missing keys take their defaults."""
        self._values = dict(self.defaults)
        for key, value in stored.items():
            self._values[key] = self._coerce(key, value)

    def _coerce(self, key: str, value: Any) -> Any:
        expected = self.types.get(key)
        if expected is None:
            return value
        if isinstance(value, expected) and not _is_bool_as_int(expected, value):
            return value

        try:
            if expected is bool and isinstance(value, int):
                return bool(value)
            if expected is int and isinstance(value, str):
                return int(value.strip())
        except ValueError:
            pass

        logger.warning(
            "[ConfigCategory] %s.%s: stored value %r is not a %s, using default",
            self.name,
            key,
            value,
            expected.__name__,
        )
        return self.defaults.get(key)


def _is_bool_as_int(expected: type, value: Any) -> bool:
    return expected is int and isinstance(value, bool)


class SequenceConfig(ConfigCategory):
    """Serial numbering state that outlives a single drop.

    Keys:
        manual_increment: The counter carries over between drops
        start: Configured first number
        next_value: Next number the manual counter hands out
    """

    def __init__(self) -> None:
        super().__init__(
            "sequence",
            defaults={
                "manual_increment": DEFAULT_MANUAL_INCREMENT,
                "start": DEFAULT_SERIAL_START,
                "next_value": DEFAULT_SERIAL_START,
            },
            types={"manual_increment": bool, "start": int, "next_value": int},
        )


class JSONConfigManager:
    """Reads and writes the registered categories as one JSON document."""

    def __init__(self, app_name: str = APP_NAME, config_dir: str | Path | None = None):
        if config_dir is None:
            from dropname.utils.paths import AppPaths

            config_dir = AppPaths.get_user_data_dir()

        self.app_name = app_name
        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / "config.json"
        self.backup_file = self.config_dir / "config.json.bak"
        self._categories: dict[str, ConfigCategory] = {}
        self._lock = threading.RLock()

        self.config_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(
            "[JSONConfigManager] Using %s", self.config_file, extra={"dev_only": True}
        )

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------

    def register_category(self, category: ConfigCategory) -> None:
        with self._lock:
            self._categories[category.name] = category

    def get_category(self, name: str, create_if_not_exists: bool = False) -> ConfigCategory | None:
        with self._lock:
            category = self._categories.get(name)
            if category is None and create_if_not_exists:
                logger.debug("[JSONConfigManager] Creating empty category '%s'", name)
                category = ConfigCategory(name, {})
                self._categories[name] = category
            return category

    def list_categories(self) -> list[str]:
        with self._lock:
            return list(self._categories)

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _read(self, path: Path) -> dict[str, Any] | None:
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("[JSONConfigManager] Cannot read %s: %s", path, e)
            return None
        if not isinstance(document, dict):
            logger.error("[JSONConfigManager] %s does not hold a JSON object", path)
            return None
        return document

    def load(self) -> bool:
        """Load every registered category from config.json.

        A missing file leaves the defaults in place. When config.json is
        unreadable the backup is tried instead.

        Returns:
            bool: False if stored settings existed but none could be read

        """
        with self._lock:
            if DEBUG_RESET_CONFIG:
                logger.info(
                    "[JSONConfigManager] DEBUG_RESET_CONFIG set, discarding %s", self.config_file
                )
                self.config_file.unlink(missing_ok=True)
                self.backup_file.unlink(missing_ok=True)

            if not self.config_file.exists():
                logger.debug(
                    "[JSONConfigManager] No config file yet, using defaults",
                    extra={"dev_only": True},
                )
                return True

            document = self._read(self.config_file)
            if document is None and self.backup_file.exists():
                logger.warning("[JSONConfigManager] Recovering settings from %s", self.backup_file)
                document = self._read(self.backup_file)
            if document is None:
                return False

            for name, category in self._categories.items():
                stored = document.get(name)
                if isinstance(stored, dict):
                    category.from_dict(stored)
            return True

    def save(self, create_backup: bool = True) -> bool:
        """Write every registered category to config.json.

        The file is replaced atomically; the previous version is kept as
        config.json.bak when create_backup is set.

        Returns:
            bool: True on success, False if the file could not be written

        """
        with self._lock:
            document: dict[str, Any] = {
                name: category.to_dict() for name, category in self._categories.items()
            }
            document[METADATA_KEY] = {
                "app_name": self.app_name,
                "version": APP_VERSION,
                "saved_at": datetime.now().isoformat(timespec="seconds"),
            }

            tmp_path = None
            try:
                if create_backup and self.config_file.exists():
                    shutil.copy2(self.config_file, self.backup_file)

                fd, tmp_path = tempfile.mkstemp(
                    prefix=".config-", suffix=".json", dir=self.config_dir
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.config_file)
                tmp_path = None
            except (OSError, TypeError, ValueError) as e:
                logger.error("[JSONConfigManager] Failed to save %s: %s", self.config_file, e)
                return False
            finally:
                if tmp_path is not None:
                    Path(tmp_path).unlink(missing_ok=True)

            logger.debug("[JSONConfigManager] Saved %s", self.config_file, extra={"dev_only": True})
            return True
