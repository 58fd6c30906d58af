"""Shared utilities: JSON configuration persistence."""

from dropname.utils.shared.json_config_manager import (
    ConfigCategory,
    JSONConfigManager,
    SequenceConfig,
)

__all__ = ["ConfigCategory", "JSONConfigManager", "SequenceConfig"]
