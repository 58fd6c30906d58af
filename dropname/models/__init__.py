"""Data models: rename commands, filename components and results."""

from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_command import (
    AddConfig,
    CaseConfig,
    CaseMode,
    CommandError,
    ConvertConfig,
    ExtensionConfig,
    FixedConfig,
    Position,
    RenameCommand,
    RenameMode,
    ReplaceConfig,
    SerialConfig,
    TrimConfig,
    WidthMode,
)
from dropname.models.rename_result import RenameResult, RenameStatus

__all__ = [
    "AddConfig",
    "CaseConfig",
    "CaseMode",
    "CommandError",
    "ConvertConfig",
    "ExtensionConfig",
    "FileNameComponents",
    "FixedConfig",
    "Position",
    "RenameCommand",
    "RenameMode",
    "RenameResult",
    "RenameStatus",
    "ReplaceConfig",
    "SerialConfig",
    "TrimConfig",
    "WidthMode",
]
