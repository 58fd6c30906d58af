"""Rename modes.

transform() dispatches a RenameCommand to the logic class of its mode.
"""

from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_command import RenameCommand, RenameMode
from dropname.modules.logic import (
    AddTextLogic,
    CaseLogic,
    ExtensionLogic,
    FixedNameLogic,
    InvalidPatternError,
    ReplaceLogic,
    SerialLogic,
    TrimLogic,
    WidthConversionLogic,
)

MODE_LOGIC = {
    RenameMode.FIXED: FixedNameLogic,
    RenameMode.SERIAL: SerialLogic,
    RenameMode.REPLACE: ReplaceLogic,
    RenameMode.ADD: AddTextLogic,
    RenameMode.TRIM: TrimLogic,
    RenameMode.EXTENSION: ExtensionLogic,
    RenameMode.CASE: CaseLogic,
    RenameMode.CONVERT: WidthConversionLogic,
}


def transform(components: FileNameComponents, command: RenameCommand) -> FileNameComponents:
    """Compute the candidate name for components under command.

    Raises:
        InvalidPatternError: Replace mode with a malformed regular expression.

    """
    return MODE_LOGIC[command.mode].apply(components, command.config)


__all__ = ["MODE_LOGIC", "InvalidPatternError", "transform"]
