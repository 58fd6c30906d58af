"""Pure business logic for the rename modes.

Author: Michael Economou
Date: 2026-10-03

One logic class per mode, each mapping (FileNameComponents, config) to the
candidate FileNameComponents. Only ExtensionLogic changes the extension;
FixedNameLogic and SerialLogic drop it when keep_ext is off.
"""

from dropname.modules.logic.case_logic import CaseLogic, WidthConversionLogic
from dropname.modules.logic.extension_logic import ExtensionLogic
from dropname.modules.logic.fixed_name_logic import FixedNameLogic
from dropname.modules.logic.replace_logic import InvalidPatternError, ReplaceLogic
from dropname.modules.logic.serial_logic import SerialLogic, zero_padded
from dropname.modules.logic.text_edit_logic import AddTextLogic, TrimLogic

__all__ = [
    "AddTextLogic",
    "CaseLogic",
    "ExtensionLogic",
    "FixedNameLogic",
    "InvalidPatternError",
    "ReplaceLogic",
    "SerialLogic",
    "TrimLogic",
    "WidthConversionLogic",
    "zero_padded",
]
