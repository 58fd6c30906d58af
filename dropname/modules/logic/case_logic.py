"""Pure letter case and character width logic.

Author: Michael Economou
Date: 2026-10-03

Both modes rewrite only the stem.

Width conversion maps printable ASCII ("!" to "~") onto the full-width
forms block (U+FF01 to U+FF5E) and the space onto the ideographic space
U+3000, and back.
"""

from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_command import CaseConfig, CaseMode, ConvertConfig, WidthMode

_FULLWIDTH_OFFSET = 0xFEE0
_IDEOGRAPHIC_SPACE = "\u3000"

_TO_ZENKAKU = {code: code + _FULLWIDTH_OFFSET for code in range(ord("!"), ord("~") + 1)}
_TO_ZENKAKU[ord(" ")] = ord(_IDEOGRAPHIC_SPACE)
_TO_HANKAKU = {full: half for half, full in _TO_ZENKAKU.items()}


def to_zenkaku(text: str) -> str:
    return text.translate(_TO_ZENKAKU)


def to_hankaku(text: str) -> str:
    return text.translate(_TO_HANKAKU)


class CaseLogic:
    """Upper- or lower-case the stem."""

    @staticmethod
    def apply(components: FileNameComponents, config: CaseConfig) -> FileNameComponents:
        if config.mode is CaseMode.UPPER:
            return components.with_stem(components.stem.upper())
        return components.with_stem(components.stem.lower())


class WidthConversionLogic:
    """Full-width / half-width conversion of the stem."""

    @staticmethod
    def apply(components: FileNameComponents, config: ConvertConfig) -> FileNameComponents:
        if config.mode is WidthMode.ZENKAKU:
            return components.with_stem(to_zenkaku(components.stem))
        return components.with_stem(to_hankaku(components.stem))
