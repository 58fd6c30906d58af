"""Pure add/trim logic for the stem.

Author: Michael Economou
Date: 2026-10-03
"""

from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_command import AddConfig, Position, TrimConfig


class AddTextLogic:
    """Prepend or append text to the stem."""

    @staticmethod
    def apply(components: FileNameComponents, config: AddConfig) -> FileNameComponents:
        if config.position is Position.START:
            return components.with_stem(config.text + components.stem)
        return components.with_stem(components.stem + config.text)


class TrimLogic:
    """Remove a number of characters from one end of the stem."""

    @staticmethod
    def trim(stem: str, count: int, position: Position) -> str:
        """Trim count characters; a count past the stem length leaves an empty stem.

        Examples:
            trim("abcdef", 2, Position.START) -> "cdef"
            trim("abc", 5, Position.END) -> ""

        """
        if count <= 0:
            return stem
        if count >= len(stem):
            return ""
        if position is Position.START:
            return stem[count:]
        return stem[:-count]

    @staticmethod
    def apply(components: FileNameComponents, config: TrimConfig) -> FileNameComponents:
        return components.with_stem(TrimLogic.trim(components.stem, config.count, config.position))
