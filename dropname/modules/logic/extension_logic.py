"""Pure extension logic.

Author: Michael Economou
Date: 2026-10-03

The only rename mode allowed to change a file's extension.
"""

from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_command import ExtensionConfig


class ExtensionLogic:
    """Replace the extension, leaving the stem untouched."""

    @staticmethod
    def normalize_extension(new_ext: str) -> str:
        """Strip leading dots so both "jpg" and ".jpg" are accepted."""
        return new_ext.lstrip(".")

    @staticmethod
    def apply(components: FileNameComponents, config: ExtensionConfig) -> FileNameComponents:
        """Swap in the new extension; an empty one removes the extension."""
        extension = ExtensionLogic.normalize_extension(config.new_ext)
        return components.with_extension(extension or None)
