"""Pure fixed-name logic.

Author: Michael Economou
Date: 2026-10-03
"""

from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_command import FixedConfig


class FixedNameLogic:
    """Replace the whole stem with a configured name."""

    @staticmethod
    def apply(components: FileNameComponents, config: FixedConfig) -> FileNameComponents:
        """Return the configured name, keeping the original extension when keep_ext is set.

        With keep_ext off the configured name is the entire new filename; no
        extension is appended.
        """
        extension = components.extension if config.keep_ext else None
        return FileNameComponents(stem=config.name, extension=extension)
