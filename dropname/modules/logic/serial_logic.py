"""Pure serial numbering logic.

Author: Michael Economou
Date: 2026-10-03

Builds prefix + [original stem] + zero-padded number + suffix. The number
itself comes from the sequence counter; this module only formats it.
"""

from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_command import SerialConfig
from dropname.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def zero_padded(number: int, pad: int) -> str:
    """Render number in base 10, left-padded with zeros to at least pad digits.

    Numbers wider than pad are never truncated: zero_padded(1234, 3) == "1234".
    """
    return f"{number:0{max(pad, 0)}d}"


class SerialLogic:
    """Serial numbering mode."""

    @staticmethod
    def apply(components: FileNameComponents, config: SerialConfig) -> FileNameComponents:
        original = components.stem if config.keep_original else ""
        stem = f"{config.prefix}{original}{zero_padded(config.number, config.pad)}{config.suffix}"
        logger.debug(
            "[SerialLogic] number: %d, pad: %d, stem: %s",
            config.number,
            config.pad,
            stem,
            extra={"dev_only": True},
        )
        extension = components.extension if config.keep_ext else None
        return FileNameComponents(stem=stem, extension=extension)
