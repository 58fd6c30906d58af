"""Pure text replacement logic.

Author: Michael Economou
Date: 2026-10-03

Replaces every occurrence of a literal substring or a regular expression in
the stem. The extension is never scanned.

Regex replacements accept Python group references (\\1, \\g<name>) as well
as the $1 / ${name} form, with $$ for a literal dollar sign.
"""

import re

from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_command import ReplaceConfig
from dropname.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_DOLLAR_REFERENCE = re.compile(r"\$(?:(\d+)|\{(\w+)\}|(\$))")


class InvalidPatternError(ValueError):
    """Raised when a Replace pattern or its replacement template is malformed."""


def dollar_to_python_template(template: str) -> str:
    """Turn $1 / ${name} / $$ references into Python's \\g<...> syntax."""

    def _convert(match: re.Match) -> str:
        number, name, dollar = match.groups()
        if dollar:
            return "$"
        return rf"\g<{number if number is not None else name}>"

    return _DOLLAR_REFERENCE.sub(_convert, template)


class ReplaceLogic:
    """Replace mode."""

    @staticmethod
    def compile_pattern(pattern: str) -> re.Pattern:
        try:
            return re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(f"Regex error: {e}") from e

    @staticmethod
    def replace_in_stem(stem: str, config: ReplaceConfig) -> str:
        """Replace all occurrences of config.from_text in stem.

        An empty search text leaves the stem unchanged.

        Raises:
            InvalidPatternError: use_regex is set and the pattern or the
                replacement does not compile.

        """
        if not config.from_text:
            return stem

        if not config.use_regex:
            return stem.replace(config.from_text, config.to_text)

        regex = ReplaceLogic.compile_pattern(config.from_text)
        try:
            return regex.sub(dollar_to_python_template(config.to_text), stem)
        except (re.error, IndexError) as e:
            raise InvalidPatternError(f"Replacement error: {e}") from e

    @staticmethod
    def apply(components: FileNameComponents, config: ReplaceConfig) -> FileNameComponents:
        new_stem = ReplaceLogic.replace_in_stem(components.stem, config)
        if new_stem != components.stem:
            logger.debug(
                "[ReplaceLogic] %s -> %s",
                components.stem,
                new_stem,
                extra={"dev_only": True},
            )
        return components.with_stem(new_stem)
