"""Module: file_name_components.py

Author: Michael Economou
Date: 2026-10-02

Stem/extension pair of a filename.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class FileNameComponents:
    """A filename split at its last dot.

    Attributes:
        stem: Filename without the trailing extension segment.
        extension: Text after the last dot, or None when the name has no
            extension (no dot, or a dotfile such as ".bashrc").

    """

    stem: str
    extension: str | None = None

    @property
    def filename(self) -> str:
        """Join stem and extension back into a filename."""
        if self.extension is None:
            return self.stem
        return f"{self.stem}.{self.extension}"

    @property
    def has_extension(self) -> bool:
        return self.extension is not None

    def with_stem(self, stem: str) -> "FileNameComponents":
        return replace(self, stem=stem)

    def with_extension(self, extension: str | None) -> "FileNameComponents":
        return replace(self, extension=extension)

    def __str__(self) -> str:
        return self.filename
