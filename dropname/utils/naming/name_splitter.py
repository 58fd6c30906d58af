"""Module: name_splitter.py

Author: Michael Economou
Date: 2026-10-02

Split a filename into stem and extension.

Only the text after the LAST dot is the extension ("archive.tar.gz" ->
"archive.tar" + "gz"). A dot in first position does not count, so dotfiles
such as ".bashrc" have no extension while ".bashrc.bak" has "bak".
"""

import os

from dropname.models.file_name_components import FileNameComponents


def split_name(filename: str) -> FileNameComponents:
    """Split a bare filename (no directory part).

    Args:
        filename: Final path segment, e.g. "photo.jpg"

    Returns:
        FileNameComponents: stem and extension (None when absent)

    """
    dot_index = filename.rfind(".")
    if dot_index <= 0:
        return FileNameComponents(stem=filename, extension=None)
    return FileNameComponents(stem=filename[:dot_index], extension=filename[dot_index + 1 :])


def split_path(full_path: str) -> tuple[str, FileNameComponents]:
    """Split a path into its untouched directory part and the name components.

    Trailing separators are ignored so a dropped folder "photos/" splits
    like "photos".
    """
    separators = os.sep + (os.altsep or "")
    stripped = full_path.rstrip(separators) or full_path
    directory, filename = os.path.split(stripped)
    return directory, split_name(filename)
