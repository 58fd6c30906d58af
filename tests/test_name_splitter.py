"""Tests for stem/extension splitting.

Author: Michael Economou
Date: 2026-10-06
"""

import os

import pytest

from dropname.models.file_name_components import FileNameComponents
from dropname.utils.naming.name_splitter import split_name, split_path


@pytest.mark.parametrize(
    ("filename", "stem", "extension"),
    [
        ("photo.jpg", "photo", "jpg"),
        ("README", "README", None),
        ("archive.tar.gz", "archive.tar", "gz"),
        (".bashrc", ".bashrc", None),
        (".bashrc.bak", ".bashrc", "bak"),
        ("trailing.", "trailing", ""),
    ],
)
def test_split_name(filename, stem, extension):
    components = split_name(filename)
    assert components == FileNameComponents(stem, extension)
    assert components.filename == filename


def test_split_path_keeps_directory():
    path = os.path.join("some", "folder", "IMG_0001.JPG")
    directory, components = split_path(path)
    assert directory == os.path.join("some", "folder")
    assert components.stem == "IMG_0001"
    assert components.extension == "JPG"


def test_split_path_without_directory():
    directory, components = split_path("notes.txt")
    assert directory == ""
    assert components.filename == "notes.txt"


def test_split_path_ignores_trailing_separator():
    directory, components = split_path(os.path.join("base", "photos") + os.sep)
    assert directory == "base"
    assert components == FileNameComponents("photos", None)


def test_components_helpers():
    components = FileNameComponents("photo", "jpg")
    assert components.has_extension
    assert components.with_stem("x").filename == "x.jpg"
    assert components.with_extension(None).filename == "photo"
    assert str(components) == "photo.jpg"
