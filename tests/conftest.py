"""
Module: conftest.py

Author: Michael Economou
Date: 2026-10-06

Global pytest configuration and fixtures for the dropname test suite.
"""

import os
import platform

import pytest

from dropname.utils.paths import AppPaths


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "posix_only: test relies on POSIX filesystem semantics")


def pytest_collection_modifyitems(session, config, items):
    """Skip POSIX-only tests on Windows."""
    _ = session
    _ = config

    if platform.system() == "Windows":
        skip_posix = pytest.mark.skip(reason="POSIX-only filesystem behavior")
        for item in items:
            if "posix_only" in item.keywords:
                item.add_marker(skip_posix)


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point the user data directory at a temporary folder for every test."""
    data_dir = tmp_path / "user_data"
    monkeypatch.setenv("DROPNAME_DATA_DIR", str(data_dir))
    AppPaths.reset()
    yield data_dir
    AppPaths.reset()


@pytest.fixture
def drop_dir(tmp_path):
    """Empty folder the dropped files live in."""
    folder = tmp_path / "drop"
    folder.mkdir()
    return folder


@pytest.fixture
def make_files(drop_dir):
    """Create files in drop_dir and return their paths as strings, in order."""

    def _make(*names: str, content: str = "data") -> list[str]:
        paths = []
        for name in names:
            path = drop_dir / name
            path.write_text(content, encoding="utf-8")
            paths.append(str(path))
        return paths

    return _make


@pytest.fixture
def case_insensitive_fs(drop_dir) -> bool:
    """True when drop_dir lives on a case-insensitive filesystem."""
    sample = drop_dir / "CaseCheck.tmp"
    sample.write_text("", encoding="utf-8")
    try:
        return os.path.exists(drop_dir / "casecheck.tmp")
    finally:
        sample.unlink()

