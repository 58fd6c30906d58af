"""Module: rename_logic.py.

Author: Michael Economou
Date: 2026-10-02

rename_logic.py
Low-level rename helpers shared by the validator and the filesystem applier:
- is_case_only_change: names that differ only in letter case.
- is_same_file: whether a destination is the source entry itself.
- safe_case_rename: case-only rename that also works on case-insensitive
  filesystems (NTFS, default APFS).
"""

import os
import platform

from dropname.config import CASE_RENAME_MAX_ATTEMPTS, CASE_RENAME_TEMP_PREFIX
from dropname.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


def is_case_only_change(old: str, new: str) -> bool:
    """Check if the only difference between old and new names is case."""
    return old.lower() == new.lower() and old != new


def normalize_path(path: str) -> str:
    """Absolute, case-normalized form used to compare destinations."""
    return os.path.normcase(os.path.abspath(path))


def is_same_file(src_path: str, dst_path: str) -> bool:
    """True when dst_path names the source directory entry itself.

    Identical paths always match. Otherwise only a case-only rename in the
    same directory on a case-insensitive filesystem qualifies: dst_path must
    resolve (without following links) to the source entry, and the directory
    must not list dst_path as a separate entry. Symlinks and hardlinks to the
    source are distinct entries and do not match.
    """
    if normalize_path(src_path) == normalize_path(dst_path):
        return True

    src_dir, src_name = os.path.split(os.path.abspath(src_path))
    dst_dir, dst_name = os.path.split(os.path.abspath(dst_path))
    if src_dir != dst_dir or not is_case_only_change(src_name, dst_name):
        return False

    try:
        if not os.path.samestat(os.lstat(src_path), os.lstat(dst_path)):
            return False
        entries = os.listdir(src_dir)
    except OSError:
        return False
    return dst_name not in entries


def _temp_case_path(src_dir: str, dst_name: str) -> str:
    base = f"{CASE_RENAME_TEMP_PREFIX}{abs(hash(dst_name))}"
    temp_path = os.path.join(src_dir, f"{base}.tmp")
    counter = 0
    while os.path.lexists(temp_path):
        counter += 1
        if counter > CASE_RENAME_MAX_ATTEMPTS:
            raise FileExistsError(f"Could not find a free temporary name in {src_dir}")
        temp_path = os.path.join(src_dir, f"{base}_{counter}.tmp")
    return temp_path


def safe_case_rename(src_path: str, dst_path: str) -> None:
    """Rename src_path to dst_path, going through a temporary name for case-only changes on Windows.

    os.rename("file.txt", "FILE.TXT") is unreliable on case-insensitive
    Windows volumes, so the file is first moved to a unique temporary name
    in the same directory and then to its final name.

    Raises:
        OSError: The rename failed. After a failed second step the file is
            moved back to src_path when possible.

    """
    src_dir = os.path.dirname(src_path)
    src_name = os.path.basename(src_path)
    dst_name = os.path.basename(dst_path)

    if not is_case_only_change(src_name, dst_name) or platform.system() != "Windows":
        os.rename(src_path, dst_path)
        return

    temp_path = _temp_case_path(src_dir, dst_name)
    os.rename(src_path, temp_path)
    logger.debug("Case rename step 1: %s -> %s", src_name, os.path.basename(temp_path))

    try:
        os.rename(temp_path, dst_path)
    except OSError:
        if not os.path.lexists(src_path):
            try:
                os.rename(temp_path, src_path)
                logger.info("Restored original file after failed case rename: %s", src_path)
            except OSError as cleanup_error:
                logger.error("Failed to cleanup after case rename failure: %s", cleanup_error)
        raise

    logger.debug("Case rename step 2: %s -> %s", os.path.basename(temp_path), dst_name)
