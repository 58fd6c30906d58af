"""dropname.core.rename.execution_manager.

Applies a validated rename on disk.

Author: Michael Economou
Date: 2026-10-04
"""

import os

from dropname.models.rename_result import RenameResult, RenameStatus
from dropname.utils.logging.logger_factory import get_cached_logger
from dropname.utils.naming.rename_logic import is_case_only_change, safe_case_rename

logger = get_cached_logger(__name__)


class FilesystemApplier:
    """Perform the rename syscall and report the outcome.

    OS failures (permission denied, path too long, source removed mid-batch,
    cross-device moves) become IoError results carrying the OS message. They
    are never retried.
    """

    def apply(self, source_path: str, destination_path: str) -> RenameResult:
        new_name = os.path.basename(destination_path)

        if os.path.abspath(source_path) == os.path.abspath(destination_path):
            logger.debug(
                "[FilesystemApplier] Skipping unchanged file: %s",
                new_name,
                extra={"dev_only": True},
            )
            return RenameResult.success(source_path, new_name)

        try:
            if is_case_only_change(os.path.basename(source_path), new_name):
                safe_case_rename(source_path, destination_path)
            else:
                os.rename(source_path, destination_path)
        except OSError as e:
            detail = e.strerror or str(e)
            logger.error(
                "[FilesystemApplier] Rename failed for %s -> %s: %s",
                source_path,
                new_name,
                detail,
            )
            return RenameResult.failure(source_path, RenameStatus.IO_ERROR, detail)

        logger.info("[FilesystemApplier] Renamed %s -> %s", source_path, new_name)
        return RenameResult.success(source_path, new_name)
