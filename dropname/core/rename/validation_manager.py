"""dropname.core.rename.validation_manager.

Validation of computed names before anything touches the disk.

Author: Michael Economou
Date: 2026-10-04
"""

import os

from dropname.core.rename.data_classes import RenamePlan
from dropname.models.rename_result import RenameStatus
from dropname.utils.logging.logger_factory import get_cached_logger
from dropname.utils.naming.rename_logic import is_same_file, normalize_path

logger = get_cached_logger(__name__)


class ClaimedDestinations:
    """Destination paths already assigned to earlier files of the same batch.

    Paths are compared in absolute, case-normalized form.
    """

    def __init__(self) -> None:
        self._claimed: set[str] = set()

    def claim(self, path: str) -> None:
        self._claimed.add(normalize_path(path))

    def is_claimed(self, path: str) -> bool:
        return normalize_path(path) in self._claimed

    def __len__(self) -> int:
        return len(self._claimed)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.is_claimed(path)


class RenameValidator:
    """Reject empty names and destination collisions."""

    def validate(self, plan: RenamePlan, claimed: ClaimedDestinations) -> RenameStatus | None:
        """Check plan against the filesystem and the batch's claimed destinations.

        Args:
            plan: The computed rename.
            claimed: Destinations taken by earlier paths of the batch.

        Returns:
            RenameStatus.EMPTY_NAME, RenameStatus.ALREADY_EXISTS, or None when
            the rename may proceed.

        """
        if not plan.candidate.stem:
            logger.debug("[RenameValidator] Empty stem for %s", plan.source_path)
            return RenameStatus.EMPTY_NAME

        destination = plan.destination_path

        if claimed.is_claimed(destination):
            logger.info(
                "[RenameValidator] %s already claimed earlier in this batch",
                plan.new_name,
            )
            return RenameStatus.ALREADY_EXISTS

        # A destination that is the source itself (same path, or a case-only
        # rename on a case-insensitive filesystem) is not a collision.
        if os.path.lexists(destination) and not is_same_file(plan.source_path, destination):
            logger.info("[RenameValidator] Target exists: %s", destination)
            return RenameStatus.ALREADY_EXISTS

        return None
