"""dropname.core.rename.rename_engine.

Single-path rename pipeline: split, transform, validate, apply.

Author: Michael Economou
Date: 2026-10-04
"""

import os

from dropname.core.rename.data_classes import RenamePlan
from dropname.core.rename.execution_manager import FilesystemApplier
from dropname.core.rename.validation_manager import ClaimedDestinations, RenameValidator
from dropname.models.rename_command import RenameCommand
from dropname.models.rename_result import RenameResult, RenameStatus
from dropname.modules import InvalidPatternError, transform
from dropname.utils.logging.logger_factory import get_cached_logger
from dropname.utils.naming.name_splitter import split_path

logger = get_cached_logger(__name__)

FILE_NOT_FOUND_DETAIL = "File not found"


class RenameEngine:
    """Rename one path per call and return a RenameResult.

    Every failure is reported as a result status; nothing raises out of
    rename() for a problem with an individual file.
    """

    def __init__(
        self,
        validator: RenameValidator | None = None,
        applier: FilesystemApplier | None = None,
    ):
        self.validator = validator or RenameValidator()
        self.applier = applier or FilesystemApplier()

    def plan(self, path: str, command: RenameCommand) -> RenamePlan:
        """Compute the new name for path without validating it.

        Raises:
            InvalidPatternError: Replace mode with a malformed pattern.

        """
        directory, original = split_path(path)
        candidate = transform(original, command)
        return RenamePlan(
            source_path=path,
            directory=directory,
            original=original,
            candidate=candidate,
        )

    def rename(
        self,
        path: str,
        command: RenameCommand,
        claimed: ClaimedDestinations | None = None,
        dry_run: bool = False,
    ) -> RenameResult:
        """Run the whole pipeline for one path.

        Args:
            path: The dropped path.
            command: Mode and configuration.
            claimed: Destinations claimed by earlier paths of the same batch;
                the destination of this path is added when it validates.
            dry_run: Validate only, do not rename on disk.

        """
        if claimed is None:
            claimed = ClaimedDestinations()

        if not os.path.lexists(path):
            logger.warning("[RenameEngine] File not found: %s", path)
            return RenameResult.failure(path, RenameStatus.IO_ERROR, FILE_NOT_FOUND_DETAIL)

        try:
            plan = self.plan(path, command)
        except InvalidPatternError as e:
            logger.warning("[RenameEngine] Invalid pattern for %s: %s", path, e)
            return RenameResult.failure(path, RenameStatus.INVALID_PATTERN, str(e))

        status = self.validator.validate(plan, claimed)
        if status is not None:
            return RenameResult.failure(path, status)

        claimed.claim(plan.destination_path)

        if dry_run:
            logger.debug(
                "[RenameEngine] Dry run: %s -> %s",
                plan.original.filename,
                plan.new_name,
                extra={"dev_only": True},
            )
            return RenameResult.success(path, plan.new_name)

        return self.applier.apply(path, plan.destination_path)
