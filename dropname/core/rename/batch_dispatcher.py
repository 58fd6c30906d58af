"""dropname.core.rename.batch_dispatcher.

Runs the rename pipeline over a dropped batch, strictly in drop order.

Author: Michael Economou
Date: 2026-10-04

Each path gets its serial number from the SequenceCounter, then goes
through RenameEngine.rename. A failing path produces its result and the
batch moves on; the report always holds one result per input path.
"""

from collections.abc import Sequence
from enum import Enum

from dropname.config import DEFAULT_SERIAL_START
from dropname.core.rename.data_classes import BatchReport
from dropname.core.rename.rename_engine import RenameEngine
from dropname.core.rename.sequence_counter import SequenceCounter
from dropname.core.rename.validation_manager import ClaimedDestinations
from dropname.models.rename_command import RenameCommand, SerialConfig
from dropname.models.rename_result import RenameResult, RenameStatus
from dropname.utils.events import Observable, Signal
from dropname.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class BatchPhase(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    DONE = "done"

    def __str__(self) -> str:
        return self.value


class BatchDispatcher(Observable):
    """Sequential batch runner.

    Signals:
        file_processed(RenameResult): after each path, in input order.
        batch_finished(BatchReport): once the whole batch is drained.
    """

    file_processed = Signal(object)
    batch_finished = Signal(object)

    def __init__(self, engine: RenameEngine | None = None):
        super().__init__()
        self.engine = engine or RenameEngine()
        self.phase = BatchPhase.PENDING
        self.current_path: str | None = None

    @staticmethod
    def default_counter(command: RenameCommand) -> SequenceCounter:
        """Batch-policy counter starting at the Serial command's number."""
        if isinstance(command.config, SerialConfig):
            return SequenceCounter.batch(command.config.number)
        return SequenceCounter.batch(DEFAULT_SERIAL_START)

    def dispatch(
        self,
        paths: Sequence[str],
        command: RenameCommand,
        counter: SequenceCounter | None = None,
        dry_run: bool = False,
    ) -> BatchReport:
        """Rename every path in order and return the batch report.

        Args:
            paths: Dropped paths, in drop order.
            command: Mode and configuration shared by the batch. For Serial
                commands the number is replaced by the counter's value.
            counter: Sequence counter; defaults to the batch policy starting
                at the command's number.
            dry_run: Compute and validate only. The counter is not consumed.

        Raises:
            RuntimeError: The dispatcher is already processing a batch.

        """
        if self.phase is BatchPhase.PROCESSING:
            raise RuntimeError("A batch is already being processed")

        if counter is None:
            counter = self.default_counter(command)

        paths = list(paths)
        numbers = counter.peek(len(paths)).numbers if dry_run else counter.reserve(len(paths))

        logger.info(
            "[BatchDispatcher] Processing %d paths in %s mode (policy=%s, dry_run=%s)",
            len(paths),
            command.mode,
            counter.policy,
            dry_run,
        )

        claimed = ClaimedDestinations()
        results: list[RenameResult] = []
        self.phase = BatchPhase.PROCESSING
        try:
            for path, number in zip(paths, numbers, strict=True):
                self.current_path = path
                result = self._process_one(path, command.with_number(number), claimed, dry_run)
                results.append(result)
                self.file_processed.emit(result)
        finally:
            self.current_path = None
            self.phase = BatchPhase.DONE

        next_sequence = counter.peek(len(paths)).next_start if dry_run else counter.next_value
        report = BatchReport(results=results, dry_run=dry_run, next_sequence=next_sequence)

        logger.info(
            "[BatchDispatcher] Batch done: %d succeeded, %d failed",
            report.success_count,
            report.error_count,
        )
        self.batch_finished.emit(report)
        return report

    def _process_one(
        self,
        path: str,
        command: RenameCommand,
        claimed: ClaimedDestinations,
        dry_run: bool,
    ) -> RenameResult:
        try:
            return self.engine.rename(path, command, claimed=claimed, dry_run=dry_run)
        except Exception as e:
            # Per-file problems come back as results; this is an unexpected failure
            logger.exception("[BatchDispatcher] Unexpected error while renaming %s", path)
            return RenameResult.failure(path, RenameStatus.IO_ERROR, str(e))
