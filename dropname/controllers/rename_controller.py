"""Module: rename_controller.py.

Author: Michael Economou
Date: 2026-10-05

RenameController: the stateful side of a drop.

The engine is stateless apart from the manual counter value it is handed.
This controller owns everything that lives between drops:
- the persisted sequence settings (manual increment flag, start, next value)
- serialization of batch starts, so two quick drops never race on the counter
- a bounded, newest-first history of results for display
- file_renamed / batch_finished / sequence_changed events for a front end
"""

import threading
from collections import deque
from collections.abc import Sequence
from typing import Any

from dropname.config import MAX_RESULT_HISTORY
from dropname.core.rename import (
    BatchDispatcher,
    BatchReport,
    RenameEngine,
    SequenceCounter,
    SequenceState,
)
from dropname.models.rename_command import RenameCommand, SerialConfig
from dropname.models.rename_result import RenameResult
from dropname.utils.events import Observable, Signal
from dropname.utils.logging.logger_factory import get_cached_logger
from dropname.utils.shared.json_config_manager import JSONConfigManager, SequenceConfig

logger = get_cached_logger(__name__)


class RenameController(Observable):
    """Controller for dropped batches.

    Attributes:
        _config_manager: Persists the sequence settings
        _sequence: The "sequence" config category
        _dispatcher: Runs the batches
        _history: Most recent results, newest first

    """

    file_renamed = Signal(object)
    batch_finished = Signal(object)
    sequence_changed = Signal(int)

    def __init__(
        self,
        config_manager: JSONConfigManager | None = None,
        engine: RenameEngine | None = None,
        history_size: int = MAX_RESULT_HISTORY,
        autosave: bool = True,
    ) -> None:
        """Initialize RenameController.

        Args:
            config_manager: Configuration store (a default one in the user data
                dir is created and loaded when omitted)
            engine: Rename engine (injected for tests)
            history_size: Number of results kept for display
            autosave: Write setting changes to the config file; off, they only
                last for this controller

        """
        super().__init__()
        if config_manager is None:
            config_manager = JSONConfigManager()
            self._register_sequence(config_manager)
            config_manager.load()
        else:
            self._register_sequence(config_manager)

        self._config_manager = config_manager
        self._sequence: SequenceConfig = config_manager.get_category("sequence")  # type: ignore[assignment]
        self._dispatcher = BatchDispatcher(engine)
        self._dispatcher.file_processed.connect(self._on_file_processed)
        self._history: deque[RenameResult] = deque(maxlen=history_size)
        self._batch_lock = threading.RLock()
        self.autosave = autosave

        logger.debug(
            "[RenameController] Initialized (manual_increment=%s, start=%d, next=%d)",
            self.manual_increment,
            self.serial_start,
            self.next_value,
            extra={"dev_only": True},
        )

    @staticmethod
    def _register_sequence(config_manager: JSONConfigManager) -> None:
        if not isinstance(config_manager.get_category("sequence"), SequenceConfig):
            config_manager.register_category(SequenceConfig())

    # -------------------------------------------------------------------------
    # Sequence settings
    # -------------------------------------------------------------------------

    @property
    def manual_increment(self) -> bool:
        return bool(self._sequence.get("manual_increment"))

    @property
    def serial_start(self) -> int:
        return int(self._sequence.get("start"))

    @property
    def next_value(self) -> int:
        """Next number of the manual counter."""
        return int(self._sequence.get("next_value"))

    def set_manual_increment(self, enabled: bool) -> None:
        """Switch the manual increment policy on or off.

        Turning it on starts the counter from the configured start; an
        already-enabled counter keeps its value.
        """
        with self._batch_lock:
            was_enabled = self.manual_increment
            self._sequence.set("manual_increment", bool(enabled))
            if enabled and not was_enabled:
                self._sequence.set("next_value", self.serial_start)
            self._save()
        logger.info("[RenameController] Manual increment %s", "on" if enabled else "off")
        self.sequence_changed.emit(self.next_value)

    def set_serial_start(self, start: int) -> None:
        """Set the start number. While manual mode is off the counter follows it."""
        with self._batch_lock:
            self._sequence.set("start", int(start))
            if not self.manual_increment:
                self._sequence.set("next_value", int(start))
            self._save()
        self.sequence_changed.emit(self.next_value)

    def reset_counter(self) -> None:
        """Restart the manual counter from the configured start."""
        with self._batch_lock:
            self._sequence.set("next_value", self.serial_start)
            self._save()
        self.sequence_changed.emit(self.next_value)

    def _save(self) -> None:
        if not self.autosave:
            return
        if not self._config_manager.save():
            logger.warning("[RenameController] Sequence settings could not be saved")

    # -------------------------------------------------------------------------
    # Drops
    # -------------------------------------------------------------------------

    def _build_counter(self, command: RenameCommand) -> SequenceCounter:
        """Counter for one batch.

        The manual policy continues the stored counter. Otherwise a Serial
        command starts at its own number and other modes at the configured start.
        """
        if self.manual_increment:
            return SequenceCounter.manual(SequenceState(next_value=self.next_value))
        if isinstance(command.config, SerialConfig):
            return SequenceCounter.batch(command.config.number)
        return SequenceCounter.batch(self.serial_start)

    def handle_drop(
        self,
        paths: Sequence[str],
        command: RenameCommand,
        dry_run: bool = False,
    ) -> BatchReport:
        """Rename a dropped batch.

        Batches are serialized: a second drop waits until the first one has
        finished and its counter value has been stored. file_renamed fires
        during the batch; the lock is reentrant, so a receiver may change the
        sequence settings. Under the manual policy the value reached by the
        batch is stored last.

        Args:
            paths: Dropped paths in drop order
            command: Rename command for the whole batch
            dry_run: Preview only; nothing is renamed and the counter is kept

        Returns:
            BatchReport: One result per path, in input order

        """
        if not paths:
            logger.debug("[RenameController] Empty drop ignored")
            return BatchReport(results=[], dry_run=dry_run, next_sequence=self.next_value)

        with self._batch_lock:
            manual = self.manual_increment
            counter = self._build_counter(command)
            report = self._dispatcher.dispatch(paths, command, counter=counter, dry_run=dry_run)

            if manual and not dry_run:
                self._sequence.set("next_value", counter.next_value)
                self._save()

        if manual and not dry_run:
            self.sequence_changed.emit(self.next_value)
        self.batch_finished.emit(report)
        return report

    def handle_payload(
        self,
        paths: Sequence[str],
        payload: dict[str, Any],
        dry_run: bool = False,
    ) -> BatchReport:
        """Rename a dropped batch described by a {"mode", "config"} payload.

        Raises:
            CommandError: The payload is malformed. Nothing is renamed.

        """
        return self.handle_drop(paths, RenameCommand.from_payload(payload), dry_run=dry_run)

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def _on_file_processed(self, result: RenameResult) -> None:
        self._history.appendleft(result)
        self.file_renamed.emit(result)

    def recent_results(self) -> list[RenameResult]:
        """Results of previous drops, newest first."""
        return list(self._history)

    def clear_history(self) -> None:
        self._history.clear()
