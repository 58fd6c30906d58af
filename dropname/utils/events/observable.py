"""Module: observable.py.

Author: Michael Economou
Date: 2026-10-02

Framework-free signals for controllers and dispatchers.

    class BatchDispatcher(Observable):
        file_processed = Signal(object)

    dispatcher.file_processed.connect(show_result)
    with dispatcher.file_processed.connected(progress_bar_tick):
        dispatcher.dispatch(paths, command)
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from dropname.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["BoundSignal", "Observable", "Signal"]

Receiver = Callable[..., Any]


def _receiver_label(receiver: Receiver) -> str:
    return getattr(receiver, "__qualname__", None) or repr(receiver)


class Signal:
    """Class-level declaration; each instance of the owner gets its own BoundSignal."""

    def __init__(self, *arg_types: type):
        self.arg_types = arg_types
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> BoundSignal:
        if obj is None:
            return self  # type: ignore[return-value]

        bound = obj.__dict__.setdefault("_bound_signals", {})
        if self.name not in bound:
            bound[self.name] = BoundSignal(f"{type(obj).__name__}.{self.name}")
        return bound[self.name]


class BoundSignal:
    """Receivers of one signal on one object, called in connection order."""

    def __init__(self, label: str):
        self.label = label
        self._receivers: list[Receiver] = []
        self._lock = threading.Lock()

    def connect(self, receiver: Receiver) -> Receiver:
        """Add receiver (once) and return it, so this also works as a decorator."""
        with self._lock:
            if receiver not in self._receivers:
                self._receivers.append(receiver)
        logger.debug(
            "[Signal] %s -> %s connected",
            self.label,
            _receiver_label(receiver),
            extra={"dev_only": True},
        )
        return receiver

    def disconnect(self, receiver: Receiver | None = None) -> None:
        """Remove receiver; with no argument remove all of them."""
        with self._lock:
            if receiver is None:
                self._receivers = []
            else:
                self._receivers = [r for r in self._receivers if r != receiver]

    @contextmanager
    def connected(self, receiver: Receiver) -> Iterator[Receiver]:
        """Keep receiver connected for the duration of a with block."""
        self.connect(receiver)
        try:
            yield receiver
        finally:
            self.disconnect(receiver)

    def emit(self, *args: Any) -> None:
        """Deliver args to every receiver.

        Receivers run outside the lock. One that raises is logged and the
        rest still run.
        """
        with self._lock:
            receivers = tuple(self._receivers)

        for receiver in receivers:
            try:
                receiver(*args)
            except Exception:
                logger.exception(
                    "[Signal] Receiver %s of %s failed", _receiver_label(receiver), self.label
                )

    def receiver_count(self) -> int:
        with self._lock:
            return len(self._receivers)


class Observable:
    """Base class for objects declaring Signal attributes."""
