"""Module: sequence_counter.py

Author: Michael Economou
Date: 2026-10-04

Serial numbers for a batch of dropped files.

Two policies:
- BATCH: path i of a batch gets start + i. Nothing carries over between batches.
- MANUAL: one counter shared by all batches. Each processed path consumes the
  current value and advances it by one. The counter value (SequenceState) is
  owned by the caller, which persists it between batches.
"""

from dataclasses import dataclass
from enum import Enum

from dropname.config import DEFAULT_SERIAL_START
from dropname.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class SequencePolicy(str, Enum):
    BATCH = "batch"
    MANUAL = "manual"

    def __str__(self) -> str:
        return self.value


@dataclass
class SequenceState:
    """Manual counter state: the next number to hand out."""

    next_value: int = DEFAULT_SERIAL_START


@dataclass(frozen=True)
class SequenceAllocation:
    """Numbers consumed by a batch and the value the next batch starts from."""

    numbers: tuple[int, ...]
    next_start: int


def allocate_sequence(start: int, count: int) -> SequenceAllocation:
    """Allocate count consecutive numbers starting at start.

    allocate_sequence(1, 3) -> numbers (1, 2, 3), next_start 4
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return SequenceAllocation(tuple(range(start, start + count)), start + count)


class SequenceCounter:
    """Hands out serial numbers under one of the two policies."""

    def __init__(
        self,
        policy: SequencePolicy = SequencePolicy.BATCH,
        start: int = DEFAULT_SERIAL_START,
        state: SequenceState | None = None,
    ):
        self.policy = policy
        self.start = start
        if policy is SequencePolicy.MANUAL and state is None:
            state = SequenceState(next_value=start)
        self.state = state

    @classmethod
    def batch(cls, start: int = DEFAULT_SERIAL_START) -> "SequenceCounter":
        return cls(SequencePolicy.BATCH, start=start)

    @classmethod
    def manual(cls, state: SequenceState) -> "SequenceCounter":
        return cls(SequencePolicy.MANUAL, start=state.next_value, state=state)

    @property
    def next_value(self) -> int:
        """First number the next reserve() call would return."""
        if self.policy is SequencePolicy.MANUAL:
            return self.state.next_value
        return self.start

    def peek(self, count: int) -> SequenceAllocation:
        """Numbers for count paths, without consuming them."""
        return allocate_sequence(self.next_value, count)

    def reserve(self, count: int) -> tuple[int, ...]:
        """Consume numbers for count paths.

        Under the manual policy the shared state advances by count; under the
        batch policy every call starts again from start.
        """
        allocation = self.peek(count)
        if self.policy is SequencePolicy.MANUAL:
            self.state.next_value = allocation.next_start
            logger.debug(
                "[SequenceCounter] Manual counter consumed %s, next: %d",
                allocation.numbers,
                allocation.next_start,
                extra={"dev_only": True},
            )
        return allocation.numbers
