"""Tests for serial number allocation.

Author: Michael Economou
Date: 2026-10-06
"""

import pytest

from dropname.core.rename.sequence_counter import (
    SequenceCounter,
    SequencePolicy,
    SequenceState,
    allocate_sequence,
)


def test_allocate_sequence():
    allocation = allocate_sequence(1, 3)
    assert allocation.numbers == (1, 2, 3)
    assert allocation.next_start == 4


def test_allocate_empty_batch():
    allocation = allocate_sequence(5, 0)
    assert allocation.numbers == ()
    assert allocation.next_start == 5


def test_allocate_negative_count_rejected():
    with pytest.raises(ValueError):
        allocate_sequence(1, -1)


class TestBatchPolicy:
    def test_numbers_restart_every_batch(self):
        counter = SequenceCounter.batch(start=10)
        assert counter.reserve(3) == (10, 11, 12)
        assert counter.reserve(2) == (10, 11)
        assert counter.next_value == 10

    def test_default_policy_is_batch(self):
        counter = SequenceCounter()
        assert counter.policy is SequencePolicy.BATCH
        assert counter.state is None


class TestManualPolicy:
    def test_counter_carries_over_between_batches(self):
        state = SequenceState(next_value=1)

        first = SequenceCounter.manual(state)
        assert first.reserve(3) == (1, 2, 3)
        assert state.next_value == 4

        second = SequenceCounter.manual(state)
        assert second.reserve(2) == (4, 5)
        assert state.next_value == 6

    def test_peek_does_not_consume(self):
        state = SequenceState(next_value=7)
        counter = SequenceCounter.manual(state)
        assert counter.peek(2).numbers == (7, 8)
        assert state.next_value == 7

    def test_manual_without_state_starts_from_start(self):
        counter = SequenceCounter(SequencePolicy.MANUAL, start=20)
        assert counter.reserve(1) == (20,)
        assert counter.next_value == 21
