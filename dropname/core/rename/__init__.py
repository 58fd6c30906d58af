"""Rename operations module.

This module provides the rename engine:
- RenameEngine: single-path pipeline (split, transform, validate, apply)
- BatchDispatcher: ordered batch runner with per-file results
- SequenceCounter: serial numbers under the batch or manual policy

Author: Michael Economou
Date: 2026-10-04
"""

from dropname.core.rename.batch_dispatcher import BatchDispatcher, BatchPhase
from dropname.core.rename.data_classes import BatchReport, RenamePlan
from dropname.core.rename.execution_manager import FilesystemApplier
from dropname.core.rename.rename_engine import RenameEngine
from dropname.core.rename.sequence_counter import (
    SequenceAllocation,
    SequenceCounter,
    SequencePolicy,
    SequenceState,
    allocate_sequence,
)
from dropname.core.rename.validation_manager import ClaimedDestinations, RenameValidator

__all__ = [
    "BatchDispatcher",
    "BatchPhase",
    "BatchReport",
    "ClaimedDestinations",
    "FilesystemApplier",
    "RenameEngine",
    "RenamePlan",
    "RenameValidator",
    "SequenceAllocation",
    "SequenceCounter",
    "SequencePolicy",
    "SequenceState",
    "allocate_sequence",
]
