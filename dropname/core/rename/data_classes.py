"""dropname.core.rename.data_classes.

Data classes holding plans and batch results of the rename engine.

Author: Michael Economou
Date: 2026-10-04
"""

import os
from collections import Counter
from dataclasses import dataclass, field

from dropname.models.file_name_components import FileNameComponents
from dropname.models.rename_result import RenameResult, RenameStatus


@dataclass(frozen=True)
class RenamePlan:
    """Computed rename for one path, before validation.

    Attributes:
        source_path: The dropped path.
        directory: Directory part of source_path, reused for the destination.
        original: Components of the current filename.
        candidate: Components of the new filename.

    """

    source_path: str
    directory: str
    original: FileNameComponents
    candidate: FileNameComponents

    @property
    def new_name(self) -> str:
        return self.candidate.filename

    @property
    def destination_path(self) -> str:
        return os.path.join(self.directory, self.new_name)

    @property
    def is_unchanged(self) -> bool:
        return self.original.filename == self.new_name


@dataclass
class BatchReport:
    """Aggregate outcome of one dropped batch.

    Attributes:
        results: One RenameResult per input path, in input order.
        dry_run: True when nothing was renamed on disk.
        next_sequence: Counter value the next batch starts from.
        success_count: Number of successful results (computed).
        error_count: Number of failed results (computed).
        status_counts: Results per status (computed).

    """

    results: list[RenameResult] = field(default_factory=list)
    dry_run: bool = False
    next_sequence: int | None = None
    success_count: int = 0
    error_count: int = 0
    status_counts: dict[RenameStatus, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Compute counts from results."""
        self.success_count = sum(1 for result in self.results if result.succeeded)
        self.error_count = len(self.results) - self.success_count
        self.status_counts = dict(Counter(result.status for result in self.results))

    @property
    def all_succeeded(self) -> bool:
        return self.error_count == 0

    def most_recent_first(self) -> list[RenameResult]:
        """Results newest-first, the order a result log displays them in."""
        return list(reversed(self.results))

    def to_payload(self) -> list[dict]:
        return [result.to_payload() for result in self.results]
