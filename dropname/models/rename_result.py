"""Module: rename_result.py

Author: Michael Economou
Date: 2026-10-02

Outcome of renaming a single dropped path.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RenameStatus(str, Enum):
    """Closed set of per-file outcomes."""

    SUCCESS = "Success"
    ALREADY_EXISTS = "AlreadyExists"
    EMPTY_NAME = "EmptyName"
    INVALID_PATTERN = "InvalidPattern"
    IO_ERROR = "IoError"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RenameResult:
    """Result record produced exactly once per input path.

    Attributes:
        original_path: The path as it was dropped.
        status: Outcome of the rename.
        new_name: Final filename (no directory), only set on success.
        detail: OS message for IoError, pattern error text for InvalidPattern.

    """

    original_path: str
    status: RenameStatus
    new_name: str | None = None
    detail: str = ""

    @classmethod
    def success(cls, original_path: str, new_name: str) -> "RenameResult":
        return cls(original_path, RenameStatus.SUCCESS, new_name=new_name)

    @classmethod
    def failure(cls, original_path: str, status: RenameStatus, detail: str = "") -> "RenameResult":
        return cls(original_path, status, detail=detail)

    @property
    def succeeded(self) -> bool:
        return self.status is RenameStatus.SUCCESS

    @property
    def status_text(self) -> str:
        """Status as shown to the user: "IoError: <detail>" carries the OS message."""
        if self.status is RenameStatus.IO_ERROR:
            return f"{self.status.value}: {self.detail}"
        return self.status.value

    def to_payload(self) -> dict[str, Any]:
        """Render the result in the caller-facing {path, status, new_name?} shape."""
        payload: dict[str, Any] = {"path": self.original_path, "status": self.status_text}
        if self.new_name is not None:
            payload["new_name"] = self.new_name
        return payload
