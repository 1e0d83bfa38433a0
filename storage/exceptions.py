"""Error kinds raised by the record file store."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class RecordStoreError(Exception):
    """Base exception for record persistence and retrieval."""


class RecordIOError(RecordStoreError):
    """The record file could not be opened, written, read or closed."""

    def __init__(self, action: str, path: Path, reason: str) -> None:
        super().__init__(f"Failed to {action}: {reason}")
        self.action = action
        self.path = path
        self.reason = reason


class InvalidIndexError(RecordStoreError):
    """The requested index does not address a complete record in the file."""

    def __init__(self, index: int, record_count: Optional[int] = None) -> None:
        detail = f"index {index}"
        if record_count is not None:
            detail += f", file holds {record_count} record(s)"
        super().__init__(f"Invalid index or incomplete record: {detail}")
        self.index = index
        self.record_count = record_count
