# src/taskpal/core/errors.py

"""
Error kinds and the few exceptions that cross module boundaries.

Command-level problems are reported as values (see results.py); only the
task list bounds check and the durable store raise.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    UNKNOWN_COMMAND = "unknown_command"
    EMPTY_DESCRIPTION = "empty_description"
    EMPTY_SEARCH_TERM = "empty_search_term"
    MISSING_TARGET = "missing_target"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    INVALID_DATE_FORMAT = "invalid_date_format"
    UNEXPECTED_ARGUMENT = "unexpected_argument"
    NO_MATCHING_TASK = "no_matching_task"
    MISSING_EVENT_TIME = "missing_event_time"
    CORRUPT_STORE = "corrupt_store"
    STORAGE_UNAVAILABLE = "storage_unavailable"


class TaskpalError(Exception):
    kind: ErrorKind = ErrorKind.UNKNOWN_COMMAND


class IndexOutOfRange(TaskpalError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        if count == 0:
            msg = f"There is no task {index}. Your list is empty."
        else:
            msg = f"There is no task {index}. Choose a number from 1 to {count}."
        super().__init__(msg)


class StoreError(TaskpalError):
    """Base class for durable store failures."""


class CorruptStore(StoreError):
    kind = ErrorKind.CORRUPT_STORE

    def __init__(self, reason: str, *, line_no: int | None = None) -> None:
        self.reason = reason
        self.line_no = line_no
        where = f" (line {line_no})" if line_no is not None else ""
        super().__init__(f"Corrupt task store{where}: {reason}")


class StorageUnavailable(StoreError):
    kind = ErrorKind.STORAGE_UNAVAILABLE
