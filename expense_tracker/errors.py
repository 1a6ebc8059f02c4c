"""Mini README: Error taxonomy and result container for the expense tracker.

Structure:
    * ErrorKind - enum naming every reportable failure category.
    * ExpenseError - a failure kind paired with a human readable message.
    * Outcome - either a value or an ExpenseError, never both.

Validation, per-line parsing and file access return an ``Outcome`` so
callers decide how to report problems. Exceptions raised by the standard
library are converted at the call site that triggers them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Enumerate the failure categories surfaced to users."""

    INVALID_DATE = "invalid_date"
    FUTURE_DATE = "future_date"
    INVALID_AMOUNT = "invalid_amount"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    INVALID_CATEGORY = "invalid_category"
    INVALID_MONTH = "invalid_month"
    STORAGE = "storage"
    MALFORMED_RECORD = "malformed_record"

    @property
    def is_validation(self) -> bool:
        """True for errors caused by user input rather than storage."""

        return self not in {ErrorKind.STORAGE, ErrorKind.MALFORMED_RECORD}


@dataclass(frozen=True, slots=True)
class ExpenseError:
    """Describe why an operation could not complete."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Result of an operation that may fail without raising."""

    value: Optional[T] = None
    error: Optional[ExpenseError] = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        """Wrap a successful value."""

        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Outcome[T]":
        """Build a failed outcome carrying an ExpenseError."""

        return cls(error=ExpenseError(kind=kind, message=message))

    @property
    def ok(self) -> bool:
        """True when no error was recorded."""

        return self.error is None
