"""Mini README: Append-only flat-file persistence for expenses.

Structure:
    * encode_expense - render one expense as a ``date,category,amount`` line.
    * decode_line - parse one stored line back into an expense.
    * RejectedLine - diagnostic describing a line skipped during a scan.
    * ScanResult - records recovered by a full read plus any diagnostics.
    * ExpenseStore - handle around one backing file offering append/read_all.

The backing file is plain UTF-8 text, one record per line, no header and no
escaping. Each operation opens and closes the file itself, so no handle
outlives a call. Damaged lines never abort a scan: they are kept as
``RejectedLine`` entries for the caller to report and the remaining lines
are still read.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional

from ..errors import ErrorKind, ExpenseError, Outcome
from ..finance import (
    Expense,
    parse_cents,
    parse_iso_date,
    quantize_amount,
    to_cents,
    validate_category,
)
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

FIELD_COUNT = 3


def encode_expense(expense: Expense, delimiter: str = ",") -> str:
    """Serialise an expense without the trailing newline."""

    amount = quantize_amount(expense.amount)
    return delimiter.join((expense.occurred_on.isoformat(), expense.category, f"{amount:.2f}"))


def decode_line(line: str, delimiter: str = ",") -> Outcome[Expense]:
    """Parse a stored line, reporting malformed content as a failure."""

    parts = line.split(delimiter)
    if len(parts) != FIELD_COUNT:
        return Outcome.failure(
            ErrorKind.MALFORMED_RECORD,
            f"expected {FIELD_COUNT} fields, found {len(parts)}",
        )
    date_text, category, amount_text = parts
    occurred_on = parse_iso_date(date_text)
    if occurred_on is None:
        return Outcome.failure(ErrorKind.MALFORMED_RECORD, f"unparseable date '{date_text}'")
    amount = parse_cents(amount_text)
    if amount is None:
        return Outcome.failure(ErrorKind.MALFORMED_RECORD, f"unparseable amount '{amount_text}'")
    return Outcome.success(Expense(occurred_on=occurred_on, category=category, amount=amount))


@dataclass(frozen=True, slots=True)
class RejectedLine:
    """A stored line that could not be turned into an expense."""

    line_number: int
    content: str
    reason: str


@dataclass(slots=True)
class ScanResult:
    """Outcome of reading the whole backing file."""

    expenses: List[Expense] = field(default_factory=list)
    rejected: List[RejectedLine] = field(default_factory=list)
    error: Optional[ExpenseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ExpenseStore:
    """Persist expenses to, and recover them from, one text file."""

    def __init__(self, path: Path | str, *, delimiter: str = ",", encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.delimiter = delimiter
        self.encoding = encoding
        LOGGER.debug("Expense store bound to %s (delimiter=%r)", self.path, delimiter)

    def append(self, expense: Expense) -> Outcome[Expense]:
        """Append one record, creating the file if it does not exist yet.

        The stored amount is rounded to cents and must stay positive; the
        returned expense is exactly what a later ``read_all`` yields.
        """

        category = validate_category(expense.category, delimiter=self.delimiter)
        if not category.ok or category.value != expense.category:
            return Outcome.failure(
                ErrorKind.INVALID_CATEGORY,
                f"Category '{expense.category}' cannot be stored safely.",
            )
        amount = to_cents(expense.amount)
        if amount is None:
            return Outcome.failure(
                ErrorKind.INVALID_AMOUNT, f"Amount '{expense.amount}' cannot be stored."
            )
        if amount <= 0:
            return Outcome.failure(
                ErrorKind.NON_POSITIVE_AMOUNT, "The amount must be a positive number."
            )
        stored = replace(expense, amount=amount)
        line = encode_expense(stored, self.delimiter) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding=self.encoding, newline="") as handle:
                handle.write(line)
        except (OSError, UnicodeEncodeError) as error:
            LOGGER.error("Failed to append to %s: %s", self.path, error)
            return Outcome.failure(ErrorKind.STORAGE, f"Could not write to {self.path}: {error}")
        LOGGER.info("Appended expense %s to %s", line.rstrip("\n"), self.path)
        return Outcome.success(stored)

    def read_all(self) -> ScanResult:
        """Read every parseable record in file order."""

        result = ScanResult()
        try:
            with self.path.open("rb") as handle:
                for line_number, raw in enumerate(handle, start=1):
                    self._scan_line(line_number, raw, result)
        except FileNotFoundError:
            LOGGER.debug("Backing file %s does not exist yet", self.path)
            return ScanResult()
        except OSError as error:
            LOGGER.error("Failed to read %s: %s", self.path, error)
            return ScanResult(
                error=ExpenseError(ErrorKind.STORAGE, f"Could not read {self.path}: {error}")
            )
        LOGGER.info(
            "Read %s expenses from %s (%s lines skipped)",
            len(result.expenses),
            self.path,
            len(result.rejected),
        )
        return result

    def _scan_line(self, line_number: int, raw: bytes, result: ScanResult) -> None:
        """Decode one raw line into ``result``, recording it if rejected."""

        try:
            line = raw.decode(self.encoding)
        except UnicodeDecodeError:
            self._reject(result, line_number, raw.decode(self.encoding, "replace"), "undecodable bytes")
            return
        line = line.rstrip("\r\n")
        if not line.strip():
            return
        outcome = decode_line(line, self.delimiter)
        if outcome.ok:
            result.expenses.append(outcome.value)
        else:
            self._reject(result, line_number, line, outcome.error.message)

    def _reject(self, result: ScanResult, line_number: int, content: str, reason: str) -> None:
        LOGGER.debug("Skipping line %s of %s (%s): %r", line_number, self.path, reason, content)
        result.rejected.append(RejectedLine(line_number=line_number, content=content, reason=reason))
