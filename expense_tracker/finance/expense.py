"""Mini README: Expense records and the validators that admit them.

Structure:
    * Expense - immutable dated, categorised amount.
    * YearMonth - calendar month used to group and filter expenses.
    * parse_iso_date - strict ``YYYY-MM-DD`` reader shared with storage.
    * to_cents / parse_cents - amounts rounded to cents, shared with storage.
    * parse_expense_date / parse_amount / validate_category - field validators.
    * build_expense - validates raw user input into an Expense.
    * parse_year_month - reads ``YYYY-MM`` selections for monthly reports.

Every validator returns an ``Outcome`` instead of raising, so the console
can report the problem and carry on. Amounts are ``Decimal`` values fixed to
two fractional digits, which is also how they are persisted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from ..errors import ErrorKind, Outcome

CENT = Decimal("0.01")
DATE_FORMAT_HINT = "YYYY-MM-DD"
MONTH_FORMAT_HINT = "YYYY-MM"

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_MONTH_PATTERN = re.compile(r"(\d{4})-(\d{2})", re.ASCII)


@dataclass(frozen=True, slots=True)
class Expense:
    """Represent one persisted expense."""

    occurred_on: date
    category: str
    amount: Decimal

    @property
    def year_month(self) -> "YearMonth":
        return YearMonth.from_date(self.occurred_on)


@dataclass(frozen=True, order=True, slots=True)
class YearMonth:
    """Calendar month ordered chronologically."""

    year: int
    month: int

    @classmethod
    def from_date(cls, value: date) -> "YearMonth":
        return cls(year=value.year, month=value.month)

    def contains(self, value: date) -> bool:
        return value.year == self.year and value.month == self.month

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def quantize_amount(value: Decimal) -> Decimal:
    """Round to cents the same way the backing file renders amounts."""

    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(value: Decimal) -> Optional[Decimal]:
    """Round a finite amount to cents, or ``None`` if it cannot be represented."""

    if not value.is_finite():
        return None
    try:
        return quantize_amount(value)
    except InvalidOperation:
        return None


def parse_cents(text: str) -> Optional[Decimal]:
    """Read plain decimal text (no digit separators) as an amount in cents."""

    candidate = text.strip()
    if "_" in candidate:
        return None
    try:
        return to_cents(Decimal(candidate))
    except InvalidOperation:
        return None


def parse_iso_date(text: str) -> Optional[date]:
    """Return the date for strict ``YYYY-MM-DD`` text, otherwise ``None``."""

    if not _DATE_PATTERN.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def parse_expense_date(text: str, *, today: Optional[date] = None) -> Outcome[date]:
    """Parse a ``YYYY-MM-DD`` date that must not lie in the future."""

    candidate = text.strip()
    parsed = parse_iso_date(candidate)
    if parsed is None:
        return Outcome.failure(
            ErrorKind.INVALID_DATE,
            f"Invalid date '{candidate}'. Use the {DATE_FORMAT_HINT} format.",
        )
    if parsed > (today or date.today()):
        return Outcome.failure(ErrorKind.FUTURE_DATE, "The date cannot be in the future.")
    return Outcome.success(parsed)


def parse_amount(text: str) -> Outcome[Decimal]:
    """Parse a strictly positive amount rounded to cents."""

    candidate = text.strip()
    amount = parse_cents(candidate)
    if amount is None:
        return Outcome.failure(
            ErrorKind.INVALID_AMOUNT,
            f"Invalid amount '{candidate}'. Enter a number such as 12.50.",
        )
    if amount <= 0:
        return Outcome.failure(
            ErrorKind.NON_POSITIVE_AMOUNT, "The amount must be a positive number."
        )
    return Outcome.success(amount)


def validate_category(text: str, *, delimiter: str = ",") -> Outcome[str]:
    """Accept a non-empty category free of the delimiter and line breaks."""

    category = text.strip()
    if not category:
        return Outcome.failure(ErrorKind.INVALID_CATEGORY, "The category cannot be empty.")
    if delimiter in category or "\n" in category or "\r" in category:
        return Outcome.failure(
            ErrorKind.INVALID_CATEGORY,
            f"The category cannot contain '{delimiter}' or line breaks.",
        )
    return Outcome.success(category)


def build_expense(
    date_text: str,
    category_text: str,
    amount_text: str,
    *,
    today: Optional[date] = None,
    delimiter: str = ",",
) -> Outcome[Expense]:
    """Validate raw field input, returning the first failure encountered."""

    occurred_on = parse_expense_date(date_text, today=today)
    if not occurred_on.ok:
        return Outcome(error=occurred_on.error)
    category = validate_category(category_text, delimiter=delimiter)
    if not category.ok:
        return Outcome(error=category.error)
    amount = parse_amount(amount_text)
    if not amount.ok:
        return Outcome(error=amount.error)
    return Outcome.success(
        Expense(occurred_on=occurred_on.value, category=category.value, amount=amount.value)
    )


def parse_year_month(text: str) -> Outcome[YearMonth]:
    """Parse a ``YYYY-MM`` month selection."""

    candidate = text.strip()
    match = _MONTH_PATTERN.fullmatch(candidate)
    if not match or not 1 <= int(match.group(2)) <= 12:
        return Outcome.failure(
            ErrorKind.INVALID_MONTH,
            f"Invalid month '{candidate}'. Use the {MONTH_FORMAT_HINT} format.",
        )
    return Outcome.success(YearMonth(year=int(match.group(1)), month=int(match.group(2))))
