"""Mini README: Expense domain model for the tracker.

The ``expense`` module defines the immutable ``Expense`` record, the
``YearMonth`` grouping key and the validators that turn raw text typed by a
user into records. Storage and analytics build on these types.
"""

from .expense import (
    Expense,
    YearMonth,
    build_expense,
    parse_amount,
    parse_expense_date,
    parse_iso_date,
    parse_cents,
    parse_year_month,
    quantize_amount,
    to_cents,
    validate_category,
)

__all__ = [
    "Expense",
    "YearMonth",
    "build_expense",
    "parse_amount",
    "parse_expense_date",
    "parse_iso_date",
    "parse_cents",
    "parse_year_month",
    "quantize_amount",
    "to_cents",
    "validate_category",
]
