"""Mini README: Tests for the aggregation helpers.

Structure:
    * worked example - 12.50 + 7.50 of Food.
    * partition checks - categories and months cover every expense once.
    * ordering checks - categories by total, months chronologically.
    * empty input - zero totals and undefined averages.
    * analyse - full breakdown used by the analysis screen.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from expense_tracker.analytics import (
    analyse,
    average,
    by_category,
    by_month,
    category_totals,
    max_expense,
    monthly_report,
    total,
)
from expense_tracker.finance import Expense, YearMonth


def _expense(on: date, category: str, amount: str) -> Expense:
    return Expense(occurred_on=on, category=category, amount=Decimal(amount))


@pytest.fixture()
def mixed_expenses() -> list[Expense]:
    return [
        _expense(date(2024, 2, 3), "Transport", "15.00"),
        _expense(date(2023, 12, 30), "Food", "40.00"),
        _expense(date(2024, 1, 5), "Food", "10.25"),
        _expense(date(2024, 2, 14), "Gifts", "60.00"),
        _expense(date(2024, 1, 20), "Transport", "4.75"),
    ]


def test_food_example() -> None:
    """Two Food expenses of 12.50 and 7.50 total 20.00 and average 10.00."""

    first = _expense(date(2024, 1, 15), "Food", "12.50")
    second = _expense(date(2024, 1, 20), "Food", "7.50")
    expenses = [first, second]

    assert category_totals(expenses) == {"Food": Decimal("20.00")}
    assert max_expense(expenses) is first
    assert average(expenses) == Decimal("10.00")


def test_empty_input() -> None:
    """Empty input gives zero totals and no average or maximum."""

    assert total([]) == Decimal("0")
    assert average([]) is None
    assert max_expense([]) is None
    assert by_category([]) == {}
    assert by_month([]) == {}
    assert analyse([]).is_empty


def test_category_groups_partition_expenses(mixed_expenses) -> None:
    """Every expense lands in exactly one category group."""

    groups = by_category(mixed_expenses)

    grouped = [expense for group in groups.values() for expense in group]
    assert sorted(grouped, key=repr) == sorted(mixed_expenses, key=repr)
    assert sum(category_totals(mixed_expenses).values()) == total(mixed_expenses)


def test_categories_ordered_by_descending_total(mixed_expenses) -> None:
    """The biggest category comes first."""

    assert list(category_totals(mixed_expenses)) == ["Gifts", "Food", "Transport"]


def test_category_ties_keep_first_appearance() -> None:
    """Categories with equal totals keep their input order."""

    expenses = [
        _expense(date(2024, 1, 1), "Books", "5.00"),
        _expense(date(2024, 1, 2), "Art", "5.00"),
    ]

    assert list(by_category(expenses)) == ["Books", "Art"]


def test_max_expense_prefers_first_of_equal_amounts() -> None:
    """The earliest of equally large expenses wins."""

    first = _expense(date(2024, 1, 1), "Books", "9.00")
    second = _expense(date(2024, 1, 2), "Art", "9.00")

    assert max_expense([first, second]) is first


def test_months_are_chronological(mixed_expenses) -> None:
    """Month totals are ordered oldest first and sum to the overall total."""

    months = by_month(mixed_expenses)

    assert list(months) == [YearMonth(2023, 12), YearMonth(2024, 1), YearMonth(2024, 2)]
    assert months[YearMonth(2024, 1)] == Decimal("15.00")
    assert sum(months.values()) == total(mixed_expenses)


def test_monthly_report_partitions_one_month(mixed_expenses) -> None:
    """Only the selected month is totalled, split by category."""

    report = monthly_report(mixed_expenses, YearMonth(2024, 2))

    assert [expense.category for expense in report.expenses] == ["Transport", "Gifts"]
    assert report.total == Decimal("75.00")
    assert report.categories == {"Gifts": Decimal("60.00"), "Transport": Decimal("15.00")}
    assert sum(report.categories.values()) == report.total


def test_monthly_report_for_month_without_expenses() -> None:
    """A month with no expenses yields an empty report, not an error."""

    january = [_expense(date(2024, 1, 15), "Food", "12.50")]

    report = monthly_report(january, YearMonth(2024, 2))

    assert report.is_empty
    assert report.total == Decimal("0")
    assert report.categories == {}


def test_analyse_summarises_everything(mixed_expenses) -> None:
    """The analysis combines overall, category and monthly figures."""

    analysis = analyse(mixed_expenses)

    assert analysis.count == 5
    assert analysis.total == Decimal("130.00")
    assert analysis.average == Decimal("26.00")
    assert analysis.largest.category == "Gifts"
    gifts = analysis.categories[0]
    assert gifts.category == "Gifts"
    assert gifts.share_percent.quantize(Decimal("0.1")) == Decimal("46.2")
    food = analysis.categories[1]
    assert (food.count, food.average) == (2, Decimal("25.125"))
    assert analysis.monthly_max == Decimal("75.00")
    assert analysis.monthly_min == Decimal("15.00")
    assert analysis.monthly_average == Decimal("130.00") / 3
