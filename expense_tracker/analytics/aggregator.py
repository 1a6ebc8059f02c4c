"""Mini README: Aggregate statistics over in-memory expense sequences.

Structure:
    * total / average / max_expense - whole-sequence figures.
    * by_category / category_totals - partition by category, largest first.
    * by_month - chronological month totals.
    * monthly_report - totals for a single month (MonthlyReport).
    * analyse - the full breakdown rendered by the console (ExpenseAnalysis).

All helpers are pure: they never touch storage, never mutate their input
and return ``None`` rather than raising where a figure is undefined for an
empty sequence. Ordering is part of the contract so renderers can iterate
the returned dictionaries directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from ..finance import Expense, YearMonth
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def total(expenses: Iterable[Expense]) -> Decimal:
    """Sum of all amounts; zero for an empty sequence."""

    return sum((expense.amount for expense in expenses), ZERO)


def total_of(amounts: Iterable[Decimal]) -> Decimal:
    """Sum plain amounts, e.g. month totals."""

    return sum(amounts, ZERO)


def average(expenses: Sequence[Expense]) -> Optional[Decimal]:
    """Mean amount, or ``None`` when there is nothing to average."""

    if not expenses:
        return None
    return total(expenses) / len(expenses)


def max_expense(expenses: Iterable[Expense]) -> Optional[Expense]:
    """Largest expense, keeping the earliest one when amounts tie."""

    largest: Optional[Expense] = None
    for expense in expenses:
        if largest is None or expense.amount > largest.amount:
            largest = expense
    return largest


def by_category(expenses: Iterable[Expense]) -> Dict[str, List[Expense]]:
    """Group expenses by category ordered by descending category total.

    Categories with equal totals keep the order in which they first appear.
    """

    groups: Dict[str, List[Expense]] = {}
    for expense in expenses:
        groups.setdefault(expense.category, []).append(expense)
    ordered = sorted(groups.items(), key=lambda item: total(item[1]), reverse=True)
    return dict(ordered)


def category_totals(expenses: Iterable[Expense]) -> Dict[str, Decimal]:
    """Summed amount per category, largest first."""

    return {category: total(group) for category, group in by_category(expenses).items()}


def by_month(expenses: Iterable[Expense]) -> Dict[YearMonth, Decimal]:
    """Summed amount per calendar month in chronological order."""

    totals: Dict[YearMonth, Decimal] = {}
    for expense in expenses:
        key = expense.year_month
        totals[key] = totals.get(key, ZERO) + expense.amount
    return dict(sorted(totals.items()))


@dataclass(slots=True)
class MonthlyReport:
    """Totals for one calendar month."""

    year_month: YearMonth
    expenses: List[Expense] = field(default_factory=list)
    total: Decimal = ZERO
    categories: Dict[str, Decimal] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.expenses


def monthly_report(expenses: Iterable[Expense], year_month: YearMonth) -> MonthlyReport:
    """Restrict to ``year_month`` and total the remaining expenses."""

    selected = [expense for expense in expenses if year_month.contains(expense.occurred_on)]
    LOGGER.debug("Monthly report for %s covers %s expenses", year_month, len(selected))
    return MonthlyReport(
        year_month=year_month,
        expenses=selected,
        total=total(selected),
        categories=category_totals(selected),
    )


@dataclass(frozen=True, slots=True)
class CategorySummary:
    """Breakdown of a single category within an analysis."""

    category: str
    total: Decimal
    share_percent: Decimal
    average: Decimal
    count: int


@dataclass(slots=True)
class ExpenseAnalysis:
    """Full statistical breakdown of an expense sequence."""

    count: int = 0
    total: Decimal = ZERO
    average: Optional[Decimal] = None
    largest: Optional[Expense] = None
    categories: List[CategorySummary] = field(default_factory=list)
    monthly_totals: Dict[YearMonth, Decimal] = field(default_factory=dict)
    monthly_average: Optional[Decimal] = None
    monthly_max: Optional[Decimal] = None
    monthly_min: Optional[Decimal] = None

    @property
    def is_empty(self) -> bool:
        return self.count == 0


def analyse(expenses: Sequence[Expense]) -> ExpenseAnalysis:
    """Compute every figure shown by the analysis screen."""

    overall = total(expenses)
    summaries: List[CategorySummary] = []
    for category, group in by_category(expenses).items():
        group_total = total(group)
        summaries.append(
            CategorySummary(
                category=category,
                total=group_total,
                share_percent=group_total / overall * HUNDRED if overall else ZERO,
                average=group_total / len(group),
                count=len(group),
            )
        )

    months = by_month(expenses)
    month_values = list(months.values())
    analysis = ExpenseAnalysis(
        count=len(expenses),
        total=overall,
        average=average(expenses),
        largest=max_expense(expenses),
        categories=summaries,
        monthly_totals=months,
        monthly_average=total_of(month_values) / len(month_values) if month_values else None,
        monthly_max=max(month_values) if month_values else None,
        monthly_min=min(month_values) if month_values else None,
    )
    LOGGER.debug(
        "Analysed %s expenses across %s categories and %s months",
        analysis.count,
        len(summaries),
        len(months),
    )
    return analysis
