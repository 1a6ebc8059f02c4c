"""Mini README: Expense analytics package.

Pure aggregation helpers (totals, category and month groupings, monthly
reports and the full analysis) live in ``aggregator``.
"""

from .aggregator import (
    CategorySummary,
    ExpenseAnalysis,
    MonthlyReport,
    analyse,
    average,
    by_category,
    by_month,
    category_totals,
    max_expense,
    monthly_report,
    total,
)

__all__ = [
    "CategorySummary",
    "ExpenseAnalysis",
    "MonthlyReport",
    "analyse",
    "average",
    "by_category",
    "by_month",
    "category_totals",
    "max_expense",
    "monthly_report",
    "total",
]
