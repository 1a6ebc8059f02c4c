"""Mini README: Interactive interfaces for the expense tracker.

Exports the menu-driven ``ExpenseConsole`` and the text renderers shared by
the one-shot CLI commands in ``main_expense_tracker``.
"""

from .console import (
    ExpenseConsole,
    format_amount,
    render_analysis,
    render_expenses,
    render_monthly_report,
)

__all__ = [
    "ExpenseConsole",
    "format_amount",
    "render_analysis",
    "render_expenses",
    "render_monthly_report",
]
