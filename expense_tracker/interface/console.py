"""Mini README: Interactive text menu for the expense tracker.

Structure:
    * render_expenses / render_analysis / render_monthly_report - pure
      renderers returning lines of text for a screen.
    * ExpenseConsole - numbered menu loop wiring user input to the store and
      the aggregation helpers.

Input and output are injected (``prompt`` and ``echo``) so the loop can be
driven by scripted answers in tests. Every failure is reported and the menu
is shown again; only choosing "Exit" or closing standard input ends the loop.
"""

from __future__ import annotations

from datetime import date
from functools import partial
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Optional

import typer

from ..analytics import ExpenseAnalysis, MonthlyReport, analyse, monthly_report
from ..errors import Outcome
from ..finance import Expense, build_expense, parse_year_month, quantize_amount
from ..logging_utils import get_logger
from ..storage import ExpenseStore, ScanResult

LOGGER = get_logger(__name__)

RULE = "-" * 24

MENU_ENTRIES = (
    ("1", "Add expense"),
    ("2", "View all expenses"),
    ("3", "Analyse expenses"),
    ("4", "Monthly report"),
    ("5", "Exit"),
)
EXIT_CHOICE = "5"


def format_amount(amount: Decimal, currency_label: str = "") -> str:
    """Render an amount with two decimals and the optional currency suffix."""

    rendered = f"{quantize_amount(amount):.2f}"
    return f"{rendered} {currency_label}" if currency_label else rendered


def render_expenses(expenses: Iterable[Expense], currency_label: str = "") -> List[str]:
    """List every expense as ``date | category | amount``."""

    expenses = list(expenses)
    if not expenses:
        return ["No expenses found."]
    lines = ["All expenses:", RULE]
    for expense in expenses:
        lines.append(
            f"{expense.occurred_on.isoformat()} | {expense.category:<15} | "
            f"{format_amount(expense.amount, currency_label):>14}"
        )
    return lines


def render_analysis(analysis: ExpenseAnalysis, currency_label: str = "") -> List[str]:
    """Render the full analysis screen."""

    if analysis.is_empty:
        return ["No expenses found."]

    money = partial(format_amount, currency_label=currency_label)
    lines = ["Expense analysis", "=" * 24, "", "1. Overview:", RULE]
    lines.append(f"Total of all expenses: {money(analysis.total)}")
    lines.append(f"Average expense: {money(analysis.average)}")
    lines.append(f"Number of expenses: {analysis.count}")

    lines += ["", "2. Largest expense:", RULE]
    largest = analysis.largest
    lines.append(
        f"Largest expense: {money(largest.amount)} "
        f"({largest.category}, {largest.occurred_on.isoformat()})"
    )

    lines += ["", "3. Expenses by category:", RULE]
    for summary in analysis.categories:
        lines.append(f"Category: {summary.category}")
        lines.append(f"  Total: {money(summary.total)} ({summary.share_percent:5.1f}%)")
        lines.append(f"  Average expense: {money(summary.average)}")
        lines.append(f"  Number of expenses: {summary.count}")

    lines += ["", "4. Monthly statistics:", RULE]
    lines.append(f"Average per month: {money(analysis.monthly_average)}")
    lines.append(f"Highest month: {money(analysis.monthly_max)}")
    lines.append(f"Lowest month: {money(analysis.monthly_min)}")

    lines += ["", "5. Monthly trend:", RULE]
    for year_month, amount in analysis.monthly_totals.items():
        lines.append(f"{year_month}: {money(amount)}")
    return lines


def render_monthly_report(report: MonthlyReport, currency_label: str = "") -> List[str]:
    """Render the per-category totals of one month."""

    if report.is_empty:
        return [f"No expenses found for {report.year_month}."]
    lines = [f"Report for {report.year_month}", RULE]
    lines.append(f"Total expenses: {format_amount(report.total, currency_label)}")
    lines.append("")
    for category, amount in report.categories.items():
        lines.append(f"{category:<15}: {format_amount(amount, currency_label):>14}")
    return lines


class ExpenseConsole:
    """Drive the numbered menu against one expense store."""

    def __init__(
        self,
        store: ExpenseStore,
        *,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = typer.echo,
        today: Callable[[], date] = date.today,
        currency_label: str = "",
    ) -> None:
        self.store = store
        self._prompt = prompt
        self._echo = echo
        self._today = today
        self.currency_label = currency_label
        self._actions: Dict[str, Callable[[], object]] = {
            "1": self.add_expense,
            "2": self.view_expenses,
            "3": self.analyse_expenses,
            "4": self.show_monthly_report,
        }

    def run(self) -> int:
        """Loop until the user exits; returns the process exit status."""

        while True:
            self._show_menu()
            choice = self._ask("Choose an action: ")
            if choice is None or choice.strip() == EXIT_CHOICE:
                self._echo("Goodbye.")
                return 0
            action = self._actions.get(choice.strip())
            if action is None:
                self._echo("Invalid choice. Please try again.")
                continue
            try:
                action()
            except Exception as exc:
                LOGGER.exception("Unexpected failure while handling menu choice %s", choice)
                self._echo(f"An error occurred: {exc}")

    def add_expense(self) -> Optional[Outcome[Expense]]:
        """Prompt for the three fields and append the resulting record."""

        date_text = self._ask("Expense date (YYYY-MM-DD): ")
        if date_text is None:
            return None
        category_text = self._ask("Category: ")
        if category_text is None:
            return None
        amount_text = self._ask("Amount: ")
        if amount_text is None:
            return None

        outcome = build_expense(
            date_text,
            category_text,
            amount_text,
            today=self._today(),
            delimiter=self.store.delimiter,
        )
        if outcome.ok:
            outcome = self.store.append(outcome.value)
        if outcome.ok:
            self._echo("Expense added.")
        else:
            self._echo(f"Error: {outcome.error.message}")
        return outcome

    def view_expenses(self) -> None:
        scan = self._load()
        if scan.ok:
            self._emit(render_expenses(scan.expenses, self.currency_label))

    def analyse_expenses(self) -> None:
        scan = self._load()
        if scan.ok:
            self._emit(render_analysis(analyse(scan.expenses), self.currency_label))

    def show_monthly_report(self) -> None:
        month_text = self._ask("Month (YYYY-MM): ")
        if month_text is None:
            return
        year_month = parse_year_month(month_text)
        if not year_month.ok:
            self._echo(f"Error: {year_month.error.message}")
            return
        scan = self._load()
        if scan.ok:
            report = monthly_report(scan.expenses, year_month.value)
            self._emit(render_monthly_report(report, self.currency_label))

    def _load(self) -> ScanResult:
        """Read the store, reporting storage errors and skipped lines."""

        scan = self.store.read_all()
        if not scan.ok:
            self._echo(f"Error: {scan.error.message}")
        for rejected in scan.rejected:
            self._echo(f"Skipped line {rejected.line_number}: {rejected.reason}")
        return scan

    def _show_menu(self) -> None:
        self._emit(["", "Personal expense tracker", RULE])
        self._emit([f"{key}. {label}" for key, label in MENU_ENTRIES])

    def _ask(self, message: str) -> Optional[str]:
        """Read one answer, returning ``None`` once input is exhausted."""

        try:
            return self._prompt(message)
        except EOFError:
            return None

    def _emit(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._echo(line)
