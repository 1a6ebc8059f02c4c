"""Mini README: Core package initializer for the expense tracker.

The package records dated, categorised expenses in an append-only text
file and reports totals, category breakdowns and monthly trends. Only the
logging helper is re-exported here so importing the package stays cheap.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
