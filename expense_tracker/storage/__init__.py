"""Mini README: Persistence layer for expense records.

Exposes ``ExpenseStore`` (the handle passed to every operation that touches
the backing file) together with the single-line codec and scan diagnostics.
"""

from .record_store import ExpenseStore, RejectedLine, ScanResult, decode_line, encode_expense

__all__ = ["ExpenseStore", "RejectedLine", "ScanResult", "decode_line", "encode_expense"]
