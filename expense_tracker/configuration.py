"""Mini README: Centralised configuration for the expense tracker.

Structure:
    * ExpenseTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to locate the backing file, pick the field
    delimiter and choose how chatty logging should be. Values come from
    ``EXPENSE_TRACKER_*`` environment variables or a local ``.env`` file and
    are validated once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_FORBIDDEN_DELIMITERS = set("0123456789-.\r\n")


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the expense tracker."""

    environment: str = Field(
        "development",
        description="Environment label shown in diagnostics.",
    )
    data_file: Path = Field(
        Path("expenses.csv"),
        description="Append-only text file holding one expense per line.",
    )
    delimiter: str = Field(
        ",",
        description="Single character separating date, category and amount.",
    )
    encoding: str = Field(
        "utf-8",
        description="Text encoding of the backing file.",
    )
    currency_label: str = Field(
        "RUB",
        description="Suffix appended to rendered amounts.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logger level name (DEBUG, INFO, WARNING, ...).",
    )

    class Config:
        env_prefix = "EXPENSE_TRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_file", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories and make sure the parent folder exists."""

        path = Path(value).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @validator("delimiter")
    def _check_delimiter(cls, value: str) -> str:
        """Reject delimiters that would collide with dates or amounts."""

        if len(value) != 1 or value in _FORBIDDEN_DELIMITERS:
            raise ValueError(
                "Delimiter must be a single character that is not a digit, '-', '.' or a line break."
            )
        return value

    @validator("log_level")
    def _normalise_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()
