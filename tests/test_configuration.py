"""Mini README: Tests for settings loading and logging configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from expense_tracker.configuration import ExpenseTrackerSettings, get_settings
from expense_tracker.logging_utils import configure_root_logger, get_logger


def test_settings_read_prefixed_environment(tmp_path, monkeypatch) -> None:
    """EXPENSE_TRACKER_* variables override the defaults."""

    target = tmp_path / "ledger" / "spend.csv"
    monkeypatch.setenv("EXPENSE_TRACKER_DATA_FILE", str(target))
    monkeypatch.setenv("EXPENSE_TRACKER_DELIMITER", ";")
    monkeypatch.setenv("EXPENSE_TRACKER_LOG_LEVEL", "debug")
    get_settings.cache_clear()

    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.data_file == target.resolve()
    assert target.parent.is_dir()
    assert settings.delimiter == ";"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("delimiter", ["", "::", "-", ".", "7"])
def test_settings_reject_unusable_delimiters(tmp_path, delimiter: str) -> None:
    """Delimiters that clash with dates or amounts are refused."""

    with pytest.raises(ValidationError):
        ExpenseTrackerSettings(data_file=tmp_path / "x.csv", delimiter=delimiter)


def test_configure_root_logger_installs_one_handler() -> None:
    """Reconfiguring changes the level without adding handlers."""

    root = logging.getLogger()
    get_logger(__name__)
    before = len(root.handlers)

    configure_root_logger("INFO")
    configure_root_logger(logging.DEBUG)

    assert len(root.handlers) == before
    assert root.level == logging.DEBUG
    configure_root_logger(logging.WARNING)


def test_configure_root_logger_rejects_unknown_level() -> None:
    """Unknown level names raise a clear ValueError."""

    with pytest.raises(ValueError):
        configure_root_logger("LOUD")
