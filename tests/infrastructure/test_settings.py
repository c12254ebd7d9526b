"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    monkeypatch.delenv("LEDGER_DEFAULT_CURRENCY", raising=False)
    monkeypatch.delenv("LEDGER_EXCLUDE_UNPAID", raising=False)


def test_from_env_uses_defaults() -> None:
    """Without variables the defaults apply."""
    settings = LedgerSettings.from_env()

    assert settings.default_currency == "USD"
    assert settings.exclude_unpaid is True


def test_from_env_normalizes_currency(monkeypatch) -> None:
    monkeypatch.setenv("LEDGER_DEFAULT_CURRENCY", " eur ")

    settings = LedgerSettings.from_env()

    assert settings.default_currency == "EUR"


def test_from_env_falls_back_on_invalid_currency(monkeypatch) -> None:
    monkeypatch.setenv("LEDGER_DEFAULT_CURRENCY", "euros")

    settings = LedgerSettings.from_env()

    assert settings.default_currency == "USD"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("false", False), ("0", False), ("YES", True), ("maybe", True)],
)
def test_from_env_parses_exclude_unpaid(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("LEDGER_EXCLUDE_UNPAID", raw)

    settings = LedgerSettings.from_env()

    assert settings.exclude_unpaid is expected
