import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("DEFAULT_DENOMINATION", "12")
    monkeypatch.delenv("DIVISION_DENOMINATION", raising=False)
    monkeypatch.setenv("STRICT_PRECISION", "false")

    from quantity.shared.config import get_settings

    get_settings.cache_clear()
