import pytest
from pydantic import ValidationError

from spanwatch.config import Settings, get_settings


def test_defaults():
    s = Settings()
    assert s.precision == 3
    assert s.log_level == "WARNING"


def test_env_overrides_take_precedence(monkeypatch):
    monkeypatch.setenv("SPANWATCH_PRECISION", "5")
    monkeypatch.setenv("SPANWATCH_LOG_LEVEL", "debug")
    s = Settings()
    assert s.precision == 5
    assert s.log_level == "DEBUG"


def test_negative_precision_rejected(monkeypatch):
    monkeypatch.setenv("SPANWATCH_PRECISION", "-1")
    with pytest.raises(ValidationError):
        Settings()


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("SPANWATCH_PRECISION", "7")
    assert get_settings() is first
    assert get_settings(force_refresh=True).precision == 7
