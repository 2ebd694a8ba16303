"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from app.config import Settings, get_settings, reset_settings_cache


@pytest.fixture()
def fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_settings_read_environment(monkeypatch, fresh_settings):
    monkeypatch.setenv("RECENT_ACTIVITY_LIMIT", "2")

    settings = get_settings()

    assert settings.recent_activity_limit == 2
    assert settings.app_timezone == "Asia/Kolkata"
    assert get_settings() is settings


def test_threshold_must_be_positive(monkeypatch):
    monkeypatch.setenv("ORDER_UPDATE_THRESHOLD_MINUTES", "0")

    with pytest.raises(ValidationError):
        Settings()


def test_timezone_name_is_trimmed():
    assert Settings(app_timezone="  Europe/Madrid ").app_timezone == "Europe/Madrid"
