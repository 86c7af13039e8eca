"""Tests for configuration."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from calendar_clone.config import CalendarConfig

ENV_VARS = [
    "CALENDAR_STORE_PATH",
    "EXPORT_DIR",
    "LOG_DIR",
    "LOG_FILENAME",
    "ICS_UID_DOMAIN",
    "ICS_PRODID",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_calendar_config_defaults():
    """Test CalendarConfig default values."""
    config = CalendarConfig()
    assert config.store_path == Path("data/calendar-events.json")
    assert config.export_dir == Path(".")
    assert config.log_dir == Path("logs")
    assert config.uid_domain == "calendar-clone.local"
    assert config.prodid == "-//Google Calendar Clone//Calendar//EN"


def test_calendar_config_from_env_all_vars(monkeypatch):
    """Test loading all config values from environment."""
    monkeypatch.setenv("CALENDAR_STORE_PATH", "/custom/events.json")
    monkeypatch.setenv("EXPORT_DIR", "/custom/exports")
    monkeypatch.setenv("LOG_DIR", "/custom/logs")
    monkeypatch.setenv("LOG_FILENAME", "custom.log")
    monkeypatch.setenv("ICS_UID_DOMAIN", "example.org")
    monkeypatch.setenv("ICS_PRODID", "-//Example//EN")

    config = CalendarConfig.from_env()
    assert config.store_path == Path("/custom/events.json")
    assert config.export_dir == Path("/custom/exports")
    assert config.log_dir == Path("/custom/logs")
    assert config.log_filename == "custom.log"
    assert config.uid_domain == "example.org"
    assert config.prodid == "-//Example//EN"


def test_calendar_config_blank_identity_keeps_defaults(monkeypatch):
    """Test blank ICS identity variables are ignored."""
    monkeypatch.setenv("ICS_UID_DOMAIN", "")
    config = CalendarConfig.from_env()
    assert config.uid_domain == "calendar-clone.local"


def test_calendar_config_from_env_file(tmp_path):
    """Test loading config from .env file."""
    (tmp_path / ".env").write_text("ICS_UID_DOMAIN=dotenv.example\n")
    try:
        config = CalendarConfig.from_env()
        assert config.uid_domain == "dotenv.example"
    finally:
        os.environ.pop("ICS_UID_DOMAIN", None)


def test_calendar_config_rejects_empty_uid_domain():
    """Test validation of the ICS identity."""
    with pytest.raises(PydanticValidationError):
        CalendarConfig(uid_domain="")
