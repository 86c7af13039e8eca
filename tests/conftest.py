import itertools

import pytest

from calendar_clone import create_app
from calendar_clone.config import CalendarConfig


@pytest.fixture
def config(tmp_path):
    """Config with every path inside a temp directory."""
    return CalendarConfig(
        store_path=tmp_path / "data" / "calendar-events.json",
        export_dir=tmp_path / "exports",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def app(config):
    """Create and configure a Flask app for testing."""
    app = create_app(config)
    app.config.update({"TESTING": True})
    return app


@pytest.fixture
def id_sequence():
    """Deterministic id generator: gen-1, gen-2, ..."""
    counter = itertools.count(1)
    return lambda: f"gen-{next(counter)}"
