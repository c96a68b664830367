import logging
from datetime import datetime, timezone

import pytest

from icsmaker.config import CalendarConfig
from icsmaker.web import create_app

FIXED_NOW = datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def config(tmp_path):
    """Config with a fixed clock, UTC timezone and LF line breaks."""
    return CalendarConfig(
        output_dir=tmp_path,
        line_break="\n",
        time_zone="UTC",
        log_dir=tmp_path / "logs",
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def app(config):
    """Create and configure a Flask app for testing."""
    return create_app(config)


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by the CLI's setup_logging."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
