"""
Tests for the logging helpers.
"""

import logging

from armorsim.core import logging as armor_logging
from rich.logging import RichHandler


def test_setup_logging_installs_rich_handler():
    armor_logging.setup_logging(logging.DEBUG)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, RichHandler) for handler in root.handlers)


def test_log_debug_appends_context(caplog):
    with caplog.at_level(logging.DEBUG, logger="armorsim"):
        armor_logging.log_debug("Resolved layer", {"states": 3, "expected": "1.5"})
    assert "Resolved layer [states=3 expected=1.5]" in caplog.text


def test_log_debug_is_silent_when_disabled(caplog):
    with caplog.at_level(logging.WARNING, logger="armorsim"):
        armor_logging.log_debug("hidden", {"a": 1})
    assert "hidden" not in caplog.text
