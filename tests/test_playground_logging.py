import logging

import pytest

from playground_logging import log_level_from_env, setup_logging


@pytest.mark.parametrize("value, expected", [
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    ("verbose", logging.INFO),
    ("", logging.INFO),
])
def test_log_level_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("LOG_LEVEL", value)
    assert log_level_from_env() == expected


def test_log_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert log_level_from_env() == logging.INFO


def test_setup_logging_with_bad_level_does_not_raise(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    # basicConfig is a no-op while the root logger has handlers
    root.handlers = []
    try:
        setup_logging()
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
