import io
import logging

import pytest

from inputwritr import logging_config
from inputwritr.logging_config import LOG_LEVEL_ENV, configure_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("inputwritr")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_configure_logging_adds_single_handler(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    logger = logging.getLogger("inputwritr")
    # Start from a logger without the package handler attached
    logger.handlers[:] = []
    stream = io.StringIO()

    configure_logging(logging.WARNING, stream=stream)
    configure_logging(logging.WARNING, stream=io.StringIO())
    assert logger.level == logging.WARNING
    assert logger.handlers == [logging_config._handler]

    logging.getLogger("inputwritr.dispatch").warning("gate closed")
    assert "gate closed" in stream.getvalue()


def test_handler_is_reinstalled_after_removal(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    logger = configure_logging(logging.INFO, stream=io.StringIO())
    logger.handlers[:] = []
    configure_logging(logging.INFO, stream=io.StringIO())
    assert logger.handlers == [logging_config._handler]


def test_env_level_overrides_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert configure_logging(logging.WARNING, stream=io.StringIO()).level == logging.DEBUG
    monkeypatch.setenv(LOG_LEVEL_ENV, "nonsense")
    assert configure_logging(logging.ERROR, stream=io.StringIO()).level == logging.ERROR
