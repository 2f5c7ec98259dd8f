from __future__ import annotations

import logging

import pytest
import structlog

from getver import logging_conf
from getver.logging_conf import configure_logging


@pytest.fixture
def fresh_logging(monkeypatch):
    monkeypatch.setattr(logging_conf, "_LOGGING_INITIALISED", False)
    yield
    logger = logging.getLogger("getver")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    structlog.reset_defaults()


def test_configure_logging_writes_json_files(tmp_path, fresh_logging) -> None:
    log_dir = tmp_path / "logs"
    logger = configure_logging(log_dir=log_dir)
    logger.info("batch_started", batch_size=2)
    logger.error("lookup_crashed", package="serde")
    for handler in logging.getLogger("getver").handlers:
        handler.flush()

    app_lines = (log_dir / "getver.log").read_text(encoding="utf-8").splitlines()
    error_lines = (log_dir / "error.log").read_text(encoding="utf-8").splitlines()
    assert any("batch_started" in line for line in app_lines)
    assert any("lookup_crashed" in line for line in app_lines)
    assert len(error_lines) == 1 and "lookup_crashed" in error_lines[0]


def test_configure_logging_is_idempotent(tmp_path, fresh_logging) -> None:
    configure_logging(log_dir=tmp_path / "first")
    handlers = list(logging.getLogger("getver").handlers)
    configure_logging(log_dir=tmp_path / "second")
    assert logging.getLogger("getver").handlers == handlers



def _console_handler() -> logging.Handler:
    return next(
        handler
        for handler in logging.getLogger("getver").handlers
        if not isinstance(handler, logging.FileHandler)
    )


def test_console_only_shows_errors_by_default(tmp_path, fresh_logging) -> None:
    configure_logging(log_dir=tmp_path / "logs")
    assert _console_handler().level == logging.ERROR


def test_console_shows_debug_when_verbose(tmp_path, fresh_logging) -> None:
    configure_logging(verbose=True, log_dir=tmp_path / "logs")
    assert _console_handler().level == logging.DEBUG
