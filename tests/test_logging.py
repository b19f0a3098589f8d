from __future__ import annotations

import logging

import pytest
import structlog

from market_data_http.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.parametrize("log_format", ["console", "json"])
def test_setup_logging_installs_single_handler(monkeypatch, log_format):
    monkeypatch.setenv("LOG_FORMAT", log_format)

    setup_logging("debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")

    assert logging.getLogger().level == logging.INFO


def test_json_output(monkeypatch, capsys):
    monkeypatch.setenv("LOG_FORMAT", "json")
    setup_logging("INFO")

    get_logger("market_data_http.test").info("request_completed", status=200)

    err = capsys.readouterr().err
    assert '"event": "request_completed"' in err
    assert '"status": 200' in err


def test_explicit_format_overrides_environment(monkeypatch, capsys):
    monkeypatch.setenv("LOG_FORMAT", "console")
    setup_logging("INFO", log_format="json")

    get_logger("market_data_http.test").info("request_rejected", variant="InvalidInput")

    assert '"variant": "InvalidInput"' in capsys.readouterr().err
