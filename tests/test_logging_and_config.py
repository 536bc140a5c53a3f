import json
import logging
import sys

import pytest
from pydantic import ValidationError

from ownvsrent.adapters.config import AppConfig
from ownvsrent.adapters.logging_utils import JsonLogFormatter, get_logger


def _record(msg, context=None, exc_info=None):
    record = logging.LogRecord("ownvsrent.test", logging.WARNING, __file__, 1, msg, (), exc_info)
    if context is not None:
        record.context = context
    return record


def test_formatter_emits_one_json_object():
    line = JsonLogFormatter().format(_record("scenario rejected", {"fields": ["home_price"], "be": None}))
    payload = json.loads(line)
    assert payload["message"] == "scenario rejected"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "ownvsrent.test"
    assert payload["fields"] == ["home_price"]
    assert payload["be"] is None
    assert "ts" in payload and "env" in payload


def test_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        line = JsonLogFormatter().format(_record("failed", exc_info=sys.exc_info()))
    assert "ValueError: boom" in json.loads(line)["exc"]


def test_get_logger_configures_once():
    logger = get_logger("ownvsrent.test.once", level="DEBUG")
    again = get_logger("ownvsrent.test.once")
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_config_reads_prefixed_env(monkeypatch):
    monkeypatch.setenv("OWNVSRENT_LOG_LEVEL", " debug ")
    monkeypatch.setenv("OWNVSRENT_MAX_HORIZON_YEARS", "40")
    cfg = AppConfig()
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.MAX_HORIZON_YEARS == 40


def test_config_rejects_non_positive_horizon(monkeypatch):
    monkeypatch.setenv("OWNVSRENT_MAX_HORIZON_YEARS", "0")
    with pytest.raises(ValidationError):
        AppConfig()
