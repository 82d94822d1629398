"""Structured Logging — JSONFormatter output and setup_logging handler management."""

import json
import logging

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "app.test"
    assert out["message"] == "hello"
    assert "timestamp" in out


def test_json_formatter_surfaces_known_extras_only():
    out = json.loads(JSONFormatter().format(
        _record(user_id=7, path="/users/7", secret="nope"),
    ))
    assert out["user_id"] == 7
    assert out["path"] == "/users/7"
    assert "secret" not in out


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    named = [h for h in logging.root.handlers if h.get_name() == "user-registry"]
    assert len(named) == 1
    assert not isinstance(named[0].formatter, JSONFormatter)
    assert logging.root.level == logging.INFO
