"""Structured Logging: JSON formatter output and setup_logging behavior.

Tests cover:
    - Base fields always present
    - Redirect extras surfaced only when set
    - Exceptions rendered into "exception"
    - setup_logging is idempotent and honors level/format
"""

import json
import logging
import sys

import pytest

from redirector.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="hello", exc_info=None, **extra):
    record = logging.LogRecord(
        "redirector.test", logging.INFO, __file__, 1, msg, None, exc_info,
    )
    for key, val in extra.items():
        setattr(record, key, val)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "redirector.test"
    assert log["message"] == "hello"
    assert "timestamp" in log
    assert "location" not in log


def test_json_formatter_surfaces_redirect_extras():
    log = json.loads(JSONFormatter().format(_record(
        method="GET", path="/anything", status_code=302, location="index.jsp",
    )))
    assert log["method"] == "GET"
    assert log["path"] == "/anything"
    assert log["status_code"] == 302
    assert log["location"] == "index.jsp"


def test_json_formatter_includes_exception():
    try:
        raise OSError("broken pipe")
    except OSError:
        exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(_record(exc_info=exc_info)))
    assert "OSError: broken pipe" in log["exception"]


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


def _installed(fmt_type):
    return [
        h for h in logging.root.handlers
        if isinstance(h, logging.StreamHandler) and isinstance(h.formatter, fmt_type)
        and type(h).__module__ == "redirector.infrastructure.observability"
    ]


def test_setup_logging_is_idempotent(restore_root_logger):
    setup_logging("DEBUG", "json")
    setup_logging("DEBUG", "json")
    assert len(_installed(JSONFormatter)) == 1
    assert logging.root.level == logging.DEBUG


def test_setup_logging_text_format_replaces_json(restore_root_logger):
    setup_logging("INFO", "json")
    setup_logging("WARNING", "text")
    assert _installed(JSONFormatter) == []
    assert len(_installed(logging.Formatter)) == 1
    assert logging.root.level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logger):
    setup_logging("chatty", "json")
    assert logging.root.level == logging.INFO
