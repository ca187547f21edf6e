from __future__ import annotations

import json
import logging
import sys

from tableview.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_RECORDS = 7
EXPECTED_PAGE_SIZE = 5


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.records = EXPECTED_RECORDS
    record.stage = "sort"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["records"] == EXPECTED_RECORDS
    assert payload["stage"] == "sort"
    assert "pathname" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"page_size": EXPECTED_PAGE_SIZE}

    payload = json.loads(_json_formatter(record))

    assert payload["page_size"] == EXPECTED_PAGE_SIZE


def test_json_formatter_includes_exception() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in payload["exc_info"]


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="DEBUG", json_logs=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JsonFormatter)

    configure_logging(level="WARNING", force=False)
    assert root.level == logging.WARNING
