from __future__ import annotations

import json
import logging

from snowman.utils.logging import _json_formatter, configure_logging, get_logger

EXPECTED_ROWS = 10


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="snowman.test",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_extra_fields() -> None:
    record = _record()
    record.rows = EXPECTED_ROWS
    record.account = "xy12345"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "snowman.test"
    assert payload["message"] == "hello"
    assert payload["rows"] == EXPECTED_ROWS
    assert payload["account"] == "xy12345"
    assert "lineno" not in payload


def test_json_formatter_supports_nested_extra_field() -> None:
    record = _record()
    record.extra = {"warehouse": "COMPUTE_WH"}

    payload = json.loads(_json_formatter(record))

    assert payload["warehouse"] == "COMPUTE_WH"
    assert "extra" not in payload


def test_json_formatter_stringifies_unserializable_values(tmp_path) -> None:
    record = _record()
    record.path = tmp_path

    payload = json.loads(_json_formatter(record))

    assert payload["path"] == str(tmp_path)


def test_get_logger_defaults_to_package_logger() -> None:
    assert get_logger().name == "snowman"
    assert get_logger("snowman.adapter").name == "snowman.adapter"


def test_configure_logging_without_force_keeps_existing_handlers() -> None:
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        before = list(root.handlers)
        configure_logging(level="DEBUG", force=False)
        assert root.handlers == before
    finally:
        root.removeHandler(sentinel)
