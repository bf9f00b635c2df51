"""Tests for logging setup and formatters."""

import json
import logging

import pytest
from rich.logging import RichHandler

from weft.logging import (
    CompactFormatter,
    JSONFormatter,
    WeftLogger,
    create_file_handler,
    get_logger,
    setup_logging,
)


def make_record(message: str, level: int = logging.INFO, **extra) -> logging.LogRecord:
    record = logging.LogRecord("weft.test", level, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def reset_weft_logger():
    yield
    root = logging.getLogger("weft")
    for handler in root.handlers:
        handler.close()
    root.handlers = []


class TestFormatters:
    def test_json_formatter_fields(self):
        line = JSONFormatter().format(make_record("hello", logging.WARNING))
        data = json.loads(line)
        assert data["level"] == "WARNING"
        assert data["logger"] == "weft.test"
        assert data["message"] == "hello"
        assert "timestamp" in data
        assert "origin" not in data

    def test_json_formatter_extras(self):
        record = make_record("fallback", origin="js.let_int", binding="1x", check="id")
        data = json.loads(JSONFormatter().format(record))
        assert data["origin"] == "js.let_int"
        assert data["binding"] == "1x"
        assert data["check"] == "id"

    @pytest.mark.parametrize(
        "level, symbol",
        [(logging.DEBUG, "·"), (logging.INFO, "→"), (logging.WARNING, "⚠"), (logging.ERROR, "✗")],
    )
    def test_compact_formatter(self, level: int, symbol: str):
        line = CompactFormatter().format(make_record("msg", level))
        assert line.endswith(f" {symbol} [test] msg")

    def test_markup_stripped(self):
        record = make_record("[fallback]js.let_int[/fallback]: invalid identifier")
        assert json.loads(JSONFormatter().format(record))["message"] == (
            "js.let_int: invalid identifier"
        )
        assert CompactFormatter().format(record).endswith("js.let_int: invalid identifier")

    def test_unbalanced_markup_kept(self):
        record = make_record("closing [/b] without opening")
        assert json.loads(JSONFormatter().format(record))["message"] == (
            "closing [/b] without opening"
        )


class TestSetup:
    def test_get_logger_prefix(self):
        assert get_logger("js").name == "weft.js"
        assert get_logger("weft.dom").name == "weft.dom"

    def test_rich_handler_by_default(self):
        setup_logging("WARNING")
        root = logging.getLogger("weft")
        assert root.level == logging.WARNING
        assert root.propagate is False
        assert [type(h) for h in root.handlers] == [RichHandler]

    def test_plain_handler(self):
        setup_logging("INFO", plain=True)
        (handler,) = logging.getLogger("weft").handlers
        assert isinstance(handler.formatter, CompactFormatter)

    def test_json_file(self, tmp_path):
        path = tmp_path / "log.jsonl"
        setup_logging("DEBUG", json_file=str(path), plain=True)
        WeftLogger().fallback("js.const_string", "1x")
        data = json.loads(path.read_text().splitlines()[-1])
        assert data["level"] == "WARNING"
        assert data["origin"] == "js.const_string"
        assert data["binding"] == "1x"
        assert data["message"] == "js.const_string: invalid identifier '1x'"

    def test_binding_with_brackets_survives(self, tmp_path):
        path = tmp_path / "log.jsonl"
        setup_logging("DEBUG", json_file=str(path), plain=True)
        WeftLogger().binding("let x = [true];")
        data = json.loads(path.read_text().splitlines()[-1])
        assert data["message"] == "binding: let x = [true];"
        assert data["statement"] == "let x = [true];"

    def test_create_file_handler_defaults(self, tmp_path):
        handler = create_file_handler(tmp_path / "nested" / "x.log")
        try:
            assert isinstance(handler.formatter, JSONFormatter)
            assert handler.level == logging.DEBUG
        finally:
            handler.close()
