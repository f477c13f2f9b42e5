import json
import logging

from sysinfo_core.core.logging import (
    ContextFilter,
    ContextualLogRecord,
    JsonFormatter,
    configure_logging,
    get_logger,
)


def make_record(msg, *args, level=logging.INFO):
    return ContextualLogRecord(
        "sysinfo_core.test", level, __file__, 10, msg, args, None
    )


def test_json_formatter():
    record = make_record("parsed %d rows", 5)
    ContextFilter().filter(record)

    message = json.loads(JsonFormatter().format(record))

    assert message["message"] == "parsed 5 rows"
    assert message["level"] == "INFO"
    assert message["logger"] == "sysinfo_core.test"
    assert "timestamp" in message


def test_json_formatter_custom_keys():
    record = make_record("hello")
    formatter = JsonFormatter(fmt_keys={"msg": "%(message)s", "lvl": "%(levelname)s"})

    assert json.loads(formatter.format(record)) == {"msg": "hello", "lvl": "INFO"}


def test_json_formatter_extra_fields():
    record = make_record("hello")
    record.extra_fields = {"source": "disk"}
    ContextFilter().filter(record)

    assert json.loads(JsonFormatter().format(record))["source"] == "disk"


def test_context_filter_fills_missing_fields():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    assert ContextFilter().filter(record) is True
    assert record.source_file == "Unknown"
    assert record.line_number == 0
    assert record.source_function == "Unknown"


def test_configure_logging_console_only():
    configure_logging()

    root_logger = logging.getLogger()
    assert len(root_logger.handlers) == 1
    assert root_logger.handlers[0].level == logging.INFO


def test_configure_logging_writes_json_files(tmp_path):
    configure_logging(debug_mode=True, log_dir=tmp_path)
    try:
        get_logger("sysinfo_core.test").debug("only in debug.log")
        get_logger("sysinfo_core.test").info("in both logs")
        for handler in logging.getLogger().handlers:
            handler.flush()

        app_log = (tmp_path / "app.log").read_text().splitlines()
        debug_log = (tmp_path / "debug.log").read_text().splitlines()

        assert [json.loads(line)["message"] for line in app_log] == ["in both logs"]
        assert [json.loads(line)["message"] for line in debug_log] == [
            "only in debug.log",
            "in both logs",
        ]
        assert json.loads(debug_log[0])["source_file"] == "test_logging.py"
    finally:
        configure_logging()
