import json
import logging
import os
import pathlib
import sys
import traceback
from typing import Dict, Optional, Union

UNKNOWN_SOURCE = ("Unknown", 0, "Unknown")

# frames from these files are never reported as the source of a record
SKIPPED_FILES = {os.path.normcase(logging.__file__), os.path.normcase(__file__)}


class ContextualLogRecord(logging.LogRecord):
    """
    LogRecord that remembers where the message came from.

    For errors raised with exception info the location is the frame that
    raised, otherwise the first frame outside of the logging machinery.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        if not self.exc_info and sys.exc_info()[0] is not None:
            self.exc_info = sys.exc_info()

        try:
            if self.levelno >= logging.ERROR and self.exc_info:
                source = self._raising_frame()
            else:
                source = self._calling_frame()
        except Exception:
            source = UNKNOWN_SOURCE

        self.source_file, self.line_number, self.source_function = source

    def _raising_frame(self):
        tb = traceback.extract_tb(self.exc_info[2])
        if not tb:
            return UNKNOWN_SOURCE
        last_frame = tb[-1]
        return os.path.basename(last_frame.filename), last_frame.lineno, last_frame.name

    def _calling_frame(self):
        for frame in reversed(traceback.extract_stack()):
            filename = os.path.normcase(frame.filename)
            if filename in SKIPPED_FILES or "contextlib" in filename:
                continue
            return os.path.basename(frame.filename), frame.lineno, frame.name
        return UNKNOWN_SOURCE


class ContextFilter(logging.Filter):
    """
    Makes sure every record carries the source fields used by JsonFormatter
    """

    def filter(self, record):
        if not hasattr(record, "source_file"):
            record.source_file = "Unknown"
        if not hasattr(record, "line_number"):
            record.line_number = 0
        if not hasattr(record, "source_function"):
            record.source_function = "Unknown"
        return True


class JsonFormatter(logging.Formatter):
    """JSON log formatter"""

    def __init__(
        self,
        *,
        fmt_keys: Optional[Dict[str, str]] = None,
    ):
        super().__init__()
        self.fmt_keys = (
            fmt_keys
            if fmt_keys is not None
            else {
                "timestamp": "%(asctime)s",
                "level": "%(levelname)s",
                "message": "%(message)s",
                "logger": "%(name)s",
                "module": "%(module)s",
                "function": "%(funcName)s",
                "source_function": "%(source_function)s",
                "line": "%(line_number)d",
                "source_file": "%(source_file)s",
            }
        )

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()

        message = {}
        for key, value in self.fmt_keys.items():
            if key == "timestamp":
                value = self.formatTime(record, self.datefmt)
            elif key == "message":
                value = record.message
            else:
                try:
                    value = value % record.__dict__
                except (KeyError, ValueError, TypeError):
                    value = "Unknown"
            message[key] = value

        if record.exc_info:
            message["exc_info"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_fields"):
            message.update(record.extra_fields)

        return json.dumps(message)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name
    """
    return logging.getLogger(f"{name}")


def configure_logging(
    debug_mode: bool = False, log_dir: Optional[Union[str, pathlib.Path]] = None
):
    """
    Configure logging with a console handler and optional JSON file handlers

    Args:
        debug_mode: Whether to show DEBUG level logging on the console
        log_dir: Directory for app.log and debug.log, no file logging if None
    """
    logging.setLogRecordFactory(ContextualLogRecord)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    context_filter = ContextFilter()

    # console - info by default, debug if --debug
    console_stream_handler = logging.StreamHandler()
    console_stream_handler.addFilter(context_filter)
    console_stream_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    console_stream_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_stream_handler)

    if log_dir is None:
        return

    log_dir = pathlib.Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    json_formatter = JsonFormatter()

    # app.log - gets info or higher
    app_file_handler = logging.FileHandler(log_dir / "app.log")
    app_file_handler.addFilter(context_filter)
    app_file_handler.setFormatter(json_formatter)
    app_file_handler.setLevel(logging.INFO)

    # debug.log - gets everything
    debug_file_handler = logging.FileHandler(log_dir / "debug.log")
    debug_file_handler.addFilter(context_filter)
    debug_file_handler.setFormatter(json_formatter)
    debug_file_handler.setLevel(logging.DEBUG)

    root_logger.addHandler(app_file_handler)
    root_logger.addHandler(debug_file_handler)
