"""Tests for logging configuration utilities."""

import inspect
from io import StringIO
import json
import logging
import sys

from huekit.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


def _record(msg="Test message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Test basic log record formatting to JSON."""
        formatter = StructuredJSONFormatter()
        record = _record()
        record.funcName = "test_function"
        record.module = "test_module"

        data = json.loads(formatter.format(record))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"]["logger_name"] == "test.logger"
        assert data["context"]["function"] == "test_function"
        assert data["context"]["line"] == 42

    def test_extra_fields_in_context(self):
        """Fields added via extra/LoggerAdapter land in context."""
        formatter = StructuredJSONFormatter()
        record = _record()
        record.palette = "brand"
        record.mode = "monochromatic"

        context = json.loads(formatter.format(record))["context"]

        assert context["palette"] == "brand"
        assert context["mode"] == "monochromatic"
        assert "msg" not in context
        assert "args" not in context

    def test_exception_info(self):
        """Exception details are included."""
        formatter = StructuredJSONFormatter()
        try:
            raise ValueError("bad color")
        except ValueError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())

        context = json.loads(formatter.format(record))["context"]

        assert context["error_type"] == "ValueError"
        assert context["error_message"] == "bad color"
        assert "Traceback" in context["stack_trace"]


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_text_output_to_stream(self):
        """Plain text format goes to the given stream."""
        stream = StringIO()
        configure_logging(level="info", format_string="%(levelname)s:%(message)s", stream=stream)

        logging.getLogger("huekit.test").info("hello")

        assert stream.getvalue().strip() == "INFO:hello"

    def test_level_filters(self):
        """Records below the level are dropped."""
        stream = StringIO()
        configure_logging(level="WARNING", stream=stream)

        logging.getLogger("huekit.test").info("quiet")

        assert stream.getvalue() == ""

    def test_structured_output(self):
        """Structured mode writes one JSON object per record."""
        stream = StringIO()
        configure_logging(level="DEBUG", structured=True, stream=stream)

        logging.getLogger("huekit.test").debug("generated", extra={"steps": 11})

        data = json.loads(stream.getvalue().strip())
        assert data["level"] == "DEBUG"
        assert data["context"]["steps"] == 11

    def test_file_output(self, tmp_path):
        """Logs go to a file when filename is given."""
        log_file = tmp_path / "huekit.log"
        configure_logging(level="INFO", filename=str(log_file))

        logging.getLogger("huekit.test").info("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "to file" in log_file.read_text()


class TestGetLogger:
    def test_plain_logger(self):
        """Without context a plain Logger is returned."""
        logger = get_logger("huekit.test")
        assert isinstance(logger, logging.Logger)

    def test_adapter_with_context(self):
        """Context kwargs wrap the logger in a LoggerAdapter."""
        logger = get_logger("huekit.test", palette="brand")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"palette": "brand"}


def test_log_performance(caplog):
    """The decorator returns the result and logs timing at debug."""

    @log_performance
    def add(a, b):
        return a + b

    with caplog.at_level(logging.DEBUG):
        assert add(2, 3) == 5

    assert "'add' took" in caplog.text


def test_log_performance_keeps_signature():
    """The wrapper exposes the wrapped function's name and signature."""

    def scale(value: float, factor: float = 2.0) -> float:
        return value * factor

    wrapped = log_performance(scale)
    assert wrapped.__name__ == "scale"
    assert wrapped.__wrapped__ is scale
    assert inspect.signature(wrapped) == inspect.signature(scale)
    assert wrapped(1.5, factor=4.0) == 6.0
