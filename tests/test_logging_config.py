"""Tests for structured logging configuration."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest

from pen_editor.logging_config import (
    ErrorFilter,
    StructuredFormatter,
    category_for,
    configure_logging,
)


def _record(name: str = "test", level: int = logging.INFO, msg: str = "Test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestStructuredFormatter:
    """Tests for StructuredFormatter JSON output."""

    @pytest.fixture
    def formatter(self) -> StructuredFormatter:
        return StructuredFormatter()

    @pytest.fixture
    def log_record(self) -> logging.LogRecord:
        return logging.LogRecord(
            name="pen_editor.session",
            level=logging.INFO,
            pathname="session.py",
            lineno=42,
            msg="Started path %d",
            args=(1,),
            exc_info=None,
        )

    def test_basic_json_output(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        """Test that output is valid JSON with required fields."""
        data = json.loads(formatter.format(log_record))

        assert "timestamp" in data
        assert data["level"] == "INFO"
        assert data["logger"] == "pen_editor.session"
        assert data["message"] == "Started path 1"
        assert data["category"] == "session"

    def test_category_detection_model(self, formatter: StructuredFormatter) -> None:
        for logger_name in ["pen_editor.curves", "pen_editor.svg", "pen_editor.hit_testing"]:
            data = json.loads(formatter.format(_record(logger_name)))
            assert data["category"] == "model", f"Failed for {logger_name}"

    def test_category_detection_history(self, formatter: StructuredFormatter) -> None:
        data = json.loads(formatter.format(_record("pen_editor.history")))
        assert data["category"] == "history"

    def test_category_detection_session(self, formatter: StructuredFormatter) -> None:
        for logger_name in ["pen_editor.session", "pen_editor.router"]:
            data = json.loads(formatter.format(_record(logger_name)))
            assert data["category"] == "session", f"Failed for {logger_name}"

    def test_category_detection_io(self, formatter: StructuredFormatter) -> None:
        data = json.loads(formatter.format(_record("pen_editor.files")))
        assert data["category"] == "io"

    def test_category_detection_render(self, formatter: StructuredFormatter) -> None:
        for logger_name in ["pen_editor.rendering", "pen_editor.interpolation"]:
            data = json.loads(formatter.format(_record(logger_name)))
            assert data["category"] == "render", f"Failed for {logger_name}"

    def test_category_detection_cli(self, formatter: StructuredFormatter) -> None:
        data = json.loads(formatter.format(_record("pen_editor.cli")))
        assert data["category"] == "cli"

    def test_category_detection_system_default(self, formatter: StructuredFormatter) -> None:
        """Unknown loggers fall back to the system category."""
        for logger_name in ["some.other.module", "pen_editor", "pen_editor.config", "PIL"]:
            data = json.loads(formatter.format(_record(logger_name)))
            assert data["category"] == "system", f"Failed for {logger_name}"

    def test_category_of_submodule(self) -> None:
        assert category_for("pen_editor.types.paths") == "model"
        assert category_for("pen_editor_extras.session") == "system"

    def test_extra_fields(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        log_record.path_index = 3  # type: ignore[attr-defined]
        log_record.action = "add_anchor"  # type: ignore[attr-defined]
        data = json.loads(formatter.format(log_record))
        assert data["extra"]["path_index"] == 3
        assert data["extra"]["action"] == "add_anchor"

    def test_no_extra_key_without_extra_fields(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        data = json.loads(formatter.format(log_record))
        assert "extra" not in data

    def test_extra_fields_non_serializable(
        self, formatter: StructuredFormatter, log_record: logging.LogRecord
    ) -> None:
        """Non-serializable extra fields are converted to string."""
        log_record.custom_obj = object()  # type: ignore[attr-defined]
        data = json.loads(formatter.format(log_record))
        assert isinstance(data["extra"]["custom_obj"], str)

    def test_exception_info(self, formatter: StructuredFormatter) -> None:
        try:
            raise IndexError("anchor index 7 out of range")
        except IndexError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="pen_editor.curves",
            level=logging.ERROR,
            pathname="curves.py",
            lineno=1,
            msg="Edit failed",
            args=(),
            exc_info=exc_info,
        )
        data = json.loads(formatter.format(record))
        assert "IndexError" in data["exception"]
        assert "anchor index 7" in data["exception"]


class TestErrorFilter:
    """Tests for ErrorFilter."""

    @pytest.fixture
    def error_filter(self) -> ErrorFilter:
        return ErrorFilter()

    @pytest.mark.parametrize("level", [logging.ERROR, logging.CRITICAL])
    def test_allows_errors(self, error_filter: ErrorFilter, level: int) -> None:
        assert error_filter.filter(_record(level=level)) is True

    @pytest.mark.parametrize("level", [logging.WARNING, logging.INFO, logging.DEBUG])
    def test_blocks_below_error(self, error_filter: ErrorFilter, level: int) -> None:
        assert error_filter.filter(_record(level=level)) is False


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_json_format_output(self) -> None:
        output = StringIO()
        configure_logging(json_format=True, log_level=logging.INFO, stream=output)

        logging.getLogger("pen_editor.history").info("Test message")

        data = json.loads(output.getvalue().strip())
        assert data["message"] == "Test message"
        assert data["category"] == "history"

    def test_plain_format_output(self) -> None:
        output = StringIO()
        configure_logging(json_format=False, log_level=logging.INFO, stream=output)

        logging.getLogger("test.plain").info("Test message")

        content = output.getvalue()
        assert "Test message" in content
        assert "INFO" in content
        assert "[test.plain]" in content
        with pytest.raises(json.JSONDecodeError):
            json.loads(content.strip())

    def test_log_level_filtering(self) -> None:
        output = StringIO()
        configure_logging(json_format=False, log_level=logging.WARNING, stream=output)

        logger = logging.getLogger("test.level")
        logger.info("Info message")
        logger.warning("Warning message")

        content = output.getvalue()
        assert "Info message" not in content
        assert "Warning message" in content

    def test_replaces_existing_handlers(self) -> None:
        configure_logging(stream=StringIO())
        configure_logging(stream=StringIO())
        stream_handlers = [
            h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler
        ]
        assert len(stream_handlers) == 1

    def test_error_log_file_only_gets_errors(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "editor.log"
        error_file = tmp_path / "logs" / "errors.log"
        configure_logging(
            json_format=True,
            log_file=str(log_file),
            error_log_file=str(error_file),
            stream=StringIO(),
        )

        logger = logging.getLogger("pen_editor.files")
        logger.info("Exported drawing")
        logger.error("Disk full")
        for handler in logging.getLogger().handlers:
            handler.flush()

        main_lines = log_file.read_text().strip().splitlines()
        error_lines = error_file.read_text().strip().splitlines()
        assert [json.loads(line)["message"] for line in main_lines] == [
            "Exported drawing",
            "Disk full",
        ]
        assert [json.loads(line)["message"] for line in error_lines] == ["Disk full"]

    def test_noisy_loggers_silenced(self) -> None:
        configure_logging(json_format=False, log_level=logging.DEBUG, stream=StringIO())

        for name in ["PIL", "asyncio"]:
            assert logging.getLogger(name).level >= logging.WARNING, f"{name} should be silenced"
