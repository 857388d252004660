"""Tests for permcore.logging module."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest

from permcore import (
    LogLevel,
    PermcoreConfig,
    PermcoreFormatter,
    Permission,
    PermissionParseError,
    safe_preview,
    setup_logging,
)


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Drop the handler installed by setup_logging() and restore the level."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


class TestSafePreview:
    """Tests for safe_preview function."""

    def test_none_value(self) -> None:
        """Test that None returns empty string."""
        assert safe_preview(None) == ""

    def test_string_value(self) -> None:
        """Test string values are preserved."""
        assert safe_preview('read("any")') == 'read("any")'

    def test_string_with_whitespace(self) -> None:
        """Test that whitespace is normalized."""
        assert safe_preview("read(\n\t\"any\")") == 'read( "any")'

    def test_string_truncation(self) -> None:
        """Test that long strings are truncated."""
        result = safe_preview("a" * 300, limit=100)
        assert len(result) == 100
        assert result.endswith("…")

    def test_list_value(self) -> None:
        """Test that lists are converted to JSON."""
        result = safe_preview(['read("any")', 'write("user:1")'])
        assert result.startswith("[")
        assert "user:1" in result


class TestPermcoreFormatter:
    """Tests for PermcoreFormatter."""

    def _record(self) -> logging.LogRecord:
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname="",
            lineno=0,
            msg="Expanding %s",
            args=('write("any")',),
            exc_info=None,
        )
        record.permission = 'write("any")'
        return record

    def test_json_format(self) -> None:
        """Test JSON formatter."""
        formatter = PermcoreFormatter(json_format=True)
        data = json.loads(formatter.format(self._record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "test"
        assert data["message"] == 'Expanding write("any")'
        assert data["permission"] == 'write("any")'

    def test_plain_format(self) -> None:
        """Test plain text formatter."""
        formatter = PermcoreFormatter(json_format=False)
        result = formatter.format(self._record())
        assert "INFO" in result
        assert 'Expanding write("any")' in result
        assert 'permission=write("any")' in result
        assert not result.startswith("{")


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_with_config(self, restore_root_logger: None) -> None:
        """Test logging setup with PermcoreConfig."""
        setup_logging(config=PermcoreConfig(log_level=LogLevel.DEBUG))
        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, PermcoreFormatter)

    def test_setup_with_env(self, restore_root_logger: None, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test logging setup loading from environment."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_json_output(self, restore_root_logger: None, capsys: pytest.CaptureFixture) -> None:
        """Parse failures are logged as JSON when log_json is set."""
        setup_logging(config=PermcoreConfig(log_level=LogLevel.DEBUG, log_json=True))

        with pytest.raises(PermissionParseError):
            Permission.parse("garbage")

        lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
        data = json.loads(lines[-1])
        assert data["level"] == "DEBUG"
        assert data["logger"] == "permcore.permissions.permission"
        assert "garbage" in data["message"]
