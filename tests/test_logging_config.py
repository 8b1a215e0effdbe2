# tests/test_logging_config.py
"""Tests for structured logging helpers."""

import json
import logging

import pytest

from promptvault.logging_config import JSONFormatter, log_operation, operation_var


class TestJSONFormatter:
    def test_includes_extra_fields(self):
        record = logging.LogRecord("promptvault", logging.INFO, __file__, 1, "created %s", ("p",), None)
        record.prompt_id = 7

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "created p"
        assert data["level"] == "INFO"
        assert data["prompt_id"] == 7
        assert "removed" not in data

    def test_non_ascii_kept(self):
        record = logging.LogRecord("promptvault", logging.INFO, __file__, 1, "编程", (), None)
        assert "编程" in JSONFormatter().format(record)


class TestLogOperation:
    def test_logs_completion(self, caplog):
        with caplog.at_level(logging.INFO, logger="promptvault.operations"):
            with log_operation("export"):
                assert operation_var.get() == "export"

        assert operation_var.get() is None
        assert any("export completed" in r.getMessage() for r in caplog.records)

    def test_reraises_and_logs_failure(self, caplog):
        with caplog.at_level(logging.INFO, logger="promptvault.operations"):
            with pytest.raises(RuntimeError):
                with log_operation("import", prompts=2):
                    raise RuntimeError("boom")

        failed = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert failed and failed[0].prompts == 2
        assert operation_var.get() is None
