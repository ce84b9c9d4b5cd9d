"""Unit tests for logging configuration."""

import json
import logging

import pytest
from loguru import logger

from textprep.utils.logging_config import setup_logging, stage_logger


@pytest.fixture
def captured():
    """Collect loguru records emitted during a test."""
    records = []
    setup_logging(log_level="DEBUG", json_format=False)
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_standard_logging_is_intercepted(self, captured):
        """Test records from logging.getLogger reach loguru."""
        logging.getLogger("textprep.tests").warning("routed through loguru")

        messages = [r["message"] for r in captured]
        assert "routed through loguru" in messages
        assert captured[-1]["level"].name == "WARNING"

    def test_level_filters_stdout(self, capsys):
        setup_logging(log_level="WARNING", json_format=False)
        logger.info("hidden")
        logger.warning("shown")

        out = capsys.readouterr().out
        assert "shown" in out
        assert "hidden" not in out

    def test_json_format(self, capsys):
        """Test serialized output is one JSON object per line."""
        setup_logging(log_level="INFO", json_format=True)
        logger.info("structured")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert json.loads(line)["record"]["message"] == "structured"

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "textprep.log"
        setup_logging(log_level="INFO", json_format=False, log_file=log_file)
        logger.info("to file")
        logger.complete()

        assert "to file" in log_file.read_text(encoding="utf-8")
        setup_logging(log_level="INFO", json_format=False)


class TestStageLogger:
    """Tests for stage_logger."""

    def test_success_logs_start_and_completion(self, captured):
        with stage_logger("clean", source="tweets.txt") as log:
            log.info("working")

        messages = [r["message"] for r in captured]
        assert "Starting stage: clean" in messages
        assert "working" in messages
        completed = [r for r in captured if r["message"].startswith("Completed stage: clean")]
        assert completed[0]["extra"]["status"] == "completed"
        assert completed[0]["extra"]["source"] == "tweets.txt"
        assert "duration_ms" in completed[0]["extra"]

    def test_failure_is_logged_and_reraised(self, captured):
        with pytest.raises(ValueError, match="boom"):
            with stage_logger("tokenize"):
                raise ValueError("boom")

        failed = [r for r in captured if r["message"] == "Failed stage: tokenize"]
        assert failed[0]["level"].name == "ERROR"
        assert failed[0]["extra"]["error"] == "boom"
