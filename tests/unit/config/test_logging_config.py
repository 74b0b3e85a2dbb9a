"""
Unit tests for logger setup: JSON field layout, text fallback and handler reuse.
"""

import io
import json
import logging

from src.config.logging_config import SERVICE_NAME, setup_logger


def _capture(logger: logging.Logger) -> io.StringIO:
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)
    return stream


class TestSetupLogger:
    def test_json_output_fields(self):
        logger = setup_logger("tests.logging.json", level="INFO", fmt="json")
        stream = _capture(logger)

        logger.info("Resolved %s of %s articles", 2, 3)

        record = json.loads(stream.getvalue().strip())
        assert record["message"] == "Resolved 2 of 3 articles"
        assert record["level"] == "INFO"
        assert record["name"] == "tests.logging.json"
        assert record["service"] == SERVICE_NAME
        assert "timestamp" in record

    def test_text_output(self):
        logger = setup_logger("tests.logging.text", level="INFO", fmt="text")
        stream = _capture(logger)

        logger.warning("jade.io lookup failed")

        line = stream.getvalue()
        assert "WARNING" in line
        assert "tests.logging.text: jade.io lookup failed" in line

    def test_repeated_setup_reuses_handler(self):
        first = setup_logger("tests.logging.reuse", level="INFO")
        second = setup_logger("tests.logging.reuse", level="DEBUG")
        assert first is second
        assert len(second.handlers) == 1
        assert second.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logger("tests.logging.level", level="CHATTY")
        assert logger.level == logging.INFO
