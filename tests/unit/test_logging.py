"""Tests for logging setup."""

import json
import sys

import pytest
from loguru import logger

from settings.logging import setup_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    def test_file_sink_writes_json_lines(self, tmp_path, restore_logger):
        setup_logging(level="WARNING", log_dir=tmp_path)
        logger.debug("cache hit: {}", "acs/acs1")
        logger.remove()

        path = tmp_path / "census_resolver.jsonl"
        records = [json.loads(line)["record"] for line in path.read_text().splitlines()]
        messages = [r["message"] for r in records]
        assert "cache hit: acs/acs1" in messages
        assert records[-1]["level"]["name"] == "DEBUG"

    def test_console_only(self, tmp_path, restore_logger):
        setup_logging(to_file=False, log_dir=tmp_path / "logs")
        logger.info("no file")
        assert not (tmp_path / "logs").exists()
