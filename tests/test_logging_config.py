"""Tests for structlog configuration."""

import json

import structlog

from failsafe.config import Settings
from failsafe.logging_config import configure_logging


def test_json_output_respects_level(capsys):
    configure_logging(Settings(_env_file=None, DEBUG=False, LOG_LEVEL="warning"))
    logger = structlog.get_logger()

    logger.info("hidden_event")
    logger.warning("visible_event", scanner="SafetyScanner")

    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    assert len(lines) == 1

    entry = json.loads(lines[0])
    assert entry["event"] == "visible_event"
    assert entry["level"] == "warning"
    assert entry["scanner"] == "SafetyScanner"
    assert "timestamp" in entry


def test_unknown_level_falls_back_to_info(capsys):
    configure_logging(Settings(_env_file=None, DEBUG=True, LOG_LEVEL="verbose"))
    logger = structlog.get_logger()

    logger.debug("hidden_event")
    logger.info("shown_event")

    out = capsys.readouterr().out
    assert "shown_event" in out
    assert "hidden_event" not in out
