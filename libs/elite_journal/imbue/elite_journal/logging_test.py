"""Tests for logging module."""

from typing import Any

import pytest
from loguru import logger

from imbue.elite_journal.logging import log_span
from imbue.elite_journal.logging import setup_logging
from imbue.elite_journal.primitives import LogLevel


def test_setup_logging_accepts_enum_and_string_levels() -> None:
    setup_logging(LogLevel.DEBUG)
    setup_logging("warning")


# =============================================================================
# Tests for log_span
# =============================================================================


def test_log_span_emits_debug_on_entry_and_trace_on_exit() -> None:
    captured_messages: list[str] = []
    captured_levels: list[str] = []

    def sink(message: Any) -> None:
        captured_messages.append(message.record["message"])
        captured_levels.append(message.record["level"].name)

    handler_id = logger.add(sink, level="TRACE", format="{message}")
    try:
        with log_span("Decoding journal {}", "Journal.01.log"):
            pass
    finally:
        logger.remove(handler_id)

    assert captured_levels == ["DEBUG", "TRACE"]
    assert captured_messages[0] == "Decoding journal Journal.01.log"
    assert captured_messages[1].startswith("Decoding journal Journal.01.log [done in ")


def test_log_span_binds_context_to_enclosed_records() -> None:
    captured_extras: list[dict] = []

    def sink(message: Any) -> None:
        captured_extras.append(dict(message.record["extra"]))

    handler_id = logger.add(sink, level="TRACE", format="{message}")
    try:
        with log_span("Decoding journal", journal_path="/tmp/Journal.01.log"):
            logger.warning("inside")
    finally:
        logger.remove(handler_id)

    assert all(extra["journal_path"] == "/tmp/Journal.01.log" for extra in captured_extras)
    assert len(captured_extras) == 3


def test_log_span_traces_failures_and_reraises() -> None:
    captured_messages: list[str] = []

    def sink(message: Any) -> None:
        captured_messages.append(message.record["message"])

    handler_id = logger.add(sink, level="TRACE", format="{message}")
    try:
        with pytest.raises(ValueError, match="boom"):
            with log_span("Reading journals"):
                raise ValueError("boom")
    finally:
        logger.remove(handler_id)

    assert "Reading journals [failed after " in captured_messages[-1]
