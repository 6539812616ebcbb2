import json
from pathlib import Path
from typing import Any

import pytest
from loguru import logger

from imbue.elite_journal.aggregator import decode_snapshot_file
from imbue.elite_journal.aggregator import iter_decode_results
from imbue.elite_journal.aggregator import iter_journal_events
from imbue.elite_journal.aggregator import read_all_events
from imbue.elite_journal.aggregator import read_snapshot
from imbue.elite_journal.errors import DecodeError
from imbue.elite_journal.errors import JournalDirectoryError
from imbue.elite_journal.errors import JournalReadError
from imbue.elite_journal.events import BareEvent
from imbue.elite_journal.events import Cargo
from imbue.elite_journal.events import SendText
from imbue.elite_journal.events import Status
from imbue.elite_journal.primitives import DecodeErrorCause
from imbue.elite_journal.primitives import DecodeErrorPolicy
from imbue.elite_journal.primitives import SnapshotKind
from imbue.elite_journal.testing import DOCKED_LINE
from imbue.elite_journal.testing import SEND_TEXT_LINE
from imbue.elite_journal.testing import make_event_line
from imbue.elite_journal.testing import write_journal


def _event_names(events: Any) -> list[str]:
    return [str(event.event) for event in events]


# =============================================================================
# Ordering
# =============================================================================


def test_read_all_events_concatenates_files_in_name_order(journal_dir: Path) -> None:
    # The second file's timestamps are earlier; events must not be re-sorted by them
    write_journal(
        journal_dir,
        "Journal.02.log",
        [make_event_line("FSDJump", timestamp="2023-01-01T00:00:00Z")],
    )
    write_journal(
        journal_dir,
        "Journal.01.log",
        [
            make_event_line("Docked", timestamp="2024-01-01T00:00:00Z"),
            make_event_line("Undocked", timestamp="2024-01-01T00:05:00Z"),
        ],
    )

    result = read_all_events(journal_dir)

    assert _event_names(result.events) == ["Docked", "Undocked", "FSDJump"]
    assert result.failures == ()


def test_read_all_events_decodes_the_docked_send_text_journal(journal_dir: Path) -> None:
    write_journal(journal_dir, "Journal.01.log", [DOCKED_LINE, SEND_TEXT_LINE])

    events = read_all_events(journal_dir).events

    assert len(events) == 2
    assert isinstance(events[0], BareEvent)
    assert isinstance(events[1], SendText)
    assert events[1].to == "Alice"
    assert events[1].message == "hi"


def test_read_all_events_is_idempotent(journal_dir: Path) -> None:
    write_journal(journal_dir, "Journal.01.log", [DOCKED_LINE, SEND_TEXT_LINE])
    write_journal(journal_dir, "Journal.02.log", [make_event_line("Shutdown")])

    assert read_all_events(journal_dir) == read_all_events(journal_dir)


def test_read_all_events_of_empty_directory_has_no_events(journal_dir: Path) -> None:
    result = read_all_events(journal_dir)

    assert result.events == ()
    assert result.failures == ()


def test_read_all_events_of_missing_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(JournalDirectoryError):
        read_all_events(tmp_path / "nowhere")


def test_blank_lines_are_skipped_without_shifting_line_numbers(journal_dir: Path) -> None:
    write_journal(journal_dir, "Journal.01.log", [DOCKED_LINE, "", "   ", "not json"])

    result = read_all_events(journal_dir, DecodeErrorPolicy.SKIP_AND_COLLECT)

    assert _event_names(result.events) == ["Docked"]
    assert len(result.failures) == 1
    assert result.failures[0].location is not None
    assert result.failures[0].location.line_number == 4


# =============================================================================
# Decode failure policy
# =============================================================================


def test_abort_raises_the_first_decode_error(journal_dir: Path) -> None:
    write_journal(journal_dir, "Journal.01.log", [DOCKED_LINE, "{broken", make_event_line("FutureThing")])

    with pytest.raises(DecodeError) as exc_info:
        read_all_events(journal_dir, DecodeErrorPolicy.ABORT)

    error = exc_info.value
    assert error.cause is DecodeErrorCause.INVALID_JSON
    assert error.location is not None
    assert error.location.path == journal_dir / "Journal.01.log"
    assert error.location.line_number == 2
    assert error.excerpt == "{broken"


def test_abort_is_the_default_policy(journal_dir: Path) -> None:
    write_journal(journal_dir, "Journal.01.log", [make_event_line("FutureThing")])

    with pytest.raises(DecodeError, match="unknown event 'FutureThing'"):
        read_all_events(journal_dir)


def test_skip_and_collect_returns_failures_next_to_events(journal_dir: Path) -> None:
    write_journal(journal_dir, "Journal.01.log", [DOCKED_LINE, "{broken"])
    write_journal(journal_dir, "Journal.02.log", [make_event_line("FutureThing"), SEND_TEXT_LINE])

    result = read_all_events(journal_dir, DecodeErrorPolicy.SKIP_AND_COLLECT)

    assert _event_names(result.events) == ["Docked", "SendText"]
    assert [failure.cause for failure in result.failures] == [
        DecodeErrorCause.INVALID_JSON,
        DecodeErrorCause.UNKNOWN_EVENT,
    ]
    assert [str(failure.location) for failure in result.failures] == [
        f"{journal_dir / 'Journal.01.log'}:2",
        f"{journal_dir / 'Journal.02.log'}:1",
    ]


def test_skip_and_collect_logs_a_warning_per_skipped_line(journal_dir: Path) -> None:
    write_journal(journal_dir, "Journal.01.log", ["{broken", make_event_line("FutureThing")])
    captured_messages: list[str] = []
    captured_levels: list[str] = []

    def sink(message: Any) -> None:
        captured_messages.append(message.record["message"])
        captured_levels.append(message.record["level"].name)

    handler_id = logger.add(sink, level="WARNING", format="{message}")
    try:
        read_all_events(journal_dir, DecodeErrorPolicy.SKIP_AND_COLLECT)
    finally:
        logger.remove(handler_id)

    assert captured_levels == ["WARNING", "WARNING"]
    assert "Journal.01.log:1" in captured_messages[0]
    assert "unknown event 'FutureThing'" in captured_messages[1]


def test_invalid_utf8_spoils_only_its_line(journal_dir: Path) -> None:
    (journal_dir / "Journal.01.log").write_bytes(b'{"event":"Docked"}\n\xff\xfe\n{"event":"Undocked"}\n')

    result = read_all_events(journal_dir, DecodeErrorPolicy.SKIP_AND_COLLECT)

    assert _event_names(result.events) == ["Docked", "Undocked"]
    assert len(result.failures) == 1
    assert result.failures[0].cause is DecodeErrorCause.INVALID_JSON
    assert "not valid UTF-8" in result.failures[0].detail


def test_windows_line_endings_are_accepted(journal_dir: Path) -> None:
    (journal_dir / "Journal.01.log").write_bytes((DOCKED_LINE + "\r\n" + SEND_TEXT_LINE + "\r\n").encode("utf-8"))

    assert _event_names(read_all_events(journal_dir).events) == ["Docked", "SendText"]


# =============================================================================
# Streaming
# =============================================================================


def test_iter_decode_results_yields_failures_in_place(journal_dir: Path) -> None:
    journal_path = write_journal(journal_dir, "Journal.01.log", [DOCKED_LINE, "[]", SEND_TEXT_LINE])

    results = list(iter_decode_results(journal_path))

    assert isinstance(results[0], BareEvent)
    assert isinstance(results[1], DecodeError)
    assert results[1].cause is DecodeErrorCause.NOT_AN_OBJECT
    assert isinstance(results[2], SendText)


def test_iter_decode_results_of_missing_file_is_a_read_error(journal_dir: Path) -> None:
    with pytest.raises(JournalReadError, match="Cannot read") as exc_info:
        list(iter_decode_results(journal_dir / "Journal.01.log"))

    assert isinstance(exc_info.value, OSError)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_iter_journal_events_skipping_yields_failures_in_place(journal_dir: Path) -> None:
    first_path = write_journal(journal_dir, "Journal.01.log", [DOCKED_LINE, make_event_line("FutureThing")])
    second_path = write_journal(journal_dir, "Journal.02.log", [SEND_TEXT_LINE])

    results = list(iter_journal_events([first_path, second_path], DecodeErrorPolicy.SKIP_AND_COLLECT))

    assert len(results) == 3
    assert isinstance(results[0], BareEvent)
    assert isinstance(results[1], DecodeError)
    assert results[1].cause is DecodeErrorCause.UNKNOWN_EVENT
    assert results[1].location is not None
    assert results[1].location.line_number == 2
    assert isinstance(results[2], SendText)


def test_iter_decode_results_does_not_leak_log_context_to_caller(journal_dir: Path) -> None:
    journal_path = write_journal(journal_dir, "Journal.01.log", [DOCKED_LINE, SEND_TEXT_LINE])
    captured_extras: list[dict] = []

    def sink(message: Any) -> None:
        captured_extras.append(dict(message.record["extra"]))

    handler_id = logger.add(sink, level="INFO", format="{message}")
    try:
        results = iter_decode_results(journal_path)
        next(results)
        logger.info("between lines")
        results.close()
    finally:
        logger.remove(handler_id)

    assert captured_extras == [{}]


def test_skipped_line_warning_carries_the_journal_path(journal_dir: Path) -> None:
    journal_path = write_journal(journal_dir, "Journal.01.log", ["{broken"])
    captured_extras: list[dict] = []

    def sink(message: Any) -> None:
        captured_extras.append(dict(message.record["extra"]))

    handler_id = logger.add(sink, level="WARNING", format="{message}")
    try:
        list(iter_journal_events([journal_path], DecodeErrorPolicy.SKIP_AND_COLLECT))
    finally:
        logger.remove(handler_id)

    assert captured_extras == [{"journal_path": journal_path}]


def test_iter_journal_events_aborting_stops_at_the_failure(journal_dir: Path) -> None:
    journal_path = write_journal(journal_dir, "Journal.01.log", [DOCKED_LINE, make_event_line("FutureThing")])
    events = iter_journal_events([journal_path])

    assert _event_names([next(events)]) == ["Docked"]
    with pytest.raises(DecodeError):
        next(events)


# =============================================================================
# Snapshots
# =============================================================================


def test_read_snapshot_decodes_pretty_printed_status(journal_dir: Path) -> None:
    status = {
        "timestamp": "2024-01-01T00:00:00Z",
        "event": "Status",
        "Flags": 16842765,
        "Flags2": 0,
        "Pips": [4, 8, 0],
        "FireGroup": 0,
        "GuiFocus": 0,
        "Fuel": {"FuelMain": 16.0, "FuelReservoir": 0.49},
        "Cargo": 0.0,
        "LegalState": "Clean",
        "Balance": 1234567,
    }
    (journal_dir / "Status.json").write_text(json.dumps(status, indent=2), encoding="utf-8")

    event = read_snapshot(journal_dir, SnapshotKind.STATUS)

    assert isinstance(event, Status)
    assert event.flags == 16842765
    assert event.pips == (4, 8, 0)
    assert event.fuel is not None
    assert event.fuel.fuel_main == 16.0
    assert event.legal_state == "Clean"


def test_read_snapshot_decodes_cargo_inventory(journal_dir: Path) -> None:
    cargo_line = make_event_line(
        "Cargo",
        Vessel="Ship",
        Count=3,
        Inventory=[{"Name": "gold", "Count": 3, "Stolen": 0}],
    )
    (journal_dir / "Cargo.json").write_text(cargo_line, encoding="utf-8")

    event = read_snapshot(journal_dir, SnapshotKind.CARGO)

    assert isinstance(event, Cargo)
    assert event.inventory[0].name == "gold"
    assert event.inventory[0].mission_id is None


def test_read_snapshot_of_missing_file_is_a_read_error(journal_dir: Path) -> None:
    with pytest.raises(JournalReadError, match="Market.json"):
        read_snapshot(journal_dir, SnapshotKind.MARKET)


def test_decode_snapshot_file_with_invalid_json_is_a_decode_error(journal_dir: Path) -> None:
    snapshot_path = journal_dir / "NavRoute.json"
    snapshot_path.write_text('{"event": "NavRoute",', encoding="utf-8")

    with pytest.raises(DecodeError) as exc_info:
        decode_snapshot_file(snapshot_path)

    assert exc_info.value.cause is DecodeErrorCause.INVALID_JSON
    assert exc_info.value.location is not None
    assert exc_info.value.location.path == snapshot_path
