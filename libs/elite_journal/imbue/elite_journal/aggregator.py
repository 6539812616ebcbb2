"""Decode every journal file in a directory into one ordered event stream.

Events come out in file order (see list_journal_files) and, within a file, in
line order. Nothing is re-sorted by timestamp.
"""

import json
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path
from typing import assert_never

from loguru import logger
from pydantic import Field

from imbue.elite_journal.decoder import decode_event_object
from imbue.elite_journal.decoder import decode_line
from imbue.elite_journal.decoder import make_excerpt
from imbue.elite_journal.discovery import get_snapshot_path
from imbue.elite_journal.discovery import list_journal_files
from imbue.elite_journal.errors import DecodeError
from imbue.elite_journal.errors import JournalReadError
from imbue.elite_journal.events import JournalEvent
from imbue.elite_journal.logging import log_span
from imbue.elite_journal.model import FrozenModel
from imbue.elite_journal.model import LineLocation
from imbue.elite_journal.primitives import DecodeErrorCause
from imbue.elite_journal.primitives import DecodeErrorPolicy
from imbue.elite_journal.primitives import SnapshotKind


class AggregationResult(FrozenModel):
    """Everything decoded from a journal directory."""

    model_config = {"arbitrary_types_allowed": True}

    events: tuple[JournalEvent, ...] = Field(description="Decoded events in file order, then line order")
    failures: tuple[DecodeError, ...] = Field(
        default=(),
        description="Lines that could not be decoded (only ever non-empty when skipping failures)",
    )


def iter_decode_results(path: Path) -> Iterator[JournalEvent | DecodeError]:
    """Decode a journal file line by line, yielding each event or the line's DecodeError.

    Blank lines are skipped. Decode failures are yielded rather than raised so that
    callers decide the policy; only failing to read the file raises (JournalReadError).
    """
    try:
        journal_file = path.open("rb")
    except OSError as e:
        raise JournalReadError(path, e.strerror or str(e)) from e

    # Never hold logger.contextualize across a yield: it leaks into the caller's records
    logger.debug("Decoding journal {}", path.name)
    with journal_file:
        line_number = 0
        while True:
            try:
                raw_line = journal_file.readline()
            except OSError as e:
                raise JournalReadError(path, e.strerror or str(e)) from e
            if not raw_line:
                break
            line_number += 1
            location = LineLocation(path=path, line_number=line_number)

            # Decode per line so a bad byte only spoils the line it is on
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as e:
                yield DecodeError(
                    DecodeErrorCause.INVALID_JSON,
                    f"not valid UTF-8: {e}",
                    make_excerpt(raw_line.decode("utf-8", errors="replace")),
                    location,
                )
                continue

            if not line.strip():
                continue

            try:
                yield decode_line(line, location)
            except DecodeError as e:
                yield e
    logger.trace("Decoded {} lines from {}", line_number, path.name)


def iter_journal_events(
    paths: Iterable[Path],
    on_decode_error: DecodeErrorPolicy = DecodeErrorPolicy.ABORT,
) -> Iterator[JournalEvent | DecodeError]:
    """Decode the given journal files in order and yield their events.

    With ABORT the first undecodable line raises its DecodeError, so only events are
    yielded. With SKIP_AND_COLLECT each undecodable line is logged and its DecodeError
    is yielded in place of the event.
    """
    for path in paths:
        for result in iter_decode_results(path):
            if isinstance(result, DecodeError):
                _handle_decode_error(result, on_decode_error)
            yield result


def read_all_events(
    journal_dir: Path,
    on_decode_error: DecodeErrorPolicy = DecodeErrorPolicy.ABORT,
) -> AggregationResult:
    """Decode every journal in journal_dir.

    Either the whole aggregation succeeds or, with ABORT, the first DecodeError is
    raised and nothing is returned. With SKIP_AND_COLLECT the failures are returned
    next to the events.
    """
    journal_paths = list_journal_files(journal_dir)
    events: list[JournalEvent] = []
    failures: list[DecodeError] = []
    with log_span("Reading {} journal files from {}", len(journal_paths), journal_dir):
        for result in iter_journal_events(journal_paths, on_decode_error):
            if isinstance(result, DecodeError):
                failures.append(result)
            else:
                events.append(result)

    logger.debug("Decoded {} events ({} lines skipped)", len(events), len(failures))
    return AggregationResult(events=tuple(events), failures=tuple(failures))


def _handle_decode_error(error: DecodeError, on_decode_error: DecodeErrorPolicy) -> None:
    """Raises the error under ABORT; logs it under SKIP_AND_COLLECT."""
    match on_decode_error:
        case DecodeErrorPolicy.ABORT:
            raise error
        case DecodeErrorPolicy.SKIP_AND_COLLECT:
            journal_path = error.location.path if error.location is not None else None
            logger.bind(journal_path=journal_path).warning(
                "Skipping undecodable line at {} ({}): {}", error.location, error.cause, error.detail
            )
        case _ as unreachable:
            assert_never(unreachable)


def decode_snapshot_file(path: Path) -> JournalEvent:
    """Decode a single-object snapshot file such as Cargo.json or Status.json.

    The game pretty-prints some snapshots over several lines, so the file is parsed
    as a whole rather than line by line.

    Raises JournalReadError if the file cannot be read and DecodeError if it does
    not hold a known event.
    """
    location = LineLocation(path=path)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(DecodeErrorCause.INVALID_JSON, f"not valid UTF-8: {e}", "", location) from None
    except OSError as e:
        raise JournalReadError(path, e.strerror or str(e)) from e

    try:
        raw_event = json.loads(content)
    except json.JSONDecodeError as e:
        raise DecodeError(DecodeErrorCause.INVALID_JSON, str(e), make_excerpt(content), location) from None
    return decode_event_object(raw_event, location)


def read_snapshot(journal_dir: Path, kind: SnapshotKind) -> JournalEvent:
    return decode_snapshot_file(get_snapshot_path(journal_dir, kind))
