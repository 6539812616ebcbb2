import json
from typing import Any
from typing import Final
from typing import cast

from pydantic import ValidationError

from imbue.elite_journal.errors import DecodeError
from imbue.elite_journal.events import EVENT_CLASS_BY_NAME
from imbue.elite_journal.events import JournalEvent
from imbue.elite_journal.model import LineLocation
from imbue.elite_journal.primitives import DecodeErrorCause

_MAX_EXCERPT_LENGTH: Final[int] = 200

_EVENT_TAG_FIELD: Final[str] = "event"


def make_excerpt(text: str) -> str:
    """Return the text without its line terminator, truncated for error messages."""
    stripped = text.rstrip("\r\n")
    if len(stripped) > _MAX_EXCERPT_LENGTH:
        return stripped[: _MAX_EXCERPT_LENGTH - 3] + "..."
    return stripped


def decode_line(line: str, location: LineLocation | None = None) -> JournalEvent:
    """Decode one journal line into its event.

    Performs no I/O. Raises DecodeError if the line is not a JSON object, has no
    event tag, names an unknown event, or does not match the event's fields.
    """
    excerpt = make_excerpt(line)
    try:
        raw_event = json.loads(line)
    except json.JSONDecodeError as e:
        raise DecodeError(DecodeErrorCause.INVALID_JSON, str(e), excerpt, location) from None
    return _decode_event(raw_event, line, excerpt, location)


def decode_event_object(raw_event: Any, location: LineLocation | None = None) -> JournalEvent:
    """Decode an already parsed JSON value, as read from a snapshot file."""
    event_json = json.dumps(raw_event, ensure_ascii=False)
    return _decode_event(raw_event, event_json, make_excerpt(event_json), location)


def _decode_event(raw_event: Any, event_json: str, excerpt: str, location: LineLocation | None) -> JournalEvent:
    # raw_event picks the model; event_json is what the model validates, since
    # strict validation only reads timestamps and enums from JSON strings
    if not isinstance(raw_event, dict):
        raise DecodeError(
            DecodeErrorCause.NOT_AN_OBJECT,
            f"expected a JSON object, got {type(raw_event).__name__}",
            excerpt,
            location,
        )

    event_name = raw_event.get(_EVENT_TAG_FIELD)
    if not isinstance(event_name, str):
        raise DecodeError(
            DecodeErrorCause.MISSING_EVENT_TAG,
            f"no string {_EVENT_TAG_FIELD!r} field",
            excerpt,
            location,
        )

    event_class = EVENT_CLASS_BY_NAME.get(event_name)
    if event_class is None:
        raise DecodeError(DecodeErrorCause.UNKNOWN_EVENT, f"unknown event {event_name!r}", excerpt, location)

    try:
        decoded = event_class.model_validate_json(event_json)
    except ValidationError as e:
        cause, detail = _describe_validation_error(event_name, e)
        raise DecodeError(cause, detail, excerpt, location) from e
    return cast(JournalEvent, decoded)


def _describe_validation_error(event_name: str, error: ValidationError) -> tuple[DecodeErrorCause, str]:
    # Locations use the wire names, since fields are validated by alias
    details = error.errors(include_url=False)
    is_only_missing_fields = all(detail["type"] == "missing" for detail in details)
    cause = DecodeErrorCause.MISSING_FIELD if is_only_missing_fields else DecodeErrorCause.INVALID_VALUE

    problems: list[str] = []
    for detail in details:
        field_path = ".".join(str(part) for part in detail["loc"])
        if detail["type"] == "missing":
            problems.append(f"missing field {field_path}")
        else:
            problems.append(f"{field_path}: {detail['msg']} (got {make_excerpt(repr(detail['input']))})")
    return cause, f"{event_name}: " + "; ".join(problems)
