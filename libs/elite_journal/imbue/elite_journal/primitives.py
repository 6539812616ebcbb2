from enum import StrEnum
from enum import auto
from typing import Annotated
from typing import Any
from typing import Final

from pydantic import PlainValidator

# The game names every journal file "Journal.<timestamp>.<part>.log" (older
# builds used "Journal.<yymmddhhmmss>.<part>.log"). Snapshot files such as
# Cargo.json never start with this prefix.
JOURNAL_FILE_PREFIX: Final[str] = "Journal"


class UpperCaseStrEnum(StrEnum):
    """A StrEnum that automatically converts enum member names to uppercase values."""

    @staticmethod
    def _generate_next_value_(
        name: str,
        start: int,
        count: int,
        last_values: list[str],
    ) -> str:
        return name.upper()


class LowerCaseStrEnum(StrEnum):
    """A StrEnum whose auto() values are the lowercased member names."""

    @staticmethod
    def _generate_next_value_(
        name: str,
        start: int,
        count: int,
        last_values: list[str],
    ) -> str:
        return name.lower()


class Channel(LowerCaseStrEnum):
    """Chat channel a ReceiveText message arrived on."""

    WING = auto()
    LOCAL = auto()
    VOICECHAT = auto()
    FRIEND = auto()
    PLAYER = auto()
    NPC = auto()
    SQUADRON = auto()
    STARSYSTEM = auto()


class Vessel(StrEnum):
    """Which vessel a Cargo event describes."""

    SHIP = "Ship"
    SRV = "SRV"


class DecodeErrorPolicy(UpperCaseStrEnum):
    """What the aggregator does when a journal line fails to decode."""

    ABORT = auto()
    SKIP_AND_COLLECT = auto()


class DecodeErrorCause(UpperCaseStrEnum):
    """Why a line could not be turned into an event."""

    INVALID_JSON = auto()
    NOT_AN_OBJECT = auto()
    MISSING_EVENT_TAG = auto()
    UNKNOWN_EVENT = auto()
    MISSING_FIELD = auto()
    INVALID_VALUE = auto()


class LogLevel(UpperCaseStrEnum):
    """Valid logging levels for the CLI."""

    TRACE = auto()
    DEBUG = auto()
    INFO = auto()
    WARNING = auto()
    ERROR = auto()


class SnapshotKind(UpperCaseStrEnum):
    """The fixed-name snapshot files the game rewrites next to the journals."""

    BACKPACK = auto()
    CARGO = auto()
    MARKET = auto()
    MODULES_INFO = auto()
    NAV_ROUTE = auto()
    OUTFITTING = auto()
    SHIP_LOCKER = auto()
    SHIPYARD = auto()
    STATUS = auto()


SNAPSHOT_FILENAME_BY_KIND: Final[dict[SnapshotKind, str]] = {
    SnapshotKind.BACKPACK: "Backpack.json",
    SnapshotKind.CARGO: "Cargo.json",
    SnapshotKind.MARKET: "Market.json",
    SnapshotKind.MODULES_INFO: "ModulesInfo.json",
    SnapshotKind.NAV_ROUTE: "NavRoute.json",
    SnapshotKind.OUTFITTING: "Outfitting.json",
    SnapshotKind.SHIP_LOCKER: "ShipLocker.json",
    SnapshotKind.SHIPYARD: "Shipyard.json",
    SnapshotKind.STATUS: "Status.json",
}


class InvalidIntBoolError(ValueError):
    """Raised when a boolean-as-integer field holds anything other than 0 or 1."""


def decode_int_bool(value: Any) -> bool:
    """Decode the journal's integer boolean encoding: 0 is False, 1 is True.

    JSON true/false are rejected as well, since bool is a subclass of int in Python.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidIntBoolError(f"Must be zero or one, got {value!r}")
    if value == 0:
        return False
    if value == 1:
        return True
    raise InvalidIntBoolError(f"Must be zero or one, got {value!r}")


IntBool = Annotated[bool, PlainValidator(decode_int_bool)]
