from collections.abc import Iterable
from collections.abc import Iterator
from typing import Final
from typing import assert_never

from imbue.elite_journal.events import JournalEvent
from imbue.elite_journal.events import ReceiveText
from imbue.elite_journal.events import SendText
from imbue.elite_journal.primitives import Channel

_CHAT_TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d %H:%M"

# The wire values are all lowercase; chat history shows the mixed-case names
CHANNEL_LABEL_BY_CHANNEL: Final[dict[Channel, str]] = {
    Channel.WING: "Wing",
    Channel.LOCAL: "Local",
    Channel.VOICECHAT: "VoiceChat",
    Channel.FRIEND: "Friend",
    Channel.PLAYER: "Player",
    Channel.NPC: "Npc",
    Channel.SQUADRON: "Squadron",
    Channel.STARSYSTEM: "StarSystem",
}


def format_chat_line(event: SendText | ReceiveText) -> str:
    timestamp = event.timestamp.strftime(_CHAT_TIMESTAMP_FORMAT)
    match event:
        case SendText():
            return f"{timestamp}\t@{event.to} me: {event.message}"
        case ReceiveText():
            return f"{timestamp}\t@{CHANNEL_LABEL_BY_CHANNEL[event.channel]} {event.from_}: {event.message}"
        case _ as unreachable:
            assert_never(unreachable)


def iter_chat_lines(events: Iterable[JournalEvent]) -> Iterator[str]:
    """Yield one formatted line per sent or received chat message, in event order."""
    for event in events:
        if isinstance(event, (SendText, ReceiveText)):
            yield format_chat_line(event)
