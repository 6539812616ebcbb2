from inline_snapshot import snapshot

from imbue.elite_journal.chat_history import CHANNEL_LABEL_BY_CHANNEL
from imbue.elite_journal.chat_history import format_chat_line
from imbue.elite_journal.chat_history import iter_chat_lines
from imbue.elite_journal.decoder import decode_line
from imbue.elite_journal.events import ReceiveText
from imbue.elite_journal.primitives import Channel
from imbue.elite_journal.testing import DOCKED_LINE
from imbue.elite_journal.testing import SEND_TEXT_LINE
from imbue.elite_journal.testing import make_event_line


def test_iter_chat_lines_formats_sent_and_received_messages() -> None:
    lines = [
        DOCKED_LINE,
        SEND_TEXT_LINE,
        make_event_line(
            "ReceiveText",
            timestamp="2024-01-01T00:02:30Z",
            From="Alice",
            Message="o7 cmdr",
            Channel="player",
        ),
        make_event_line(
            "ReceiveText",
            timestamp="2024-01-01T00:03:00Z",
            From="$npc_name_decorate:#name=Station;",
            From_Localised="Station",
            Message="Docking request granted",
            Channel="npc",
        ),
    ]

    chat_lines = list(iter_chat_lines(decode_line(line) for line in lines))

    assert chat_lines == snapshot(
        [
            "2024-01-01 00:01\t@Alice me: hi",
            "2024-01-01 00:02\t@Player Alice: o7 cmdr",
            "2024-01-01 00:03\t@Npc $npc_name_decorate:#name=Station;: Docking request granted",
        ]
    )


def test_iter_chat_lines_without_chat_is_empty() -> None:
    assert list(iter_chat_lines([decode_line(DOCKED_LINE)])) == []


def test_every_channel_has_a_chat_label() -> None:
    assert set(CHANNEL_LABEL_BY_CHANNEL) == set(Channel)


def test_received_messages_show_mixed_case_channel_names() -> None:
    event = decode_line(make_event_line("ReceiveText", From="Sol", Message="Welcome", Channel="starsystem"))

    assert isinstance(event, ReceiveText)
    assert format_chat_line(event) == "2024-01-01 00:00\t@StarSystem Sol: Welcome"
