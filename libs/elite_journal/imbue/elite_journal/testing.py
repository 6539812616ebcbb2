import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any
from typing import Final

DOCKED_LINE: Final[str] = '{"event":"Docked","timestamp":"2024-01-01T00:00:00Z"}'
SEND_TEXT_LINE: Final[str] = '{"event":"SendText","timestamp":"2024-01-01T00:01:00Z","To":"Alice","Message":"hi"}'


def write_journal(journal_dir: Path, name: str, lines: Sequence[str]) -> Path:
    """Write a journal file with one line per entry, newline-terminated like the game's."""
    journal_path = journal_dir / name
    journal_path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return journal_path


def make_event_line(event_name: str, timestamp: str = "2024-01-01T00:00:00Z", **fields: Any) -> str:
    return json.dumps({"timestamp": timestamp, "event": event_name, **fields})
