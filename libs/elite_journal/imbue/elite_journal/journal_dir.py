"""Resolve the directory where the game writes its journal.

The game always writes to "Saved Games/Frontier Developments/Elite Dangerous"
under the user's profile directory. On Linux (Proton) the profile directory is
inside the Wine prefix, so callers there pass it in as `home`.
"""

from pathlib import Path
from typing import Final

JOURNAL_DIR_PARTS: Final[tuple[str, ...]] = ("Saved Games", "Frontier Developments", "Elite Dangerous")


def get_default_journal_dir(home: Path | None = None) -> Path:
    base_dir = home if home is not None else Path.home()
    return base_dir.joinpath(*JOURNAL_DIR_PARTS)
