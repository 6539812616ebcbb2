from pathlib import Path

from loguru import logger

from imbue.elite_journal.errors import JournalDirectoryError
from imbue.elite_journal.errors import NoJournalFilesError
from imbue.elite_journal.primitives import JOURNAL_FILE_PREFIX
from imbue.elite_journal.primitives import SNAPSHOT_FILENAME_BY_KIND
from imbue.elite_journal.primitives import SnapshotKind


def list_journal_files(journal_dir: Path) -> tuple[Path, ...]:
    """Return every journal file in journal_dir, oldest first.

    The game puts the creation time and then the part number into each journal's
    file name, so ordering by name is ordering by creation. Neither file contents nor
    modification times are consulted: copies and backups do not preserve mtimes.

    Raises JournalDirectoryError if the directory cannot be listed.
    """
    try:
        entries = tuple(journal_dir.iterdir())
    except OSError as e:
        raise JournalDirectoryError(journal_dir, e.strerror or str(e)) from e

    journal_paths = sorted(
        (path for path in entries if path.name.startswith(JOURNAL_FILE_PREFIX) and path.is_file()),
        key=lambda path: path.name,
    )
    logger.debug("Found {} journal files in {}", len(journal_paths), journal_dir)
    return tuple(journal_paths)


def get_latest_journal_path(journal_dir: Path) -> Path:
    """Return the journal the game is currently writing (the last one by name).

    Raises NoJournalFilesError if the game has never written a journal here.
    """
    journal_paths = list_journal_files(journal_dir)
    if not journal_paths:
        raise NoJournalFilesError(journal_dir)
    return journal_paths[-1]


def get_snapshot_path(journal_dir: Path, kind: SnapshotKind) -> Path:
    return journal_dir / SNAPSHOT_FILENAME_BY_KIND[kind]
