from pathlib import Path

from click import ClickException

from imbue.elite_journal.model import LineLocation
from imbue.elite_journal.primitives import DecodeErrorCause


class BaseJournalError(Exception):
    """Base exception for all elite-journal errors."""


class JournalError(ClickException, BaseJournalError):
    """Base exception for all user-facing elite-journal errors.

    Subclasses can set user_help_text to tell the user how to resolve the error.
    The CLI appends it to the message.
    """

    user_help_text: str | None = None

    def format_message(self) -> str:
        if self.user_help_text:
            return str(self) + "  [" + self.user_help_text + "]"
        return str(self)


class DiscoveryError(JournalError):
    """Raised when the set of journal files cannot be determined."""


class JournalDirectoryError(DiscoveryError):
    """The journal directory is missing or cannot be listed."""

    user_help_text = "Pass the directory holding the Journal.*.log files with --journal-dir."

    def __init__(self, journal_dir: Path, reason: str) -> None:
        self.journal_dir = journal_dir
        self.reason = reason
        super().__init__(f"Cannot read journal directory {journal_dir}: {reason}")


class NoJournalFilesError(DiscoveryError):
    """The journal directory exists but holds no journal files."""

    user_help_text = "Start the game at least once so that it writes a journal."

    def __init__(self, journal_dir: Path) -> None:
        self.journal_dir = journal_dir
        super().__init__(f"No journal file found in {journal_dir}")


class JournalReadError(JournalError, OSError):
    """Raised when a journal or snapshot file cannot be read from disk."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class DecodeError(JournalError, ValueError):
    """A line (or snapshot file) does not match the shape of any known event.

    Carries enough context to diagnose the failure without opening the file again:
    where the line came from, a bounded excerpt of it, and what went wrong.
    """

    def __init__(
        self,
        cause: DecodeErrorCause,
        detail: str,
        excerpt: str,
        location: LineLocation | None = None,
    ) -> None:
        self.cause = cause
        self.detail = detail
        self.excerpt = excerpt
        self.location = location
        where = f" at {location}" if location is not None else ""
        super().__init__(f"Cannot decode journal line{where} ({cause}): {detail}\n  {excerpt}")


class ConfigParseError(JournalError):
    """Raised when the reader configuration file is missing or invalid."""

    user_help_text = "Check the file against the documented JournalReaderConfig fields."
