import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator

from imbue.elite_journal.errors import ConfigParseError
from imbue.elite_journal.journal_dir import get_default_journal_dir
from imbue.elite_journal.model import FrozenModel
from imbue.elite_journal.primitives import DecodeErrorPolicy
from imbue.elite_journal.primitives import LogLevel


class JournalReaderConfig(FrozenModel):
    """Settings for reading a journal directory.

    Example config file:

        journal_dir = "~/Saved Games/Frontier Developments/Elite Dangerous"
        on_decode_error = "skip-and-collect"
        log_level = "debug"
    """

    journal_dir: Path | None = Field(
        default=None,
        description="Directory holding the journal and snapshot files (None means the game's default location)",
    )
    on_decode_error: DecodeErrorPolicy = Field(
        default=DecodeErrorPolicy.ABORT,
        description="Whether an undecodable line aborts the read or is skipped and collected",
    )
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level for the CLI")

    @field_validator("on_decode_error", "log_level", mode="before")
    @classmethod
    def _normalize_enum_spelling(cls, value: Any) -> Any:
        # Accept "skip-and-collect" and "debug" as well as the enum values
        if isinstance(value, str):
            return value.strip().upper().replace("-", "_")
        return value

    def resolve_journal_dir(self) -> Path:
        if self.journal_dir is not None:
            return self.journal_dir.expanduser()
        return get_default_journal_dir()


def load_reader_config(config_path: Path) -> JournalReaderConfig:
    """Raises ConfigParseError if the file is missing, is not valid TOML, or holds invalid settings."""
    try:
        with config_path.open("rb") as f:
            raw_config = tomllib.load(f)
    except OSError as e:
        raise ConfigParseError(f"Cannot read config file: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML in config file {config_path}: {e}") from e

    try:
        return JournalReaderConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigParseError(f"Invalid settings in config file {config_path}: {e}") from e
