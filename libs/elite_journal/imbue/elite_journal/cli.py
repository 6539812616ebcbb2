from pathlib import Path
from typing import Any
from typing import Final

import click
from click_option_group import optgroup
from loguru import logger

from imbue.elite_journal.aggregator import read_all_events
from imbue.elite_journal.chat_history import iter_chat_lines
from imbue.elite_journal.config import JournalReaderConfig
from imbue.elite_journal.config import load_reader_config
from imbue.elite_journal.discovery import get_latest_journal_path
from imbue.elite_journal.discovery import get_snapshot_path
from imbue.elite_journal.logging import setup_logging
from imbue.elite_journal.primitives import DecodeErrorPolicy
from imbue.elite_journal.primitives import LogLevel
from imbue.elite_journal.primitives import SnapshotKind

_LATEST_JOURNAL_CHOICE: Final[str] = "latest-journal"


def _to_cli_choice(value: str) -> str:
    return value.lower().replace("_", "-")


def _from_cli_choice(choice: str) -> str:
    return choice.upper().replace("-", "_")


_PATH_CHOICES: Final[tuple[str, ...]] = tuple(_to_cli_choice(kind) for kind in SnapshotKind) + (
    _LATEST_JOURNAL_CHOICE,
)
_DECODE_ERROR_CHOICES: Final[tuple[str, ...]] = tuple(_to_cli_choice(policy) for policy in DecodeErrorPolicy)


@click.group(name="elite-journal")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with reader settings",
)
@click.option(
    "--journal-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the journal files [default: the game's save directory]",
)
@click.option(
    "--log-level",
    type=click.Choice([_to_cli_choice(level) for level in LogLevel], case_sensitive=False),
    default=None,
    help="Logging level for messages on stderr",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, journal_dir: Path | None, log_level: str | None) -> None:
    """Read the Elite Dangerous journal."""
    config = load_reader_config(config_path) if config_path is not None else JournalReaderConfig()

    # CLI flags win over the config file
    updates: dict[str, Any] = {}
    if journal_dir is not None:
        updates["journal_dir"] = journal_dir
    if log_level is not None:
        updates["log_level"] = LogLevel(_from_cli_choice(log_level))
    config = config.model_copy(update=updates)

    setup_logging(config.log_level)
    ctx.obj = config


@cli.command(name="path")
@click.argument("kind", type=click.Choice(_PATH_CHOICES, case_sensitive=False))
@click.pass_obj
def path_command(config: JournalReaderConfig, kind: str) -> None:
    """Print the path to a snapshot file or to the latest journal."""
    journal_dir = config.resolve_journal_dir()
    if kind.lower() == _LATEST_JOURNAL_CHOICE:
        click.echo(str(get_latest_journal_path(journal_dir)))
        return
    click.echo(str(get_snapshot_path(journal_dir, SnapshotKind(_from_cli_choice(kind)))))


@cli.command(name="events")
@optgroup.group("Decoding")
@optgroup.option(
    "--on-decode-error",
    type=click.Choice(_DECODE_ERROR_CHOICES, case_sensitive=False),
    default=None,
    help="Abort on the first undecodable line, or skip such lines and report them at the end",
)
@click.pass_obj
def events_command(config: JournalReaderConfig, on_decode_error: str | None) -> None:
    """Print every event from every journal, one JSON object per line."""
    policy = DecodeErrorPolicy(_from_cli_choice(on_decode_error)) if on_decode_error else config.on_decode_error
    result = read_all_events(config.resolve_journal_dir(), policy)

    for event in result.events:
        click.echo(event.model_dump_json())

    if result.failures:
        logger.debug("Reporting {} undecodable lines", len(result.failures))
        click.echo(f"Skipped {len(result.failures)} undecodable lines:", err=True)
        for failure in result.failures:
            click.echo(str(failure), err=True)


@cli.command(name="chat-history")
@click.pass_obj
def chat_history_command(config: JournalReaderConfig) -> None:
    """Print every chat message sent or received, oldest first."""
    result = read_all_events(config.resolve_journal_dir(), config.on_decode_error)
    for chat_line in iter_chat_lines(result.events):
        click.echo(chat_line)


def main() -> None:
    cli()
