from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from loguru import logger


@pytest.fixture
def journal_dir(tmp_path: Path) -> Path:
    """An empty directory standing in for the game's journal directory."""
    journal_dir = tmp_path / "Elite Dangerous"
    journal_dir.mkdir()
    return journal_dir


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _remove_log_sinks_after_test() -> Generator[None, None, None]:
    """The CLI replaces loguru's sinks with one bound to the runner's stderr, which is closed after the test."""
    yield
    logger.remove()
