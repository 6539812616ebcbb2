import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger

from imbue.elite_journal.primitives import LogLevel


def setup_logging(level: LogLevel | str = LogLevel.INFO) -> None:
    """Replace loguru's default sink with a single stderr sink at the given level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=str(level).upper(),
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )


@contextmanager
def log_span(message: str, *args: Any, **context: Any) -> Iterator[None]:
    """Log a debug message on entry and a trace message with the elapsed time on exit.

    Keyword arguments are bound with logger.contextualize, so every record logged
    inside the span carries them as extra fields. Do not enter a span in a generator
    that yields inside it.
    """
    with logger.contextualize(**context):
        logger.debug(message, *args)
        start_time = time.monotonic()
        try:
            yield
        except BaseException:
            elapsed = time.monotonic() - start_time
            logger.trace(message + " [failed after {:.5f} sec]", *args, elapsed)
            raise
        else:
            elapsed = time.monotonic() - start_time
            logger.trace(message + " [done in {:.5f} sec]", *args, elapsed)
