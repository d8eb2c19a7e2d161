# ABOUTME: Loguru integration for resolved logger sections
# ABOUTME: Provides console and append-only file sinks and installs them as loguru handlers

import sys
from pathlib import Path
from typing import List, Union

from loguru import logger

from service_config.models.config import AnyLoggerSection


class ConsoleSink:
    """Writes log messages to the current ``sys.stdout``."""

    def write(self, message: str) -> None:
        try:
            sys.stdout.write(message)
        except (OSError, ValueError):
            # Logging must never take the service down
            pass

    def __repr__(self) -> str:
        return "ConsoleSink()"


class FileSink:
    """
    Append-only log file writer.

    The file is opened once, in append mode, when the sink is created and
    stays open for the lifetime of the process. Write failures are dropped.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).resolve()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._stream = self.path.open("a", encoding="utf-8")

    def write(self, message: str) -> None:
        try:
            self._stream.write(message)
            self._stream.flush()
        except (OSError, ValueError):
            # Logging must never take the service down
            pass

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def __repr__(self) -> str:
        return f"FileSink(path={str(self.path)!r})"


def setup_logging(section: AnyLoggerSection) -> List[int]:
    """
    Install a loguru handler for a resolved logger section.

    Existing handlers are removed first. A disabled section leaves loguru
    without any handler. Pretty-printed sections use a coloured text format;
    the others are serialized as one JSON object per line.

    Args:
        section: The resolved logger section.

    Returns:
        The ids of the handlers that were added.
    """
    logger.remove()

    if not section:
        return []

    if section.pretty_print is not None:
        handler_id = logger.add(
            section.sink,
            level=section.level,
            format=section.pretty_print.format(),
            colorize=section.pretty_print.colorize,
            backtrace=True,
            diagnose=True,
            enqueue=False,
            catch=True,
        )
    else:
        handler_id = logger.add(
            section.sink,
            level=section.level,
            format="{message}",
            serialize=True,
            colorize=False,
            backtrace=False,
            diagnose=False,
            enqueue=False,
            catch=True,
        )
    return [handler_id]


def get_logger(name: str):
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance bound to the specified name
    """
    return logger.bind(name=name)
