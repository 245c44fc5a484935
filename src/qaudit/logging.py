"""Logging setup for applications embedding QAUDIT.

QAUDIT modules only ever log through `logging.getLogger(__name__)`; nothing
here runs on import. An application calls `configure_logging` once to get a
Rich console on stderr and, optionally, a flight recorder: a memory buffer
of DEBUG records that is written to a file only when something goes wrong.
"""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "qaudit"

#: Library loggers that are noisy at INFO; raised to WARNING by default.
DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside the project with their top-level package.

    Sets `record.prefix` to e.g. "[alembic]" for a record from
    `alembic.runtime.migration`, and to "" for records from `project`
    loggers. Never drops a record.
    """

    def __init__(self, project: str = PROJECT_PREFIX) -> None:
        super().__init__()
        self.project = project

    def filter(self, record: logging.LogRecord) -> bool:
        top_level = record.name.partition(".")[0]
        record.prefix = "" if top_level == self.project else f"[{top_level}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    In debug mode the level is forced to DEBUG and each line carries its
    timestamp, logger name and source path. Otherwise lines are bare
    messages, with third-party ones tagged by `ThirdPartyPrefixFilter`.
    """
    color_system: ColorSystem | None = "auto" if color else None
    level = logging.DEBUG if debug_mode else level

    handler = RichHandler(
        level=level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a flight recorder writing to `path`.

    Up to `capacity` records are held in memory. The buffer is written out
    when a record at `flush_level` or above arrives, or when it fills up;
    with `flush_on_close` also when the handler is closed. The file is not
    created until the first write.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(
    level: int = logging.WARNING,
    *,
    debug_mode: bool = False,
    color: bool = True,
    flight_recorder_path: Path | None = None,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Replace the root logger's handlers with QAUDIT's.

    The root logger itself is opened up to DEBUG; each handler applies its
    own threshold, so the flight recorder sees detail the console hides.

    Args:
        level: Console level.
        debug_mode: Enable debug console formatting.
        color: Enable color console output.
        flight_recorder_path: If given, also install a flight recorder
            writing to this file.
        logger_levels: Per-logger levels, applied over `DEFAULT_LIB_LEVELS`.

    Returns:
        The handlers that were installed.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if flight_recorder_path is not None:
        handlers.append(config_flight_recorder(flight_recorder_path))

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in (DEFAULT_LIB_LEVELS | (logger_levels or {})).items():
        logging.getLogger(name).setLevel(lvl)

    return handlers
