import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

import structlog
from structlog.stdlib import ProcessorFormatter, BoundLogger, add_logger_name
from structlog.processors import (
    JSONRenderer,
    TimeStamper,
    add_log_level,
    StackInfoRenderer,
    format_exc_info,
)
from rich.logging import RichHandler
from structlog.dev import ConsoleRenderer

from vboxsearch.shared.path_handler import PathHandler

LOGGER_NAME = "vboxsearch"


def setup_logging(
    level: int = logging.INFO, log_file_path: Optional[str] = None
) -> BoundLogger:
    """
    Configures structlog on top of the stdlib logger: JSON lines to a rotating
    file under the XDG state directory and rendered lines on the console.
    """
    if log_file_path is None:
        log_file_path = PathHandler().get_state_path("vbox-search-provider.log")
    shared_processors = [
        add_log_level,
        TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
        StackInfoRenderer(),
        format_exc_info,
    ]

    structlog.configure(
        processors=shared_processors
        + [
            add_logger_name,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    std_logger = logging.getLogger(LOGGER_NAME)
    std_logger.setLevel(level)
    std_logger.propagate = False
    for handler in std_logger.handlers[:]:
        std_logger.removeHandler(handler)
    file_handler = RotatingFileHandler(
        log_file_path,
        maxBytes=1024 * 1024,
        backupCount=2,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=shared_processors + [add_logger_name],
            processor=JSONRenderer(),
        )
    )
    std_logger.addHandler(file_handler)
    console_handler = RichHandler(
        rich_tracebacks=True,
        markup=False,
        show_path=False,
        show_time=False,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processor=ConsoleRenderer(colors=False),
            fmt="%(message)s",
        )
    )
    std_logger.addHandler(console_handler)
    return structlog.get_logger(LOGGER_NAME)


def parse_level(name: str) -> int:
    """Maps a level name from the config file to a logging level."""
    level = logging.getLevelName(str(name).upper())
    if isinstance(level, int):
        return level
    return logging.INFO
