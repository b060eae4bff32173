# twang/utils/logging_config.py

"""
Logging setup for the twang CLI, driven by the [logging] section of the
configuration and by the -v/-q verbosity flags. Uses Rich for console logging.
"""

import logging
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from twang.config import TwangConfig

ROOT_LOGGER_NAME = "twang"

# Tag attached to handlers installed here so repeated setup replaces them.
_HANDLER_TAG = "_twang_handler"


def _console_level(config: TwangConfig, verbosity: int) -> int:
    """
    Maps verbosity onto a console log level.

    -1 (quiet) -> CRITICAL, 0 -> configured console level,
    1 -> INFO, 2 or more -> DEBUG.
    """
    if verbosity < 0:
        return logging.CRITICAL
    if verbosity == 0:
        return logging.getLevelName(config.logging.log_level_console)
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(config: TwangConfig, verbosity: int = 0, timestamp: Optional[datetime] = None) -> logging.Logger:
    """
    Configures the 'twang' logger hierarchy.

    Installs a console handler on stderr and, if enabled, a file handler in
    `config.paths.log_directory`. Handlers from a previous call are removed
    first, so calling this repeatedly (e.g. from tests) does not duplicate
    output.

    Args:
        config: Loaded configuration.
        verbosity: -1 for quiet, 0 for default, 1 for INFO, 2+ for DEBUG.
        timestamp: Time used to fill the log filename template (default: now).

    Returns:
        The configured 'twang' logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    console_level = _console_level(config, verbosity)
    # stdout stays reserved for command output (e.g. `analyze --format json`).
    console_handler = RichHandler(
        level=console_level,
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_TAG, True)
    root.addHandler(console_handler)
    levels = [console_level]

    if config.logging.log_file_enabled:
        log_dir = config.paths.log_directory
        log_dir.mkdir(parents=True, exist_ok=True)
        filename = config.logging.log_filename_template.format(timestamp=timestamp or datetime.now())
        file_level = logging.getLevelName(config.logging.log_level_file)
        file_handler = logging.FileHandler(log_dir / filename, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(config.logging.log_format))
        setattr(file_handler, _HANDLER_TAG, True)
        root.addHandler(file_handler)
        levels.append(file_level)

    # The logger must let through whatever its most verbose handler wants.
    root.setLevel(min(levels))
    root.debug(f"Logging configured (console={logging.getLevelName(console_level)}, "
               f"file={'on' if config.logging.log_file_enabled else 'off'}).")
    return root
