"""Logging setup for the py2sass command line.

Three output modes:
- Human mode: [LEVEL] message (colored if TTY)
- Verbose mode: [LEVEL][HH:MM:SS] message
- CI/JSON mode: {"level":"...","ts":"...","msg":"..."}

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves; only the CLI calls ``setup_logging``.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from typing import Any, TextIO

ROOT_LOGGER = "py2sass"


class LogMode(Enum):
    """Logging output mode."""

    HUMAN = "human"
    VERBOSE = "verbose"
    JSON = "json"


RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[90m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[31m",
}


def _is_tty(stream: TextIO | None = None) -> bool:
    stream = stream if stream is not None else sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


class HumanFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] message``, optionally colored."""

    def __init__(self, use_colors: bool = True, timestamps: bool = False) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to wrap the level tag in ANSI colors
            timestamps: Whether to append ``[HH:MM:SS]`` after the level tag
        """
        super().__init__()
        self.use_colors = use_colors
        self.timestamps = timestamps

    def format(self, record: logging.LogRecord) -> str:
        tag = f"[{record.levelname}]"
        if self.use_colors:
            tag = f"{LEVEL_COLORS.get(record.levelno, RESET)}{tag}{RESET}"
        if self.timestamps:
            tag += f"[{datetime.now().strftime('%H:%M:%S')}]"

        message = f"{tag} {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


class VerboseFormatter(HumanFormatter):
    """Formats records as ``[LEVEL][HH:MM:SS] message``."""

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__(use_colors=use_colors, timestamps=True)


class JSONFormatter(logging.Formatter):
    """Formats records as JSON lines for CI logs."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname,
            "ts": datetime.now(UTC).isoformat(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extra = getattr(record, "extra_data", None)
        if extra:
            entry.update(extra)
        return json.dumps(entry)


class Py2SassLogger(logging.Logger):
    """Logger with a ``structured`` helper for JSON-mode fields."""

    def structured(self, level: int, msg: str, **fields: Any) -> None:
        """Log ``msg`` with extra fields that JSONFormatter merges into the entry.

        Args:
            level: Log level
            msg: Log message
            **fields: Additional data for JSON output
        """
        if self.isEnabledFor(level):
            self.log(level, msg, extra={"extra_data": fields})


logging.setLoggerClass(Py2SassLogger)


def get_logger(name: str = ROOT_LOGGER) -> Py2SassLogger:
    """Get a py2sass logger.

    Args:
        name: Logger name (children of ``py2sass`` inherit its handlers)

    Returns:
        Py2SassLogger instance
    """
    return logging.getLogger(name)  # type: ignore[return-value]


def setup_logging(
    mode: LogMode = LogMode.HUMAN,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Attach a single handler to the ``py2sass`` logger.

    Logs go to stderr by default so ``py2sass build`` can write CSS to stdout.

    Args:
        mode: Output mode (human, verbose, json)
        level: Minimum log level
        stream: Output stream (default: stderr)
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    use_colors = _is_tty(stream)
    if mode == LogMode.JSON:
        formatter: logging.Formatter = JSONFormatter()
    elif mode == LogMode.VERBOSE:
        formatter = VerboseFormatter(use_colors=use_colors)
    else:
        formatter = HumanFormatter(use_colors=use_colors)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_from_cli(
    verbose: bool = False,
    quiet: bool = False,
    ci: bool = False,
) -> None:
    """Configure logging from CLI flags.

    Args:
        verbose: Debug level with timestamps
        quiet: Warnings and errors only
        ci: JSON lines output
    """
    if ci:
        mode = LogMode.JSON
    elif verbose:
        mode = LogMode.VERBOSE
    else:
        mode = LogMode.HUMAN

    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    setup_logging(mode=mode, level=level)
