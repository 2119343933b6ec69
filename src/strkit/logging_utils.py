"""Custom logging utilities for the StrKit command-line interface."""
# src/strkit/logging_utils.py

import logging
import sys
import time
from logging import FileHandler
from pathlib import Path


class _UtcMicrosecondFormatter(logging.Formatter):
    """Format record times in UTC with 6-digit microseconds and a 'Z' suffix."""

    def __init__(self, fmt: str) -> None:
        super().__init__(fmt=fmt, datefmt="%Y-%m-%dT%H:%M:%S")
        self.converter = time.gmtime

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the time with 6-digit microseconds and a 'Z' for UTC."""
        ct = self.converter(record.created)
        s = time.strftime(datefmt, ct) if datefmt else time.strftime(self.default_time_format, ct)
        # Calculate microseconds from the fractional part of `created`
        microseconds = int((record.created - int(record.created)) * 1_000_000)
        return f"{s}.{microseconds:06d}Z"


# Console Log Formatter
class ConsoleFormatter(_UtcMicrosecondFormatter):
    """A custom formatter for console output to provide clean, user-friendly logs."""

    def __init__(self, version: str) -> None:
        """
        Initialize the formatter with the application version.

        Args:
            version: The StrKit version.

        """
        super().__init__(f"%(asctime)s | StrKit - {version} | %(message)s")


# File Log Formatter
class FileFormatter(_UtcMicrosecondFormatter):
    """A detailed formatter for debug log files, aimed at developers."""

    def __init__(self) -> None:
        """Initialize the detailed file formatter."""
        super().__init__("%(asctime)s | %(name)-20s | %(funcName)-20s:%(lineno)-4d | %(levelname)-8s | %(message)s")


def setup_logging(version: str, *, debug: bool = False, log_file: Path | None = None) -> None:
    """
    Configure the root logger for the StrKit CLI.

    Console messages go to stderr so that command output on stdout stays
    machine-readable. The console level is WARNING by default and DEBUG when
    ``debug`` is True. With ``debug`` and a ``log_file``, a detailed DEBUG log
    is also written to that file.

    Args:
        version: The application version, included in console logs.
        debug: If True, sets console level to DEBUG and enables the file log.
        log_file: Where to write the detailed debug log.

    """
    root_logger = logging.getLogger()
    # Clear any handlers created by basicConfig or previous setups
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    console_level = logging.DEBUG if debug else logging.WARNING
    root_logger.setLevel(console_level)

    # --- Console Handler ---
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ConsoleFormatter(version))
    root_logger.addHandler(console_handler)

    if debug and log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)

            # --- File Handler (DEBUG) ---
            file_handler = FileHandler(log_file, mode="w", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(FileFormatter())
            root_logger.addHandler(file_handler)

            root_logger.debug("Debug mode enabled. Detailed logs will be written to %s", log_file)
        except OSError:
            # Console logging keeps working without the file.
            root_logger.exception("Failed to create debug log file. Continuing with console logging only.")
