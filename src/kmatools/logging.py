"""Logging setup for kmatools.

Copyright © 2026 Pixelgen Technologies AB.
"""
from __future__ import annotations

import logging
import sys
import traceback
import typing
from pathlib import Path

import click

from kmatools.types import PathType

kmatools_root_logger = logging.getLogger("kmatools")


class StyleDict(typing.TypedDict):
    """Style dictionary for kwargs to `click.style`."""

    fg: str


class ColorFormatter(logging.Formatter):
    """Click formatter with colored levels"""

    colors: dict[str, StyleDict] = {
        "debug": StyleDict(fg="blue"),
        "info": StyleDict(fg="green"),
        "warning": StyleDict(fg="yellow"),
        "error": StyleDict(fg="red"),
        "exception": StyleDict(fg="red"),
        "critical": StyleDict(fg="red"),
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format a record with colored level.

        :param record: The record to format.
        :returns str: A formatted log record.
        """
        if not record.exc_info:
            level = record.levelname.lower()
            msg = record.getMessage()
            if level in self.colors:
                timestamp = self.formatTime(record, self.datefmt)
                colored_level = click.style(
                    f"{level.upper():<10}", **self.colors[level]
                )
                prefix = f"{timestamp} [{colored_level}]  "
                msg = "\n".join(prefix + x for x in msg.splitlines())
            return msg
        return logging.Formatter.format(self, record)


class DefaultCliFormatter(logging.Formatter):
    """Plain formatter, info messages are printed as is"""

    def format(self, record: logging.LogRecord) -> str:
        """Format a record for CLI output."""
        if not record.exc_info:
            level = record.levelname.lower()
            msg = record.getMessage()

            if level == "info":
                return msg

            return f"{level.upper()}: {msg}"
        return logging.Formatter.format(self, record)


class ClickHandler(logging.Handler):
    """Click logging handler.

    Messages are forwarded to the console using `click.echo`.
    """

    def __init__(self, level: int = 0, use_stderr: bool = True):
        """Initialize the click handler.

        :param level: The logging level.
        :param use_stderr: Log to sys.stderr instead of sys.stdout.
        """
        super().__init__(level=level)
        self._use_stderr = use_stderr

    def emit(self, record: logging.LogRecord) -> None:
        """Write the record to the console.

        :param record: The record to log.
        """
        try:
            msg = self.format(record)
            click.echo(msg, err=self._use_stderr)
        except Exception:
            self.handleError(record)


class LoggingSetup:
    """Logging setup for kmatools.

    Installs a console handler and, when a log file is given, a file handler
    on the root logger. Use it as a context manager to have the handlers
    removed again and unhandled exceptions written to the log.
    """

    def __init__(
        self, log_file: PathType | None = None, verbose: bool = False, logger=None
    ):
        """Initialize the logging setup.

        :param log_file: the filename of the log output
        :param verbose: enable verbose logging and console output
        :param logger: the logger to configure, default is the root logger
        """
        self.log_file = Path(log_file) if log_file is not None else None
        self.verbose = verbose
        self._root_logger = logger or logging.getLogger()
        self._handlers: list[logging.Handler] = []
        self._previous_level: int | None = None

    def initialize(self):
        """Configure the handlers and the log level."""
        console_handler = ClickHandler()
        console_handler.setFormatter(
            ColorFormatter(datefmt="%Y-%m-%d %H:%M:%S")
            if self.verbose
            else DefaultCliFormatter()
        )
        self._handlers.append(console_handler)

        if self.log_file:
            file_handler = logging.FileHandler(str(self.log_file), mode="w")
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s %(name)s %(levelname)-8s %(message)s")
            )
            self._handlers.append(file_handler)

        self._previous_level = self._root_logger.level
        for handler in self._handlers:
            self._root_logger.addHandler(handler)
        self._root_logger.setLevel(logging.DEBUG if self.verbose else logging.INFO)

    @property
    def log_level(self):
        """Return the current log level."""
        return self._root_logger.level

    def __enter__(self):
        """Enter the context manager.

        This will initialize the logging setup.
        """
        self.initialize()
        return self

    def close(self):
        """Remove and close the handlers installed by this setup."""
        for handler in self._handlers:
            self._root_logger.removeHandler(handler)
            handler.close()
        self._handlers = []
        if self._previous_level is not None:
            self._root_logger.setLevel(self._previous_level)
            self._previous_level = None

    def __exit__(self, exc_type, exc_value, traceback_obj):
        """Exit the context manager.

        Unhandled exceptions are logged before the handlers are removed.
        """
        try:
            if exc_type is not None and not issubclass(
                exc_type, (click.exceptions.ClickException, click.exceptions.Exit)
            ):
                log_exception(self._root_logger, exc_type, exc_value, traceback_obj)
        finally:
            self.close()

        # Reraise exception higher up the stack
        return False


def log_exception(logger, exc_type, exc_value, traceback_obj) -> None:
    """Write an exception and its traceback to `logger` at critical level."""
    if issubclass(exc_type, SystemExit):
        # an explicit exit does not need a trace
        return

    logger.critical("Unhandled exception of type: {}".format(exc_type.__name__))
    logger.critical("Exception message was: {}".format(exc_value))
    for item in traceback.format_exception(exc_type, exc_value, traceback_obj):
        for line in item.splitlines():
            logger.critical(line)


def handle_unhandled_exception(exc_type, exc_value, exc_traceback):
    """Handle "unhandled" exceptions."""
    if issubclass(exc_type, KeyboardInterrupt):
        # Will call default excepthook
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    log_exception(kmatools_root_logger, exc_type, exc_value, exc_traceback)


# Assign the excepthook to the handler
sys.excepthook = handle_unhandled_exception
