"""
    Copyright 2026 Inmanta

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

    Contact: code@inmanta.com
"""

import logging
import os
import sys
from typing import Optional

import colorlog
from colorlog.formatter import LogColors

ENVIRON_FORCE_TTY = "WEBIDL_FORCE_TTY"

log_levels = {
    "0": logging.ERROR,
    "1": logging.WARNING,
    "2": logging.INFO,
    "3": logging.DEBUG,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def _is_on_tty() -> bool:
    return (hasattr(sys.stdout, "isatty") and sys.stdout.isatty()) or ENVIRON_FORCE_TTY in os.environ


def convert_log_level(log_level: str, cli: bool = False) -> int:
    """
    Convert the given log level, a name or a number of -v flags, to the corresponding Python log level.

    :param log_level: The log level
    :param cli: True if the logs will be outputted to the CLI.
    :return: python log level
    """
    # maximum of 3 v's
    if log_level.isdigit() and int(log_level) > 3:
        log_level = "3"
    # The minimal log level on the CLI is always WARNING
    if cli and (log_level == "ERROR" or (log_level.isdigit() and int(log_level) < 1)):
        log_level = "WARNING"
    return log_levels[log_level]


class MultiLineFormatter(colorlog.ColoredFormatter):
    """
    Formatter for multi-line log records.

    This class extends the `colorlog.ColoredFormatter` class to indent every line of a record after the first one to the
    width of the header.
    """

    def __init__(
        self,
        fmt: Optional[str] = None,
        *,
        log_colors: Optional[LogColors] = None,
        reset: bool = True,
        no_color: bool = False,
    ):
        """
        Initialize a new `MultiLineFormatter` instance.

        :param fmt: Optional string specifying the log record format.
        :param log_colors: Optional `LogColors` object mapping log level names to color codes.
        :param reset: Boolean indicating whether to reset terminal colors at the end of each log record.
        :param no_color: Boolean indicating whether to disable colors in the output.
        """
        super().__init__(fmt, log_colors=log_colors, reset=reset, no_color=no_color)
        self.fmt = fmt

    def get_header_length(self, record: logging.LogRecord) -> int:
        """
        Get the header length of a given log record.

        :param record: The `logging.LogRecord` object for which to calculate the header length.
        :return: The length of the header in the log record, without color codes.
        """
        # to get the length of the header we want to get the header without the color codes
        formatter = colorlog.ColoredFormatter(
            fmt=self.fmt,
            log_colors=self.log_colors,
            reset=False,
            no_color=True,
        )
        header = formatter.format(
            logging.LogRecord(
                record.name,
                record.levelno,
                record.pathname,
                record.lineno,
                "",
                (),
                None,
            )
        )
        return len(header)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record with added indentation.

        :param record: The `logging.LogRecord` object to format.
        :return: The formatted log record as a string.
        """
        indent: str = " " * self.get_header_length(record)
        head, *tail = super().format(record).splitlines(True)
        return head + "".join(indent + line for line in tail)


def get_console_formatter() -> MultiLineFormatter:
    """
    Returns the formatter for logs that are sent to the console. Colors are only used on a TTY.
    """
    if _is_on_tty():
        log_format = "%(log_color)s%(name)-25s%(levelname)-8s%(reset)s%(blue)s%(message)s"
        log_colors = {"DEBUG": "cyan", "INFO": "green", "WARNING": "yellow", "ERROR": "red", "CRITICAL": "red"}
    else:
        log_format = "%(name)-25s%(levelname)-8s%(message)s"
        log_colors = None
    return MultiLineFormatter(log_format, log_colors=log_colors, reset=_is_on_tty(), no_color=not _is_on_tty())


def setup_cli_logging(verbosity: int) -> logging.Handler:
    """
    Send the logs of this package to stderr, at the level matching the number of -v flags given on the command line.

    :return: the handler that was installed on the root logger
    """
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(get_console_formatter())
    log_level = convert_log_level(str(verbosity), cli=True)
    handler.setLevel(log_level)

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(log_level)
    return handler
