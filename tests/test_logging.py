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

import pytest

from webidl.logging import ENVIRON_FORCE_TTY, MultiLineFormatter, convert_log_level, get_console_formatter, setup_cli_logging


@pytest.mark.parametrize(
    "log_level,cli,expected",
    [
        ("0", False, logging.ERROR),
        ("0", True, logging.WARNING),
        ("1", True, logging.WARNING),
        ("2", True, logging.INFO),
        ("3", True, logging.DEBUG),
        ("7", True, logging.DEBUG),
        ("ERROR", True, logging.WARNING),
        ("ERROR", False, logging.ERROR),
        ("INFO", False, logging.INFO),
    ],
)
def test_convert_log_level(log_level, cli, expected):
    assert convert_log_level(log_level, cli) == expected


def make_record(msg: str) -> logging.LogRecord:
    return logging.LogRecord("webidl.parser", logging.WARNING, __file__, 1, msg, (), None)


def test_multi_line_formatter():
    formatter = MultiLineFormatter("%(name)-15s%(levelname)-8s%(message)s", no_color=True)
    header = "webidl.parser  WARNING "
    assert formatter.get_header_length(make_record("")) == len(header)
    assert formatter.format(make_record("first\nsecond\nthird")) == (
        header + "first\n" + " " * len(header) + "second\n" + " " * len(header) + "third"
    )


def test_console_formatter(monkeypatch):
    monkeypatch.delenv(ENVIRON_FORCE_TTY, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    plain = get_console_formatter()
    assert "\x1b" not in plain.format(make_record("message"))

    monkeypatch.setenv(ENVIRON_FORCE_TTY, "1")
    colored = get_console_formatter()
    assert "\x1b" in colored.format(make_record("message"))


def test_setup_cli_logging():
    root = logging.getLogger()
    previous_level = root.level
    handler = setup_cli_logging(3)
    try:
        assert handler in root.handlers
        assert handler.level == logging.DEBUG
        assert isinstance(handler.formatter, MultiLineFormatter)
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
