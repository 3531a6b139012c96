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
import sys
from typing import Optional

import click

from webidl import VERSION
from webidl.config import Config
from webidl.logging import setup_cli_logging
from webidl.parser import ParserException, dictionary

LOGGER = logging.getLogger(__name__)


@click.group(help="Parse WebIDL dictionary members")
@click.version_option(VERSION, prog_name="webidl-member")
@click.option(
    "-v",
    "--verbose",
    count=True,
    default=0,
    help="Log level for messages going to the console. Default is warnings, -vv is info and -vvv is debug.",
)
@click.option(
    "-c",
    "--config-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Use this config file, on top of the default config files.",
)
@click.pass_context
def cmd(ctx: click.Context, verbose: int, config_file: Optional[str]) -> None:
    root = logging.getLogger()
    previous_level = root.level
    handler = setup_cli_logging(verbose)

    def restore_logging() -> None:
        root.removeHandler(handler)
        root.setLevel(previous_level)

    ctx.call_on_close(restore_logging)
    Config.load_config(config_file)


@cmd.command(help="Parse dictionary members. Each TEXT is parsed as one member, stdin is read when no TEXT is given.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "idl"]),
    default="json",
    show_default=True,
    help="Print every member as the json export of its structure, or as canonical WebIDL.",
)
@click.option("--file-name", default=None, help="The file name to use in locations, defaults to parser.default_file.")
@click.argument("text", nargs=-1)
def parse(output_format: str, file_name: Optional[str], text: tuple[str, ...]) -> None:
    texts = list(text) if text else [sys.stdin.read()]
    for member_text in texts:
        try:
            member = dictionary.parse(member_text, file_name)
        except ParserException as e:
            LOGGER.debug("Failed to parse %r", member_text, exc_info=True)
            raise click.ClickException(e.format())

        if output_format == "json":
            click.echo(member.export().model_dump_json())
        else:
            click.echo(member.unparse())


def main() -> None:
    cmd()


if __name__ == "__main__":
    main()
