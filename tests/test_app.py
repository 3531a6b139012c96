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

import json
import os

from click import testing

from webidl.app import cmd


def run(*args: str, **kwargs) -> testing.Result:
    runner = testing.CliRunner()
    return runner.invoke(cli=cmd, args=list(args), catch_exceptions=False, **kwargs)


def test_parse_idl():
    result = run("parse", "--format", "idl", "[Clamp] required [EnforceRange]  long num;", "long x=0x1;")
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["required [EnforceRange] long num;", "long x = 0x1;"]


def test_parse_json():
    result = run("parse", "--file-name", "dict.webidl", 'required [Reflect="r"] DOMString name;')
    assert result.exit_code == 0
    exported = json.loads(result.stdout)
    assert exported["name"] == "name"
    assert exported["type"] == "DOMString"
    assert exported["required"] is True
    assert exported["default"] is None
    assert exported["attributes_position"] == "type"
    assert exported["attributes"] == [{"name": "Reflect", "kind": "ident", "rhs": "r", "arguments": []}]
    assert exported["location"]["uri"] == "dict.webidl"


def test_parse_stdin(recwarn):
    result = run("parse", "--format", "idl", input="// from stdin\nsequence<long>? values = [];\n")
    assert result.exit_code == 0
    assert result.stdout.strip() == "sequence<long>? values = [];"
    assert not [w for w in recwarn if issubclass(w.category, DeprecationWarning) and "webidl" in w.filename]


def test_parse_error():
    result = run("parse", "--file-name", "dict.webidl", "long num")
    assert result.exit_code == 1
    assert "Error: Syntax error: expected terminator, found end of input (dict.webidl:1:9)" in result.output


def test_parse_trailing_input():
    result = run("parse", "long a; long b;")
    assert result.exit_code == 1
    assert "unexpected input after dictionary member a" in result.output


def test_config_file(tmpdir):
    config_file = os.path.join(tmpdir, "webidl.cfg")
    with open(config_file, "w", encoding="utf-8") as f:
        f.write("[parser]\ndefault_file=configured.webidl\n")

    result = run("-c", config_file, "parse", "long num;")
    assert result.exit_code == 0
    assert json.loads(result.stdout)["location"]["uri"] == "configured.webidl"


def test_version():
    result = run("--version")
    assert result.exit_code == 0
    assert result.stdout.strip() == "webidl-member, version 1.0.0"
