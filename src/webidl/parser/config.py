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

from webidl.config import Option, is_bool, is_str

trace: Option[bool] = Option(
    "parser",
    "trace",
    False,
    "Log every sub-parse that is attempted while parsing a dictionary member, with the position it was attempted at.",
    is_bool,
)

default_file: Option[str] = Option(
    "parser",
    "default_file",
    "<input>",
    "File name used in reported locations when the parsed text did not come from a file.",
    is_str,
)
