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

from dataclasses import dataclass, field

from webidl.ast import Node, Range


@dataclass(frozen=True)
class Keyword(Node):
    """
    A keyword or punctuation token, e.g. ``unsigned``, ``sequence`` or ``[``.
    """

    value: str
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return self.value


@dataclass(frozen=True)
class Identifier(Node):
    """
    A WebIDL identifier. The value is kept as written, including a leading escape underscore.
    """

    value: str
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    @property
    def name(self) -> str:
        """The identifier with a leading escape underscore removed"""
        return self.value[1:] if self.value.startswith("_") else self.value

    def unparse(self) -> str:
        return self.value


@dataclass(frozen=True)
class Required(Node):
    """The ``required`` marker of a dictionary member. Only its presence is meaningful."""

    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "required"


@dataclass(frozen=True)
class SemiColon(Node):
    """The ``;`` closing a declaration."""

    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return ";"
