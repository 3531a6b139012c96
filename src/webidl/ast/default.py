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


class DefaultValue(Node):
    """Base class for the values that can follow ``=`` in a default clause"""


@dataclass(frozen=True)
class BooleanLiteral(DefaultValue):
    value: bool
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class IntegerLiteral(DefaultValue):
    """
    An integer literal. ``raw`` keeps the notation it was written in (decimal, ``0x`` hexadecimal or ``0`` octal), two
    literals with the same value compare equal.
    """

    value: int
    raw: str = field(compare=False)
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return self.raw


@dataclass(frozen=True)
class FloatLiteral(DefaultValue):
    """
    A decimal literal, ``Infinity``, ``-Infinity`` or ``NaN``.

    Literals are compared on their text, as ``NaN`` never equals itself.
    """

    raw: str
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    @property
    def value(self) -> float:
        if self.raw == "Infinity":
            return float("inf")
        if self.raw == "-Infinity":
            return float("-inf")
        if self.raw == "NaN":
            return float("nan")
        return float(self.raw)

    def unparse(self) -> str:
        return self.raw


@dataclass(frozen=True)
class StringLiteral(DefaultValue):
    """A double quoted string. WebIDL strings have no escape sequences, ``value`` is the text between the quotes."""

    value: str
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return '"%s"' % self.value


@dataclass(frozen=True)
class NullLiteral(DefaultValue):
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "null"


@dataclass(frozen=True)
class UndefinedLiteral(DefaultValue):
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "undefined"


@dataclass(frozen=True)
class EmptyArray(DefaultValue):
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "[]"


@dataclass(frozen=True)
class EmptyDictionary(DefaultValue):
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "{}"


@dataclass(frozen=True)
class Default(Node):
    """The ``= value`` clause of a dictionary member or an optional argument"""

    value: DefaultValue
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "= %s" % self.value.unparse()
