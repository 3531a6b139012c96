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
from typing import TYPE_CHECKING, Tuple

from webidl.ast import Node, Range
from webidl.ast.terms import Identifier

if TYPE_CHECKING:
    from webidl.ast.attribute import ExtendedAttributeList  # noqa: F401

STRING_TYPES = ("DOMString", "ByteString", "USVString")
GENERIC_TYPES = ("sequence", "FrozenArray", "ObservableArray", "Promise")


class Type(Node):
    """
    Base class for all WebIDL types.

    The parser does not resolve or validate types, they are kept as written.
    """

    @property
    def nullable(self) -> bool:
        return False


@dataclass(frozen=True)
class BuiltinType(Type):
    """
    A type named by keywords only, e.g. ``any``, ``boolean``, ``unsigned long long`` or ``DOMString``.

    ``name`` holds the keywords separated by a single space.
    """

    name: str
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return self.name


@dataclass(frozen=True)
class IdentifierType(Type):
    """A reference to a named type: an interface, dictionary, enumeration, callback or typedef."""

    identifier: Identifier
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return self.identifier.unparse()


@dataclass(frozen=True)
class GenericType(Type):
    """``sequence<T>``, ``FrozenArray<T>``, ``ObservableArray<T>`` or ``Promise<T>``."""

    kind: str
    argument: Type
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "%s<%s>" % (self.kind, self.argument.unparse())


@dataclass(frozen=True)
class RecordType(Type):
    """``record<K, V>`` where ``K`` is one of the string types."""

    key: BuiltinType
    value: Type
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "record<%s, %s>" % (self.key.unparse(), self.value.unparse())


@dataclass(frozen=True)
class UnionType(Type):
    """``(A or B or ...)``"""

    members: Tuple[Type, ...]
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "(%s)" % " or ".join(member.unparse() for member in self.members)


@dataclass(frozen=True)
class AttributedType(Type):
    """A type preceded by an extended attribute list, e.g. ``[Clamp] octet`` inside ``sequence<[Clamp] octet>``."""

    attributes: "ExtendedAttributeList"
    inner: Type
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    @property
    def nullable(self) -> bool:
        return self.inner.nullable

    def unparse(self) -> str:
        return "%s %s" % (self.attributes.unparse(), self.inner.unparse())


@dataclass(frozen=True)
class NullableType(Type):
    """``T?``"""

    inner: Type
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    @property
    def nullable(self) -> bool:
        return True

    def unparse(self) -> str:
        return "%s?" % self.inner.unparse()
