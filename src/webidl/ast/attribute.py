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
from typing import Iterator, List, Optional, Tuple, Union

from webidl.ast import Node, Range, export
from webidl.ast.default import Default, StringLiteral
from webidl.ast.terms import Identifier
from webidl.ast.type import Type


@dataclass(frozen=True)
class Argument(Node):
    """
    An argument in the argument list of an extended attribute, e.g. ``optional long x = 0`` in
    ``[Constructor(optional long x = 0)]``.
    """

    attributes: Optional["ExtendedAttributeList"]
    optional: bool
    type: Type
    variadic: bool
    identifier: Identifier
    default: Optional[Default]
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        parts: List[str] = []
        if self.attributes is not None:
            parts.append(self.attributes.unparse())
        if self.optional:
            parts.append("optional")
        parts.append(self.type.unparse() + ("..." if self.variadic else ""))
        parts.append(self.identifier.unparse())
        if self.default is not None:
            parts.append(self.default.unparse())
        return " ".join(parts)

    def export(self) -> export.Argument:
        return export.Argument(
            name=self.identifier.value,
            type=self.type.unparse(),
            optional=self.optional,
            variadic=self.variadic,
            default=self.default.value.unparse() if self.default is not None else None,
            attributes=[attribute.export() for attribute in self.attributes] if self.attributes is not None else [],
        )


def _unparse_arguments(arguments: Tuple[Argument, ...]) -> str:
    return "(%s)" % ", ".join(argument.unparse() for argument in arguments)


class ExtendedAttribute(Node):
    """
    Base class for the six forms an extended attribute can take. Every form has a name and an (possibly empty) argument
    list.
    """

    kind: str
    name: Identifier

    @property
    def arguments(self) -> Tuple[Argument, ...]:
        return ()

    def export(self) -> export.ExtendedAttribute:
        return export.ExtendedAttribute(
            name=self.name.value,
            kind=self.kind,
            arguments=[argument.export() for argument in self.arguments],
        )


@dataclass(frozen=True)
class ExtendedAttributeNoArgs(ExtendedAttribute):
    """``[Replaceable]``"""

    kind = "no_args"

    name: Identifier
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return self.name.unparse()


@dataclass(frozen=True)
class ExtendedAttributeArgList(ExtendedAttribute):
    """``[Constructor(double x, double y)]``"""

    kind = "arg_list"

    name: Identifier
    args: Tuple[Argument, ...]
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    @property
    def arguments(self) -> Tuple[Argument, ...]:
        return self.args

    def unparse(self) -> str:
        return self.name.unparse() + _unparse_arguments(self.args)


@dataclass(frozen=True)
class ExtendedAttributeNamedArgList(ExtendedAttribute):
    """``[LegacyFactoryFunction=Image(DOMString src)]``"""

    kind = "named_arg_list"

    name: Identifier
    rhs: Identifier
    args: Tuple[Argument, ...]
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    @property
    def arguments(self) -> Tuple[Argument, ...]:
        return self.args

    def unparse(self) -> str:
        return "%s=%s%s" % (self.name.unparse(), self.rhs.unparse(), _unparse_arguments(self.args))

    def export(self) -> export.ExtendedAttribute:
        result = super().export()
        result.rhs = self.rhs.value
        return result


@dataclass(frozen=True)
class ExtendedAttributeIdent(ExtendedAttribute):
    """``[PutForwards=name]`` or ``[Reflect="value"]``"""

    kind = "ident"

    name: Identifier
    rhs: Union[Identifier, StringLiteral]
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "%s=%s" % (self.name.unparse(), self.rhs.unparse())

    def export(self) -> export.ExtendedAttribute:
        result = super().export()
        result.rhs = self.rhs.value
        return result


@dataclass(frozen=True)
class ExtendedAttributeIdentList(ExtendedAttribute):
    """``[Exposed=(Window,Worker)]``"""

    kind = "ident_list"

    name: Identifier
    rhs: Tuple[Identifier, ...]
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "%s=(%s)" % (self.name.unparse(), ", ".join(identifier.unparse() for identifier in self.rhs))

    def export(self) -> export.ExtendedAttribute:
        result = super().export()
        result.rhs = [identifier.value for identifier in self.rhs]
        return result


@dataclass(frozen=True)
class ExtendedAttributeWildcard(ExtendedAttribute):
    """``[Exposed=*]``"""

    kind = "wildcard"

    name: Identifier
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def unparse(self) -> str:
        return "%s=*" % self.name.unparse()

    def export(self) -> export.ExtendedAttribute:
        result = super().export()
        result.rhs = "*"
        return result


@dataclass(frozen=True)
class ExtendedAttributeList(Node):
    """A bracketed, comma separated list of extended attributes: ``[A, B=c]``"""

    attributes: Tuple[ExtendedAttribute, ...]
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    def __iter__(self) -> Iterator[ExtendedAttribute]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def names(self) -> List[str]:
        return [attribute.name.value for attribute in self.attributes]

    def get(self, name: str) -> Optional[ExtendedAttribute]:
        """
        Get the first attribute with the given name or None if there is no such attribute.
        """
        for attribute in self.attributes:
            if attribute.name.value == name:
                return attribute
        return None

    def unparse(self) -> str:
        return "[%s]" % ", ".join(attribute.unparse() for attribute in self.attributes)
