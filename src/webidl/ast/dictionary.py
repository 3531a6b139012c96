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
from enum import Enum
from typing import List, Optional

from webidl.ast import Node, Range, export
from webidl.ast.attribute import ExtendedAttributeList
from webidl.ast.default import Default
from webidl.ast.terms import Identifier, Required, SemiColon
from webidl.ast.type import Type


class AttributePosition(str, Enum):
    """
    The syntactic position the extended attributes of a dictionary member were taken from.
    """

    member = "member"
    """
        In front of the member: ``[A] required long x;`` or ``[A] long x;``
    """

    type = "type"
    """
        Between ``required`` and the type: ``required [A] long x;``
    """


@dataclass(frozen=True)
class DictionaryMember(Node):
    """
    A single member of a dictionary::

        [member-attrs]? required [type-attrs]? Type identifier ;
        [member-attrs]? Type identifier Default? ;

    ``attributes`` holds the attributes of one position only, see :py:func:`webidl.parser.dictionary.merge_extended_attributes`.
    ``default`` is never set when ``required`` is.
    """

    attributes: Optional[ExtendedAttributeList]
    attributes_position: Optional[AttributePosition]
    required: Optional[Required]
    type: Type
    identifier: Identifier
    default: Optional[Default]
    semi_colon: SemiColon = field(compare=False, repr=False)
    location: Range = field(compare=False, repr=False)
    lexpos: int = field(compare=False, repr=False)
    lexend: int = field(compare=False, repr=False)

    @property
    def is_required(self) -> bool:
        return self.required is not None

    @property
    def name(self) -> str:
        return self.identifier.value

    def unparse(self) -> str:
        parts: List[str] = []
        if self.attributes is not None and self.attributes_position is AttributePosition.member:
            parts.append(self.attributes.unparse())
        if self.required is not None:
            parts.append(self.required.unparse())
        if self.attributes is not None and self.attributes_position is AttributePosition.type:
            parts.append(self.attributes.unparse())
        parts.append(self.type.unparse())
        parts.append(self.identifier.unparse())
        if self.default is not None:
            parts.append(self.default.unparse())
        return " ".join(parts) + self.semi_colon.unparse()

    def export(self) -> export.DictionaryMember:
        return export.DictionaryMember(
            name=self.name,
            type=self.type.unparse(),
            required=self.is_required,
            default=self.default.value.unparse() if self.default is not None else None,
            attributes=[attribute.export() for attribute in self.attributes] if self.attributes is not None else [],
            attributes_position=self.attributes_position.value if self.attributes_position is not None else None,
            location=self.location.export(),
        )
