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
from typing import Optional

from webidl.ast import Node
from webidl.ast.attribute import ExtendedAttributeList
from webidl.ast.default import Default
from webidl.ast.dictionary import AttributePosition, DictionaryMember
from webidl.parser import ParserException
from webidl.parser.cursor import Cursor
from webidl.parser.peIdlParser import (
    parse_default,
    parse_extended_attribute_list,
    parse_identifier,
    parse_required,
    parse_semi_colon,
    parse_type,
)

LOGGER = logging.getLogger(__name__)


def merge_extended_attributes(
    member_attributes: Optional[ExtendedAttributeList], type_attributes: Optional[ExtendedAttributeList]
) -> tuple[Optional[ExtendedAttributeList], Optional[AttributePosition]]:
    """
    Pick the extended attributes of a required member.

    A required member can carry extended attributes in front of the member (``[A] required long x;``) and in front of
    its type (``required [A] long x;``). The type position wins: when both are present, the member level list is
    dropped. The lists are never combined.

    :return: the attributes to use and the position they were taken from, (None, None) if neither is present
    """
    if type_attributes is not None:
        return type_attributes, AttributePosition.type
    if member_attributes is not None:
        return member_attributes, AttributePosition.member
    return None, None


def parse_dictionary_member(cursor: Cursor) -> tuple[Cursor, DictionaryMember]:
    """
    Parse a single dictionary member at the cursor::

        [member-attrs]? required [type-attrs]? Type identifier ;
        [member-attrs]? Type identifier Default? ;

    :param cursor: the position to start parsing at. Leading whitespace and comments are skipped.
    :return: the cursor positioned right after the terminating ``;`` and the parsed member
    :raises ExpectedConstructException: when the type, the identifier or the terminator is missing
    """
    cursor, member_attributes = parse_extended_attribute_list(cursor)
    cursor, required = parse_required(cursor)

    attributes: Optional[ExtendedAttributeList]
    attributes_position: Optional[AttributePosition]
    default: Optional[Default] = None

    if required is not None:
        cursor, type_attributes = parse_extended_attribute_list(cursor)
        cursor, member_type = parse_type(cursor)
        cursor, identifier = parse_identifier(cursor)
        cursor, semi_colon = parse_semi_colon(cursor)

        attributes, attributes_position = merge_extended_attributes(member_attributes, type_attributes)
        if member_attributes is not None and type_attributes is not None:
            LOGGER.debug(
                "Ignoring extended attributes %s in front of required member %s, using %s in front of its type",
                member_attributes.unparse(),
                identifier.value,
                type_attributes.unparse(),
            )
    else:
        cursor, member_type = parse_type(cursor)
        cursor, identifier = parse_identifier(cursor)
        cursor, default = parse_default(cursor)
        cursor, semi_colon = parse_semi_colon(cursor)

        attributes = member_attributes
        attributes_position = AttributePosition.member if member_attributes is not None else None

    # the span starts at the first token consumed, dropped attributes included
    first: Node = member_type
    if required is not None:
        first = required
    if member_attributes is not None:
        first = member_attributes
    location = first.location.merge(semi_colon.location)

    member = DictionaryMember(
        attributes,
        attributes_position,
        required,
        member_type,
        identifier,
        default,
        semi_colon,
        location,
        first.lexpos,
        semi_colon.lexend,
    )
    return cursor, member


def parse(text: str, file: Optional[str] = None) -> DictionaryMember:
    """
    Parse a text that holds exactly one dictionary member, optionally surrounded by whitespace and comments.

    :param text: the text to parse
    :param file: the file name to use in locations
    :raises ParserException: when the text is not a dictionary member or holds more than the member
    """
    cursor, member = parse_dictionary_member(Cursor.from_string(text, file))
    cursor = cursor.skip_ignored()
    if not cursor.at_end():
        raise ParserException(cursor.location(), cursor.peek(), "unexpected input after dictionary member %s" % member.name)
    return member
