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
import re
import threading
import typing
from contextvars import ContextVar
from typing import Callable, Optional, TypeVar

import pe
from pe._grammar import Grammar
from pe.actions import Action
from pe.operators import AutoIgnore
from pe.operators import Capture as Cap
from pe.operators import Choice as Ch
from pe.operators import Class
from pe.operators import Nonterminal as NT
from pe.operators import Optional as Opt
from pe.operators import Plus, Regex
from pe.operators import Sequence as Seq
from pe.operators import Star
from pe.packrat import PackratParser
from webidl.ast import Node, Range
from webidl.ast.attribute import (
    Argument,
    ExtendedAttribute,
    ExtendedAttributeArgList,
    ExtendedAttributeIdent,
    ExtendedAttributeIdentList,
    ExtendedAttributeList,
    ExtendedAttributeNamedArgList,
    ExtendedAttributeNoArgs,
    ExtendedAttributeWildcard,
)
from webidl.ast.default import (
    BooleanLiteral,
    Default,
    DefaultValue,
    EmptyArray,
    EmptyDictionary,
    FloatLiteral,
    IntegerLiteral,
    NullLiteral,
    StringLiteral,
    UndefinedLiteral,
)
from webidl.ast.terms import Identifier, Keyword, Required, SemiColon
from webidl.ast.type import AttributedType, BuiltinType, GenericType, IdentifierType, NullableType, RecordType, Type, UnionType
from webidl.parser import Construct, ExpectedConstructException
from webidl.parser.config import trace
from webidl.parser.cursor import BLOCK_COMMENT_PAT, IGNORED_REGEX, LINE_COMMENT_PAT, WHITESPACE, Cursor

LOGGER = logging.getLogger(__name__)

# rule name -> keyword
KEYWORDS: dict[str, str] = {
    "KW_required": "required",
    "KW_optional": "optional",
    "KW_or": "or",
    "KW_unsigned": "unsigned",
    "KW_unrestricted": "unrestricted",
    "KW_short": "short",
    "KW_long": "long",
    "KW_float": "float",
    "KW_double": "double",
    "KW_boolean": "boolean",
    "KW_byte": "byte",
    "KW_octet": "octet",
    "KW_bigint": "bigint",
    "KW_any": "any",
    "KW_object": "object",
    "KW_symbol": "symbol",
    "KW_undefined": "undefined",
    "KW_DOMString": "DOMString",
    "KW_ByteString": "ByteString",
    "KW_USVString": "USVString",
    "KW_sequence": "sequence",
    "KW_FrozenArray": "FrozenArray",
    "KW_ObservableArray": "ObservableArray",
    "KW_Promise": "Promise",
    "KW_record": "record",
    "KW_true": "true",
    "KW_false": "false",
    "KW_null": "null",
    "KW_Infinity": "Infinity",
    "KW_NEG_INFINITY": "-Infinity",
    "KW_NaN": "NaN",
}

# rule name -> punctuation
PUNCTUATION: dict[str, str] = {
    "LBRACKET": "[",
    "RBRACKET": "]",
    "LPAREN": "(",
    "RPAREN": ")",
    "LT": "<",
    "GT": ">",
    "LBRACE": "{",
    "RBRACE": "}",
    "COMMA": ",",
    "EQUALS": "=",
    "SEMICOLON": ";",
    "QMARK": "?",
    "ELLIPSIS": "...",
    "ASTERISK": "*",
}

IDENT_CONT_PAT = r"(?![0-9A-Z_a-z\-])"
IDENTIFIER_PAT = r"[_-]?[A-Za-z][0-9A-Z_a-z\-]*"
STRING_PAT = r'"[^"]*"'
DECIMAL_PAT = r"-?(?:(?:[0-9]+\.[0-9]*|[0-9]*\.[0-9]+)(?:[Ee][+-]?[0-9]+)?|[0-9]+[Ee][+-]?[0-9]+)"
INTEGER_PAT = r"-?(?:0[Xx][0-9A-Fa-f]+|[1-9][0-9]*|0[0-7]*)"

# ---------------------------------------------------------------------------
# Parse state, set for the duration of a single match
# ---------------------------------------------------------------------------

_state: ContextVar[Cursor] = ContextVar("webidl_parse_state")


def _token_span(s: str, pos: int, text: str) -> tuple[Range, int, int]:
    """
    Locate a token that was captured by a rule matching s from pos. Ignored text in front of the token is skipped.
    """
    match = IGNORED_REGEX.match(s, pos)
    start = match.end() if match is not None else pos
    end = start + len(text)
    return _state.get().make_range(start, end), start, end


def _span(first: Node, last: Node) -> tuple[Range, int, int]:
    return first.location.merge(last.location), first.lexpos, last.lexend


def _to_int(raw: str) -> int:
    sign = -1 if raw.startswith("-") else 1
    digits = raw.lstrip("-")
    if digits[:2] in ("0x", "0X"):
        return sign * int(digits[2:], 16)
    if digits.startswith("0") and len(digits) > 1:
        return sign * int(digits[1:], 8)
    return sign * int(digits)


# ---------------------------------------------------------------------------
# Custom Action wrapper
# ---------------------------------------------------------------------------


class PosAction(Action):  # type: ignore[misc]
    """Action that receives (s, pos, end, args) and returns a single value."""

    def __init__(self, func: Callable[..., object]) -> None:
        self.func = func

    def __call__(
        self,
        s: str,
        pos: int,
        end: int,
        args: tuple[object, ...],
        kwargs: dict[str, object],
    ) -> tuple[tuple[object, ...], Optional[dict[str, object]]]:
        result = self.func(s, pos, end, list(args))
        return (result,), None


def P(fn: Callable[..., object]) -> PosAction:
    return PosAction(fn)


def _first(s: str, pos: int, end: int, args: list[object]) -> object:
    return args[0]


# ---------------------------------------------------------------------------
# Token actions
# ---------------------------------------------------------------------------


def act_keyword(s: str, pos: int, end: int, args: list[object]) -> Keyword:
    text = str(args[0])
    return Keyword(text, *_token_span(s, pos, text))


def act_identifier(s: str, pos: int, end: int, args: list[object]) -> Identifier:
    text = str(args[0])
    return Identifier(text, *_token_span(s, pos, text))


def act_string(s: str, pos: int, end: int, args: list[object]) -> StringLiteral:
    text = str(args[0])
    return StringLiteral(text[1:-1], *_token_span(s, pos, text))


def act_integer(s: str, pos: int, end: int, args: list[object]) -> IntegerLiteral:
    text = str(args[0])
    return IntegerLiteral(_to_int(text), text, *_token_span(s, pos, text))


def act_decimal(s: str, pos: int, end: int, args: list[object]) -> FloatLiteral:
    text = str(args[0])
    return FloatLiteral(text, *_token_span(s, pos, text))


# ---------------------------------------------------------------------------
# Term actions
# ---------------------------------------------------------------------------


def act_required(s: str, pos: int, end: int, args: list[object]) -> Required:
    keyword = typing.cast(Keyword, args[0])
    return Required(keyword.location, keyword.lexpos, keyword.lexend)


def act_semi_colon(s: str, pos: int, end: int, args: list[object]) -> SemiColon:
    keyword = typing.cast(Keyword, args[0])
    return SemiColon(keyword.location, keyword.lexpos, keyword.lexend)


# ---------------------------------------------------------------------------
# Extended attribute actions
# ---------------------------------------------------------------------------


def act_extended_attribute_list(s: str, pos: int, end: int, args: list[object]) -> ExtendedAttributeList:
    attributes = tuple(a for a in args if isinstance(a, ExtendedAttribute))
    return ExtendedAttributeList(attributes, *_span(typing.cast(Node, args[0]), typing.cast(Node, args[-1])))


def act_ea_no_args(s: str, pos: int, end: int, args: list[object]) -> ExtendedAttributeNoArgs:
    name = typing.cast(Identifier, args[0])
    return ExtendedAttributeNoArgs(name, name.location, name.lexpos, name.lexend)


def act_ea_arg_list(s: str, pos: int, end: int, args: list[object]) -> ExtendedAttributeArgList:
    # identifier ( arguments )
    name = typing.cast(Identifier, args[0])
    arguments = typing.cast(tuple[Argument, ...], args[2])
    return ExtendedAttributeArgList(name, arguments, *_span(name, typing.cast(Node, args[3])))


def act_ea_named_arg_list(s: str, pos: int, end: int, args: list[object]) -> ExtendedAttributeNamedArgList:
    # identifier = identifier ( arguments )
    name = typing.cast(Identifier, args[0])
    rhs = typing.cast(Identifier, args[2])
    arguments = typing.cast(tuple[Argument, ...], args[4])
    return ExtendedAttributeNamedArgList(name, rhs, arguments, *_span(name, typing.cast(Node, args[5])))


def act_ea_ident(s: str, pos: int, end: int, args: list[object]) -> ExtendedAttributeIdent:
    # identifier = (identifier | string)
    name = typing.cast(Identifier, args[0])
    rhs = typing.cast(typing.Union[Identifier, StringLiteral], args[2])
    return ExtendedAttributeIdent(name, rhs, *_span(name, rhs))


def act_ea_ident_list(s: str, pos: int, end: int, args: list[object]) -> ExtendedAttributeIdentList:
    # identifier = ( identifier (, identifier)* )
    name = typing.cast(Identifier, args[0])
    identifiers = tuple(a for a in args[1:] if isinstance(a, Identifier))
    return ExtendedAttributeIdentList(name, identifiers, *_span(name, typing.cast(Node, args[-1])))


def act_ea_wildcard(s: str, pos: int, end: int, args: list[object]) -> ExtendedAttributeWildcard:
    name = typing.cast(Identifier, args[0])
    return ExtendedAttributeWildcard(name, *_span(name, typing.cast(Node, args[2])))


def act_argument_list(s: str, pos: int, end: int, args: list[object]) -> tuple[Argument, ...]:
    return tuple(a for a in args if isinstance(a, Argument))


def act_argument(s: str, pos: int, end: int, args: list[object]) -> Argument:
    attributes: Optional[ExtendedAttributeList] = None
    optional = False
    variadic = False
    arg_type: Optional[Type] = None
    identifier: Optional[Identifier] = None
    default: Optional[Default] = None
    for a in args:
        if isinstance(a, ExtendedAttributeList):
            attributes = a
        elif isinstance(a, Keyword):
            optional = optional or a.value == "optional"
            variadic = variadic or a.value == "..."
        elif isinstance(a, Type):
            arg_type = a
        elif isinstance(a, Identifier):
            identifier = a
        elif isinstance(a, Default):
            default = a
    assert arg_type is not None and identifier is not None
    return Argument(
        attributes,
        optional,
        arg_type,
        variadic,
        identifier,
        default,
        *_span(typing.cast(Node, args[0]), typing.cast(Node, args[-1])),
    )


# ---------------------------------------------------------------------------
# Type actions
# ---------------------------------------------------------------------------


def act_builtin_type(s: str, pos: int, end: int, args: list[object]) -> BuiltinType:
    keywords = [typing.cast(Keyword, a) for a in args]
    return BuiltinType(" ".join(k.value for k in keywords), *_span(keywords[0], keywords[-1]))


def act_identifier_type(s: str, pos: int, end: int, args: list[object]) -> IdentifierType:
    identifier = typing.cast(Identifier, args[0])
    return IdentifierType(identifier, identifier.location, identifier.lexpos, identifier.lexend)


def act_generic_type(s: str, pos: int, end: int, args: list[object]) -> GenericType:
    # kind < type >
    kind = typing.cast(Keyword, args[0])
    return GenericType(kind.value, typing.cast(Type, args[2]), *_span(kind, typing.cast(Node, args[3])))


def act_record_type(s: str, pos: int, end: int, args: list[object]) -> RecordType:
    # record < key , value >
    return RecordType(
        typing.cast(BuiltinType, args[2]),
        typing.cast(Type, args[4]),
        *_span(typing.cast(Node, args[0]), typing.cast(Node, args[5])),
    )


def act_union_type(s: str, pos: int, end: int, args: list[object]) -> UnionType:
    members = tuple(a for a in args if isinstance(a, Type))
    return UnionType(members, *_span(typing.cast(Node, args[0]), typing.cast(Node, args[-1])))


def act_type(s: str, pos: int, end: int, args: list[object]) -> Type:
    inner = typing.cast(Type, args[0])
    if len(args) == 1:
        return inner
    # trailing ?
    return NullableType(inner, *_span(inner, typing.cast(Node, args[1])))


def act_type_with_extended_attributes(s: str, pos: int, end: int, args: list[object]) -> Type:
    if len(args) == 1:
        return typing.cast(Type, args[0])
    attributes = typing.cast(ExtendedAttributeList, args[0])
    inner = typing.cast(Type, args[1])
    return AttributedType(attributes, inner, *_span(attributes, inner))


# ---------------------------------------------------------------------------
# Default value actions
# ---------------------------------------------------------------------------


def act_boolean_literal(s: str, pos: int, end: int, args: list[object]) -> BooleanLiteral:
    keyword = typing.cast(Keyword, args[0])
    return BooleanLiteral(keyword.value == "true", keyword.location, keyword.lexpos, keyword.lexend)


def act_float_literal(s: str, pos: int, end: int, args: list[object]) -> FloatLiteral:
    value = args[0]
    if isinstance(value, FloatLiteral):
        return value
    # Infinity, -Infinity or NaN
    keyword = typing.cast(Keyword, value)
    return FloatLiteral(keyword.value, keyword.location, keyword.lexpos, keyword.lexend)


def act_null_literal(s: str, pos: int, end: int, args: list[object]) -> NullLiteral:
    keyword = typing.cast(Keyword, args[0])
    return NullLiteral(keyword.location, keyword.lexpos, keyword.lexend)


def act_undefined_literal(s: str, pos: int, end: int, args: list[object]) -> UndefinedLiteral:
    keyword = typing.cast(Keyword, args[0])
    return UndefinedLiteral(keyword.location, keyword.lexpos, keyword.lexend)


def act_empty_array(s: str, pos: int, end: int, args: list[object]) -> EmptyArray:
    return EmptyArray(*_span(typing.cast(Node, args[0]), typing.cast(Node, args[1])))


def act_empty_dictionary(s: str, pos: int, end: int, args: list[object]) -> EmptyDictionary:
    return EmptyDictionary(*_span(typing.cast(Node, args[0]), typing.cast(Node, args[1])))


def act_default(s: str, pos: int, end: int, args: list[object]) -> Default:
    # = value
    value = typing.cast(DefaultValue, args[1])
    return Default(value, *_span(typing.cast(Node, args[0]), value))


# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------


def _build_parser(start: str) -> PackratParser:
    """Build a pe PackratParser for the grammar, starting at the given rule"""

    WS_IGNORE = Star(Ch(Class(WHITESPACE), Regex(LINE_COMMENT_PAT), Regex(BLOCK_COMMENT_PAT)))

    rules: dict[str, object] = {}
    actions: dict[str, PosAction] = {}

    # --- Token rules ---
    for name, word in KEYWORDS.items():
        # keywords are Regex so they're Primary and can't be followed by identifier characters
        rules[name] = AutoIgnore(Cap(Regex(re.escape(word) + IDENT_CONT_PAT)))
        actions[name] = P(act_keyword)
    for name, punctuation in PUNCTUATION.items():
        rules[name] = AutoIgnore(Cap(Regex(re.escape(punctuation))))
        actions[name] = P(act_keyword)

    rules["identifier"] = AutoIgnore(Cap(Regex(IDENTIFIER_PAT)))
    rules["string"] = AutoIgnore(Cap(Regex(STRING_PAT)))
    rules["decimal"] = AutoIgnore(Cap(Regex(DECIMAL_PAT)))
    rules["integer"] = AutoIgnore(Cap(Regex(INTEGER_PAT)))

    # --- Terms ---
    rules["required"] = AutoIgnore(NT("KW_required"))
    rules["semi_colon"] = AutoIgnore(NT("SEMICOLON"))

    # --- Extended attributes ---
    rules["extended_attribute_list"] = AutoIgnore(
        Seq(NT("LBRACKET"), NT("extended_attribute"), Star(Seq(NT("COMMA"), NT("extended_attribute"))), NT("RBRACKET"))
    )
    rules["ea_named_arg_list"] = AutoIgnore(
        Seq(NT("identifier"), NT("EQUALS"), NT("identifier"), NT("LPAREN"), NT("argument_list"), NT("RPAREN"))
    )
    rules["ea_arg_list"] = AutoIgnore(Seq(NT("identifier"), NT("LPAREN"), NT("argument_list"), NT("RPAREN")))
    rules["ea_ident_list"] = AutoIgnore(
        Seq(
            NT("identifier"),
            NT("EQUALS"),
            NT("LPAREN"),
            NT("identifier"),
            Star(Seq(NT("COMMA"), NT("identifier"))),
            NT("RPAREN"),
        )
    )
    rules["ea_wildcard"] = AutoIgnore(Seq(NT("identifier"), NT("EQUALS"), NT("ASTERISK")))
    rules["ea_ident"] = AutoIgnore(Seq(NT("identifier"), NT("EQUALS"), Ch(NT("identifier"), NT("string"))))
    rules["ea_no_args"] = AutoIgnore(NT("identifier"))
    # longest forms first, they all start with an identifier
    rules["extended_attribute"] = AutoIgnore(
        Ch(
            NT("ea_named_arg_list"),
            NT("ea_arg_list"),
            NT("ea_ident_list"),
            NT("ea_wildcard"),
            NT("ea_ident"),
            NT("ea_no_args"),
        )
    )

    # --- Arguments ---
    rules["argument_optional"] = AutoIgnore(
        Seq(
            Opt(NT("extended_attribute_list")),
            NT("KW_optional"),
            NT("type_with_extended_attributes"),
            NT("identifier"),
            Opt(NT("default")),
        )
    )
    rules["argument_single"] = AutoIgnore(
        Seq(Opt(NT("extended_attribute_list")), NT("type"), Opt(NT("ELLIPSIS")), NT("identifier"))
    )
    rules["argument"] = AutoIgnore(Ch(NT("argument_optional"), NT("argument_single")))
    rules["argument_list"] = AutoIgnore(Opt(Seq(NT("argument"), Star(Seq(NT("COMMA"), NT("argument"))))))

    # --- Types ---
    rules["integer_type"] = AutoIgnore(Ch(Seq(NT("KW_long"), NT("KW_long")), NT("KW_long"), NT("KW_short")))
    rules["float_type"] = AutoIgnore(Ch(NT("KW_float"), NT("KW_double")))
    rules["string_type"] = AutoIgnore(Ch(NT("KW_DOMString"), NT("KW_ByteString"), NT("KW_USVString")))
    rules["builtin_type"] = AutoIgnore(
        Ch(
            Seq(NT("KW_unsigned"), NT("integer_type")),
            Seq(NT("KW_unrestricted"), NT("float_type")),
            NT("integer_type"),
            NT("float_type"),
            NT("KW_boolean"),
            NT("KW_byte"),
            NT("KW_octet"),
            NT("KW_bigint"),
            NT("KW_DOMString"),
            NT("KW_ByteString"),
            NT("KW_USVString"),
            NT("KW_any"),
            NT("KW_object"),
            NT("KW_symbol"),
            NT("KW_undefined"),
        )
    )
    rules["identifier_type"] = AutoIgnore(NT("identifier"))
    rules["generic_type"] = AutoIgnore(
        Seq(
            Ch(NT("KW_sequence"), NT("KW_FrozenArray"), NT("KW_ObservableArray"), NT("KW_Promise")),
            NT("LT"),
            NT("type_with_extended_attributes"),
            NT("GT"),
        )
    )
    rules["record_type"] = AutoIgnore(
        Seq(NT("KW_record"), NT("LT"), NT("string_type"), NT("COMMA"), NT("type_with_extended_attributes"), NT("GT"))
    )
    rules["union_type"] = AutoIgnore(
        Seq(
            NT("LPAREN"),
            NT("type_with_extended_attributes"),
            Plus(Seq(NT("KW_or"), NT("type_with_extended_attributes"))),
            NT("RPAREN"),
        )
    )
    rules["non_null_type"] = AutoIgnore(
        Ch(NT("union_type"), NT("generic_type"), NT("record_type"), NT("builtin_type"), NT("identifier_type"))
    )
    rules["type"] = AutoIgnore(Seq(NT("non_null_type"), Opt(NT("QMARK"))))
    rules["type_with_extended_attributes"] = AutoIgnore(Seq(Opt(NT("extended_attribute_list")), NT("type")))

    # --- Default values ---
    rules["boolean_literal"] = AutoIgnore(Ch(NT("KW_true"), NT("KW_false")))
    rules["float_literal"] = AutoIgnore(Ch(NT("decimal"), NT("KW_NEG_INFINITY"), NT("KW_Infinity"), NT("KW_NaN")))
    rules["null_literal"] = AutoIgnore(NT("KW_null"))
    rules["undefined_literal"] = AutoIgnore(NT("KW_undefined"))
    rules["empty_array"] = AutoIgnore(Seq(NT("LBRACKET"), NT("RBRACKET")))
    rules["empty_dictionary"] = AutoIgnore(Seq(NT("LBRACE"), NT("RBRACE")))
    rules["default_value"] = AutoIgnore(
        Ch(
            NT("boolean_literal"),
            NT("float_literal"),
            NT("integer"),
            NT("string"),
            NT("null_literal"),
            NT("undefined_literal"),
            NT("empty_array"),
            NT("empty_dictionary"),
        )
    )
    rules["default"] = AutoIgnore(Seq(NT("EQUALS"), NT("default_value")))

    actions.update(
        {
            # Tokens
            "identifier": P(act_identifier),
            "string": P(act_string),
            "decimal": P(act_decimal),
            "integer": P(act_integer),
            # Terms
            "required": P(act_required),
            "semi_colon": P(act_semi_colon),
            # Extended attributes
            "extended_attribute_list": P(act_extended_attribute_list),
            "ea_named_arg_list": P(act_ea_named_arg_list),
            "ea_arg_list": P(act_ea_arg_list),
            "ea_ident_list": P(act_ea_ident_list),
            "ea_wildcard": P(act_ea_wildcard),
            "ea_ident": P(act_ea_ident),
            "ea_no_args": P(act_ea_no_args),
            "extended_attribute": P(_first),
            # Arguments
            "argument_optional": P(act_argument),
            "argument_single": P(act_argument),
            "argument": P(_first),
            "argument_list": P(act_argument_list),
            # Types
            "string_type": P(act_builtin_type),
            "builtin_type": P(act_builtin_type),
            "identifier_type": P(act_identifier_type),
            "generic_type": P(act_generic_type),
            "record_type": P(act_record_type),
            "union_type": P(act_union_type),
            "non_null_type": P(_first),
            "type": P(act_type),
            "type_with_extended_attributes": P(act_type_with_extended_attributes),
            # Default values
            "boolean_literal": P(act_boolean_literal),
            "float_literal": P(act_float_literal),
            "null_literal": P(act_null_literal),
            "undefined_literal": P(act_undefined_literal),
            "empty_array": P(act_empty_array),
            "empty_dictionary": P(act_empty_dictionary),
            "default_value": P(_first),
            "default": P(act_default),
        }
    )

    grammar = Grammar(rules, actions=actions, start=start)
    return PackratParser(grammar, ignore=WS_IGNORE)


# ---------------------------------------------------------------------------
# Lazily built parsers, one per start rule
# ---------------------------------------------------------------------------

_parsers: dict[str, PackratParser] = {}
_parsers_lock = threading.Lock()


def _get_parser(start: str) -> PackratParser:
    parser = _parsers.get(start)
    if parser is None:
        with _parsers_lock:
            parser = _parsers.get(start)
            if parser is None:
                parser = _build_parser(start)
                _parsers[start] = parser
    return parser


T = TypeVar("T", bound=Node)


def _match(start: str, cursor: Cursor) -> Optional[tuple[Cursor, Node]]:
    """
    Match the rule start at the cursor, after skipping whitespace and comments.

    :return: the cursor after the match and the node that was produced, or None when the rule doesn't match
    """
    cursor = cursor.skip_ignored()
    if trace.get():
        LOGGER.debug("Trying %s at %s", start, cursor.location())

    token = _state.set(cursor)
    try:
        m = _get_parser(start).match(cursor.text, pos=cursor.pos)
        node = typing.cast(Optional[Node], m.value() if m is not None else None)
    except pe.ParseError:
        node = None
    finally:
        _state.reset(token)

    if node is None:
        return None
    return cursor.advance_to(node.lexend), node


def _optional(start: str, cursor: Cursor, result_type: type[T]) -> tuple[Cursor, Optional[T]]:
    result = _match(start, cursor)
    if result is None:
        return cursor, None
    remaining, node = result
    assert isinstance(node, result_type)
    return remaining, node


def _mandatory(start: str, construct: Construct, cursor: Cursor, result_type: type[T]) -> tuple[Cursor, T]:
    result = _match(start, cursor)
    if result is None:
        at = cursor.skip_ignored()
        raise ExpectedConstructException(construct, at.location(), at.peek())
    remaining, node = result
    assert isinstance(node, result_type)
    return remaining, node


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_extended_attribute_list(cursor: Cursor) -> tuple[Cursor, Optional[ExtendedAttributeList]]:
    """Parse an optional extended attribute list: ``[A, B=c, D(long x)]``"""
    return _optional("extended_attribute_list", cursor, ExtendedAttributeList)


def parse_required(cursor: Cursor) -> tuple[Cursor, Optional[Required]]:
    """Parse an optional ``required`` keyword"""
    return _optional("required", cursor, Required)


def parse_type(cursor: Cursor) -> tuple[Cursor, Type]:
    """
    Parse a type.

    :raises ExpectedConstructException: if there is no type at the cursor
    """
    return _mandatory("type", Construct.type, cursor, Type)


def parse_identifier(cursor: Cursor) -> tuple[Cursor, Identifier]:
    """
    Parse an identifier.

    :raises ExpectedConstructException: if there is no identifier at the cursor
    """
    return _mandatory("identifier", Construct.identifier, cursor, Identifier)


def parse_default(cursor: Cursor) -> tuple[Cursor, Optional[Default]]:
    """Parse an optional default clause: ``= value``"""
    return _optional("default", cursor, Default)


def parse_semi_colon(cursor: Cursor) -> tuple[Cursor, SemiColon]:
    """
    Parse the ``;`` terminating a declaration.

    :raises ExpectedConstructException: if there is no ``;`` at the cursor
    """
    return _mandatory("semi_colon", Construct.terminator, cursor, SemiColon)
