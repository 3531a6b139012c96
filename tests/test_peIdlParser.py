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

import pytest

from webidl.ast import Range
from webidl.ast.attribute import (
    ExtendedAttributeArgList,
    ExtendedAttributeIdent,
    ExtendedAttributeIdentList,
    ExtendedAttributeNamedArgList,
    ExtendedAttributeNoArgs,
    ExtendedAttributeWildcard,
)
from webidl.ast.default import FloatLiteral, IntegerLiteral, StringLiteral
from webidl.ast.terms import Identifier
from webidl.ast.type import AttributedType, BuiltinType, GenericType, IdentifierType, NullableType, RecordType, UnionType
from webidl.parser import Construct, ExpectedConstructException
from webidl.parser.config import trace
from webidl.parser.peIdlParser import (
    parse_default,
    parse_extended_attribute_list,
    parse_identifier,
    parse_required,
    parse_semi_colon,
    parse_type,
)
from utils import cursor_for, log_contains


def test_extended_attribute_list_absent():
    cursor = cursor_for("long x;")
    remaining, attributes = parse_extended_attribute_list(cursor)
    assert attributes is None
    assert remaining is cursor


def test_extended_attribute_list_unclosed():
    cursor = cursor_for("[Clamp long x;")
    remaining, attributes = parse_extended_attribute_list(cursor)
    assert attributes is None
    assert remaining is cursor


def test_extended_attribute_list():
    text = "[Replaceable, PutForwards=name] long"
    remaining, attributes = parse_extended_attribute_list(cursor_for(text))
    assert remaining.rest == " long"
    assert len(attributes) == 2
    assert attributes.names() == ["Replaceable", "PutForwards"]
    assert attributes.location == Range("test", 1, 1, 1, 32)
    assert attributes.source(text) == "[Replaceable, PutForwards=name]"
    assert attributes.get("Missing") is None
    assert attributes.get("PutForwards").rhs.value == "name"


@pytest.mark.parametrize(
    "text,attribute_type,kind,rhs",
    [
        ("[Replaceable]", ExtendedAttributeNoArgs, "no_args", None),
        ("[Constructor(double x, optional long y = 0)]", ExtendedAttributeArgList, "arg_list", None),
        ("[Constructor()]", ExtendedAttributeArgList, "arg_list", None),
        ("[LegacyFactoryFunction=Image(DOMString src)]", ExtendedAttributeNamedArgList, "named_arg_list", "Image"),
        ("[PutForwards=name]", ExtendedAttributeIdent, "ident", "name"),
        ('[Reflect="some value"]', ExtendedAttributeIdent, "ident", "some value"),
        ("[Exposed=(Window,Worker)]", ExtendedAttributeIdentList, "ident_list", ["Window", "Worker"]),
        ("[Exposed=*]", ExtendedAttributeWildcard, "wildcard", "*"),
    ],
)
def test_extended_attribute_forms(text, attribute_type, kind, rhs):
    remaining, attributes = parse_extended_attribute_list(cursor_for(text))
    assert remaining.at_end()
    (attribute,) = attributes
    assert isinstance(attribute, attribute_type)
    exported = attribute.export()
    assert exported.kind == kind
    assert exported.rhs == rhs


def test_extended_attribute_arguments():
    _, attributes = parse_extended_attribute_list(
        cursor_for("[Constructor([Clamp] octet a, optional [EnforceRange] long b = -1, DOMString... rest)]")
    )
    (attribute,) = attributes
    a, b, rest = attribute.arguments
    assert a.attributes.names() == ["Clamp"]
    assert not a.optional
    assert not a.variadic
    assert a.identifier.value == "a"

    assert b.optional
    assert isinstance(b.type, AttributedType)
    assert b.type.attributes.names() == ["EnforceRange"]
    assert b.default.value == IntegerLiteral(-1, "-1", None, 0, 0)

    assert rest.variadic
    assert rest.unparse() == "DOMString... rest"

    exported = attribute.export()
    assert [argument.name for argument in exported.arguments] == ["a", "b", "rest"]
    assert exported.arguments[0].attributes[0].name == "Clamp"
    assert exported.arguments[1].type == "[EnforceRange] long"
    assert exported.arguments[1].default == "-1"


def test_required():
    remaining, required = parse_required(cursor_for("  required long x;"))
    assert required is not None
    assert required.location == Range("test", 1, 3, 1, 11)
    assert remaining.rest == " long x;"


@pytest.mark.parametrize("text", ["requiredness x;", "long x;", ""])
def test_required_absent(text):
    cursor = cursor_for(text)
    remaining, required = parse_required(cursor)
    assert required is None
    assert remaining is cursor


@pytest.mark.parametrize(
    "text,name,rest",
    [
        ("unsigned long long x", "unsigned long long", " x"),
        ("unsigned short x", "unsigned short", " x"),
        ("long longer", "long", " longer"),
        ("unrestricted double x", "unrestricted double", " x"),
        ("float x", "float", " x"),
        ("boolean x", "boolean", " x"),
        ("byte x", "byte", " x"),
        ("octet x", "octet", " x"),
        ("bigint x", "bigint", " x"),
        ("DOMString x", "DOMString", " x"),
        ("ByteString x", "ByteString", " x"),
        ("USVString x", "USVString", " x"),
        ("any x", "any", " x"),
        ("object x", "object", " x"),
        ("symbol x", "symbol", " x"),
        ("undefined x", "undefined", " x"),
    ],
)
def test_builtin_types(text, name, rest):
    remaining, parsed = parse_type(cursor_for(text))
    assert isinstance(parsed, BuiltinType)
    assert parsed.name == name
    assert remaining.rest == rest


def test_identifier_type():
    remaining, parsed = parse_type(cursor_for("longer x"))
    assert isinstance(parsed, IdentifierType)
    assert parsed.identifier.value == "longer"
    assert remaining.rest == " x"


def test_generic_types():
    _, parsed = parse_type(cursor_for("sequence<sequence<long>>"))
    assert isinstance(parsed, GenericType)
    assert parsed.kind == "sequence"
    assert isinstance(parsed.argument, GenericType)
    assert parsed.argument.argument.unparse() == "long"

    _, parsed = parse_type(cursor_for("Promise<undefined>"))
    assert parsed.kind == "Promise"
    assert parsed.argument.unparse() == "undefined"


def test_record_type():
    text = "record<USVString, [Clamp] octet?>"
    remaining, parsed = parse_type(cursor_for(text))
    assert remaining.at_end()
    assert isinstance(parsed, RecordType)
    assert parsed.key.name == "USVString"
    assert isinstance(parsed.value, AttributedType)
    assert parsed.value.nullable
    assert parsed.location == Range("test", 1, 1, 1, len(text) + 1)


def test_union_type():
    text = "(Node or sequence<long> or DOMString)? x"
    remaining, parsed = parse_type(cursor_for(text))
    assert remaining.rest == " x"
    assert isinstance(parsed, NullableType)
    assert parsed.nullable
    union = parsed.inner
    assert isinstance(union, UnionType)
    assert not union.nullable
    assert [member.unparse() for member in union.members] == ["Node", "sequence<long>", "DOMString"]
    assert parsed.source(text) == "(Node or sequence<long> or DOMString)?"


def test_nullable_identifier_type():
    _, parsed = parse_type(cursor_for("Node ? x"))
    assert isinstance(parsed, NullableType)
    assert parsed.inner == IdentifierType(Identifier("Node", None, 0, 0), None, 0, 0)
    assert parsed.unparse() == "Node?"


@pytest.mark.parametrize("text,value", [(";", ";"), ("", None), ("  = 5", "=")])
def test_type_missing(text, value):
    with pytest.raises(ExpectedConstructException) as pytest_e:
        parse_type(cursor_for(text))
    assert pytest_e.value.construct is Construct.type
    assert pytest_e.value.value == value


def test_identifier():
    remaining, identifier = parse_identifier(cursor_for(" _interface;"))
    assert identifier.value == "_interface"
    assert identifier.name == "interface"
    assert identifier.location == Range("test", 1, 2, 1, 12)
    assert remaining.rest == ";"

    _, identifier = parse_identifier(cursor_for("with-dash"))
    assert identifier.value == "with-dash"


def test_identifier_missing():
    with pytest.raises(ExpectedConstructException) as pytest_e:
        parse_identifier(cursor_for("\n  9lives"))
    assert pytest_e.value.construct is Construct.identifier
    assert pytest_e.value.location == Range("test", 2, 3, 2, 4)
    assert pytest_e.value.value == "9"


def test_default():
    remaining, default = parse_default(cursor_for(' = "text";'))
    assert isinstance(default.value, StringLiteral)
    assert default.value.value == "text"
    assert default.unparse() == '= "text"'
    assert remaining.rest == ";"


def test_default_absent():
    for text in [";", "= ;", "== 5;", "= required;"]:
        cursor = cursor_for(text)
        remaining, default = parse_default(cursor)
        assert default is None
        assert remaining is cursor


def test_default_decimal_before_integer():
    _, default = parse_default(cursor_for("= 1.0"))
    assert isinstance(default.value, FloatLiteral)
    assert default.value.raw == "1.0"


def test_semi_colon():
    remaining, semi_colon = parse_semi_colon(cursor_for(" /* end */ ; rest"))
    assert semi_colon.unparse() == ";"
    assert semi_colon.location == Range("test", 1, 12, 1, 13)
    assert remaining.rest == " rest"


def test_semi_colon_missing():
    with pytest.raises(ExpectedConstructException) as pytest_e:
        parse_semi_colon(cursor_for("  // nothing here"))
    assert pytest_e.value.construct is Construct.terminator
    assert pytest_e.value.value is None
    assert pytest_e.value.get_message() == "Syntax error: expected terminator, found end of input"


def test_trace(caplog):
    caplog.set_level(logging.DEBUG)
    trace.set("true")
    parse_type(cursor_for("  long"))
    log_contains(caplog, "webidl.parser.peIdlParser", logging.DEBUG, "Trying type at test:1:3")


@pytest.mark.parametrize("text,value", [("-webkit-box", "-webkit-box"), ("_a-b", "_a-b"), ("-_a", None), ("--a", None)])
def test_identifier_prefix(text, value):
    if value is None:
        with pytest.raises(ExpectedConstructException):
            parse_identifier(cursor_for(text))
    else:
        remaining, identifier = parse_identifier(cursor_for(text))
        assert identifier.value == value
        assert remaining.at_end()
