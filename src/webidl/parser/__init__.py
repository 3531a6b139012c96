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

from enum import Enum
from typing import Optional

import webidl.ast.export as ast_export
from webidl.ast import Range, WebIDLException


class ParserException(WebIDLException):
    """Exception occurring during the parsing of the code"""

    def __init__(self, location: Range, value: object, msg: Optional[str] = None) -> None:
        if msg is None:
            msg = "Syntax error at token %s" % value
        else:
            msg = "Syntax error: %s" % msg
        WebIDLException.__init__(self, msg, location)
        self.value = value

    def export(self) -> ast_export.Error:
        error: ast_export.Error = super().export()
        error.category = ast_export.ErrorCategory.parser
        return error


class Construct(str, Enum):
    """
    The constructs that must be present in a dictionary member
    """

    type = "type"
    identifier = "identifier"
    terminator = "terminator"


class ExpectedConstructException(ParserException):
    """
    Raised when a mandatory part of a declaration is missing.

    :param construct: the construct that was expected
    :param location: where the construct was expected, after any whitespace and comments
    :param value: the character found at that position, or None at the end of the input
    """

    def __init__(self, construct: Construct, location: Range, value: Optional[str]) -> None:
        found = "end of input" if value is None else repr(value)
        super().__init__(location, value, "expected %s, found %s" % (construct.value, found))
        self.construct = construct

    def export(self) -> ast_export.Error:
        return ast_export.Error(**super().export().model_dump(), construct=self.construct.value)
