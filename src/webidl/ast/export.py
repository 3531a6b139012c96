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
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict


class Exportable:
    # explicitly set empty slots so child classes are allowed to use __slots__
    __slots__ = ()

    def export(self) -> BaseModel:
        raise NotImplementedError()


class Position(BaseModel):
    """
    Position in a file. Based on the
    `LSP spec 3.15 <https://microsoft.github.io/language-server-protocol/specifications/specification-3-15/#position>`__
    """

    line: int
    character: int


class Range(BaseModel):
    """
    Range in a file. Based on the
    `LSP spec 3.15 <https://microsoft.github.io/language-server-protocol/specifications/specification-3-15/#range>`__
    """

    start: Position
    end: Position


class Location(BaseModel):
    """
    Location in a file. Based on the
    `LSP spec 3.15 <https://microsoft.github.io/language-server-protocol/specifications/specification-3-15/#location>`__
    """

    uri: str
    range: Range


class ErrorCategory(str, Enum):
    """
    Category of an error.
    """

    parser = "parse_error"
    """
        Error occurred while parsing.
    """

    other = "other_error"
    """
        Any other error raised by this package.
    """


class Error(BaseModel):
    """
    Error occurred while trying to parse.
    """

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    category: ErrorCategory = ErrorCategory.other
    """
        Category of this error.
    """

    type: str
    """
        Fully qualified name of the actual exception.
    """

    message: str
    """
        Error message.
    """

    location: Optional[Location] = None
    """
        Location where this error occurred.
    """


class Argument(BaseModel):
    """
    An argument of an extended attribute argument list.
    """

    name: str
    type: str
    optional: bool = False
    variadic: bool = False
    default: Optional[str] = None
    attributes: List["ExtendedAttribute"] = []


class ExtendedAttribute(BaseModel):
    """
    A single extended attribute.
    """

    name: str
    kind: str
    """
        One of ``no_args``, ``arg_list``, ``named_arg_list``, ``ident``, ``ident_list`` or ``wildcard``.
    """

    rhs: Optional[Union[str, List[str]]] = None
    """
        The right hand side of ``name=rhs``, a list for ``name=(a, b)``.
    """

    arguments: List[Argument] = []


class DictionaryMember(BaseModel):
    """
    A parsed dictionary member.
    """

    name: str
    type: str
    required: bool
    default: Optional[str] = None
    attributes: List[ExtendedAttribute] = []
    attributes_position: Optional[str] = None
    location: Optional[Location] = None


Argument.model_rebuild()
