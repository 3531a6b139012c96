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

from typing import Optional

from webidl.ast import export


class Range(export.Exportable):
    """
    A span of text in a file.

    :param file: the file the text is in
    :param lnr: the line the span starts on, 1-based
    :param start_char: the column the span starts at, 1-based
    :param end_lnr: the line the span ends on, 1-based
    :param end_char: the column right after the span, 1-based
    """

    __slots__ = ("file", "lnr", "start_char", "end_lnr", "end_char")

    def __init__(self, file: str, lnr: int, start_char: int, end_lnr: int, end_char: int) -> None:
        self.file = file
        self.lnr = lnr
        self.start_char = start_char
        self.end_lnr = end_lnr
        self.end_char = end_char

    @property
    def start(self) -> tuple[int, int]:
        return self.lnr, self.start_char

    @property
    def end(self) -> tuple[int, int]:
        return self.end_lnr, self.end_char

    def merge(self, other: "Range") -> "Range":
        """The smallest range covering both this range and other"""
        assert self.file == other.file
        start = min(self.start, other.start)
        end = max(self.end, other.end)
        return Range(self.file, start[0], start[1], end[0], end[1])

    def export(self) -> export.Location:
        # Range is 1-based, the exported position is 0-based
        return export.Location(
            uri=self.file,
            range=export.Range(
                start=export.Position(line=self.lnr - 1, character=self.start_char - 1),
                end=export.Position(line=self.end_lnr - 1, character=self.end_char - 1),
            ),
        )

    def __str__(self) -> str:
        return "%s:%d:%d" % (self.file, self.lnr, self.start_char)

    def __repr__(self) -> str:
        return "Range(%r, %d, %d, %d, %d)" % (self.file, self.lnr, self.start_char, self.end_lnr, self.end_char)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return False
        return self.file == other.file and self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.file, self.start, self.end))


class Node(export.Exportable):
    """
    Base class for everything the parser produces.

    Concrete nodes are frozen dataclasses. They end with three fields that are excluded from comparison:
    ``location``, the :class:`Range` of the node in the source, and ``lexpos``/``lexend``, the absolute offsets of the
    first character and one past the last character of the node in the parsed text.
    """

    location: Range
    lexpos: int
    lexend: int

    def get_location(self) -> Range:
        return self.location

    def unparse(self) -> str:
        """
        Return the canonical WebIDL text for this node. Parsing the result yields an equal node.
        """
        raise NotImplementedError()

    def source(self, text: str) -> str:
        """
        Return the exact text this node was parsed from.

        :param text: the complete text that was handed to the parser
        """
        return text[self.lexpos : self.lexend]

    def __str__(self) -> str:
        return self.unparse()


class WebIDLException(Exception, export.Exportable):
    """Base class for exceptions generated by this package"""

    def __init__(self, msg: str, location: Optional[Range] = None) -> None:
        Exception.__init__(self, msg)
        self.msg = msg
        self.location = location

    def get_message(self) -> str:
        return self.msg

    def get_location(self) -> Optional[Range]:
        return self.location

    def format(self) -> str:
        """The message, followed by the location when it is known"""
        if self.location is None:
            return self.msg
        return "%s (%s)" % (self.msg, self.location)

    def export(self) -> export.Error:
        return export.Error(
            type="%s.%s" % (self.__class__.__module__, self.__class__.__qualname__),
            message=self.msg,
            location=self.location.export() if self.location is not None else None,
        )

    def __str__(self) -> str:
        return self.format()
