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

import bisect
import re
from dataclasses import dataclass, field
from typing import Optional

from webidl.ast import Range

# WebIDL whitespace, // line comments and /* block comments */
WHITESPACE = " \t\n\r"
LINE_COMMENT_PAT = r"//[^\n]*"
BLOCK_COMMENT_PAT = r"/\*[\s\S]*?\*/"
IGNORED_REGEX = re.compile(r"(?:[ \t\n\r]+|%s|%s)*" % (LINE_COMMENT_PAT, BLOCK_COMMENT_PAT))


class PositionTracker:
    """Convert a flat character offset to (line_nr, col) using bisect."""

    def __init__(self, text: str) -> None:
        self._line_starts: list[int] = [0]
        for i, c in enumerate(text):
            if c == "\n":
                self._line_starts.append(i + 1)

    def pos_to_lnr_col(self, pos: int) -> tuple[int, int]:
        idx = bisect.bisect_right(self._line_starts, pos) - 1
        return idx + 1, pos - self._line_starts[idx] + 1


@dataclass(frozen=True)
class Cursor:
    """
    An immutable position in a text.

    Parse functions take a cursor and return a new one positioned after what they consumed, the cursor they received is
    never changed. A parse that fails therefore leaves the caller free to continue from its own cursor.
    """

    text: str
    pos: int = 0
    file: str = "<input>"
    tracker: PositionTracker = field(default=None, compare=False, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.tracker is None:
            object.__setattr__(self, "tracker", PositionTracker(self.text))

    @classmethod
    def from_string(cls, text: str, file: Optional[str] = None) -> "Cursor":
        if file is None:
            # late import to prevent an import loop with the option definitions
            from webidl.parser.config import default_file

            file = default_file.get()
        return cls(text, 0, file)

    @property
    def rest(self) -> str:
        """The unconsumed part of the text"""
        return self.text[self.pos :]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> Optional[str]:
        """The character at the current position, None at the end of the text"""
        if self.at_end():
            return None
        return self.text[self.pos]

    def advance_to(self, pos: int) -> "Cursor":
        assert self.pos <= pos <= len(self.text)
        if pos == self.pos:
            return self
        return Cursor(self.text, pos, self.file, self.tracker)

    def skip_ignored(self) -> "Cursor":
        """Return a cursor positioned after any whitespace and comments at the current position"""
        match = IGNORED_REGEX.match(self.text, self.pos)
        assert match is not None
        return self.advance_to(match.end())

    def make_range(self, start: int, end: int) -> Range:
        """
        Build the range covering the characters from offset start up to, but not including, offset end.
        """
        start_lnr, start_col = self.tracker.pos_to_lnr_col(start)
        end_lnr, end_col = self.tracker.pos_to_lnr_col(max(start, end - 1))
        return Range(self.file, start_lnr, start_col, end_lnr, end_col + (1 if end > start else 0))

    def location(self) -> Range:
        """The range of the character at the current position"""
        return self.make_range(self.pos, min(self.pos + 1, len(self.text)))
