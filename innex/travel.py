"""Character-indexed text content and a cursor that walks over it."""

from __future__ import annotations

from bisect import bisect_right
from enum import Enum, auto
from itertools import takewhile
from typing import Optional

from innex.pano import Pano
from innex.wordtype import word_type


def _read_lines(file_path: str) -> list[str]:
    """Read a UTF-8 file as lines without their ``\\n`` or ``\\r\\n`` endings."""
    with open(file_path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class TravelMode(Enum):
    """The unit a :class:`Travel` cursor advances by."""

    WORD = auto()
    LINE = auto()
    TOKEN = auto()


class Content:
    """Lines of text addressed by a single running character index.

    Line breaks take no index: the last character of one line is followed
    directly by the first character of the next.
    """

    def __init__(self) -> None:
        self.pn = Pano.ON
        self.content: list[str] = []
        # Running index just past the end of each line.
        self.innk: list[int] = []

    def __len__(self) -> int:
        return self.innk[-1] if self.innk else 0

    def __getitem__(self, index: int) -> str:
        line, column = self._locate(index)
        return self.content[line][column]

    def _locate(self, index: int) -> tuple[int, int]:
        line = self.index_belong(index)
        if line is None:
            raise IndexError(f"index {index} is outside the content")
        start = self.innk[line - 1] if line else 0
        return line, index - start

    def index_belong(self, index: int) -> Optional[int]:
        """Return the number of the line holding ``index``, or None if out of range."""
        if index < 0:
            return None
        line = bisect_right(self.innk, index)
        return line if line < len(self.innk) else None

    def read_file(self, file_path: str) -> None:
        """Append the lines of a UTF-8 text file."""
        total = len(self)
        for line in _read_lines(file_path):
            total += len(line)
            self.content.append(line)
            self.innk.append(total)

    def get_line_inside(self, index: int) -> Optional[str]:
        """Return the line holding the character at ``index``."""
        line = self.index_belong(index)
        return None if line is None else self.content[line]

    def get_line_outside(self, index: int) -> Optional[str]:
        """Return line number ``index``."""
        if 0 <= index < len(self.content):
            return self.content[index]
        return None

    def get_mul(self, head: int, tail: int) -> str:
        """Return the characters from ``head`` up to, not including, ``tail``."""
        return "".join(self[i] for i in range(head, tail))

    def get_token(self, index: int) -> Optional[str]:
        """Return the run of same-typed characters starting at ``index``.

        Returns None when ``index`` is out of range or points at a space.
        """
        if not 0 <= index < len(self):
            return None
        first = self[index]
        if first == " ":
            return None
        kind = word_type(first)
        chars = (self[i] for i in range(index, len(self)))
        return "".join(takewhile(lambda c: word_type(c) == kind, chars))


class Travel:
    """A cursor over :class:`Content` that yields words, lines or tokens."""

    def __init__(self, mode: TravelMode = TravelMode.WORD) -> None:
        self.mode = mode
        self.content = Content()
        self.begin = 0
        self.end = 0
        self.now = 0

    def read_file(self, file_path: str) -> None:
        """Load a file and extend the travel range to its end."""
        self.content.read_file(file_path)
        self.end = len(self.content)

    def get_next(self) -> Optional[str]:
        """Return the next unit and advance past it.

        Returns None at the end of the content, and in token mode also when
        the cursor rests on a space.
        """
        if self.now >= self.end:
            return None
        if self.mode is TravelMode.WORD:
            char = self.content[self.now]
            self.now += 1
            return char
        if self.mode is TravelMode.LINE:
            line = self.content.index_belong(self.now)
            if line is None:
                return None
            self.now = self.content.innk[line]
            return self.content.content[line]
        token = self.content.get_token(self.now)
        if token is not None:
            self.now += len(token)
        return token