"""Building blocks for text analysis: cursors, word pools, tokens and meanings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Sequence

from innex.travel import _read_lines


class TecorMode(Enum):
    """The granularity a :class:`Tecor` works at."""

    EDGE = auto()
    LETTERS = auto()
    WORDS = auto()


def _origin() -> list[int]:
    return [0, 0]


@dataclass
class Tecor:
    """A text cursor holding ``[row, column]`` positions and line lengths."""

    begin: list[int] = field(default_factory=_origin)
    end: list[int] = field(default_factory=_origin)
    at: list[int] = field(default_factory=_origin)
    side: list[int] = field(default_factory=_origin)
    ends: list[int] = field(default_factory=list)
    mode: TecorMode = TecorMode.EDGE

    def rec(self, begin: Sequence[int], end: Sequence[int]) -> None:
        """Set the range the cursor spans."""
        self.begin = list(begin)
        self.end = list(end)


class Wopol:
    """A pool of a file's characters, line by line, with a cursor over them."""

    def __init__(self) -> None:
        self.contents: list[list[str]] = []
        self.tec = Tecor()

    def read(self, filename: str) -> None:
        """Load a UTF-8 file, replacing what was held before."""
        lines = _read_lines(filename)
        self.tec = Tecor()
        self.contents = [list(line) for line in lines]
        self.tec.ends = [len(line) for line in lines]
        if lines:
            last = len(lines) - 1
            self.tec.end = [last, self.tec.ends[last]]


class TokenState(Enum):
    """How far a token has been processed."""

    INIT = auto()
    ANA = auto()


@dataclass
class Token:
    """A piece of text with its processing state and a tag."""

    the: str
    state: TokenState = TokenState.INIT
    tag: str = ""


@dataclass
class Mean:
    """A named meaning built from input meanings and evaluated by ``action``."""

    name: str
    mean_type: str
    action: Callable[[Mean], int]
    inputs: list[Mean] = field(default_factory=list)