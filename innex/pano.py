"""Relative cursor positions."""

from enum import Enum, auto


class Pano(Enum):
    """Where a cursor points: before, at, after the current item, or suspended."""

    PREV = auto()
    AT = auto()
    NEXT = auto()
    ON = auto()