"""A movable cursor over the characters of a file."""

from __future__ import annotations

from typing import Optional

from innex.pano import Pano
from innex.travel import Travel


class TokenStream:
    """Tokens loaded from a file, with a cursor moved in the current direction."""

    def __init__(self) -> None:
        self.pn = Pano.ON
        self.at = 0
        self.tokens: list[str] = []

    def load_file(self, file_path: str) -> None:
        """Append every character of a file as a token."""
        travel = Travel()
        travel.read_file(file_path)
        self.tokens.extend(iter(travel.get_next, None))

    def topano(self, tar: Pano) -> None:
        """Set the direction the cursor moves in."""
        self.pn = tar

    def move_to(self, offset: int) -> None:
        """Move the cursor by ``offset``, clamped to the tokens held.

        ``Pano.ON`` moves forward, ``Pano.PREV`` moves backward.
        """
        if offset < 0:
            raise ValueError("offset must not be negative")
        if not self.tokens:
            raise IndexError("no tokens to move over")
        if self.pn is Pano.ON:
            self.at = min(self.at + offset, len(self.tokens) - 1)
        elif self.pn is Pano.PREV:
            self.at = max(self.at - offset, 0)
        else:
            raise ValueError(f"cannot move in direction {self.pn.name}")

    def get_token(self) -> Optional[str]:
        """Return the token under the cursor, or None if there is none."""
        if 0 <= self.at < len(self.tokens):
            return self.tokens[self.at]
        return None