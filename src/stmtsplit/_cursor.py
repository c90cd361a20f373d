"""Forward-only cursor over an immutable string.

Internal module: the scanner's region handlers move through the text exclusively through this class so that every
read past the end of the input yields ``""`` instead of raising, and every move is clamped to the text length.
"""

from __future__ import annotations


class Cursor:
    """A position in *text* that only ever moves forward."""

    __slots__ = ("_end", "pos", "text")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self._end = len(text)

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, len={self._end})"

    @property
    def at_end(self) -> bool:
        return self.pos >= self._end

    def peek(self, offset: int = 0) -> str:
        """Return the character *offset* positions ahead, or ``""`` past the end of the text."""
        index = self.pos + offset
        if index >= self._end:
            return ""
        return self.text[index]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def find(self, sub: str) -> int:
        """Return the absolute index of the next occurrence of *sub* at or after the cursor, or ``-1``."""
        return self.text.find(sub, self.pos)

    def advance(self, count: int = 1) -> None:
        self.pos = min(self.pos + count, self._end)

    def advance_to(self, index: int) -> None:
        """Move to absolute *index*; a target behind the cursor is ignored."""
        self.pos = max(self.pos, min(index, self._end))

    def advance_to_end(self) -> None:
        self.pos = self._end
