"""Line-addressable document interface and an in-memory text implementation"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Position:
    line: int
    ch: int


class Document(Protocol):
    """Minimal editor surface needed to splice settings into a document."""

    def get_line(self, line: int) -> str: ...

    def last_line(self) -> int: ...

    def replace_range(self, text: str, start: Position, end: Position) -> None: ...


class TextDocument:
    """Document backed by a plain string; lines are split on '\\n'.

    A text using CRLF endings keeps them: get_line strips the trailing '\\r'
    and inserted '\\n' line breaks are written as '\\r\\n'.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self.newline = "\r\n" if "\r\n" in text else "\n"

    @property
    def text(self) -> str:
        return self._text

    @property
    def lines(self) -> list[str]:
        return self._text.split("\n")

    def get_line(self, line: int) -> str:
        return self.lines[line].removesuffix("\r")

    def last_line(self) -> int:
        return len(self.lines) - 1

    def _offset(self, pos: Position) -> int:
        """Character offset of pos, clamped to the end of its line and of the text."""
        lines = self.lines
        if pos.line > len(lines) - 1:
            return len(self._text)
        offset = sum(len(l) + 1 for l in lines[:pos.line])
        return offset + min(pos.ch, len(lines[pos.line].removesuffix("\r")))

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        """Replace the span [start, end) with text."""
        a, b = self._offset(start), self._offset(end)
        if b < a:
            raise ValueError(f"range end {end} precedes start {start}")
        if self.newline != "\n":
            text = text.replace("\r\n", "\n").replace("\n", self.newline)
        self._text = self._text[:a] + text + self._text[b:]
