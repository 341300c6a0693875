# -*- encoding: utf-8 -*-
# @File   : cursor.py
# @Time   : 2024/10/12 21:03:11
# @Author : Kariko Lin

from ..abstract import SerializedComponents
from .consts import IniMark


class Cursor(SerializedComponents[str | None]):
    """Scanning position over an immutable text buffer.

    `current` is `None` once the buffer is exhausted. Advancing past the end
    is allowed and simply keeps yielding `None`.

    The line counter is bumped when the cursor steps *over* a newline,
    so every newline is counted exactly once, whoever consumes it.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._line = 1

    @property
    def position(self) -> int:
        return self._pos

    @property
    def line(self) -> int:
        return self._line

    @property
    def current(self) -> str | None:
        if self._pos >= len(self._text):
            return None
        return self._text[self._pos]

    @property
    def eof(self) -> bool:
        return self._pos >= len(self._text)

    @property
    def seekable(self) -> bool:
        return True

    def advance(self) -> None:
        if self.current == IniMark.NEWLINE:
            self._line += 1
        self._pos += 1

    def reset_seek(self) -> None:
        self._pos = 0
        self._line = 1

    def slice(self, start: int, end: int | None = None) -> str:
        """Extract text by recorded offsets, `end` defaults to here."""
        return self._text[start:self._pos if end is None else end]

    def __str__(self) -> str:
        return f'line {self._line}, offset {self._pos}'

    def __repr__(self) -> str:
        return '<Cursor %d/%d line=%d>' % (
            self._pos, len(self._text), self._line)
