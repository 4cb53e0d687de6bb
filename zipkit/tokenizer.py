"""A line-oriented tokenizer for small text files."""

from __future__ import annotations

import os


class Tokenizer:
    """Walks text line by line, splitting tokens at caller-given delimiters.

    A NUL character always acts as a delimiter.
    """

    def __init__(self, filename: str, contents: str) -> None:
        self._filename = str(filename)
        self._buffer = contents
        self._pos = 0
        self._line_number = 1

    @classmethod
    def open(cls, filename: str | os.PathLike[str]) -> Tokenizer:
        """Tokenize the contents of a file; raises ``OSError`` if it cannot be read."""
        with open(filename, encoding="utf-8", errors="surrogateescape") as fp:
            contents = fp.read()
        return cls(os.fspath(filename), contents)

    @classmethod
    def from_contents(cls, filename: str, contents: str) -> Tokenizer:
        """Tokenize a string, reporting ``filename`` in locations."""
        return cls(filename, contents)

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def line_number(self) -> int:
        """The 1-based number of the current line."""
        return self._line_number

    def is_eof(self) -> bool:
        """Whether the end of the text is reached."""
        return self._pos >= len(self._buffer)

    def is_eol(self) -> bool:
        """Whether at the end of a line or of the text."""
        return self.is_eof() or self._buffer[self._pos] == "\n"

    def location(self) -> str:
        """The file name and current line, like ``name.txt:33``."""
        return f"{self._filename}:{self._line_number}"

    def peek_char(self) -> str:
        """The current character, or an empty string at the end."""
        return "" if self.is_eof() else self._buffer[self._pos]

    def peek_remainder_of_line(self) -> str:
        """The rest of the current line without its newline."""
        end = self._buffer.find("\n", self._pos)
        if end < 0:
            end = len(self._buffer)
        return self._buffer[self._pos:end]

    def next_char(self) -> str:
        """The current character, advancing past it; empty at the end."""
        if self.is_eof():
            return ""
        ch = self._buffer[self._pos]
        self._pos += 1
        return ch

    def _is_delimiter(self, ch: str, delimiters: str) -> bool:
        return ch == "\0" or ch in delimiters

    def next_token(self, delimiters: str) -> str:
        """The text up to the next delimiter or line end, advancing past it."""
        start = self._pos
        while not self.is_eol():
            if self._is_delimiter(self._buffer[self._pos], delimiters):
                break
            self._pos += 1
        return self._buffer[start:self._pos]

    def next_line(self) -> None:
        """Advance to the start of the next line; nothing happens at the end."""
        end = self._buffer.find("\n", self._pos)
        if end < 0:
            self._pos = len(self._buffer)
            return
        self._pos = end + 1
        self._line_number += 1

    def skip_delimiters(self, delimiters: str) -> None:
        """Advance past delimiters on the current line."""
        while not self.is_eol():
            if not self._is_delimiter(self._buffer[self._pos], delimiters):
                break
            self._pos += 1