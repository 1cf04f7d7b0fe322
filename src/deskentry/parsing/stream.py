#!/usr/bin/env python3
"""
DESKENTRY CHARACTER STREAM (Phase 1.0)
--------------------------------------
Wraps a binary byte source and hands out 'semantic' characters:
comments are folded into newlines, a backslash makes the following byte
literal, and the line counter follows every unescaped newline.

Characters are single-byte `bytes` objects. End-of-file is `b""`.

Author: DeskEntry Team
Date: 2026-10-19
"""

from typing import BinaryIO, Optional

EOF = b""
NEWLINE = b"\n"
COMMENT = b"#"
ESCAPE = b"\\"


class StreamError(RuntimeError):
    """Raised when the single-slot pushback contract is violated."""


class CharStream:
    """
    Parser State for one file: the byte source, the path (for diagnostics),
    the line counter and at most one pushed-back character.
    """

    def __init__(self, source: BinaryIO, path: str = "<stream>"):
        self.source = source
        self.path = path
        self.line_no = 1
        # Lookahead slot: None means empty, EOF is a valid pending value
        self._pending: Optional[bytes] = None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def _read_raw(self) -> bytes:
        return self.source.read(1)

    def next(self) -> bytes:
        """
        Returns the next semantic character or EOF.

        A pushed-back character is returned verbatim with no further
        processing, so a pending newline is never counted twice.
        """
        if self._pending is not None:
            c, self._pending = self._pending, None
            return c

        c = self._read_raw()

        if c == COMMENT:
            # Drop everything up to and including the newline; the caller
            # sees the comment as a blank line.
            while True:
                c = self._read_raw()
                if c == EOF:
                    break
                if c == NEWLINE:
                    self.line_no += 1
                    break
            return NEWLINE

        if c == ESCAPE:
            # Exactly one raw byte, no comment detection, no line counting
            return self._read_raw()

        if c == NEWLINE:
            self.line_no += 1
        return c

    def pushback(self, c: bytes):
        """Makes `c` the next character `next()` returns."""
        if self._pending is not None:
            raise StreamError(
                f"{self.path}: cannot push back {c!r}, {self._pending!r} is already pending"
            )
        self._pending = c

    def skip_to_end_of_line(self):
        """Discards characters until a newline or EOF is produced."""
        c = self.next()
        while c != NEWLINE and c != EOF:
            c = self.next()

    def at_eof(self) -> bool:
        """Peeks one semantic character without consuming it."""
        if self._pending is not None:
            return self._pending == EOF
        c = self.next()
        self.pushback(c)
        return c == EOF
