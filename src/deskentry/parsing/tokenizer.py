#!/usr/bin/env python3
"""
DESKENTRY TOKENIZER HELPERS (Phase 1.1)
---------------------------------------
Small readers built on top of CharStream: whitespace skipping, bounded
identifier and raw-line reading, and group header discarding.

Author: DeskEntry Team
Date: 2026-10-19
"""

import codecs
from typing import Optional

from deskentry.core.config import DEFAULT_CONFIG
from deskentry.parsing.stream import EOF, NEWLINE, CharStream

GROUP_OPEN = b"["
GROUP_CLOSE = b"]"
KEY_PUNCTUATION = frozenset([b"-", b"_", b"@", b"[", b"]"])


def is_key_char(c: bytes) -> bool:
    return c.isalnum() or c in KEY_PUNCTUATION


def skip_whitespace(stream: CharStream, include_newlines: bool) -> bytes:
    """
    Consumes whitespace and returns the first character that was not skipped.
    With `include_newlines` off, a newline stops the skip and is returned.
    """
    c = stream.next()
    while c.isspace():
        if c == NEWLINE and not include_newlines:
            break
        c = stream.next()
    return c


def read_identifier(stream: CharStream, first: bytes,
                    max_length: int = DEFAULT_CONFIG.max_key_length,
                    encoding: str = DEFAULT_CONFIG.encoding) -> Optional[str]:
    """
    Reads a key starting at `first`. The first character that does not
    belong to the key (or the one past the cap) is pushed back.

    Returns None when not a single character qualified.
    """
    chars = bytearray()
    c = first
    while len(chars) < max_length and is_key_char(c):
        chars += c
        c = stream.next()
    stream.pushback(c)
    if not chars:
        return None
    return chars.decode(encoding, errors="replace")


def read_raw_line(stream: CharStream, first: bytes,
                  max_length: int = DEFAULT_CONFIG.max_value_length,
                  encoding: str = DEFAULT_CONFIG.encoding) -> str:
    """
    Reads everything from `first` to the end of the line, newline consumed
    but not included. Past `max_length` the rest of the line is dropped.
    """
    chars = bytearray()
    c = first
    while c != NEWLINE and c != EOF:
        chars += c
        if len(chars) >= max_length:
            # Usually something boring like MimeType; keep the head only
            stream.skip_to_end_of_line()
            # Non-final decode holds back a character split by the cap
            decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
            return decoder.decode(bytes(chars), final=False)
        c = stream.next()
    return chars.decode(encoding, errors="replace")


def discard_group_header(stream: CharStream):
    """
    Drops characters up to and including ']'. Whatever follows the ']' on
    the same line is left for the next record.
    """
    c = stream.next()
    while c != GROUP_CLOSE and c != EOF:
        c = stream.next()
