#!/usr/bin/env python3
"""
DESKENTRY LEXER - Line Parser (Phase 1.2)
-----------------------------------------
Consumes one logical record per call: a group header (discarded), a
Key=Value pair, or a syntax error. Errors are reported and the parser
resynchronizes on the next physical line, so one bad line never hides
the rest of the file.

Author: DeskEntry Team
Date: 2026-10-19
"""

from typing import Optional

from deskentry.core.config import DEFAULT_CONFIG, ParserConfig
from deskentry.core.models import KeyValuePair
from deskentry.parsing.context import LoadContext
from deskentry.parsing.stream import EOF, CharStream
from deskentry.parsing.tokenizer import (
    GROUP_OPEN,
    discard_group_header,
    read_identifier,
    read_raw_line,
    skip_whitespace,
)

EQUALS = b"="

MSG_EXPECTED_KEY = "Expected key or group name"
MSG_EXPECTED_EQUALS = "Expected '=' after key"


class DeskLexer:
    """
    Character-level state machine for desktop entry records.
    """

    def __init__(self, stream: CharStream, context: LoadContext,
                 config: ParserConfig = DEFAULT_CONFIG):
        self.stream = stream
        self.context = context
        self.config = config

    def _syntax_error(self, line_no: int, message: str):
        self.context.report(line_no, message)
        self.stream.skip_to_end_of_line()

    def parse_line(self) -> Optional[KeyValuePair]:
        """
        Reads the next record. Returns None for group headers, syntax
        errors and trailing blank input.
        """
        c = skip_whitespace(self.stream, include_newlines=True)
        if c == EOF:
            return None
        start_line = self.stream.line_no

        if c == GROUP_OPEN:
            discard_group_header(self.stream)
            return None

        key = read_identifier(self.stream, c, self.config.max_key_length, self.config.encoding)
        if key is None:
            self._syntax_error(start_line, MSG_EXPECTED_KEY)
            return None

        c = skip_whitespace(self.stream, include_newlines=False)
        if c != EQUALS:
            # Put back whatever stopped us so a newline still ends this line
            self.stream.pushback(c)
            self._syntax_error(start_line, MSG_EXPECTED_EQUALS)
            return None

        # Blanks after '=' are skipped but a newline is not, so "Key=" gives
        # an empty value instead of swallowing the next line
        c = skip_whitespace(self.stream, include_newlines=False)
        value = read_raw_line(self.stream, c, self.config.max_value_length, self.config.encoding)

        # Eat trailing blank lines so the caller sees EOF as soon as it is there
        self.stream.pushback(skip_whitespace(self.stream, include_newlines=True))

        return KeyValuePair(key=key, value=value, line_no=start_line)
