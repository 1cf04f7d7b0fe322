#!/usr/bin/env python3
"""
DESKENTRY LEXER SUITE
---------------------
One-record-per-call behaviour of DeskLexer, including resynchronization
after syntax errors and the group header quirk.

Author: DeskEntry Team
Date: 2026-10-19
"""

import io

import pytest

from deskentry.core.config import DEFAULT_CONFIG, ParserConfig
from deskentry.core.models import DiagnosticKind
from deskentry.parsing.context import LoadContext
from deskentry.parsing.lexer import MSG_EXPECTED_EQUALS, MSG_EXPECTED_KEY, DeskLexer
from deskentry.parsing.stream import CharStream


def make_lexer(data: bytes, config: ParserConfig = DEFAULT_CONFIG):
    stream = CharStream(io.BytesIO(data), "test.desktop")
    context = LoadContext(path="test.desktop")
    return DeskLexer(stream, context, config), stream, context


def collect(data: bytes, config: ParserConfig = DEFAULT_CONFIG):
    """Runs the lexer to EOF and returns (pairs, context)."""
    lexer, stream, context = make_lexer(data, config)
    pairs = []
    while not stream.at_eof():
        pair = lexer.parse_line()
        if pair is not None:
            pairs.append((pair.key, pair.value, pair.line_no))
    return pairs, context


@pytest.mark.parametrize("data, expected", [
    (b"Key=Value\n", ("Key", "Value")),
    (b"Key=   \tValue  \n", ("Key", "Value  ")),
    (b"Key = v\n", ("Key", "v")),
    (b"  Name[fr]=Bonjour\n", ("Name[fr]", "Bonjour")),
    (b"Name=C\\# Sharp\n", ("Name", "C# Sharp")),
    (b"Exec=a\\\\b\n", ("Exec", "a\\b")),
    (b"Name=Foo # trailing\n", ("Name", "Foo ")),
    (b"Name=NoNewline", ("Name", "NoNewline")),
])
def test_single_pair(data, expected):
    lexer, _, context = make_lexer(data)
    pair = lexer.parse_line()
    assert (pair.key, pair.value) == expected
    assert context.diagnostics == []


def test_empty_value_does_not_absorb_next_line():
    pairs, context = collect(b"Key=\nOther=x\n")
    assert pairs == [("Key", "", 1), ("Other", "x", 2)]
    assert context.diagnostics == []


def test_group_header_emits_nothing():
    lexer, _, context = make_lexer(b"[Desktop Entry]\nName=X\n")
    assert lexer.parse_line() is None
    assert context.diagnostics == []
    pair = lexer.parse_line()
    assert (pair.key, pair.value, pair.line_no) == ("Name", "X", 2)


def test_missing_equals_reports_once_and_recovers():
    pairs, context = collect(b"BadLine\nName=X\n")
    assert pairs == [("Name", "X", 2)]
    assert len(context.diagnostics) == 1
    diagnostic = context.diagnostics[0]
    assert diagnostic.line_no == 1
    assert diagnostic.message == MSG_EXPECTED_EQUALS
    assert diagnostic.kind is DiagnosticKind.SYNTAX


def test_words_without_equals_skip_whole_line():
    pairs, context = collect(b"Key value here\nExec=y\n")
    assert pairs == [("Exec", "y", 2)]
    assert [d.message for d in context.diagnostics] == [MSG_EXPECTED_EQUALS]


def test_missing_key_reports_and_recovers():
    pairs, context = collect(b"=oops\nName=X\n")
    assert pairs == [("Name", "X", 2)]
    assert [(d.line_no, d.message) for d in context.diagnostics] == [(1, MSG_EXPECTED_KEY)]


def test_text_after_group_header_becomes_next_record():
    pairs, context = collect(b"[Group] junk\nName=X\n")
    assert pairs == [("Name", "X", 2)]
    assert [(d.line_no, d.message) for d in context.diagnostics] == [(1, MSG_EXPECTED_EQUALS)]


def test_trailing_blank_lines_are_consumed():
    lexer, stream, _ = make_lexer(b"Name=X\n\n\n# closing comment\n   \n")
    assert lexer.parse_line().value == "X"
    assert stream.at_eof()


def test_only_whitespace_and_comments_is_not_an_error():
    pairs, context = collect(b"   \n# only a comment\n\n")
    assert pairs == []
    assert context.diagnostics == []


def test_escaped_newline_ends_value_without_counting_line():
    pairs, context = collect(b"A=1\nB=2\\\nC=3\n")
    assert pairs == [("A", "1", 1), ("B", "2", 2), ("C", "3", 2)]
    assert context.diagnostics == []


def test_line_counter_tracks_comments_and_blank_lines():
    lexer, stream, _ = make_lexer(b"# header\n\nName=X\n# c\nExec=Y\n")
    assert lexer.parse_line().line_no == 3
    assert lexer.parse_line().line_no == 5
    assert stream.line_no == 6


def test_value_cap_truncates_and_resyncs():
    pairs, context = collect(b"Name=0123456789\nExec=x\n", ParserConfig(max_value_length=8))
    assert pairs == [("Name", "01234567", 1), ("Exec", "x", 2)]
    assert context.diagnostics == []


def test_key_cap_turns_overlong_key_into_syntax_error():
    pairs, context = collect(b"LongKey=v\nName=X\n", ParserConfig(max_key_length=4))
    assert pairs == [("Name", "X", 2)]
    assert [d.message for d in context.diagnostics] == [MSG_EXPECTED_EQUALS]
