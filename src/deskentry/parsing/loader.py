#!/usr/bin/env python3
"""
DESKENTRY LOADER - Desktop File Driver
--------------------------------------
Top-level entry point for a single file: checks the suffix, opens the
file, drives the DeskLexer to end-of-input, keeps the Name/Comment/Exec
values and reports the required fields that never showed up.

Author: DeskEntry Team
Date: 2026-10-19
"""

import os
from pathlib import Path
from typing import BinaryIO, Union

from deskentry.core.config import DEFAULT_CONFIG, ParserConfig
from deskentry.core.models import DesktopEntry, DiagnosticKind
from deskentry.parsing.context import LoadContext, logger
from deskentry.parsing.lexer import DeskLexer
from deskentry.parsing.stream import CharStream

PathLike = Union[str, Path]


def has_suffix(name: str, suffix: str) -> bool:
    """Exact tail match; a name shorter than the suffix never matches."""
    return len(name) >= len(suffix) and name[len(name) - len(suffix):] == suffix


class DesktopFileLoader:
    """
    Turns one desktop entry file into a DesktopEntry.
    Holds no per-file state, so one instance can serve any number of files.
    """

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self.config = config

    def _new_context(self, path: str) -> LoadContext:
        return LoadContext(path=path, recognized_keys=self.config.recognized_keys)

    def load(self, path: PathLike) -> DesktopEntry:
        """
        Loads `path`. Suffix mismatches return an empty entry silently;
        open failures return an empty entry with one OPEN_FAILURE diagnostic.
        """
        path_str = os.fspath(path)
        context = self._new_context(path_str)

        if not has_suffix(path_str, self.config.suffix):
            return context.to_entry()

        try:
            source = open(path_str, 'rb')
        except OSError as e:
            context.report(0, e.strerror or str(e), DiagnosticKind.OPEN_FAILURE)
            return context.to_entry()

        with source:
            return self._run(CharStream(source, path_str), context)

    def load_stream(self, source: BinaryIO, path: str = "<stream>") -> DesktopEntry:
        """Parses an already-open binary stream; the caller keeps ownership of it."""
        return self._run(CharStream(source, path), self._new_context(path))

    def _run(self, stream: CharStream, context: LoadContext) -> DesktopEntry:
        lexer = DeskLexer(stream, context, self.config)

        while not stream.at_eof():
            pair = lexer.parse_line()
            if pair is not None:
                context.adopt(pair)

        for key in self.config.required_keys:
            if context.get(key) is None:
                context.report(stream.line_no, f"Does not have a '{key}=' field",
                               DiagnosticKind.MISSING_FIELD)

        logger.debug(f"Loaded {context.path}: {len(context.diagnostics)} diagnostic(s)")
        return context.to_entry()


def load(path: PathLike, config: ParserConfig = DEFAULT_CONFIG) -> DesktopEntry:
    """Convenience wrapper: `load(path) -> DesktopEntry`."""
    return DesktopFileLoader(config).load(path)
