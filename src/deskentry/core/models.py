#!/usr/bin/env python3
"""
DESKENTRY CORE MODELS
---------------------
Defines the fundamental data structures used across the DeskEntry parser.
These models are the only things that cross component boundaries: the
Line Parser emits KeyValuePairs, the Loader returns DesktopEntries, and
every problem found along the way becomes a Diagnostic.

Author: DeskEntry Team
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class DiagnosticKind(Enum):
    """The three kinds of problem the Loader can report."""
    SYNTAX = "syntax"
    MISSING_FIELD = "missing_field"
    OPEN_FAILURE = "open_failure"


@dataclass
class KeyValuePair:
    """
    A single `Key=Value` record produced by the Line Parser.
    """
    key: str                # Bounded identifier (e.g. 'Name', 'Exec', 'Name[de]')
    value: str              # Raw value text, leading blanks after '=' stripped
    line_no: int = 0        # Line on which the record started


@dataclass
class Diagnostic:
    """
    A structured diagnostic record. Replaces the bare stderr line with
    something callers and tests can inspect.
    """
    path: str
    line_no: int
    message: str
    kind: DiagnosticKind = DiagnosticKind.SYNTAX

    def format(self) -> str:
        if self.kind is DiagnosticKind.OPEN_FAILURE:
            # No line to point at
            return f"{self.path}: {self.message}"
        return f"Error: {self.path} - Line {self.line_no}: {self.message}"


@dataclass
class DesktopEntry:
    """
    The result of loading one desktop entry file.

    An unset required slot (name or exec) IS the failure signal; there is
    no separate status code.
    """
    path: str
    name: Optional[str] = None
    comment: Optional[str] = None
    exec: Optional[str] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.name is not None and self.exec is not None

    def as_tuple(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        return self.name, self.comment, self.exec
