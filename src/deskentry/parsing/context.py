#!/usr/bin/env python3
"""
DESKENTRY LOAD CONTEXT
----------------------
State for a single desktop file load: the output slots and the
diagnostics collected along the way.

Author: DeskEntry Team
Date: 2026-10-19
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from deskentry.core.models import DesktopEntry, Diagnostic, DiagnosticKind, KeyValuePair

logger = logging.getLogger("deskentry.loader")


@dataclass
class LoadContext:
    """
    Maintains the state of one Loader run.

    Created by the DesktopFileLoader per file and enriched by the Line
    Parser (diagnostics) and the Loader itself (slots).
    """
    path: str                                    # Path as given by the caller
    recognized_keys: tuple = ("Name", "Comment", "Exec")
    slots: Dict[str, Optional[str]] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def report(self, line_no: int, message: str,
               kind: DiagnosticKind = DiagnosticKind.SYNTAX) -> Diagnostic:
        """Records a diagnostic and writes it to the shared error channel."""
        diagnostic = Diagnostic(path=self.path, line_no=line_no, message=message, kind=kind)
        self.diagnostics.append(diagnostic)
        logger.error(diagnostic.format())
        return diagnostic

    def adopt(self, pair: KeyValuePair) -> bool:
        """
        Stores the value of a recognized key, replacing any earlier value.
        Returns False when the key is not one we keep.
        """
        if pair.key not in self.recognized_keys:
            return False
        self.slots[pair.key] = pair.value
        return True

    def get(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def to_entry(self) -> DesktopEntry:
        return DesktopEntry(
            path=self.path,
            name=self.slots.get("Name"),
            comment=self.slots.get("Comment"),
            exec=self.slots.get("Exec"),
            diagnostics=list(self.diagnostics),
        )
