#!/usr/bin/env python3
"""
DESKENTRY EXPORTER - Launcher Menu
----------------------------------
Turns loaded DesktopEntries into the YAML menu a launcher reads:
one mapping per application, ordered by display name.

Author: DeskEntry Team
Date: 2026-10-19
"""

import io
from typing import Iterable, List

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from deskentry.core.models import DesktopEntry


class MenuExporter:
    """
    The Menu Builder: converts complete entries into a YAML sequence.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096
        self.field_order = ["name", "comment", "exec", "path"]

    def _to_map(self, entry: DesktopEntry) -> CommentedMap:
        item = CommentedMap()
        for key in self.field_order:
            value = entry.path if key == "path" else getattr(entry, key)
            # Comment is optional; leave it out rather than writing null
            if value is None:
                continue
            item[key] = value
        return item

    def build_menu(self, entries: Iterable[DesktopEntry]) -> List[DesktopEntry]:
        """Keeps complete entries only, sorted case-insensitively by name."""
        complete = [e for e in entries if e.is_complete]
        return sorted(complete, key=lambda e: (e.name.casefold(), e.path))

    def export(self, entries: Iterable[DesktopEntry]) -> str:
        menu = CommentedSeq(self._to_map(e) for e in self.build_menu(entries))
        if not menu:
            return "[]\n"

        stream = io.StringIO()
        self.yaml.dump(menu, stream)
        return stream.getvalue()
