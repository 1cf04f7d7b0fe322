#!/usr/bin/env python3
"""
DESKENTRY ENGINE - Batch Orchestrator
-------------------------------------
Runs the DesktopFileLoader over a list of candidate files and turns each
result into a flat report the CLI can render. Every file is handled on
its own: a failure in one never stops the batch.

Author: DeskEntry Team
Date: 2026-10-19
"""

import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from deskentry.core.config import DEFAULT_CONFIG, ParserConfig
from deskentry.core.models import DesktopEntry, DiagnosticKind
from deskentry.parsing.loader import DesktopFileLoader, has_suffix

# Setup standardized logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("deskentry.engine")

STATUS_COMPLETE = "COMPLETE"
STATUS_INCOMPLETE = "INCOMPLETE"
STATUS_SKIPPED = "SKIPPED"
STATUS_OPEN_FAILED = "OPEN_FAILED"
STATUS_ENGINE_ERROR = "ENGINE_ERROR"


class MenuEngine:
    """
    Principal orchestrator for loading desktop entries in bulk.
    Keeps the loaded entries around so the exporter can build a menu.
    """

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self.config = config
        self.loader = DesktopFileLoader(config)
        self.entries: List[DesktopEntry] = []

    def load_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Loads a single file and summarizes the outcome.
        """
        path_str = str(path)
        try:
            entry = self.loader.load(path_str)
        except Exception as e:
            logger.error(f"Error processing {path_str}: {str(e)}")
            return self._file_error(path_str, str(e))

        self.entries.append(entry)
        return {
            "file_path": path_str,
            "status": self._derive_status(entry),
            "success": entry.is_complete,
            "name": entry.name,
            "comment": entry.comment,
            "exec": entry.exec,
            "diagnostics": entry.diagnostics,
            "entry": entry,
        }

    def load_files(self, paths: Iterable[Union[str, Path]],
                   progress_callback: Optional[Callable[[int, int], None]] = None) -> List[Dict[str, Any]]:
        """
        Loads each given path once, in order. No directory walking happens here;
        callers decide which files are candidates.
        """
        targets = [str(p) for p in paths]
        total_files = len(targets)
        reports = []

        for processed, path in enumerate(targets, 1):
            reports.append(self.load_file(path))
            if progress_callback:
                progress_callback(processed, total_files)

        return reports

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Aggregates per-file reports into totals for the final panel."""
        if not reports:
            return {
                "total_files": 0, "complete": 0, "incomplete": 0, "skipped": 0,
                "open_failures": 0, "system_errors": 0, "diagnostics": 0
            }

        def count(status: str) -> int:
            return sum(1 for r in reports if r.get('status') == status)

        return {
            "total_files": len(reports),
            "complete": count(STATUS_COMPLETE),
            "incomplete": count(STATUS_INCOMPLETE),
            "skipped": count(STATUS_SKIPPED),
            "open_failures": count(STATUS_OPEN_FAILED),
            "system_errors": count(STATUS_ENGINE_ERROR),
            "diagnostics": sum(len(r.get('diagnostics', [])) for r in reports),
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S")
        }

    def _derive_status(self, entry: DesktopEntry) -> str:
        if any(d.kind is DiagnosticKind.OPEN_FAILURE for d in entry.diagnostics):
            return STATUS_OPEN_FAILED
        if not has_suffix(entry.path, self.config.suffix):
            return STATUS_SKIPPED
        return STATUS_COMPLETE if entry.is_complete else STATUS_INCOMPLETE

    def _file_error(self, path: str, error: str) -> Dict[str, Any]:
        return {
            "file_path": path, "status": STATUS_ENGINE_ERROR, "error": error,
            "success": False, "name": None, "comment": None, "exec": None,
            "diagnostics": [], "entry": None
        }
