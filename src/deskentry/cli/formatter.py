# src/deskentry/cli/formatter.py
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from deskentry.core.models import Diagnostic, DiagnosticKind

# Initialize the Rich console for high-quality terminal output
console = Console()

STATUS_COLORS = {
    "COMPLETE": "green",
    "INCOMPLETE": "yellow",
    "SKIPPED": "dim",
    "OPEN_FAILED": "red",
    "ENGINE_ERROR": "red",
}


class DeskFormatter:
    """
    DeskFormatter: the visual side of the CLI.
    Renders diagnostics, the per-file results table and the summary panel.
    """

    def __init__(self, out: Console = console):
        self.console = out

    def show_diagnostics(self, diagnostics: List[Diagnostic]):
        """
        Prints each diagnostic on its own line, colored by kind.
        """
        for d in diagnostics:
            color = "yellow" if d.kind is DiagnosticKind.MISSING_FIELD else "red"
            self.console.print(f"[bold {color}]{d.kind.value.upper()}:[/bold {color}] {escape(d.format())}", highlight=False)

    def print_final_table(self, reports: List[Dict[str, Any]]):
        """
        Builds the results table shown at the end of a check.
        """
        table = Table(title="DeskEntry Check Report", show_lines=True, header_style="bold magenta")
        table.add_column("File Path", style="cyan")
        table.add_column("Name")
        table.add_column("Exec")
        table.add_column("Status", style="bold")
        table.add_column("Result", justify="center")

        for r in reports:
            status = r.get("status", "ENGINE_ERROR")
            color = STATUS_COLORS.get(status, "red")
            result_icon = "✅" if r.get("success") else "➖" if status == "SKIPPED" else "❌"
            table.add_row(
                escape(str(r.get("file_path"))),
                escape(r.get("name") or "-"),
                escape(r.get("exec") or "-"),
                f"[{color}]{status}[/{color}]",
                result_icon
            )

        self.console.print(table)

    def print_summary(self, summary: Dict[str, Any]):
        self.console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Total Files:    {summary['total_files']}\n"
            f"Complete:       [green]{summary['complete']}[/green]\n"
            f"Incomplete:     [yellow]{summary['incomplete']}[/yellow]\n"
            f"Skipped:        {summary['skipped']}\n"
            f"Open Failures:  [red]{summary['open_failures']}[/red]\n"
            f"Diagnostics:    {summary['diagnostics']}",
            border_style="dim"
        ))
