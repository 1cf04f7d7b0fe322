#!/usr/bin/env python3
"""
DESKENTRY CLI
-------------
Command line front end: `check` reports what the parser made of each
desktop file, `menu` exports the launcher menu built from them.

Author: DeskEntry Team
Date: 2026-10-19
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from deskentry.cli.formatter import DeskFormatter
from deskentry.core.config import load_config
from deskentry.core.engine import (
    STATUS_ENGINE_ERROR,
    STATUS_INCOMPLETE,
    STATUS_OPEN_FAILED,
    MenuEngine,
)
from deskentry.parsing.exporter import MenuExporter

VERSION = "0.1.0"

# Global console for consistent styling across the application
console = Console()


class DeskEntryCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self, out: Console = console):
        """Initializes the CLI and sets up the argument parser."""
        self.console = out
        self.formatter = DeskFormatter(out)
        self.parser = argparse.ArgumentParser(
            prog="deskentry",
            description="DeskEntry - Desktop Entry Parser & Launcher Menu Builder",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("-v", "--version", action="version", version=f"deskentry v{VERSION}")
        self.parser.add_argument("--config", help="YAML settings file overriding parser limits")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        check_parser = subparsers.add_parser("check", help="Parse desktop files and report problems")
        check_parser.add_argument("paths", nargs="+", help="Desktop entry files to check")
        check_parser.add_argument("--quiet", action="store_true", help="Only print the summary")

        menu_parser = subparsers.add_parser("menu", help="Export a launcher menu as YAML")
        menu_parser.add_argument("paths", nargs="+", help="Desktop entry files to include")
        menu_parser.add_argument("-o", "--output", help="Write the menu here instead of stdout")

    def print_header(self, subtitle: str):
        """Renders the splash header."""
        self.console.print(Panel.fit(
            f"[bold cyan]DeskEntry v{VERSION}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def _build_engine(self, args: argparse.Namespace) -> MenuEngine:
        return MenuEngine(load_config(args.config))

    def _run_check(self, args: argparse.Namespace) -> int:
        engine = self._build_engine(args)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True
        ) as progress:
            task_id = progress.add_task("Parsing desktop files...", total=len(args.paths))
            reports = engine.load_files(
                args.paths,
                progress_callback=lambda done, total: progress.update(task_id, completed=done)
            )

        if not args.quiet:
            for r in reports:
                if r["status"] == STATUS_ENGINE_ERROR:
                    self.console.print(f"[bold red]Error in {r['file_path']}:[/bold red] {r.get('error')}")
                self.formatter.show_diagnostics(r["diagnostics"])
            self.formatter.print_final_table(reports)

        self.formatter.print_summary(engine.generate_summary(reports))

        failed = {STATUS_INCOMPLETE, STATUS_OPEN_FAILED, STATUS_ENGINE_ERROR}
        return 1 if any(r["status"] in failed for r in reports) else 0

    def _run_menu(self, args: argparse.Namespace) -> int:
        engine = self._build_engine(args)
        engine.load_files(args.paths)
        menu_yaml = MenuExporter().export(engine.entries)

        if args.output:
            Path(args.output).write_text(menu_yaml, encoding='utf-8')
            self.console.print(f"[green]Menu written to {args.output}[/green]")
        else:
            sys.stdout.write(menu_yaml)
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        argv = sys.argv[1:] if argv is None else argv
        if not argv:
            self.print_header("Desktop Entry Parser")
            self.parser.print_help()
            return 0

        args = self.parser.parse_args(argv)
        try:
            if args.command == "check":
                self.print_header("Desktop File Check")
                return self._run_check(args)
            if args.command == "menu":
                return self._run_menu(args)
        except (RuntimeError, ValueError, OSError) as e:
            self.console.print(f"[bold red]CRITICAL ERROR:[/bold red] {e}")
            return 2

        self.parser.print_help()
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(DeskEntryCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
