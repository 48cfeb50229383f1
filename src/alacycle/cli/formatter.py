# src/alacycle/cli/formatter.py
import difflib
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from alacycle.cycling.catalog import AnchorCatalog

# Shared Rich console for all user-facing output
console = Console()
err_console = Console(stderr=True)


class CycleFormatter:
    """
    Renders cycle results: the switch summary, the unified diff of the
    rewritten config, and the anchor listing.
    """

    def display_diff(self, original_text: str, new_text: str, file_name: str):
        diff = difflib.unified_diff(
            original_text.splitlines(),
            new_text.splitlines(),
            fromfile=f"a/{file_name}",
            tofile=f"b/{file_name}",
            lineterm=""
        )
        diff_list = list(diff)

        if not diff_list:
            console.print(f"[dim]ℹ No changes for {file_name} (single scheme cycles to itself).[/dim]")
            return

        syntax = Syntax("\n".join(diff_list), "diff", theme="monokai", background_color="default")
        console.print(Panel(syntax, title=f"Proposed change: {file_name}", border_style="green"))

    def show_switch(self, report: Dict[str, Any], quiet: bool = False):
        if quiet:
            console.print(report["current"], markup=False, highlight=False)
            return

        verb = "Would switch" if report.get("status") == "PREVIEW" else "Switched"
        console.print(
            f"[bold green]{verb}[/bold green] "
            f"[cyan]{escape(report['previous'])}[/cyan] → [bold cyan]{escape(report['current'])}[/bold cyan] "
            f"[dim](line {report['line_no']} of {escape(report['config_path'])})[/dim]",
            soft_wrap=True
        )
        if report.get("backup_created"):
            console.print(f"[dim]Backup: {escape(report['backup_created'])}[/dim]")

    def print_anchor_table(self, catalog: AnchorCatalog, active: Optional[str], config_path: str):
        table = Table(title=f"Color schemes in {escape(config_path)}", header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Anchor")
        table.add_column("Active", justify="center")

        # Only the first declaration of the active name is the cycle position
        active_position = catalog.position(active) if active else -1
        for i, name in enumerate(catalog):
            is_active = i == active_position
            table.add_row(
                str(i + 1),
                f"[bold green]{escape(name)}[/bold green]" if is_active else escape(name),
                "●" if is_active else ""
            )

        console.print(table)

    def print_error(self, kind: str, message: str):
        err_console.print(f"[bold red]Error \\[{escape(kind)}]:[/bold red] {escape(message)}",
                          highlight=False, soft_wrap=True)
