"""Shared Rich console for pdx-explorer commands.

Commands print through ``console`` so styling stays consistent:

    from pdx_explorer.pipeline.ui import console, print_header, print_stats

    print_header("INDEX")
    print_stats({"Files": 120, "Localization keys": 5400})
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

EXPLORER_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "bold cyan",
    "dir": "bold blue",
    "loc": "green",
    "key": "bold magenta",
    "dim": "dim white",
})

# Import this instead of creating another Console
console = Console(
    theme=EXPLORER_THEME,
    force_terminal=sys.stdout.isatty()
)


def print_header(title: str) -> None:
    console.rule(f"[bold]{title}[/bold]")


def print_warning(msg: str) -> None:
    console.print(f"[warning]WARNING:[/warning] {msg}")


def print_success(msg: str) -> None:
    console.print(f"[success]OK:[/success] {msg}")


def print_stats(stats: dict[str, object]) -> None:
    """Print label/value pairs as an aligned two-column block."""
    table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
    table.add_column("Label", style="info", no_wrap=True)
    table.add_column("Value", justify="right", no_wrap=True)
    for label, value in stats.items():
        table.add_row(label, str(value))
    console.print(table)
