"""Display components for CLI using Rich."""

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from classpath_infer.models.classpath import StrategyKind

console = Console()


def show_error(title: str, message: str) -> None:
    """Display an error message."""
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(message)}[/]",
            title=f"[bold]{escape(title)}[/]",
            border_style="red",
        )
    )


def show_strategy(workspace_root: Path, kind: StrategyKind) -> None:
    """Display the detected build system."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Workspace", escape(str(workspace_root)))
    table.add_row("Build System", f"[bold green]{kind.value}[/]")
    console.print(Panel(table, title="[bold]Detection[/]", border_style="blue"))


def show_paths(title: str, paths: Iterable[Path]) -> None:
    """Display classpath entries in a table, marking the ones missing on disk.

    Args:
        title: Table title.
        paths: Classpath entries.
    """
    entries = sorted(paths)

    table = Table(title=f"[bold]{escape(title)}[/] ({len(entries)} entries)")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Path", style="white")
    table.add_column("Exists", justify="center")

    for path in entries:
        kind = "jar" if path.suffix in (".jar", ".aar") else "classes"
        exists = "[green]yes[/]" if path.exists() else "[dim]no[/]"
        table.add_row(kind, escape(str(path)), exists)

    console.print(table)
