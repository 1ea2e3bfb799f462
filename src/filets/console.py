"""Rich output helpers for the filets command line."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from filets.types import FileStats


class Output:
    """Console output for filets commands (non-interactive)."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}", highlight=False)

    def show_info(self, message: str) -> None:
        """Show info message."""
        self.console.print(f"[blue]i[/blue] {message}")

    def show_text(self, content: str) -> None:
        """Print raw text without markup processing."""
        self.console.out(content, end="", highlight=False)

    def show_names(self, names: list[str], empty_message: str) -> None:
        """Print one name per line.

        Args:
            names: Names or paths to print.
            empty_message: Shown instead when there are no names.
        """
        if not names:
            self.console.print(f"[yellow]{empty_message}[/yellow]")
            return
        for name in names:
            self.console.print(name, markup=False, highlight=False)

    def show_stats(self, path: str, stats: FileStats) -> None:
        """Display a stats table for one path.

        Args:
            path: Path the stats belong to.
            stats: Snapshot to display.
        """
        if stats.is_directory:
            kind = "directory"
        elif stats.is_file:
            kind = "file"
        else:
            kind = "other"

        table = Table(title=path, show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Type", kind)
        table.add_row("Size", f"{stats.size} bytes")
        table.add_row("Modified", stats.modified.isoformat())
        table.add_row("Changed", stats.changed.isoformat())
        self.console.print(table)
