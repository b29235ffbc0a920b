"""Rich-powered console output for prdiff."""

from __future__ import annotations

from collections import Counter

from rich.console import Console as RichConsole
from rich.table import Table

from prdiff.github.models import ChangedFile, DiffSummary


class Console:
    """Terminal output for the local prdiff commands."""

    def __init__(self, console: RichConsole | None = None) -> None:
        self.console = console or RichConsole()

    def error(self, message: str) -> None:
        self.console.print(f"[red]✗[/red] {message}")

    def info(self, message: str) -> None:
        self.console.print(f"[blue]i[/blue] {message}")

    def show_files(self, files: list[ChangedFile], labels: list[str]) -> None:
        """Per-file table: path, label, +/-."""
        table = Table(title="Changed Files", border_style="cyan")
        table.add_column("File", style="bold")
        table.add_column("Label", style="magenta")
        table.add_column("+", justify="right", style="green")
        table.add_column("-", justify="right", style="red")

        for file, label in zip(files, labels):
            table.add_row(file.filename, label, str(file.additions), str(file.deletions))

        self.console.print(table)

    def show_summary(self, summary: DiffSummary, labels: list[str]) -> None:
        """Display the totals and the label breakdown."""
        table = Table(title="Diff Summary", border_style="cyan")
        table.add_column("Metric", style="bold")
        table.add_column("Count", justify="right", style="cyan")

        table.add_row("Additions", str(summary.additions))
        table.add_row("Deletions", str(summary.deletions))
        table.add_row("Changed files", str(summary.changed_file_count))

        if labels:
            table.add_section()
            for label, count in sorted(Counter(labels).items(), key=lambda x: -x[1]):
                table.add_row(f"  {label}", str(count))

        self.console.print(table)

    def show_labels(self, paths: list[str], labels: list[str]) -> None:
        for path, label in zip(paths, labels):
            self.console.print(f"  [cyan]{path}[/cyan] [dim]→[/dim] [bold]{label}[/bold]")
