"""
Console rendering of validation errors.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from modelguard.domain.errors import ErrorBag


def print_errors(
    errors: ErrorBag,
    console: Console | None = None,
    title: str = "Validation errors",
) -> None:
    """
    Print an ErrorBag as a table of attribute/message rows.

    Args:
        errors: The bag to display
        console: Target console (a new stdout Console if None)
        title: Table title
    """
    console = console or Console()

    if errors.is_empty():
        console.print("[bold green]✓ valid[/bold green]")
        return

    table = Table(title=title, title_style="bold red")
    table.add_column("Attribute", style="cyan")
    table.add_column("Message")
    for entry in errors.entries():
        if entry.is_base:
            label = Text("(record)", style="dim")
        else:
            label = Text(entry.attribute)
        table.add_row(label, Text(entry.message))
    console.print(table)
    console.print(
        f"[dim]{errors.count()} error(s) on {len(errors.keys())} attribute(s)[/dim]"
    )
