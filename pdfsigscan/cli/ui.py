"""Rich-based UI components for CLI"""

from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich import box

console = Console(legacy_windows=False, highlight=False)


def print_success(message: str):
    """Print success message"""
    console.print(f"[green][+][/green] {message}")


def print_error(message: str):
    """Print error message"""
    console.print(f"[red][!][/red] {message}", style="red")


def print_warning(message: str):
    """Print warning message"""
    console.print(f"[yellow][*][/yellow] {message}", style="yellow")


def print_info(message: str):
    """Print info message"""
    console.print(f"[blue]\\[i][/blue] {message}")


def print_header(title: str, subtitle: Optional[str] = None):
    """Print section header"""
    if subtitle:
        console.print(f"\n[bold cyan]{title}[/bold cyan]: {subtitle}")
    else:
        console.print(f"\n[bold cyan]{title}[/bold cyan]")


def create_table(
    title: str,
    columns: List[str],
    rows: List[List[Any]],
    show_header: bool = True,
    show_lines: bool = False,
) -> Table:
    """Create a Rich table"""
    table = Table(
        title=title,
        show_header=show_header,
        show_lines=show_lines,
        box=box.ROUNDED,
    )

    for col in columns:
        table.add_column(col, style="cyan", no_wrap=False)

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    return table


def print_table(
    title: str,
    columns: List[str],
    rows: List[List[Any]],
    show_header: bool = True,
    show_lines: bool = False,
):
    """Print a Rich table"""
    table = create_table(title, columns, rows, show_header, show_lines)
    console.print(table)


def print_dict(data: Dict[str, Any], title: Optional[str] = None):
    """Print dictionary as key/value lines"""
    if title:
        console.print(f"\n[bold]{title}[/bold]")

    for key, value in data.items():
        console.print(f"  [cyan]{key}:[/cyan] {value}")


def print_verbose(message: str, verbose: bool = False):
    """Print message only in verbose mode"""
    if verbose:
        console.print(f"[dim]{message}[/dim]")