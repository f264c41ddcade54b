"""Enhanced error handling with explanations and suggestions"""

from typing import Optional, Dict, Any
from pathlib import Path

from rich.console import Console

from pdfsigscan.core.exceptions import (
    PDFNotFoundError,
    PDFReadError,
    ConfigurationError,
    ValidationError,
)


class ErrorContext:
    """Context information for enhanced error reporting"""

    def __init__(
        self,
        operation: str,
        input_file: Optional[Path] = None,
        output_file: Optional[Path] = None,
        extra_info: Optional[Dict[str, Any]] = None,
    ):
        self.operation = operation
        self.input_file = input_file
        self.output_file = output_file
        self.extra_info = extra_info or {}


ERROR_EXPLANATIONS = {
    PDFNotFoundError: {
        "why": "The specified file does not exist",
        "try_next": [
            "Verify file path is correct",
            "Use absolute path instead of relative",
            "Check file permissions on the parent directory",
        ],
    },
    PDFReadError: {
        "why": "The file exists but its content could not be read. Common causes:\n"
               "  - Insufficient permissions\n"
               "  - The path is a directory or a special file\n"
               "  - The file is locked or on an unavailable mount",
        "try_next": [
            "Check read permissions: `ls -l <input>`",
            "Copy the file locally and retry",
        ],
    },
    ConfigurationError: {
        "why": "The configuration file is missing or invalid. Options must be valid TOML\n"
               "  with the same type as their defaults (strings, booleans)",
        "try_next": [
            "Check the path passed with --config",
            "Validate the TOML syntax",
            "Remove the file to fall back to defaults",
        ],
    },
    ValidationError: {
        "why": "Input validation failed. Check command syntax and arguments",
        "try_next": [
            "Review command help: `pdfsigscan <command> --help`",
            "Check for typos in arguments",
        ],
    },
}


def explain_error(
    error: Exception,
    context: Optional[ErrorContext] = None,
    show_traceback: bool = False,
) -> None:
    """
    Explain error with context and suggestions

    Args:
        error: The exception that occurred
        context: Additional context about the operation
        show_traceback: Whether to show full traceback (debug mode)
    """
    console = Console(stderr=True)
    error_type = type(error)

    console.print("\n[bold red]Error occurred:[/bold red]", style="bold")
    console.print(f"[red][!][/red] {error}", style="red")

    if context:
        console.print(f"\n[bold]Operation:[/bold] {context.operation}")
        if context.input_file:
            console.print(f"[bold]Input:[/bold] {context.input_file}")
        if context.output_file:
            console.print(f"[bold]Output:[/bold] {context.output_file}")
        for key, value in context.extra_info.items():
            console.print(f"[bold]{key}:[/bold] {value}")

    explanation = ERROR_EXPLANATIONS.get(error_type)
    if explanation:
        console.print(f"\n[bold yellow]Why this likely failed:[/bold yellow]")
        console.print(f"[yellow]{explanation['why']}[/yellow]")

        console.print(f"\n[bold cyan]What to try next:[/bold cyan]")
        for i, suggestion in enumerate(explanation['try_next'], 1):
            console.print(f"  [cyan]{i}. {suggestion}[/cyan]")
    else:
        console.print(f"\n[yellow]This error type does not have specific guidance.[/yellow]")

    if show_traceback:
        console.print("\n[bold]Full traceback:[/bold]")
        console.print_exception(show_locals=True)
    else:
        console.print("\n[dim]Use --debug for full traceback[/dim]")
