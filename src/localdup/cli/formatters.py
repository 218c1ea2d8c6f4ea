"""Rich formatting utilities for terminal output.

The duplicate report is written to stdout; every status message, error and
progress bar goes to stderr.
"""

import os
import sys
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _write_line(text: str) -> None:
    """Write one raw line to stdout.

    Paths are encoded back to their on-disk bytes, so names that are not
    valid in the terminal encoding are reproduced as-is.
    """
    stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text + "\n")
        return
    stream.flush()
    buffer.write(os.fsencode(text) + b"\n")
    buffer.flush()


def print_path(path: str) -> None:
    """Print one report line exactly as the path is spelled."""
    _write_line(path)


def print_summary(message: str) -> None:
    """Print the trailing summary line of the report."""
    _write_line(message)


def print_success(message: str) -> None:
    """Print success message."""
    err_console.print(f"[green]✓[/green] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print error message."""
    err_console.print(f"[red]✗[/red] {escape(message)}", style="red", soft_wrap=True)


def print_info(message: str) -> None:
    """Print info message."""
    err_console.print(f"[blue]ℹ[/blue] {escape(message)}", soft_wrap=True)


def create_progress() -> Progress:
    """Create a progress bar with common columns.

    The bar is disabled when stderr is not a terminal.

    Returns:
        Configured Progress instance
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=err_console,
        transient=True,
        disable=not err_console.is_terminal,
    )


def create_table(title: Optional[str] = None, **kwargs: Any) -> Table:
    """Create a Rich table with common styling.

    Args:
        title: Optional table title
        **kwargs: Additional Table arguments

    Returns:
        Configured Table instance
    """
    return Table(title=title, show_header=True, header_style="bold cyan", **kwargs)
