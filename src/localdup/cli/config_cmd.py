"""Configuration commands."""

import typer

from ..config.settings import get_settings
from .formatters import console, create_table

config_app = typer.Typer(help="Inspect configuration settings")


@config_app.command()
def show() -> None:
    """Show current configuration.

    Values come from LOCALDUP_* environment variables or a .env file.
    """
    settings = get_settings()

    table = create_table(title="Configuration")
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", style="white")

    table.add_row("Chunk size", str(settings.chunk_size))
    table.add_row("Max workers", str(settings.max_workers))
    table.add_row("Hash algorithm", settings.hash_algorithm)
    table.add_row("Min file size", str(settings.min_file_size))
    table.add_row("Log level", settings.log_level)
    table.add_row("Log file", str(settings.log_file) if settings.log_file else "None")

    console.print(table)
