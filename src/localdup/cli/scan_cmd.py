"""Scan command."""

from pathlib import Path
from typing import Optional

import typer
from humanize import naturalsize

from ..common.constants import SHORTCUT_EXTENSIONS
from ..common.exceptions import ConfigError, LocalDupError
from ..config.settings import get_settings
from ..detector.pipeline import DetectionPipeline
from ..reporting.exporter import ReportExporter
from ..scanner.file_enumerator import FileEnumerator
from .formatters import (
    create_progress,
    print_error,
    print_info,
    print_path,
    print_success,
    print_summary,
)


def _resolve_root(path: Path) -> Path:
    """Validate the scan root before anything is read."""
    if not path.exists():
        raise ConfigError(f"location doesn't exist: {path}")
    if not path.is_dir():
        raise ConfigError(f"location is not a directory: {path}")
    return path.resolve()


def scan(
    path: Path = typer.Argument(..., help="Directory to search for duplicates"),
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Search subdirectories too"
    ),
    extensions: Optional[list[str]] = typer.Option(
        None, "--ext", "-e", help="Only consider files with this extension (repeatable)"
    ),
    jpg: bool = typer.Option(False, "--jpg", help="Only consider .jpg files"),
    png: bool = typer.Option(False, "--png", help="Only consider .png files"),
    gif: bool = typer.Option(False, "--gif", help="Only consider .gif files"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print a summary line after the report"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="Size groups processed in parallel"
    ),
    chunk_size: Optional[int] = typer.Option(
        None, "--chunk-size", min=1, help="Bytes compared at each end of a file"
    ),
    min_size: Optional[int] = typer.Option(
        None, "--min-size", min=0, help="Minimum file size in bytes"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Also export the matches to this file"
    ),
    format: str = typer.Option(
        "csv", "--format", "-f", help="Export format: csv or json"
    ),
) -> None:
    """Report files whose content duplicates another file under PATH."""
    settings = get_settings()

    try:
        root = _resolve_root(path)
        if output is not None and format.lower() not in ("csv", "json"):
            raise ConfigError(f"Invalid format: {format}. Must be 'csv' or 'json'")

        selected = list(extensions or [])
        for flag, enabled in (("jpg", jpg), ("png", png), ("gif", gif)):
            if enabled:
                selected.append(SHORTCUT_EXTENSIONS[flag])

        overrides = {
            key: value
            for key, value in (
                ("chunk_size", chunk_size),
                ("max_workers", workers),
                ("min_file_size", min_size),
            )
            if value is not None
        }
        run_settings = settings.model_copy(update=overrides)
        pipeline = DetectionPipeline.from_settings(run_settings)
        enumerator = FileEnumerator()
        files = enumerator.enumerate(str(root), recursive=recursive, extensions=selected)

        progress = create_progress()
        with progress:
            task = progress.add_task("[cyan]Comparing size groups...", total=None)

            def on_progress(completed: int, total: int) -> None:
                progress.update(task, completed=completed, total=total)

            result = pipeline.detect_duplicates(
                files,
                min_size=run_settings.min_file_size,
                progress=on_progress,
            )

        for duplicate_path in result.duplicate_paths:
            print_path(duplicate_path)

        if verbose:
            print_summary(
                f"found {result.count} duplicates "
                f"({naturalsize(result.wasted_size)} reclaimable)"
            )
            if enumerator.skipped:
                print_info(f"Skipped {enumerator.skipped} inaccessible entries")

        if output is not None:
            ReportExporter().export(result, output, format)
            print_success(f"Exported report to: {output}")

    except ConfigError as e:
        print_error(f"error - {e}")
        raise typer.Exit(1)
    except LocalDupError as e:
        print_error(f"Scan failed: {e}")
        raise typer.Exit(1)
