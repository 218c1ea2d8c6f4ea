"""CSV and JSON export functionality."""

import csv
import json
from pathlib import Path

from ..common.exceptions import ExportError
from ..common.logging import get_logger
from ..detector.models import DetectionResult

logger = get_logger(__name__)

CSV_HEADER = ["duplicate", "original", "size", "extension"]


class ReportExporter:
    """Exports duplicate matches to CSV or JSON."""

    def export(self, result: DetectionResult, output_path: Path, format: str) -> None:
        """Export in the requested format.

        Args:
            result: Detection result to export
            output_path: Output file path
            format: "csv" or "json"

        Raises:
            ExportError: If the format is unknown or the file cannot be written
        """
        format = format.lower()
        if format not in ("csv", "json"):
            raise ExportError(f"Invalid format: {format}. Must be 'csv' or 'json'")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            if format == "csv":
                self.export_csv(result, output_path)
            else:
                self.export_json(result, output_path)
        except OSError as e:
            raise ExportError(f"Cannot write {output_path}: {e.strerror or e}") from e

    def export_csv(self, result: DetectionResult, output_path: Path) -> None:
        """Export duplicate matches to CSV.

        Args:
            result: Detection result to export
            output_path: Output file path
        """
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)

            for match in result.matches:
                writer.writerow([
                    match.duplicate.path,
                    match.original.path,
                    match.size,
                    match.duplicate.extension,
                ])

        logger.info(f"Exported {result.count} duplicates to CSV: {output_path}")

    def export_json(self, result: DetectionResult, output_path: Path) -> None:
        """Export duplicate matches to JSON.

        Args:
            result: Detection result to export
            output_path: Output file path
        """
        data = {
            "files_scanned": result.files_scanned,
            "total_duplicates": result.count,
            "total_wasted_space": result.wasted_size,
            "duplicates": [
                {
                    "duplicate": match.duplicate.path,
                    "original": match.original.path,
                    "size": match.size,
                    "extension": match.duplicate.extension,
                }
                for match in result.matches
            ],
        }

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        logger.info(f"Exported {result.count} duplicates to JSON: {output_path}")
