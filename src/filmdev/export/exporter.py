"""
Calculation result export.

Supports JSON, CSV and a plain-text report. Each export covers one
CalculationResult; nothing is kept between exports.
"""

import csv
import io
import json
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from filmdev.config import ExportSettings, get_settings
from filmdev.core.exceptions import ExportError
from filmdev.core.logging import get_logger
from filmdev.core.models import CalculationResult
from filmdev.core.types import ExportFormat

logger = get_logger(__name__)

EXPORT_VERSION = "1.0.0"

# Column order for CSV export
CSV_FIELDS = (
    "film_name",
    "developer_name",
    "process_family",
    "time_formatted",
    "time_minutes",
    "dilution",
    "chemistry_ml",
    "water_ml",
    "volume",
    "temperature",
    "push_pull",
    "temperature_multiplier",
    "base_time_minutes",
    "film_id",
    "developer_id",
    "notes",
)


class ExportMetadata(BaseModel):
    """Metadata for exported data."""

    export_date: datetime = Field(default_factory=datetime.now)
    export_version: str = Field(default=EXPORT_VERSION)
    format: str = Field(...)


class ResultExporter:
    """Export calculation results to various formats."""

    def __init__(
        self,
        settings: ExportSettings | None = None,
        exports_dir: Path | None = None,
    ) -> None:
        """
        Initialize the exporter.

        Args:
            settings: Export settings. If None, uses global settings.
            exports_dir: Directory for relative output paths. If None, uses
                ``Settings.exports_dir``; relative paths stay relative when
                that is unset too.
        """
        global_settings = get_settings()
        self.settings = settings or global_settings.export
        self.exports_dir = exports_dir if exports_dir is not None else global_settings.exports_dir

    def resolve_path(self, path: Path | str) -> Path:
        """Place a relative output path under the exports directory."""
        path = Path(path)
        if path.is_absolute() or self.exports_dir is None:
            return path
        return Path(self.exports_dir) / path

    def export(
        self,
        result: CalculationResult,
        export_format: ExportFormat | str | None = None,
        path: Path | str | None = None,
    ) -> str:
        """
        Render a result and optionally write it to a file.

        Args:
            result: Calculation result to export
            export_format: json, csv or text (default from settings)
            path: Optional output file path, relative to the exports directory

        Returns:
            The rendered content

        Raises:
            ExportError: If the format is unknown or the file cannot be written
        """
        fmt = self._coerce_format(export_format)
        renderers = {
            ExportFormat.JSON: self.to_json,
            ExportFormat.CSV: self.to_csv,
            ExportFormat.TEXT: self.to_text,
        }
        content = renderers[fmt](result)

        if path is not None:
            self._write(self.resolve_path(path), content, fmt)
        return content

    def to_json(self, result: CalculationResult) -> str:
        """Render a result as a JSON document with export metadata."""
        metadata = ExportMetadata(format=ExportFormat.JSON.value)
        export_data = {
            "metadata": metadata.model_dump(mode="json"),
            "calculation": result.to_dict(),
        }
        return json.dumps(export_data, indent=self.settings.json_indent, ensure_ascii=False)

    def to_csv(self, result: CalculationResult) -> str:
        """Render a result as a CSV header plus one row.

        Note:
            The notes list is joined with "; "
        """
        data = result.to_dict()
        row: dict[str, Any] = {}
        for key in CSV_FIELDS:
            value = data.get(key)
            if value is None:
                row[key] = ""
            elif isinstance(value, (list, tuple)):
                row[key] = "; ".join(str(v) for v in value)
            else:
                row[key] = value

        buffer = io.StringIO()
        writer = csv.DictWriter(
            buffer,
            fieldnames=list(CSV_FIELDS),
            delimiter=self.settings.csv_delimiter,
            lineterminator="\n",
        )
        writer.writeheader()
        writer.writerow(row)
        return buffer.getvalue()

    def to_text(self, result: CalculationResult) -> str:
        """Format a result as a human-readable report."""
        push_pull = "Normal" if result.push_pull == 0 else f"{result.push_pull:+d} stops"
        lines = [
            "=" * 50,
            "FILM DEVELOPMENT",
            "=" * 50,
            "",
            f"Film: {result.film_name}",
            f"Developer: {result.developer_name}",
            f"Process: {result.process_family.label}",
            "",
            "-" * 50,
            "TIME",
            "-" * 50,
            f"Development Time: {result.time_formatted} ({result.time_minutes:.2f} min)",
            f"Temperature: {result.temperature:g}C (x{result.temperature_multiplier:.3f})",
            f"Push/Pull: {push_pull}",
            "",
            "-" * 50,
            "CHEMISTRY",
            "-" * 50,
            f"Dilution: {result.dilution}",
            f"Developer: {result.chemistry_ml} ml",
            f"Water: {result.water_ml} ml",
            f"Total: {result.volume} ml",
        ]

        if result.notes:
            lines.extend(
                [
                    "",
                    "-" * 50,
                    "NOTES",
                    "-" * 50,
                ]
            )
            for note in result.notes:
                lines.append(f"* {note}")

        lines.append("=" * 50)

        return "\n".join(lines)

    def _coerce_format(self, export_format: ExportFormat | str | None) -> ExportFormat:
        if export_format is None:
            return ExportFormat(self.settings.default_format)
        try:
            return ExportFormat(str(getattr(export_format, "value", export_format)).lower())
        except ValueError as e:
            raise ExportError(
                f"Unsupported export format: {export_format}", export_format=str(export_format)
            ) from e

    def _write(self, path: Path, content: str, fmt: ExportFormat) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content if content.endswith("\n") else content + "\n", encoding="utf-8")
        except OSError as e:
            raise ExportError(
                f"Failed to write export file: {e}", export_format=fmt.value, details={"path": str(path)}
            ) from e
        logger.info(f"Exported {fmt.value} to {path}")
