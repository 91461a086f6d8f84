"""
Unit tests for result export.
"""

import csv
import io
import json

import pytest

from filmdev.config import ExportSettings, configure
from filmdev.core.exceptions import ExportError
from filmdev.core.models import CalculationRequest
from filmdev.core.types import ExportFormat
from filmdev.export import CSV_FIELDS, ResultExporter


@pytest.fixture
def exporter():
    return ResultExporter(ExportSettings())


class TestJsonExport:
    """Tests for JSON export."""

    def test_structure(self, exporter, sample_result):
        data = json.loads(exporter.export(sample_result, ExportFormat.JSON))

        assert data["metadata"]["format"] == "json"
        assert data["metadata"]["export_version"] == "1.0.0"
        assert "export_date" in data["metadata"]
        assert data["calculation"]["film_id"] == "test-bw"
        assert data["calculation"]["chemistry_ml"] == 10
        assert data["calculation"]["water_ml"] == 500

    def test_indent_from_settings(self, sample_result):
        content = ResultExporter(ExportSettings(json_indent=4)).to_json(sample_result)
        assert '\n    "metadata"' in content


class TestCsvExport:
    """Tests for CSV export."""

    def test_header_and_row(self, exporter, sample_result):
        content = exporter.export(sample_result, "csv")
        rows = list(csv.DictReader(io.StringIO(content)))

        assert len(rows) == 1
        assert list(rows[0]) == list(CSV_FIELDS)
        assert rows[0]["film_name"] == "Test Pan 400"
        assert rows[0]["time_formatted"] == sample_result.time_formatted
        assert rows[0]["notes"] == "; ".join(sample_result.notes)

    def test_delimiter_from_settings(self, sample_result):
        content = ResultExporter(ExportSettings(csv_delimiter=";")).to_csv(sample_result)
        assert content.splitlines()[0].startswith("film_name;developer_name;")


class TestTextExport:
    """Tests for the text report."""

    def test_report(self, exporter, sample_result):
        content = exporter.export(sample_result, "text")

        assert "FILM DEVELOPMENT" in content
        assert "Film: Test Pan 400" in content
        assert "Developer: Rodinal" in content
        assert f"Development Time: {sample_result.time_formatted}" in content
        assert "Dilution: 1:50" in content
        assert "Push/Pull: +1 stops" in content
        assert "* Push 1 stop" in content

    def test_default_format_is_text(self, exporter, sample_result):
        assert exporter.export(sample_result) == exporter.to_text(sample_result)

    def test_normal_processing(self, exporter, calculator):
        result = calculator.calculate(CalculationRequest(film_id="test-bw", developer_id="d76"))
        content = exporter.to_text(result)
        assert "Push/Pull: Normal" in content
        assert "NOTES" not in content


class TestExportErrors:
    """Tests for export failure handling."""

    def test_unknown_format(self, exporter, sample_result):
        with pytest.raises(ExportError) as exc_info:
            exporter.export(sample_result, "xml")
        assert exc_info.value.operation == "export"

    def test_format_is_case_insensitive(self, exporter, sample_result):
        assert exporter.export(sample_result, "JSON").startswith("{")


class TestExportToFile:
    """Tests for writing exports to disk."""

    def test_writes_file(self, exporter, sample_result, tmp_path):
        path = tmp_path / "nested" / "result.json"
        content = exporter.export(sample_result, "json", path)

        assert path.exists()
        assert path.read_text(encoding="utf-8") == content + "\n"

    def test_unwritable_target(self, exporter, sample_result, tmp_path):
        target = tmp_path / "dir"
        target.mkdir()
        with pytest.raises(ExportError):
            exporter.export(sample_result, "text", target)

    def test_relative_path_goes_under_exports_dir(self, sample_result, tmp_path):
        exporter = ResultExporter(ExportSettings(), exports_dir=tmp_path / "exports")
        exporter.export(sample_result, "json", "result.json")

        assert (tmp_path / "exports" / "result.json").exists()

    def test_exports_dir_from_settings(self, sample_result, tmp_path):
        configure(data_dir=tmp_path, exports_dir="exports")
        assert ResultExporter().resolve_path("out.txt") == tmp_path / "exports" / "out.txt"

    def test_absolute_path_unchanged(self, tmp_path):
        exporter = ResultExporter(ExportSettings(), exports_dir=tmp_path / "exports")
        assert exporter.resolve_path(tmp_path / "out.csv") == tmp_path / "out.csv"

    def test_relative_path_without_exports_dir(self):
        exporter = ResultExporter(ExportSettings(), exports_dir=None)
        assert str(exporter.resolve_path("out.csv")) == "out.csv"
