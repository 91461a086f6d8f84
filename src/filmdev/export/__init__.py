"""
Export of calculation results to JSON, CSV and text.
"""

from filmdev.export.exporter import CSV_FIELDS, ExportMetadata, ResultExporter

__all__ = [
    "CSV_FIELDS",
    "ExportMetadata",
    "ResultExporter",
]
