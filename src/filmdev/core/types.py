"""
Domain-specific types and enumerations for film development.
"""

from enum import Enum


class ProcessFamily(str, Enum):
    """Development chemistry class of a film stock."""

    BLACK_WHITE = "black_white"
    COLOR_NEGATIVE = "color_negative"  # C-41
    SLIDE = "slide"  # E-6

    @property
    def label(self) -> str:
        """Short process name for display."""
        return {
            ProcessFamily.BLACK_WHITE: "B&W",
            ProcessFamily.COLOR_NEGATIVE: "C-41",
            ProcessFamily.SLIDE: "E-6",
        }[self]


class ExportFormat(str, Enum):
    """Supported calculation export formats."""

    JSON = "json"
    CSV = "csv"
    TEXT = "text"
