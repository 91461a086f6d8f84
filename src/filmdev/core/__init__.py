"""
Core data models, types and errors for the film development calculator.
"""

from filmdev.core.exceptions import (
    BackendError,
    CalculationError,
    DatabaseError,
    ExportError,
    FilmDevError,
    InvalidDataError,
    MissingSelectionError,
    UnknownDeveloperError,
    UnknownFilmError,
    UnsupportedCombinationError,
)
from filmdev.core.models import (
    BlackAndWhiteEntry,
    CalculationRequest,
    CalculationResult,
    ColorNegativeEntry,
    CompensationTable,
    DatabaseMetadata,
    DatabaseStats,
    DeveloperOption,
    DeveloperProfile,
    DilutionResult,
    FilmStock,
    ProcessEntry,
    SlideEntry,
)
from filmdev.core.types import ExportFormat, ProcessFamily

__all__ = [
    # Models
    "BlackAndWhiteEntry",
    "CalculationRequest",
    "CalculationResult",
    "ColorNegativeEntry",
    "CompensationTable",
    "DatabaseMetadata",
    "DatabaseStats",
    "DeveloperOption",
    "DeveloperProfile",
    "DilutionResult",
    "FilmStock",
    "ProcessEntry",
    "SlideEntry",
    # Types
    "ExportFormat",
    "ProcessFamily",
    # Errors
    "BackendError",
    "CalculationError",
    "DatabaseError",
    "ExportError",
    "FilmDevError",
    "InvalidDataError",
    "MissingSelectionError",
    "UnknownDeveloperError",
    "UnknownFilmError",
    "UnsupportedCombinationError",
]
