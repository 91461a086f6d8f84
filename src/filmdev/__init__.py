"""
Film development calculator.

Computes black-and-white, C-41 and E-6 development times and chemistry
volumes from a reference database of film/developer combinations, adjusted
for temperature and push/pull processing:

- Developer key resolution across inconsistently named data
- Temperature compensation with half-degree interpolation
- Push/pull time resolution per process family
- Dilution arithmetic for working solutions
- Export of results to JSON, CSV and text
"""

__version__ = "1.0.0"

from filmdev.config import Settings, configure, get_settings
from filmdev.core import (
    CalculationError,
    CalculationRequest,
    CalculationResult,
    DeveloperProfile,
    ExportFormat,
    FilmDevError,
    FilmStock,
    ProcessFamily,
)
from filmdev.database import ReferenceDatabase, load_reference_database
from filmdev.engine import (
    CompensationEngine,
    DevelopmentCalculator,
    DilutionCalculator,
    KeyResolver,
)
from filmdev.export import ResultExporter

__all__ = [
    "__version__",
    # Configuration
    "Settings",
    "configure",
    "get_settings",
    # Models
    "CalculationRequest",
    "CalculationResult",
    "DeveloperProfile",
    "FilmStock",
    "ExportFormat",
    "ProcessFamily",
    # Errors
    "CalculationError",
    "FilmDevError",
    # Engine
    "CompensationEngine",
    "DevelopmentCalculator",
    "DilutionCalculator",
    "KeyResolver",
    "ReferenceDatabase",
    "load_reference_database",
    # Export
    "ResultExporter",
]
