"""
Calculation engine for film development.

Provides the developer key resolver, temperature and push/pull compensation,
dilution arithmetic and the calculator that combines them:
- KeyResolver: raw process-map keys -> developer profiles
- CompensationEngine: temperature multipliers and push/pull times
- DilutionCalculator: ratio -> chemistry and water volumes
- DevelopmentCalculator: request -> result
"""

from filmdev.engine.resolver import (
    DEFAULT_STRATEGIES,
    SUFFIX_PATTERNS,
    KeyResolver,
    exact_key,
    first_two_segments,
    strip_suffixes,
)
from filmdev.engine.compensation import (
    COLOR_NEGATIVE_FALLBACK_TIMES,
    SLIDE_FALLBACK_TIMES,
    CompensationEngine,
    round_to_half_degree,
)
from filmdev.engine.dilution import DilutionCalculator, parse_ratio
from filmdev.engine.calculator import DevelopmentCalculator, format_time
from filmdev.engine.backends import (
    CalculationBackend,
    FallbackCalculationBackend,
    LocalCalculationBackend,
)

__all__ = [
    # Key resolution
    "KeyResolver",
    "DEFAULT_STRATEGIES",
    "SUFFIX_PATTERNS",
    "exact_key",
    "strip_suffixes",
    "first_two_segments",
    # Compensation
    "CompensationEngine",
    "COLOR_NEGATIVE_FALLBACK_TIMES",
    "SLIDE_FALLBACK_TIMES",
    "round_to_half_degree",
    # Dilution
    "DilutionCalculator",
    "parse_ratio",
    # Calculator
    "DevelopmentCalculator",
    "format_time",
    # Backends
    "CalculationBackend",
    "FallbackCalculationBackend",
    "LocalCalculationBackend",
]
