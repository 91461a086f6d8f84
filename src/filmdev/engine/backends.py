"""
Calculation backends.

A backend is anything that can turn a CalculationRequest into a
CalculationResult. The local backend runs the DevelopmentCalculator in
process; FallbackCalculationBackend lets a caller try another backend first
(for example a remote service) and fall back to a second one when the first
is unavailable.

Usage:
    local = LocalCalculationBackend(DevelopmentCalculator(database))
    backend = FallbackCalculationBackend(primary=remote, fallback=local)
    result = backend.calculate(request)
"""

from abc import ABC, abstractmethod

from filmdev.core.exceptions import BackendError
from filmdev.core.logging import LoggingMixin
from filmdev.core.models import CalculationRequest, CalculationResult
from filmdev.engine.calculator import DevelopmentCalculator


class CalculationBackend(ABC):
    """Abstract source of calculation results."""

    name: str = "backend"

    @abstractmethod
    def calculate(self, request: CalculationRequest) -> CalculationResult:
        """Calculate development parameters.

        Raises:
            BackendError: The backend could not serve the request.
            CalculationError: The request itself cannot be calculated.
        """
        ...


class LocalCalculationBackend(CalculationBackend):
    """Runs the in-process DevelopmentCalculator."""

    name = "local"

    def __init__(self, calculator: DevelopmentCalculator):
        self.calculator = calculator

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        return self.calculator.calculate(request)


class FallbackCalculationBackend(CalculationBackend, LoggingMixin):
    """Tries a primary backend and falls back when it is unavailable.

    Only BackendError triggers the fallback. Calculation errors are properties
    of the request and propagate from the primary unchanged.
    """

    def __init__(self, primary: CalculationBackend, fallback: CalculationBackend):
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}->{fallback.name}"

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        try:
            return self.primary.calculate(request)
        except BackendError as e:
            self.logger.warning(
                f"Backend {self.primary.name!r} failed, falling back to {self.fallback.name!r}: {e}",
                extra={"backend": self.primary.name},
            )
            return self.fallback.calculate(request)
