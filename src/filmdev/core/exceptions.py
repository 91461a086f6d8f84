"""
Exceptions for the film development calculator.

Provides a hierarchy of exceptions:
- FilmDevError (base)
  - CalculationError
    - MissingSelectionError
    - UnknownFilmError
    - UnknownDeveloperError
    - UnsupportedCombinationError
    - InvalidDataError
  - DatabaseError
  - BackendError
  - ExportError

Every CalculationError is terminal for the request that raised it; callers
surface ``kind`` to the user and never display a partial result.
"""

from typing import Any


class FilmDevError(Exception):
    """Base exception for film development calculator errors.

    Attributes:
        operation: Operation that failed.
        details: Additional error details.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize error.

        Args:
            message: Human-readable error message.
            operation: Operation that was being performed.
            details: Additional context as key-value pairs.
        """
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.details = details or {}

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.operation:
            parts.append(f"Operation: {self.operation}")
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"Details: {details_str}")
        return " | ".join(parts)


class CalculationError(FilmDevError):
    """Base class for failures of a single development calculation."""

    kind = "CalculationError"

    def __init__(self, message: str, **kwargs: Any):
        kwargs.setdefault("operation", "calculate")
        super().__init__(message, **kwargs)


class MissingSelectionError(CalculationError):
    """Film or developer identifier was not supplied."""

    kind = "MissingSelection"

    def __init__(
        self,
        message: str = "Please select both film stock and developer",
        film_id: str | None = None,
        developer_id: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        details["film_id"] = film_id or ""
        details["developer_id"] = developer_id or ""
        super().__init__(message, details=details, **kwargs)


class UnknownFilmError(CalculationError):
    """Film identifier is not in the reference database."""

    kind = "UnknownFilm"

    def __init__(self, film_id: str, message: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        details["film_id"] = film_id
        super().__init__(message or f"Film not found: {film_id}", details=details, **kwargs)
        self.film_id = film_id


class UnknownDeveloperError(CalculationError):
    """Developer identifier cannot be resolved to a developer profile."""

    kind = "UnknownDeveloper"

    def __init__(self, developer_id: str, message: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        details["developer_id"] = developer_id
        super().__init__(
            message or f"Developer not found: {developer_id}", details=details, **kwargs
        )
        self.developer_id = developer_id


class UnsupportedCombinationError(CalculationError):
    """Film has no process entry for the requested developer key."""

    kind = "UnsupportedCombination"

    def __init__(self, film_id: str, developer_id: str, message: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        details["film_id"] = film_id
        details["developer_id"] = developer_id
        super().__init__(
            message
            or f"Film/developer combination not supported: {film_id} with {developer_id}",
            details=details,
            **kwargs,
        )
        self.film_id = film_id
        self.developer_id = developer_id


class InvalidDataError(CalculationError):
    """Reference data holds a value the engine cannot interpret."""

    kind = "InvalidData"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details=details, **kwargs)


class DatabaseError(FilmDevError):
    """Reference database could not be loaded or failed validation.

    Raised when:
    - The database file does not exist or cannot be read
    - The document is not valid JSON
    - Required sections are missing or empty
    - An entity does not match the expected schema
    """

    def __init__(self, message: str, source: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        if source:
            details["source"] = source
        kwargs.setdefault("operation", "load_database")
        super().__init__(message, details=details, **kwargs)


class BackendError(FilmDevError):
    """A calculation backend could not serve the request."""

    def __init__(self, message: str, backend: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        if backend:
            details["backend"] = backend
        super().__init__(message, details=details, **kwargs)
        self.backend = backend


class ExportError(FilmDevError):
    """Calculation result could not be exported."""

    def __init__(self, message: str, export_format: str | None = None, **kwargs: Any):
        details = kwargs.pop("details", {})
        if export_format:
            details["format"] = export_format
        kwargs.setdefault("operation", "export")
        super().__init__(message, details=details, **kwargs)
