"""
Film development calculator.

Combines key resolution, compensation and dilution into one result for a
request:

1. Film and developer must both be selected
2. Film must exist in the reference database
3. Developer key must be an exact key of the film's process map
4. Developer key must resolve to a developer profile (for display)
5. Baseline time -> push/pull -> temperature compensation
6. Chemistry and water volumes from the entry's dilution
7. Time formatted as M:SS

The calculation is pure: the same request against the same database always
yields the same result.
"""

import math

from filmdev.config import CalculatorSettings, get_settings
from filmdev.core.exceptions import (
    MissingSelectionError,
    UnknownDeveloperError,
    UnknownFilmError,
    UnsupportedCombinationError,
)
from filmdev.core.logging import LogContext, LoggingMixin
from filmdev.core.models import (
    CalculationRequest,
    CalculationResult,
    DeveloperOption,
    DeveloperProfile,
    FilmStock,
)
from filmdev.core.types import ProcessFamily
from filmdev.database.reference import ReferenceDatabase
from filmdev.engine.compensation import CompensationEngine, round_half_up
from filmdev.engine.dilution import DilutionCalculator
from filmdev.engine.resolver import KeyResolver


def format_time(minutes: float) -> str:
    """Format a time in minutes as M:SS, carrying 60 seconds into the minute."""
    whole_minutes = math.floor(minutes)
    seconds = round_half_up((minutes - whole_minutes) * 60)
    if seconds >= 60:
        whole_minutes += 1
        seconds -= 60
    return f"{whole_minutes}:{seconds:02d}"


class DevelopmentCalculator(LoggingMixin):
    """Calculates development time and chemistry for a film/developer pair."""

    def __init__(
        self,
        database: ReferenceDatabase,
        resolver: KeyResolver | None = None,
        compensation: CompensationEngine | None = None,
        dilution: DilutionCalculator | None = None,
        settings: CalculatorSettings | None = None,
    ):
        """Initialize the calculator.

        Args:
            database: Read-only reference data.
            resolver: Developer key resolver. Defaults to one over the database developers.
            compensation: Compensation engine. Defaults to one over the database tables.
            dilution: Dilution calculator.
            settings: Calculator settings. If None, uses global settings.
        """
        self.database = database
        self.resolver = resolver or KeyResolver(database.developers)
        self.compensation = compensation or CompensationEngine(database.compensation)
        self.dilution = dilution or DilutionCalculator()
        self.settings = settings or get_settings().calculator

    def calculate(self, request: CalculationRequest) -> CalculationResult:
        """Calculate development parameters for ``request``.

        Raises:
            MissingSelectionError: Film or developer id is empty.
            UnknownFilmError: Film is not in the database.
            UnsupportedCombinationError: Film has no entry for the developer key.
            UnknownDeveloperError: Developer key resolves to no profile.
            InvalidDataError: The entry's dilution ratio is malformed.
        """
        film_id = request.film_id.strip()
        developer_id = request.developer_id.strip()
        if not film_id or not developer_id:
            raise MissingSelectionError(film_id=film_id, developer_id=developer_id)

        with LogContext(film_id=film_id, developer_id=developer_id):
            film = self.database.get_film(film_id)
            if film is None:
                raise UnknownFilmError(film_id)

            entry = film.process_entry(developer_id)
            if entry is None:
                raise UnsupportedCombinationError(film.id, developer_id)

            developer = self.resolver.resolve(developer_id)
            if developer is None:
                raise UnknownDeveloperError(developer_id)

            time_minutes, multiplier = self.compensation.adjust(
                entry, request.push_pull, request.temperature
            )
            dilution = self.dilution.calculate(film.film_type, entry.dilution, request.volume)

            result = CalculationResult(
                time_minutes=time_minutes,
                time_formatted=format_time(time_minutes),
                base_time_minutes=entry.base_time,
                temperature_multiplier=multiplier,
                dilution=dilution.label,
                chemistry_ml=dilution.chemistry_ml,
                water_ml=dilution.water_ml,
                film_id=film.id,
                developer_id=developer_id,
                temperature=request.temperature,
                push_pull=request.push_pull,
                volume=request.volume,
                film_name=film.name,
                developer_name=developer.name,
                process_family=film.film_type,
                notes=tuple(self._generate_notes(film, developer, request)),
            )
            self.logger.info(
                f"{film.name} in {developer.name}: {result.time_formatted} "
                f"at {request.temperature}°C, {request.push_pull:+d} stops"
            )
            return result

    def available_films(self, family: ProcessFamily | None = None) -> list[FilmStock]:
        """Films in the database, optionally limited to one process family."""
        return list(self.database.iter_films(family))

    def available_developers(self, film_id: str) -> list[DeveloperOption]:
        """Developer options for a film, one per distinct developer name.

        Process-map keys that do not resolve are skipped. When several keys
        resolve to developers with the same display name, the first key in
        process-map order is kept.

        Raises:
            UnknownFilmError: Film is not in the database.
        """
        film = self.get_film_info(film_id)
        options: list[DeveloperOption] = []
        seen_names: set[str] = set()
        for key in film.developers:
            developer = self.resolver.resolve(key)
            if developer is None:
                self.logger.debug(f"Skipping unresolvable developer key {key!r} for {film_id}")
                continue
            if developer.name in seen_names:
                continue
            seen_names.add(developer.name)
            options.append(DeveloperOption(key=key, developer=developer))
        return options

    def get_film_info(self, film_id: str) -> FilmStock:
        """Film stock by id.

        Raises:
            UnknownFilmError: Film is not in the database.
        """
        film = self.database.get_film(film_id)
        if film is None:
            raise UnknownFilmError(film_id)
        return film

    def get_developer_info(self, developer_id: str) -> DeveloperProfile:
        """Developer profile for a raw or canonical developer key.

        Raises:
            UnknownDeveloperError: Key resolves to no profile.
        """
        developer = self.resolver.resolve(developer_id)
        if developer is None:
            raise UnknownDeveloperError(developer_id)
        return developer

    def _generate_notes(
        self,
        film: FilmStock,
        developer: DeveloperProfile,
        request: CalculationRequest,
    ) -> list[str]:
        """Generate helpful notes for the result."""
        notes = []

        if film.film_type == ProcessFamily.COLOR_NEGATIVE:
            notes.append("C-41 Developer")
        elif film.film_type == ProcessFamily.SLIDE:
            notes.append("E-6 First Developer")

        if request.temperature != self.settings.standard_temperature_c:
            notes.append(f"Temperature adjusted for {request.temperature:g}°C")

        if request.push_pull != 0:
            direction = "Push" if request.push_pull > 0 else "Pull"
            stops = abs(request.push_pull)
            notes.append(f"{direction} {stops} stop{'' if stops == 1 else 's'}")

        if developer.safety_notes:
            notes.append(f"Safety: {developer.safety_notes}")

        return notes
