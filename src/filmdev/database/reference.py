"""
Read-only reference database of film stocks, developers and compensation data.

The database is constructed once by a loader and injected into the
calculation engine. It exposes lookups only; there are no mutation methods.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Optional

from filmdev.core.models import (
    CompensationTable,
    DatabaseMetadata,
    DatabaseStats,
    DeveloperProfile,
    FilmStock,
)
from filmdev.core.types import ProcessFamily


class ReferenceDatabase:
    """Film and developer lookup by identifier."""

    def __init__(
        self,
        films: Mapping[str, FilmStock],
        developers: Mapping[str, DeveloperProfile],
        compensation: CompensationTable,
        metadata: DatabaseMetadata | None = None,
    ):
        """Initialize the database.

        Args:
            films: Film stocks keyed by identifier.
            developers: Developer profiles keyed by identifier.
            compensation: Temperature and push/pull multipliers.
            metadata: Optional descriptive metadata of the source document.
        """
        self._films = MappingProxyType(dict(films))
        self._developers = MappingProxyType(dict(developers))
        self._compensation = compensation
        self._metadata = metadata or DatabaseMetadata()

    @property
    def films(self) -> Mapping[str, FilmStock]:
        return self._films

    @property
    def developers(self) -> Mapping[str, DeveloperProfile]:
        return self._developers

    @property
    def compensation(self) -> CompensationTable:
        return self._compensation

    @property
    def metadata(self) -> DatabaseMetadata:
        return self._metadata

    def get_film(self, film_id: str) -> Optional[FilmStock]:
        """Get a film stock by identifier, or None if absent."""
        return self._films.get(film_id)

    def get_developer(self, developer_id: str) -> Optional[DeveloperProfile]:
        """Get a developer profile by exact identifier, or None if absent."""
        return self._developers.get(developer_id)

    def iter_films(self, family: ProcessFamily | None = None) -> Iterator[FilmStock]:
        """Iterate films in document order, optionally filtered by process family."""
        for film in self._films.values():
            if family is None or film.film_type == family:
                yield film

    def stats(self) -> DatabaseStats:
        """Counts of films, developers and film/developer combinations."""
        return DatabaseStats(
            film_count=len(self._films),
            developer_count=len(self._developers),
            total_combinations=sum(len(f.developers) for f in self._films.values()),
            version=self._metadata.version,
            last_updated=self._metadata.last_updated,
        )

    def __contains__(self, film_id: object) -> bool:
        return film_id in self._films

    def __len__(self) -> int:
        return len(self._films)

    def __repr__(self) -> str:
        return (
            f"ReferenceDatabase(films={len(self._films)}, "
            f"developers={len(self._developers)}, version={self._metadata.version!r})"
        )
