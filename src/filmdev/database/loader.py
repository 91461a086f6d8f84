"""
Reference database loading.

Builds a ReferenceDatabase from a JSON document with ``films``,
``developers`` and ``temperature_compensation`` sections (plus optional
``push_pull_compensation`` and ``metadata``). Loading is the only place
reference data is written; the resulting database is read-only.

Usage:
    from filmdev.database.loader import load_reference_database

    database = load_reference_database()  # configured file or bundled data
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from filmdev.config import Settings, get_settings
from filmdev.core.exceptions import DatabaseError
from filmdev.core.logging import get_logger, log_duration
from filmdev.core.models import (
    CompensationTable,
    DatabaseMetadata,
    DeveloperProfile,
    FilmStock,
)
from filmdev.database.builtin import BUILTIN_DATABASE
from filmdev.database.reference import ReferenceDatabase
from filmdev.engine.resolver import KeyResolver

logger = get_logger(__name__)

REQUIRED_SECTIONS = ("films", "developers", "temperature_compensation")


def load_database_file(path: Path | str) -> ReferenceDatabase:
    """Load a reference database from a JSON file.

    Raises:
        DatabaseError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)
    if not path.exists():
        raise DatabaseError(f"Database file not found at path: {path}", source=str(path))

    with log_duration(logger, "load_database"):
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DatabaseError(f"Failed to read database file: {e}", source=str(path)) from e
        return load_database_json(content, source=str(path))


def load_database_json(content: str, source: str = "<string>") -> ReferenceDatabase:
    """Load a reference database from a JSON string.

    Raises:
        DatabaseError: If the content is not valid JSON or fails validation.
    """
    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise DatabaseError(f"Failed to parse database JSON: {e}", source=source) from e
    return load_database_document(document, source=source)


def load_database_document(
    document: Mapping[str, Any], source: str = "<document>"
) -> ReferenceDatabase:
    """Build a reference database from an already parsed document.

    Raises:
        DatabaseError: If a section is missing or empty, or an entity is invalid.
    """
    if not isinstance(document, Mapping):
        raise DatabaseError("Database document must be a JSON object", source=source)

    for section in REQUIRED_SECTIONS:
        if not document.get(section):
            raise DatabaseError(f"Invalid database structure: no {section} found", source=source)

    try:
        developers = {
            key: DeveloperProfile(id=key, **data) for key, data in document["developers"].items()
        }
        films = {key: FilmStock(id=key, **data) for key, data in document["films"].items()}
        compensation = CompensationTable(
            temperature=document["temperature_compensation"],
            **(
                {"push_pull": document["push_pull_compensation"]}
                if document.get("push_pull_compensation")
                else {}
            ),
        )
        metadata = DatabaseMetadata(**document.get("metadata", {}))
    except (ValidationError, TypeError, AttributeError) as e:
        raise DatabaseError(f"Invalid database structure: {e}", source=source) from e

    for film_id, film in films.items():
        if not film.developers:
            raise DatabaseError(
                f"Invalid database structure: film '{film_id}' has no developer data",
                source=source,
            )

    _warn_unresolved_keys(films, developers)

    database = ReferenceDatabase(films, developers, compensation, metadata)
    logger.info(f"Loaded {database!r} from {source}")
    return database


def load_builtin_database() -> ReferenceDatabase:
    """Load the bundled reference data."""
    return load_database_document(BUILTIN_DATABASE, source="<builtin>")


def load_reference_database(settings: Settings | None = None) -> ReferenceDatabase:
    """Load the configured database file, or the bundled data if none is set."""
    settings = settings or get_settings()
    if settings.database.path is not None:
        return load_database_file(settings.database.path)
    return load_builtin_database()


def _warn_unresolved_keys(
    films: Mapping[str, FilmStock], developers: Mapping[str, DeveloperProfile]
) -> None:
    """Log process-map keys that cannot be used for calculation."""
    resolver = KeyResolver(developers)
    for film_id, film in films.items():
        for key in resolver.unresolved(list(film.developers)):
            logger.warning(f"Film '{film_id}': developer key '{key}' matches no developer profile")
