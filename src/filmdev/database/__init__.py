"""
Reference data: read-only database, loader and bundled data.
"""

from filmdev.database.reference import ReferenceDatabase
from filmdev.database.loader import (
    load_builtin_database,
    load_database_document,
    load_database_file,
    load_database_json,
    load_reference_database,
)

__all__ = [
    "ReferenceDatabase",
    "load_builtin_database",
    "load_database_document",
    "load_database_file",
    "load_database_json",
    "load_reference_database",
]
