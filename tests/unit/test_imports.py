"""
Tests for module imports and package structure.

Ensures all public modules can be imported correctly.
"""


class TestPackageImports:
    """Test top-level package imports."""

    def test_version(self):
        import filmdev

        assert filmdev.__version__ == "1.0.0"

    def test_public_names(self):
        import filmdev

        for name in filmdev.__all__:
            assert getattr(filmdev, name) is not None


class TestSubpackageImports:
    """Test subpackage imports."""

    def test_import_core(self):
        from filmdev.core import (
            CalculationRequest,
            CalculationResult,
            FilmDevError,
            ProcessFamily,
        )

        assert CalculationRequest is not None
        assert CalculationResult is not None
        assert FilmDevError is not None
        assert ProcessFamily is not None

    def test_import_engine(self):
        from filmdev.engine import (
            CompensationEngine,
            DevelopmentCalculator,
            DilutionCalculator,
            FallbackCalculationBackend,
            KeyResolver,
        )

        assert CompensationEngine is not None
        assert DevelopmentCalculator is not None
        assert DilutionCalculator is not None
        assert FallbackCalculationBackend is not None
        assert KeyResolver is not None

    def test_import_database(self):
        from filmdev.database import ReferenceDatabase, load_reference_database

        assert ReferenceDatabase is not None
        assert load_reference_database is not None

    def test_import_cli(self):
        from filmdev.cli import main

        assert callable(main)
