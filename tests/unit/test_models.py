"""
Unit tests for core data models.
"""

import pytest
from pydantic import ValidationError

from filmdev.core.models import (
    BlackAndWhiteEntry,
    CalculationResult,
    ColorNegativeEntry,
    CompensationTable,
    DeveloperProfile,
    FilmStock,
    SlideEntry,
    coerce_process_family,
)
from filmdev.core.types import ProcessFamily


class TestProcessFamily:
    """Tests for process family values."""

    def test_labels(self):
        assert ProcessFamily.BLACK_WHITE.label == "B&W"
        assert ProcessFamily.COLOR_NEGATIVE.label == "C-41"
        assert ProcessFamily.SLIDE.label == "E-6"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("black_white", ProcessFamily.BLACK_WHITE),
            ("B&W Negative", ProcessFamily.BLACK_WHITE),
            ("C41", ProcessFamily.COLOR_NEGATIVE),
            ("e-6", ProcessFamily.SLIDE),
            (ProcessFamily.SLIDE, ProcessFamily.SLIDE),
        ],
    )
    def test_coerce(self, value, expected):
        assert coerce_process_family(value) == expected

    def test_coerce_unknown(self):
        with pytest.raises(ValueError):
            coerce_process_family("daguerreotype")


class TestProcessEntries:
    """Tests for process entry variants."""

    def test_black_and_white_defaults(self):
        assert BlackAndWhiteEntry().base_time == 8.0
        assert BlackAndWhiteEntry(time=9.0).base_time == 9.0
        assert BlackAndWhiteEntry(time=9.0, time_minutes=7.0).base_time == 7.0

    def test_color_defaults(self):
        assert ColorNegativeEntry().base_time == 3.25
        assert SlideEntry().base_time == 6.0

    def test_override_for(self):
        entry = BlackAndWhiteEntry(time_minutes=8.0, pull_2_stop_minutes=4.5)
        assert entry.override_for(-2) == 4.5
        assert entry.override_for(1) is None

    def test_slide_has_no_plus_three_override(self):
        assert SlideEntry(first_dev_time_minutes=6.0).override_for(3) is None

    def test_frozen(self):
        entry = BlackAndWhiteEntry(time_minutes=8.0)
        with pytest.raises(ValidationError):
            entry.time_minutes = 9.0

    def test_negative_time_rejected(self):
        with pytest.raises(ValidationError):
            BlackAndWhiteEntry(time_minutes=-1.0)


class TestFilmStock:
    """Tests for FilmStock."""

    def test_entries_tagged_from_type(self):
        film = FilmStock(
            id="portra",
            name="Portra",
            iso=400,
            type="C-41",
            developers={"kodak_flexicolor_c41": {"developer_time_minutes": 3.25}},
        )
        assert film.film_type == ProcessFamily.COLOR_NEGATIVE
        assert isinstance(film.process_entry("kodak_flexicolor_c41"), ColorNegativeEntry)

    def test_process_entry_exact_key(self):
        film = FilmStock(
            id="tri-x", name="Tri-X", iso=400, type="black_white", developers={"d76": {}}
        )
        assert film.process_entry("d76") is not None
        assert film.process_entry("d76_stock") is None


class TestDeveloperProfile:
    """Tests for DeveloperProfile."""

    def test_type_alias(self):
        developer = DeveloperProfile(id="d76", name="Kodak D-76", type="Powder")
        assert developer.developer_type == "Powder"

    def test_optional_metadata(self):
        developer = DeveloperProfile(id="x", name="X")
        assert developer.manufacturer is None
        assert developer.dilutions == ()


class TestCompensationTable:
    """Tests for CompensationTable validation."""

    def test_string_keys_are_parsed(self):
        table = CompensationTable(temperature={"20": 1.0, "20.5": 0.95})
        assert table.temperature == {20.0: 1.0, 20.5: 0.95}

    def test_sorted(self):
        table = CompensationTable(temperature={"22": 0.8, "18": 1.3, "20": 1.0})
        assert table.temperature_range == (18.0, 22.0)

    def test_off_grid_key(self):
        with pytest.raises(ValidationError):
            CompensationTable(temperature={"20.25": 0.97})

    def test_non_positive_multiplier(self):
        with pytest.raises(ValidationError):
            CompensationTable(temperature={"20": 0.0})

    def test_empty_table(self):
        with pytest.raises(ValidationError):
            CompensationTable(temperature={})

    def test_partial_push_pull_keeps_defaults(self):
        table = CompensationTable(temperature={"20": 1.0}, push_pull={"1": 1.5})
        assert table.push_pull == {-2: 0.5, -1: 0.7, 0: 1.0, 1: 1.5, 2: 2.0, 3: 2.8}

    def test_push_pull_range(self):
        with pytest.raises(ValidationError):
            CompensationTable(temperature={"20": 1.0}, push_pull={"4": 3.5})


class TestCalculationResult:
    """Tests for CalculationResult."""

    def test_volumes_must_sum(self, sample_result):
        data = sample_result.model_dump()
        data["water_ml"] += 1
        with pytest.raises(ValidationError):
            CalculationResult(**data)

    def test_to_dict(self, sample_result):
        data = sample_result.to_dict()
        assert data["process_family"] == "black_white"
        assert data["notes"][1] == "Push 1 stop"
