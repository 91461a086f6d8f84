"""
Shared fixtures for film development calculator tests.
"""

import copy
import json

import pytest

from filmdev import config
from filmdev.core.models import CalculationRequest
from filmdev.database.loader import load_database_document
from filmdev.engine.calculator import DevelopmentCalculator

SAMPLE_DOCUMENT = {
    "metadata": {"version": "2.1.0", "last_updated": "2024-03-01"},
    "temperature_compensation": {
        "18": 1.3,
        "19": 1.15,
        "20": 1.0,
        "21": 0.9,
        "22": 0.8,
        "23": 0.72,
        "24": 0.65,
    },
    "push_pull_compensation": {
        "-2": 0.5,
        "-1": 0.7,
        "0": 1.0,
        "1": 1.4,
        "2": 2.0,
        "3": 2.8,
    },
    "films": {
        "test-bw": {
            "name": "Test Pan 400",
            "manufacturer": "Testco",
            "iso": 400,
            "type": "black_white",
            "developers": {
                "d76": {"time_minutes": 8.0, "dilution": "1:1"},
                "d76_stock": {
                    "time_minutes": 6.5,
                    "dilution": "stock",
                    "push_1_stop_minutes": 9.5,
                },
                "hc110_b": {"time_minutes": 5.0, "dilution": "1:31"},
                "rodinal_1_50": {"time": 11.0, "dilution": "1:50"},
                "mystery_dev": {"time_minutes": 7.0, "dilution": "1:1"},
            },
        },
        "broken-bw": {
            "name": "Broken Pan 100",
            "iso": 100,
            "type": "B&W",
            "developers": {
                "d76": {"time_minutes": 7.0, "dilution": "one:one"},
            },
        },
        "test-c41": {
            "name": "Test Color 400",
            "iso": 400,
            "type": "color_negative",
            "developers": {
                "kodak_flexicolor_c41": {
                    "developer_time_minutes": 3.25,
                    "temperature_c": 37.8,
                    "push_1_stop_dev_time": 4.0,
                },
                "cinestill_cs41_kit": {"developer_time_minutes": 3.5},
            },
        },
        "test-e6": {
            "name": "Test Chrome 100",
            "iso": 100,
            "type": "slide",
            "developers": {
                "kodak_e6_kit": {"first_dev_time_minutes": 6.0},
                "tetenal_colortec_e6": {
                    "first_dev_time_minutes": 6.5,
                    "push_1_stop_first_dev_time": 8.5,
                },
            },
        },
    },
    "developers": {
        "d76": {"name": "Kodak D-76", "manufacturer": "Kodak", "type": "Powder"},
        "hc110": {"name": "Kodak HC-110", "manufacturer": "Kodak"},
        "rodinal": {
            "name": "Rodinal",
            "manufacturer": "Agfa",
            "safety_notes": "Contains p-aminophenol; wear gloves",
        },
        "kodak_flexicolor": {"name": "Kodak Flexicolor C-41"},
        "cinestill_cs41": {"name": "CineStill Cs41"},
        "kodak_e6": {"name": "Kodak E-6 Kit"},
        "tetenal_colortec": {"name": "Tetenal Colortec E-6"},
    },
}


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Give every test a fresh global settings instance."""
    monkeypatch.setattr(config, "_settings", None)


@pytest.fixture
def sample_document():
    """A deep copy of the sample reference document, safe to modify."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def sample_database(sample_document):
    """Reference database built from the sample document."""
    return load_database_document(sample_document, source="<test>")


@pytest.fixture
def calculator(sample_database):
    """Development calculator over the sample database."""
    return DevelopmentCalculator(sample_database)


@pytest.fixture
def database_file(tmp_path, sample_document):
    """The sample document written to a JSON file."""
    path = tmp_path / "films.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def sample_result(calculator):
    """A pushed, warm Rodinal calculation with notes."""
    return calculator.calculate(
        CalculationRequest(
            film_id="test-bw",
            developer_id="rodinal_1_50",
            temperature=22.0,
            push_pull=1,
            volume=510,
        )
    )
