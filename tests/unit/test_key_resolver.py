"""
Unit tests for developer key resolution.
"""

import pytest

from filmdev.core.models import DeveloperProfile
from filmdev.engine.resolver import (
    KeyResolver,
    exact_key,
    first_two_segments,
    strip_suffixes,
)


@pytest.fixture
def resolver(sample_database):
    return KeyResolver(sample_database.developers)


class TestStrategies:
    """Tests for the individual normalization strategies."""

    def test_exact_key_is_identity(self):
        assert exact_key("d76") == "d76"

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("d76_stock", "d76"),
            ("cinestill_cs41_kit", "cinestill_cs41"),
            ("rodinal_1_50", "rodinal"),
            ("hc110_b", "hc110"),
            ("kodak_e6_kit", "kodak_e6"),
        ],
    )
    def test_strip_suffixes(self, key, expected):
        assert strip_suffixes(key) == expected

    def test_strip_suffixes_returns_none_when_nothing_stripped(self):
        assert strip_suffixes("d76") is None
        assert strip_suffixes("kodak_flexicolor_c41") is None

    def test_first_two_segments(self):
        assert first_two_segments("kodak_flexicolor_c41") == "kodak_flexicolor"
        assert first_two_segments("tetenal_colortec_e6") == "tetenal_colortec"

    def test_first_two_segments_needs_three_parts(self):
        assert first_two_segments("d76") is None
        assert first_two_segments("mystery_dev") is None


class TestKeyResolver:
    """Tests for KeyResolver."""

    @pytest.mark.parametrize(
        "key,developer_id",
        [
            ("d76", "d76"),
            ("d76_stock", "d76"),
            ("hc110_b", "hc110"),
            ("rodinal_1_50", "rodinal"),
            ("kodak_flexicolor_c41", "kodak_flexicolor"),
            ("cinestill_cs41_kit", "cinestill_cs41"),
            ("kodak_e6_kit", "kodak_e6"),
            ("tetenal_colortec_e6", "tetenal_colortec"),
        ],
    )
    def test_resolves_variant_keys(self, resolver, key, developer_id):
        assert resolver.resolve_key(key) == developer_id

    def test_resolve_returns_profile(self, resolver):
        developer = resolver.resolve("d76_stock")
        assert isinstance(developer, DeveloperProfile)
        assert developer.name == "Kodak D-76"

    def test_unresolvable_key(self, resolver):
        assert resolver.resolve("mystery_dev") is None

    def test_empty_key(self, resolver):
        assert resolver.resolve("") is None

    def test_exact_match_wins(self):
        developers = {
            "d76": DeveloperProfile(id="d76", name="Kodak D-76"),
            "d76_stock": DeveloperProfile(id="d76_stock", name="D-76 Stock"),
        }
        assert KeyResolver(developers).resolve("d76_stock").name == "D-76 Stock"

    def test_unresolved_lists_keys(self, resolver):
        keys = ["d76", "mystery_dev", "hc110_b", "xyz"]
        assert resolver.unresolved(keys) == ["mystery_dev", "xyz"]

    def test_custom_strategies(self, sample_database):
        resolver = KeyResolver(sample_database.developers, strategies=[exact_key])
        assert resolver.resolve("d76") is not None
        assert resolver.resolve("d76_stock") is None
        assert resolver.strategies == (exact_key,)
