"""
Developer key resolution.

Film process maps key their entries by developer identifiers as stored in the
data, which often carry variant markers ("d76_stock", "hc110_b",
"rodinal_1_50", "cinestill_cs41_kit"). The resolver maps such a key to a
DeveloperProfile by trying an ordered list of normalization strategies and
returning the first exact hit.

The same resolver must be used wherever developer keys are consumed (listing
and calculation), so an option shown to the user is always resolvable.
"""

import re
from collections.abc import Callable, Mapping, Sequence
from typing import Optional

from filmdev.core.logging import get_logger
from filmdev.core.models import DeveloperProfile

logger = get_logger(__name__)

# A strategy turns a raw key into a candidate developer id, or None if it
# does not apply to the key.
NormalizationStrategy = Callable[[str], Optional[str]]

# Trailing variant markers, stripped repeatedly until none match
SUFFIX_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"_stock$"),
    re.compile(r"_kit$"),
    re.compile(r"_\d+_\d+$"),  # dilution marker, e.g. rodinal_1_50
    re.compile(r"_[a-z]$"),  # single-letter variant, e.g. hc110_b
)


def exact_key(key: str) -> Optional[str]:
    """Use the key unchanged."""
    return key


def strip_suffixes(key: str, patterns: Sequence[re.Pattern[str]] = SUFFIX_PATTERNS) -> Optional[str]:
    """Remove known variant suffixes; None when nothing was stripped."""
    stripped = key
    changed = True
    while changed:
        changed = False
        for pattern in patterns:
            candidate = pattern.sub("", stripped)
            if candidate != stripped and candidate:
                stripped = candidate
                changed = True
    return stripped if stripped != key else None


def first_two_segments(key: str) -> Optional[str]:
    """Keep the first two underscore-delimited segments of a longer key."""
    parts = key.split("_")
    if len(parts) < 3:
        return None
    return f"{parts[0]}_{parts[1]}"


DEFAULT_STRATEGIES: tuple[NormalizationStrategy, ...] = (
    exact_key,
    strip_suffixes,
    first_two_segments,
)


class KeyResolver:
    """Resolve process-map developer keys to developer profiles."""

    def __init__(
        self,
        developers: Mapping[str, DeveloperProfile],
        strategies: Sequence[NormalizationStrategy] = DEFAULT_STRATEGIES,
    ):
        """Initialize the resolver.

        Args:
            developers: Developer profiles keyed by identifier.
            strategies: Normalization strategies, tried in order.
        """
        self._developers = developers
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> tuple[NormalizationStrategy, ...]:
        return self._strategies

    def resolve_key(self, key: str) -> Optional[str]:
        """Developer identifier that ``key`` resolves to, or None."""
        if not key:
            return None
        for strategy in self._strategies:
            candidate = strategy(key)
            if candidate and candidate in self._developers:
                if candidate != key:
                    logger.debug(f"Resolved developer key {key!r} -> {candidate!r} via {strategy.__name__}")
                return candidate
        logger.debug(f"Developer key {key!r} did not resolve")
        return None

    def resolve(self, key: str) -> Optional[DeveloperProfile]:
        """Developer profile that ``key`` resolves to, or None."""
        developer_id = self.resolve_key(key)
        if developer_id is None:
            return None
        return self._developers[developer_id]

    def unresolved(self, keys: Sequence[str]) -> list[str]:
        """Keys from ``keys`` that no strategy can resolve."""
        return [key for key in keys if self.resolve_key(key) is None]
