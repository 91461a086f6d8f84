"""
Working solution dilution.

Converts a developer:water ratio into chemistry and water volumes for a tank
volume. Water is computed as the remainder so the two volumes always add up
to the requested total. Color kits are always used ready to use.
"""

from typing import Optional

from filmdev.core.exceptions import InvalidDataError
from filmdev.core.models import DilutionResult
from filmdev.core.types import ProcessFamily
from filmdev.engine.compensation import round_half_up

STOCK_LABEL = "Stock"
READY_TO_USE_LABEL = "Ready to use"

# Spellings meaning "use undiluted"
STOCK_VALUES = frozenset({"", "stock", "1:0", "ready to use"})


def parse_ratio(dilution: str) -> tuple[int, int]:
    """Parse a "D:W" ratio into (developer parts, water parts).

    Raises:
        InvalidDataError: If the string is not two non-negative integers
            separated by a colon, or the developer part is zero.
    """
    parts = dilution.split(":")
    if len(parts) != 2:
        raise InvalidDataError(
            f"Malformed dilution ratio: {dilution!r}", field="dilution", value=dilution
        )
    try:
        developer, water = (int(part.strip()) for part in parts)
    except ValueError as e:
        raise InvalidDataError(
            f"Malformed dilution ratio: {dilution!r}", field="dilution", value=dilution
        ) from e
    if developer <= 0 or water < 0:
        raise InvalidDataError(
            f"Dilution parts must be positive: {dilution!r}", field="dilution", value=dilution
        )
    return developer, water


class DilutionCalculator:
    """Calculates chemistry and water volumes for a working solution."""

    def calculate(
        self,
        family: ProcessFamily,
        dilution: Optional[str],
        volume_ml: int,
    ) -> DilutionResult:
        """Calculate volumes for ``volume_ml`` of working solution.

        Args:
            family: Process family of the film.
            dilution: Ratio string ("1:31"), "stock", or None.
            volume_ml: Total working solution volume.

        Returns:
            DilutionResult whose chemistry and water volumes sum to ``volume_ml``.

        Raises:
            ValueError: If volume is not positive.
            InvalidDataError: If a black-and-white ratio is malformed.
        """
        if volume_ml <= 0:
            raise ValueError("volume must be positive")

        if family != ProcessFamily.BLACK_WHITE:
            return DilutionResult(label=READY_TO_USE_LABEL, chemistry_ml=volume_ml, water_ml=0)

        text = (dilution or "").strip()
        if text.lower() in STOCK_VALUES:
            return DilutionResult(label=STOCK_LABEL, chemistry_ml=volume_ml, water_ml=0)

        developer, water = parse_ratio(text)
        if water == 0:
            return DilutionResult(
                label=STOCK_LABEL, chemistry_ml=volume_ml, water_ml=0, ratio=(developer, 0)
            )

        chemistry_ml = round_half_up(volume_ml * developer / (developer + water))
        return DilutionResult(
            label=text,
            chemistry_ml=chemistry_ml,
            water_ml=volume_ml - chemistry_ml,
            ratio=(developer, water),
        )
