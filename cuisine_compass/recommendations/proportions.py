from __future__ import annotations

import logging

from .models import AttendeeMix, CuisineProportions
from .rounding import round_half_up

logger = logging.getLogger(__name__)

# Share of the menu every audience gets from universally palatable dishes
UNIVERSAL_BASELINE = 0.15


def total_attendees(mix: AttendeeMix) -> int:
    return mix.total


def calculate_cuisine_proportions(mix: AttendeeMix) -> CuisineProportions:
    """
    Derive the target cuisine-origin mix from attendee counts.

    Steps:
    - South/north shares come straight from their head counts.
    - "Others" are split between south and north by their relative share,
      or evenly when neither is present.
    - Universal gets the foreigner share plus a fixed baseline, and south/north
      are scaled down to make room for it.
    - Values are rounded to 2 decimals; only universal absorbs rounding drift.
    """
    total = total_attendees(mix)
    if total == 0:
        return CuisineProportions()

    south = mix.south_indian / total
    north = mix.north_indian / total

    others_ratio = mix.others / total
    if south + north > 0:
        base = south + north
        south += (south / base) * others_ratio
        north += (north / base) * others_ratio
    else:
        south += others_ratio / 2
        north += others_ratio / 2

    # Capped so a foreigner-heavy crowd cannot push south/north negative
    universal = min(mix.foreigners / total + UNIVERSAL_BASELINE, 1.0)

    if south + north > 0:
        south *= 1 - universal
        north *= 1 - universal
    else:
        universal = 1.0
        south = 0.0
        north = 0.0

    south = round_half_up(south, 2)
    north = round_half_up(north, 2)
    universal = round_half_up(universal, 2)

    if south + north + universal != 1.0:
        # Only universal is corrected; south/north keep their rounded values
        universal = 1.0 - (south + north)

    logger.debug(
        "Cuisine proportions for %d attendees: south=%.2f north=%.2f universal=%.2f",
        total, south, north, universal,
    )
    return CuisineProportions(south_indian=south, north_indian=north, universal=universal)
