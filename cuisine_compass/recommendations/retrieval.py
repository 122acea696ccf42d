from __future__ import annotations

import logging

import pandas as pd

from ..catalog.data_store import get_dataframe
from ..catalog.models import (
    CuisineOrigin,
    DietaryRestriction,
    Dish,
    DishCategory,
    DishType,
    EventType,
    MealType,
)
from .models import EventParameters

logger = logging.getLogger(__name__)


def _ratio(count: int, total: int) -> float:
    return count / total if total > 0 else 0.0


def filter_dishes(
    params: EventParameters,
    dish_type: DishType | str = "both",
    catalog: pd.DataFrame | None = None,
) -> list[Dish]:
    """
    Narrow the catalog to dishes eligible for the event.

    Every condition is a hard filter: meal type, event type, veg/non-veg
    selector, and each requested dietary restriction.
    """
    df = get_dataframe() if catalog is None else catalog
    if df.empty:
        return []

    meal = params.meal_type.value
    event = params.event_type.value

    mask = df["meal_types"].apply(lambda types: meal in types)
    mask = mask & df["event_types"].apply(lambda types: event in types)

    if dish_type != "both":
        mask = mask & (df["type"] == DishType(dish_type).value)

    if DietaryRestriction.jain in params.dietary_restrictions:
        mask = mask & df["is_jain_friendly"].astype(bool)

    if DietaryRestriction.gluten_free in params.dietary_restrictions:
        mask = mask & df["is_gluten_free"].astype(bool)

    candidates = df.loc[mask.astype(bool), "dish"].tolist()
    logger.debug(
        "%d of %d dishes eligible for %s/%s (%s)",
        len(candidates), len(df), meal, event, dish_type,
    )
    return candidates


def score_dish(dish: Dish, params: EventParameters) -> float:
    """Compute a heuristic desirability score for a single dish."""
    mix = params.attendee_mix
    total = mix.total

    score = dish.popularity * 10.0

    # Very spicy dishes lose ground when many foreigners attend
    foreigner_ratio = _ratio(mix.foreigners, total)
    if foreigner_ratio > 0.2 and dish.spice_level > 3:
        score -= (dish.spice_level - 3) * 5 * foreigner_ratio * 10

    # Boost dishes matching the dominant demographic
    south_ratio = _ratio(mix.south_indian, total)
    north_ratio = _ratio(mix.north_indian, total)
    if dish.origin == CuisineOrigin.south_indian and south_ratio > 0.4:
        score += 10 * south_ratio
    elif dish.origin == CuisineOrigin.north_indian and north_ratio > 0.4:
        score += 10 * north_ratio

    if dish.origin == CuisineOrigin.universal:
        score += 5

    if params.meal_type == MealType.breakfast and dish.category == DishCategory.main:
        score += 10
    if params.meal_type in (MealType.lunch, MealType.dinner) and dish.category in (
        DishCategory.main,
        DishCategory.rice,
    ):
        score += 8

    if params.event_type == EventType.wedding and dish.popularity >= 4:
        score += 10
    elif params.event_type == EventType.corporate and dish.spice_level <= 3:
        score += 8

    return score


def rank_dishes(dishes: list[Dish], params: EventParameters) -> list[Dish]:
    """Sort dishes by descending score; ties keep their catalog order."""
    if not dishes:
        return []

    ranked = pd.DataFrame({
        "dish": pd.Series(dishes, dtype=object),
        "_score": [score_dish(d, params) for d in dishes],
        "_position": range(len(dishes)),
    })
    ranked = ranked.sort_values(
        ["_score", "_position"], ascending=[False, True], kind="mergesort"
    )
    return ranked["dish"].tolist()
