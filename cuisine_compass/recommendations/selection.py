from __future__ import annotations

import logging
from functools import reduce

from ..catalog.models import CuisineOrigin, Dish, DishCategory, MealType
from .models import CuisineProportions, EventParameters
from .rounding import round_count

logger = logging.getLogger(__name__)

# Categories that should have at least one representative on a full meal
COVERAGE_CATEGORIES = (
    DishCategory.main,
    DishCategory.side,
    DishCategory.rice,
    DishCategory.bread,
    DishCategory.dessert,
)

# Non-veg attendance above this share of the crowd earns a second non-veg dish
SECOND_NON_VEG_THRESHOLD = 0.4


def target_dish_count(meal_type: MealType) -> int:
    return 6 if meal_type == MealType.breakfast else 10


def category_caps(meal_type: MealType) -> dict[DishCategory, int]:
    breakfast = meal_type == MealType.breakfast
    return {
        DishCategory.main: 2 if breakfast else 4,
        DishCategory.side: 3,
        DishCategory.bread: 1 if breakfast else 2,
        DishCategory.rice: 0 if breakfast else 2,
        DishCategory.dessert: 0 if breakfast else 2,
        DishCategory.starter: 0 if breakfast else 2,
    }


def origin_targets(proportions: CuisineProportions, meal_type: MealType) -> dict[CuisineOrigin, int]:
    total = target_dish_count(meal_type)
    return {
        origin: round_count(proportions.for_origin(origin) * total)
        for origin in CuisineOrigin
    }


def non_veg_attendance(params: EventParameters) -> int:
    total = params.attendee_mix.total
    return total - round_count(params.veg_non_veg_ratio * total)


def _pick_by_origin(veg_ranked: list[Dish], targets: dict[CuisineOrigin, int]) -> list[Dish]:
    picked: list[Dish] = []
    for origin in CuisineOrigin:
        of_origin = [d for d in veg_ranked if d.origin == origin]
        picked.extend(of_origin[: targets[origin]])
    return picked


def _ensure_coverage(
    picked: list[Dish],
    veg_ranked: list[Dish],
    caps: dict[DishCategory, int],
) -> list[Dish]:
    picked = list(picked)
    for category in COVERAGE_CATEGORIES:
        if caps[category] == 0 or any(d.category == category for d in picked):
            continue
        chosen_ids = {d.id for d in picked}
        filler = next(
            (d for d in veg_ranked if d.category == category and d.id not in chosen_ids),
            None,
        )
        if filler is not None:
            picked.append(filler)
    return picked


def _pick_non_veg(non_veg_ranked: list[Dish], params: EventParameters) -> list[Dish]:
    non_veg_count = non_veg_attendance(params)
    if non_veg_count <= 0 or not non_veg_ranked:
        return []

    picked: list[Dish] = []
    main = next((d for d in non_veg_ranked if d.category == DishCategory.main), None)
    if main is not None:
        picked.append(main)

    total = params.attendee_mix.total
    if non_veg_count > total * SECOND_NON_VEG_THRESHOLD and len(non_veg_ranked) > 1:
        second = next(
            (d for d in non_veg_ranked if main is None or d.id != main.id),
            None,
        )
        if second is not None:
            picked.append(second)
    return picked


def _dedupe(dishes: list[Dish]) -> list[Dish]:
    unique: dict[str, Dish] = {}
    for dish in dishes:
        unique.setdefault(dish.id, dish)
    return list(unique.values())


def _admit(
    state: tuple[dict[DishCategory, int], tuple[Dish, ...]],
    dish: Dish,
    caps: dict[DishCategory, int],
) -> tuple[dict[DishCategory, int], tuple[Dish, ...]]:
    counts, kept = state
    if counts.get(dish.category, 0) >= caps[dish.category]:
        return state
    return {**counts, dish.category: counts.get(dish.category, 0) + 1}, kept + (dish,)


def apply_category_caps(
    dishes: list[Dish], caps: dict[DishCategory, int]
) -> tuple[list[Dish], dict[DishCategory, int]]:
    """Admit dishes in order while their category is under its cap; return kept dishes and final counts."""
    counts, kept = reduce(lambda state, dish: _admit(state, dish, caps), dishes, ({}, ()))
    return list(kept), counts


def select_dishes(
    veg_ranked: list[Dish],
    non_veg_ranked: list[Dish],
    params: EventParameters,
    proportions: CuisineProportions,
) -> list[Dish]:
    """
    Pick a bounded, category-balanced set of dishes.

    Steps:
    - Take the top veg dishes of each origin, sized by the origin's proportion.
    - On lunch/dinner, add the best remaining veg dish for any core category
      still missing.
    - Add non-veg dishes when part of the crowd eats non-veg.
    - Drop duplicates, then enforce the per-category caps in selection order.
    """
    caps = category_caps(params.meal_type)
    targets = origin_targets(proportions, params.meal_type)

    picked = _pick_by_origin(veg_ranked, targets)
    if params.meal_type != MealType.breakfast:
        picked = _ensure_coverage(picked, veg_ranked, caps)
    picked = picked + _pick_non_veg(non_veg_ranked, params)

    selected, counts = apply_category_caps(_dedupe(picked), caps)
    logger.debug(
        "Selected %d dishes (targets=%s, per category=%s)",
        len(selected),
        {o.value: n for o, n in targets.items()},
        {c.value: n for c, n in counts.items()},
    )
    return selected
