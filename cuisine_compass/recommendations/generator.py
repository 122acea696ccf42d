from __future__ import annotations

import logging

import pandas as pd

from ..catalog.models import DishType
from .models import DishRecommendation, EventParameters, MenuRecommendation
from .proportions import calculate_cuisine_proportions
from .quantities import calculate_dish_quantity, generate_preparation_tip
from .retrieval import filter_dishes, rank_dishes
from .selection import select_dishes

logger = logging.getLogger(__name__)


def generate_menu_recommendation(
    params: EventParameters,
    catalog: pd.DataFrame | None = None,
) -> MenuRecommendation:
    """Run the full pipeline: proportions, filtering, ranking, selection and quantities."""
    proportions = calculate_cuisine_proportions(params.attendee_mix)

    # No attendees, no menu
    if params.attendee_mix.total == 0:
        logger.debug("No attendees; returning an empty menu")
        return MenuRecommendation(dishes=[], cuisine_proportions=proportions)

    veg_ranked = rank_dishes(filter_dishes(params, DishType.veg, catalog), params)
    non_veg_ranked = rank_dishes(filter_dishes(params, DishType.non_veg, catalog), params)

    selected = select_dishes(veg_ranked, non_veg_ranked, params, proportions)

    items = [
        DishRecommendation(
            dish=dish,
            quantity=calculate_dish_quantity(dish, params),
            quantity_unit=dish.serving_unit,
            preparation_tip=generate_preparation_tip(dish, params),
        )
        for dish in selected
    ]

    logger.info(
        "Recommended %d dishes for %d attendees (%s, %s)",
        len(items),
        params.attendee_mix.total,
        params.meal_type.value,
        params.event_type.value,
    )
    return MenuRecommendation(dishes=items, cuisine_proportions=proportions)
