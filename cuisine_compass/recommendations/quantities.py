from __future__ import annotations

from ..catalog.models import CuisineOrigin, Dish, DishType, EventType, MealType
from .models import EventParameters
from .rounding import round_half_up

# Extra veg portion per non-veg attendee, who also samples the veg dishes
NON_VEG_SAMPLING_FACTOR = 0.3
BREAKFAST_FACTOR = 0.8
WEDDING_FACTOR = 1.2


def calculate_dish_quantity(dish: Dish, params: EventParameters) -> int | float:
    """Total amount of a dish to prepare, in the dish's serving unit."""
    total = params.attendee_mix.total
    non_veg_share = 1 - params.veg_non_veg_ratio

    if dish.type == DishType.veg:
        quantity = total * dish.serving_size + total * non_veg_share * NON_VEG_SAMPLING_FACTOR
    else:
        # Sized for the non-veg attendees only
        quantity = total * non_veg_share * dish.serving_size

    if params.meal_type == MealType.breakfast:
        quantity *= BREAKFAST_FACTOR
    if params.event_type == EventType.wedding:
        quantity *= WEDDING_FACTOR

    if dish.serving_unit == "pieces":
        return int(round_half_up(quantity))
    return round_half_up(quantity, 1)


def generate_preparation_tip(dish: Dish, params: EventParameters) -> str | None:
    mix = params.attendee_mix
    foreigner_ratio = mix.foreigners / mix.total if mix.total > 0 else 0.0

    if foreigner_ratio > 0.1 and dish.spice_level > 3:
        percent = int(round_half_up(foreigner_ratio * 100))
        return f"Reduce spice level for a mixed audience with {percent}% foreigners"

    if dish.origin == CuisineOrigin.south_indian and mix.north_indian > mix.south_indian:
        return "Consider a moderate spice level to accommodate North Indian palates"

    if dish.origin == CuisineOrigin.north_indian and mix.south_indian > mix.north_indian:
        return "South Indians might prefer this slightly spicier"

    if params.event_type == EventType.corporate and dish.spice_level > 3:
        return "Keep spice moderate for a professional setting"

    return None
