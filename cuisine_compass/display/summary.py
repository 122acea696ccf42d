from __future__ import annotations

from typing import Any

from ..catalog.models import CuisineOrigin, DishCategory
from ..recommendations.models import MenuRecommendation
from ..recommendations.rounding import round_half_up

CATEGORY_ORDER: list[DishCategory] = [
    DishCategory.main,
    DishCategory.side,
    DishCategory.rice,
    DishCategory.bread,
    DishCategory.starter,
    DishCategory.dessert,
]


def format_label(text: str) -> str:
    """Turn a hyphenated tag into a display label, e.g. "south-indian" -> "South Indian"."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split("-"))


def build_menu_display(recommendation: MenuRecommendation) -> dict[str, Any]:
    # Dishes grouped by category, in display order
    grouped: dict[DishCategory, list[dict[str, Any]]] = {c: [] for c in CATEGORY_ORDER}
    for item in recommendation.dishes:
        dish = item.dish
        grouped[dish.category].append({
            "id": dish.id,
            "name": dish.name,
            "description": dish.description,
            "type": dish.type.value,
            "origin": dish.origin.value,
            "origin_label": format_label(dish.origin.value),
            "spice_level": dish.spice_level,
            "quantity": item.quantity,
            "unit": item.quantity_unit,
            "preparation_tip": item.preparation_tip,
        })
    categories = [
        {"category": c.value, "label": format_label(c.value), "dishes": grouped[c]}
        for c in CATEGORY_ORDER
        if grouped[c]
    ]

    # Whole-percent cuisine shares
    proportions = recommendation.cuisine_proportions
    shares = [
        {
            "origin": origin.value,
            "label": format_label(origin.value),
            "percent": int(round_half_up(proportions.for_origin(origin) * 100)),
        }
        for origin in CuisineOrigin
    ]

    # Quantity table in selection order
    quantities = [
        {
            "dish": item.dish.name,
            "category": format_label(item.dish.category.value),
            "quantity": item.quantity,
            "unit": item.quantity_unit,
        }
        for item in recommendation.dishes
    ]

    return {
        "total_dishes": len(recommendation.dishes),
        "categories": categories,
        "proportions": shares,
        "quantities": quantities,
    }
