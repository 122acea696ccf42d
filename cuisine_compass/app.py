from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from .catalog.data_store import get_dataframe, get_dish
from .catalog.models import (
    CuisineOrigin,
    DietaryRestriction,
    Dish,
    DishCategory,
    EventType,
    MealType,
)
from .config import DEFAULT_APP_CONFIG
from .display.summary import build_menu_display
from .recommendations.generator import generate_menu_recommendation
from .recommendations.models import EventForm, MenuRecommendation

logging.getLogger("cuisine_compass").setLevel(DEFAULT_APP_CONFIG.log_level.upper())

app = FastAPI(title="Cuisine Compass API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    df = get_dataframe()
    return {
        "meal_types": [m.value for m in MealType],
        "event_types": [e.value for e in EventType],
        "dietary_restrictions": [r.value for r in DietaryRestriction],
        "origins": [o.value for o in CuisineOrigin],
        "categories": [c.value for c in DishCategory],
        "total_dishes": len(df),
    }


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/dishes", response_model=list[Dish])
def dishes(
    meal_type: MealType | None = None,
    event_type: EventType | None = None,
    origin: CuisineOrigin | None = None,
) -> list[Dish]:
    df = get_dataframe()
    mask = df["id"].notna()
    if meal_type is not None:
        mask = mask & df["meal_types"].apply(lambda types: meal_type.value in types)
    if event_type is not None:
        mask = mask & df["event_types"].apply(lambda types: event_type.value in types)
    if origin is not None:
        mask = mask & (df["origin"] == origin.value)
    return df.loc[mask.astype(bool), "dish"].tolist()


@app.get("/dishes/{dish_id}", response_model=Dish)
def dish_detail(dish_id: str) -> Dish:
    try:
        return get_dish(dish_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown dish: {dish_id}")


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/recommendations", response_model=MenuRecommendation)
def recommendations(body: EventForm) -> MenuRecommendation:
    return generate_menu_recommendation(body.to_parameters())


@app.post("/recommendations/display")
def recommendations_display(body: EventForm) -> dict:
    return build_menu_display(generate_menu_recommendation(body.to_parameters()))
