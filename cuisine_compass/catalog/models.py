from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class DishType(str, Enum):
    veg = "veg"
    non_veg = "non-veg"


class CuisineOrigin(str, Enum):
    south_indian = "south-indian"
    north_indian = "north-indian"
    universal = "universal"


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"


class EventType(str, Enum):
    casual = "casual"
    wedding = "wedding"
    corporate = "corporate"


class DietaryRestriction(str, Enum):
    none = "none"
    jain = "jain"
    gluten_free = "gluten-free"


class DishCategory(str, Enum):
    main = "main"
    side = "side"
    dessert = "dessert"
    bread = "bread"
    rice = "rice"
    starter = "starter"


class Dish(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: DishType
    origin: CuisineOrigin
    spice_level: int = Field(..., ge=1, le=5)
    popularity: int = Field(..., ge=1, le=5)
    meal_types: frozenset[MealType]
    event_types: frozenset[EventType]
    is_jain_friendly: bool
    is_gluten_free: bool
    serving_unit: str = Field(..., min_length=1)
    serving_size: float = Field(..., ge=0.0, description="Quantity per attendee")
    description: str = ""
    category: DishCategory

    @field_serializer("meal_types", "event_types", when_used="json")
    def serialize_applicability(self, values: frozenset, info) -> list[str]:
        vocabulary = MealType if info.field_name == "meal_types" else EventType
        return [member.value for member in vocabulary if member in values]
