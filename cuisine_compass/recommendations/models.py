from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt

from ..catalog.models import (
    CuisineOrigin,
    DietaryRestriction,
    Dish,
    EventType,
    MealType,
)


class AttendeeMix(BaseModel):
    model_config = ConfigDict(frozen=True)

    south_indian: int = Field(default=0, ge=0)
    north_indian: int = Field(default=0, ge=0)
    foreigners: int = Field(default=0, ge=0)
    others: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.south_indian + self.north_indian + self.foreigners + self.others


class EventParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    attendee_mix: AttendeeMix
    veg_non_veg_ratio: float = Field(
        ..., ge=0.0, le=1.0, description="Share of vegetarian attendees"
    )
    dietary_restrictions: frozenset[DietaryRestriction] = frozenset(
        {DietaryRestriction.none}
    )
    meal_type: MealType
    event_type: EventType


class CuisineProportions(BaseModel):
    model_config = ConfigDict(frozen=True)

    south_indian: float = Field(default=0.0, ge=0.0, le=1.0)
    north_indian: float = Field(default=0.0, ge=0.0, le=1.0)
    universal: float = Field(default=0.0, ge=0.0, le=1.0)

    def for_origin(self, origin: CuisineOrigin) -> float:
        return {
            CuisineOrigin.south_indian: self.south_indian,
            CuisineOrigin.north_indian: self.north_indian,
            CuisineOrigin.universal: self.universal,
        }[origin]


class DishRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    dish: Dish
    # Whole units for "pieces", one decimal otherwise
    quantity: NonNegativeInt | NonNegativeFloat
    quantity_unit: str
    preparation_tip: str | None = None


class MenuRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    dishes: list[DishRecommendation]
    cuisine_proportions: CuisineProportions


class EventForm(BaseModel):
    """Event details as collected from the user, before conversion to EventParameters."""

    south_indian: int = Field(default=60, ge=0)
    north_indian: int = Field(default=30, ge=0)
    foreigners: int = Field(default=10, ge=0)
    others: int = Field(default=0, ge=0)
    veg_percent: float = Field(default=80.0, ge=0.0, le=100.0)
    jain: bool = False
    gluten_free: bool = False
    meal_type: MealType = MealType.dinner
    event_type: EventType = EventType.casual

    def to_parameters(self) -> EventParameters:
        restrictions: set[DietaryRestriction] = set()
        if self.jain:
            restrictions.add(DietaryRestriction.jain)
        if self.gluten_free:
            restrictions.add(DietaryRestriction.gluten_free)
        if not restrictions:
            restrictions.add(DietaryRestriction.none)

        return EventParameters(
            attendee_mix=AttendeeMix(
                south_indian=self.south_indian,
                north_indian=self.north_indian,
                foreigners=self.foreigners,
                others=self.others,
            ),
            veg_non_veg_ratio=self.veg_percent / 100,
            dietary_restrictions=frozenset(restrictions),
            meal_type=self.meal_type,
            event_type=self.event_type,
        )
