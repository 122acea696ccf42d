import pytest

from cuisine_compass.catalog.data_store import catalog_frame
from cuisine_compass.catalog.models import (
    DietaryRestriction,
    Dish,
    DishType,
    EventType,
    MealType,
)
from cuisine_compass.recommendations.models import AttendeeMix, EventParameters
from cuisine_compass.recommendations.retrieval import (
    filter_dishes,
    rank_dishes,
    score_dish,
)


def _params(
    mix=None,
    ratio=0.8,
    restrictions=(DietaryRestriction.none,),
    meal=MealType.dinner,
    event=EventType.casual,
):
    return EventParameters(
        attendee_mix=mix or AttendeeMix(south_indian=60, north_indian=30, foreigners=10),
        veg_non_veg_ratio=ratio,
        dietary_restrictions=frozenset(restrictions),
        meal_type=meal,
        event_type=event,
    )


def _dish(**overrides):
    fields = {
        "id": "test-dish",
        "name": "Test Dish",
        "type": "veg",
        "origin": "universal",
        "spice_level": 2,
        "popularity": 3,
        "meal_types": {"lunch", "dinner"},
        "event_types": {"casual", "wedding", "corporate"},
        "is_jain_friendly": True,
        "is_gluten_free": True,
        "serving_unit": "grams",
        "serving_size": 100,
        "description": "",
        "category": "side",
    }
    fields.update(overrides)
    return Dish(**fields)


# ── Filtering ────────────────────────────────────────────────────────────


class TestFilter:
    def test_meal_event_and_type_respected(self):
        params = _params()
        result = filter_dishes(params, DishType.veg)
        assert result
        for dish in result:
            assert MealType.dinner in dish.meal_types
            assert EventType.casual in dish.event_types
            assert dish.type == DishType.veg

    def test_both_includes_veg_and_non_veg(self):
        types = {d.type for d in filter_dishes(_params(), "both")}
        assert types == {DishType.veg, DishType.non_veg}

    def test_no_non_veg_breakfast_dishes(self):
        assert filter_dishes(_params(meal=MealType.breakfast), DishType.non_veg) == []

    def test_jain_and_gluten_free_both_enforced(self):
        params = _params(
            restrictions=(DietaryRestriction.jain, DietaryRestriction.gluten_free)
        )
        result = filter_dishes(params)
        assert result
        for dish in result:
            assert dish.is_jain_friendly
            assert dish.is_gluten_free

    def test_single_failing_condition_excludes_dish(self):
        catalog = catalog_frame([
            _dish(id="ok"),
            _dish(id="wrong-meal", meal_types={"breakfast"}),
            _dish(id="wrong-event", event_types={"wedding"}),
            _dish(id="wrong-type", type="non-veg"),
            _dish(id="not-jain", is_jain_friendly=False),
            _dish(id="has-gluten", is_gluten_free=False),
        ])
        params = _params(
            restrictions=(DietaryRestriction.jain, DietaryRestriction.gluten_free)
        )
        result = filter_dishes(params, DishType.veg, catalog=catalog)
        assert [d.id for d in result] == ["ok"]

    def test_empty_catalog(self):
        assert filter_dishes(_params(), catalog=catalog_frame([])) == []


# ── Scoring ──────────────────────────────────────────────────────────────


class TestScore:
    def test_base_is_popularity(self):
        dish = _dish(popularity=3, origin="universal", category="side")
        # 30 base + 5 universal
        assert score_dish(dish, _params()) == pytest.approx(35.0)

    def test_spice_penalty_for_foreign_heavy_crowd(self):
        mix = AttendeeMix(south_indian=40, north_indian=30, foreigners=30)
        dish = _dish(origin="north-indian", spice_level=5, popularity=4, category="main")
        # 40 base - (2 * 5 * 0.3 * 10) + 8 dinner main
        assert score_dish(dish, _params(mix=mix)) == pytest.approx(18.0)

    def test_no_spice_penalty_below_threshold(self):
        mix = AttendeeMix(south_indian=80, foreigners=20)
        dish = _dish(origin="north-indian", spice_level=5, popularity=4, category="side")
        assert score_dish(dish, _params(mix=mix)) == pytest.approx(40.0)

    def test_south_affinity_boost(self):
        mix = AttendeeMix(south_indian=50, north_indian=50)
        dish = _dish(origin="south-indian", popularity=2, category="side")
        assert score_dish(dish, _params(mix=mix)) == pytest.approx(25.0)

    def test_north_affinity_boost(self):
        mix = AttendeeMix(south_indian=10, north_indian=90)
        dish = _dish(origin="north-indian", popularity=2, category="side")
        assert score_dish(dish, _params(mix=mix)) == pytest.approx(29.0)

    def test_breakfast_main_boost(self):
        dish = _dish(popularity=1, category="main", meal_types={"breakfast"})
        assert score_dish(dish, _params(meal=MealType.breakfast)) == pytest.approx(25.0)

    @pytest.mark.parametrize("meal", [MealType.lunch, MealType.dinner])
    def test_lunch_dinner_rice_boost(self, meal):
        dish = _dish(popularity=1, category="rice")
        assert score_dish(dish, _params(meal=meal)) == pytest.approx(23.0)

    def test_wedding_popular_boost(self):
        dish = _dish(popularity=4, category="side")
        assert score_dish(dish, _params(event=EventType.wedding)) == pytest.approx(55.0)

    def test_corporate_mild_boost(self):
        mild = _dish(popularity=1, spice_level=3, category="side")
        hot = _dish(popularity=1, spice_level=4, category="side")
        params = _params(event=EventType.corporate)
        assert score_dish(mild, params) == pytest.approx(23.0)
        assert score_dish(hot, params) == pytest.approx(15.0)

    def test_zero_attendees_does_not_raise(self):
        dish = _dish(origin="south-indian", spice_level=5)
        assert score_dish(dish, _params(mix=AttendeeMix())) == pytest.approx(30.0)


# ── Ranking ──────────────────────────────────────────────────────────────


def test_rank_descending_and_stable_for_ties():
    first = _dish(id="first", popularity=3)
    second = _dish(id="second", popularity=3)
    best = _dish(id="best", popularity=5)
    ranked = rank_dishes([first, second, best], _params())
    assert [d.id for d in ranked] == ["best", "first", "second"]


def test_rank_is_reproducible():
    params = _params()
    dishes = filter_dishes(params)
    assert rank_dishes(dishes, params) == rank_dishes(list(dishes), params)


def test_rank_empty():
    assert rank_dishes([], _params()) == []
