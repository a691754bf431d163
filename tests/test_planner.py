from datetime import date
import pytest
from family_menu.models import AppState
from family_menu.planner import MEAL_TYPES, day_key, meals_for_day, week_dates

TODAY = date(2026, 2, 27)


def test_day_key_format():
    assert day_key(date(2026, 3, 1)) == "2026-03-01"


def test_first_week_starts_today():
    days = week_dates(0, today=TODAY)
    assert len(days) == 7
    assert days[0] == TODAY
    assert day_key(days[-1]) == "2026-03-05"


def test_second_week_follows_first():
    first = week_dates(0, today=TODAY)
    second = week_dates(1, today=TODAY)
    assert second[0] == date(2026, 3, 6)
    assert set(first).isdisjoint(second)


def test_only_two_weeks():
    with pytest.raises(ValueError, match="week"):
        week_dates(2, today=TODAY)


def test_meals_for_day_resolves_recipes(guiso, sopa):
    state = AppState(recipes=[guiso, sopa], calendar={"2026-02-27": {"lunch": "a", "dinner": "b"}})
    meals = meals_for_day(state, "2026-02-27")
    assert list(meals) == list(MEAL_TYPES)
    assert meals["breakfast"] is None
    assert meals["lunch"].name == "Guiso"
    assert meals["dinner"].name == "Sopa"


def test_meals_for_day_ignores_dangling_and_unset(guiso):
    state = AppState(recipes=[guiso], calendar={"2026-02-27": {"lunch": None, "dinner": "gone"}})
    assert meals_for_day(state, "2026-02-27") == {"breakfast": None, "lunch": None, "dinner": None}


def test_meals_for_unplanned_day():
    assert meals_for_day(AppState(), "2026-02-27") == {"breakfast": None, "lunch": None, "dinner": None}
