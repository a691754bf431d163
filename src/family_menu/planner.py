from __future__ import annotations
from datetime import date, timedelta
from typing import Optional
from family_menu.models import AppState, MealCategory, Recipe

MEAL_TYPES: tuple[MealCategory, ...] = ("breakfast", "lunch", "dinner")
DAYS_PER_WEEK = 7
WEEKS = 2


def day_key(day: date) -> str:
    return day.strftime("%Y-%m-%d")


def week_dates(week: int, today: date | None = None) -> list[date]:
    """The seven days shown for ``week`` (0 or 1), starting ``7 * week`` days from today."""
    if week not in range(WEEKS):
        raise ValueError(f"week must be 0 or 1, got {week}")
    start = (today or date.today()) + timedelta(days=DAYS_PER_WEEK * week)
    return [start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]


def meals_for_day(state: AppState, day: str) -> dict[MealCategory, Optional[Recipe]]:
    by_id = {r.id: r for r in reversed(state.recipes)}
    slots = state.calendar.get(day, {})
    return {meal: by_id.get(slots.get(meal) or "") for meal in MEAL_TYPES}
