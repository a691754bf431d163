from __future__ import annotations
from datetime import date
from itertools import groupby
from family_menu.config import Config
from family_menu.models import AppState, ShoppingListItem
from family_menu.planner import MEAL_TYPES, day_key, meals_for_day, week_dates


def format_shopping_list(items: list[ShoppingListItem], config: Config) -> str:
    if not items:
        return "No items needed."

    lines: list[str] = []
    for category, group in groupby(items, key=lambda i: i.category):
        label = config.category_labels.get(category, category)
        lines.append(f"\n{label}")
        lines.append("-" * len(label))
        for item in group:
            mark = "x" if item.checked else " "
            quantity = f"{item.amount:g} {item.unit}".strip()
            sources = ", ".join(item.recipe_names)
            lines.append(f"[{mark}] {quantity} {item.name}  ({sources})")

    done = sum(1 for i in items if i.checked)
    lines.append(f"\n{done}/{len(items)} checked")
    return "\n".join(lines).strip()


def format_week(state: AppState, week: int, today: date | None = None) -> str:
    lines: list[str] = []
    for day in week_dates(week, today=today):
        meals = meals_for_day(state, day_key(day))
        names = [meals[m].name if meals[m] else "—" for m in MEAL_TYPES]
        lines.append(f"{day_key(day)}  " + " | ".join(names))
    return "\n".join(lines)
