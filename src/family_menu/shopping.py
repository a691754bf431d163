from __future__ import annotations
import uuid
from family_menu.models import CalendarMeal, Recipe, ShoppingListItem


def _new_item_id(ingredient_id: str) -> str:
    return f"shopping-{ingredient_id}-{uuid.uuid4().hex[:12]}"


def build_shopping_list(recipes: list[Recipe], calendar: CalendarMeal) -> list[ShoppingListItem]:
    """Aggregate the ingredients of every planned meal into one shopping list.

    Ingredients are merged on the exact (name, unit) pair; amounts are summed and
    each item remembers which recipes asked for it. Slots pointing at a recipe
    that no longer exists are skipped. Items come back stable-sorted by category
    and always unchecked.
    """
    by_id: dict[str, Recipe] = {}
    for recipe in recipes:
        by_id.setdefault(recipe.id, recipe)
    merged: dict[tuple[str, str], ShoppingListItem] = {}

    for meals in calendar.values():
        for recipe_id in meals.values():
            if not recipe_id:
                continue
            recipe = by_id.get(recipe_id)
            if recipe is None:
                continue
            for ingredient in recipe.ingredients:
                key = (ingredient.name, ingredient.unit)
                existing = merged.get(key)
                if existing is not None:
                    existing.amount += ingredient.amount
                    if recipe.name not in existing.recipe_names:
                        existing.recipe_names.append(recipe.name)
                else:
                    merged[key] = ShoppingListItem(
                        id=_new_item_id(ingredient.id),
                        name=ingredient.name,
                        amount=ingredient.amount,
                        unit=ingredient.unit,
                        category=ingredient.category,
                        checked=False,
                        recipe_names=[recipe.name],
                    )

    return sorted(merged.values(), key=lambda item: item.category)
