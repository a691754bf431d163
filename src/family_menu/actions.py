"""Actions accepted by the store, one variant per state transition.

Each action carries a ``type`` tag so payloads coming from the presentation
layer as plain dicts can be parsed into the right variant with ``parse_action``.
"""
from __future__ import annotations
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field, TypeAdapter
from family_menu.models import CalendarMeal, MealCategory, Recipe


class LoadInitialData(BaseModel):
    type: Literal["LOAD_INITIAL_DATA"] = "LOAD_INITIAL_DATA"
    recipes: list[Recipe]
    calendar: Optional[CalendarMeal] = None


class AddRecipe(BaseModel):
    type: Literal["ADD_RECIPE"] = "ADD_RECIPE"
    recipe: Recipe


class UpdateRecipe(BaseModel):
    type: Literal["UPDATE_RECIPE"] = "UPDATE_RECIPE"
    recipe: Recipe


class DeleteRecipe(BaseModel):
    type: Literal["DELETE_RECIPE"] = "DELETE_RECIPE"
    recipe_id: str


class SetMeal(BaseModel):
    type: Literal["SET_MEAL"] = "SET_MEAL"
    day: str
    meal_type: MealCategory
    recipe_id: Optional[str] = None


class ClearMeal(BaseModel):
    type: Literal["CLEAR_MEAL"] = "CLEAR_MEAL"
    day: str
    meal_type: MealCategory


class GenerateShoppingList(BaseModel):
    type: Literal["GENERATE_SHOPPING_LIST"] = "GENERATE_SHOPPING_LIST"


class ToggleShoppingItem(BaseModel):
    type: Literal["TOGGLE_SHOPPING_ITEM"] = "TOGGLE_SHOPPING_ITEM"
    item_id: str


class SetCurrentWeek(BaseModel):
    type: Literal["SET_CURRENT_WEEK"] = "SET_CURRENT_WEEK"
    week: Literal[0, 1]


Action = Annotated[
    Union[
        LoadInitialData,
        AddRecipe,
        UpdateRecipe,
        DeleteRecipe,
        SetMeal,
        ClearMeal,
        GenerateShoppingList,
        ToggleShoppingItem,
        SetCurrentWeek,
    ],
    Field(discriminator="type"),
]

_action_adapter: TypeAdapter[Action] = TypeAdapter(Action)


def parse_action(data: dict[str, Any]) -> Action:
    """Build an action from a plain payload such as ``{"type": "CLEAR_MEAL", ...}``."""
    return _action_adapter.validate_python(data)
