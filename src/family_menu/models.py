from __future__ import annotations
from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

MealCategory = Literal["breakfast", "lunch", "dinner"]

IngredientCategory = Literal[
    "verduras",
    "frutas",
    "carnes",
    "pescados",
    "lacteos",
    "cereales",
    "legumbres",
    "despensa",
    "condimentos",
    "otros",
]

# day key ("YYYY-MM-DD") -> meal category -> recipe id.
# A meal key that is present with None means "no selection".
CalendarMeal = dict[str, dict[MealCategory, Optional[str]]]


class Ingredient(BaseModel):
    id: str
    name: str
    amount: float = Field(ge=0)
    unit: str
    category: IngredientCategory


class Recipe(BaseModel):
    id: str
    name: str
    image: Optional[str] = None
    servings: int = Field(gt=0)
    category: MealCategory
    ingredients: list[Ingredient] = Field(default_factory=list)
    tags: Optional[list[str]] = None


class ShoppingListItem(BaseModel):
    id: str
    name: str
    amount: float
    unit: str
    category: IngredientCategory
    checked: bool = False
    recipe_names: list[str] = Field(default_factory=list)


class AppState(BaseModel):
    recipes: list[Recipe] = Field(default_factory=list)
    calendar: CalendarMeal = Field(default_factory=dict)
    shopping_list: list[ShoppingListItem] = Field(default_factory=list)
    current_week: Literal[0, 1] = 0


class PersistedData(BaseModel):
    """The record written to the key-value store. Only recipes and calendar survive a restart."""

    recipes: Optional[list[Recipe]] = None
    calendar: CalendarMeal = Field(default_factory=dict)

    @field_validator("calendar", mode="before")
    @classmethod
    def null_calendar_is_empty(cls, v):
        return {} if v is None else v
