import pytest
from family_menu.models import Ingredient, Recipe


def _make_recipe(recipe_id, name, ingredients, category="lunch"):
    return Recipe(
        id=recipe_id,
        name=name,
        servings=2,
        category=category,
        ingredients=[
            Ingredient(id=f"{recipe_id}-{i}", name=n, amount=a, unit=u, category=c)
            for i, (n, a, u, c) in enumerate(ingredients, start=1)
        ],
    )


@pytest.fixture
def make_recipe():
    return _make_recipe


@pytest.fixture
def guiso():
    return _make_recipe("a", "Guiso", [
        ("Cebolla", 1, "unidad", "verduras"),
        ("Manzana", 2, "unidades", "frutas"),
    ])


@pytest.fixture
def sopa():
    return _make_recipe("b", "Sopa", [
        ("Cebolla", 2, "unidad", "verduras"),
        ("Pera", 1, "unidad", "frutas"),
        ("Zanahoria", 3, "unidades", "verduras"),
    ])
