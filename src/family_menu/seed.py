from __future__ import annotations
from family_menu.assets import default_images
from family_menu.models import Recipe

_SEED = [
    {
        "id": "1",
        "name": "Lentejas con verduras",
        "image": "lentejas_verduras",
        "category": "lunch",
        "servings": 4,
        "ingredients": [
            {"id": "1-1", "name": "Lentejas", "amount": 300, "unit": "g", "category": "legumbres"},
            {"id": "1-2", "name": "Cebolla", "amount": 1, "unit": "unidad", "category": "verduras"},
            {"id": "1-3", "name": "Zanahoria", "amount": 2, "unit": "unidades", "category": "verduras"},
            {"id": "1-4", "name": "Apio", "amount": 2, "unit": "tallos", "category": "verduras"},
            {"id": "1-5", "name": "Aceite de oliva", "amount": 3, "unit": "cucharadas", "category": "despensa"},
        ],
    },
    {
        "id": "2",
        "name": "Tostadas con palta",
        "image": "tostadas_palta",
        "category": "breakfast",
        "servings": 2,
        "ingredients": [
            {"id": "2-1", "name": "Pan integral", "amount": 4, "unit": "rebanadas", "category": "cereales"},
            {"id": "2-2", "name": "Palta", "amount": 2, "unit": "unidades", "category": "frutas"},
            {"id": "2-3", "name": "Limón", "amount": 1, "unit": "unidad", "category": "frutas"},
            {"id": "2-4", "name": "Tomate cherry", "amount": 8, "unit": "unidades", "category": "verduras"},
            {"id": "2-5", "name": "Sal", "amount": 1, "unit": "pizca", "category": "condimentos"},
        ],
    },
    {
        "id": "3",
        "name": "Pollo al horno",
        "image": "pollo_horno",
        "category": "dinner",
        "servings": 4,
        "ingredients": [
            {"id": "3-1", "name": "Pollo", "amount": 1.5, "unit": "kg", "category": "carnes"},
            {"id": "3-2", "name": "Papas", "amount": 6, "unit": "unidades", "category": "verduras"},
            {"id": "3-3", "name": "Cebolla", "amount": 1, "unit": "unidad", "category": "verduras"},
            {"id": "3-4", "name": "Pimentón", "amount": 1, "unit": "unidad", "category": "verduras"},
            {"id": "3-5", "name": "Aceite de oliva", "amount": 4, "unit": "cucharadas", "category": "despensa"},
            {"id": "3-6", "name": "Romero", "amount": 2, "unit": "ramas", "category": "condimentos"},
        ],
    },
    {
        "id": "4",
        "name": "Ensalada fresca",
        "image": "ensalada_fresca",
        "category": "lunch",
        "servings": 2,
        "ingredients": [
            {"id": "4-1", "name": "Lechuga", "amount": 1, "unit": "unidad", "category": "verduras"},
            {"id": "4-2", "name": "Tomate", "amount": 3, "unit": "unidades", "category": "verduras"},
            {"id": "4-3", "name": "Pepino", "amount": 1, "unit": "unidad", "category": "verduras"},
            {"id": "4-4", "name": "Queso fresco", "amount": 200, "unit": "g", "category": "lacteos"},
            {"id": "4-5", "name": "Aceite de oliva", "amount": 3, "unit": "cucharadas", "category": "despensa"},
            {"id": "4-6", "name": "Vinagre", "amount": 1, "unit": "cucharada", "category": "despensa"},
        ],
    },
    {
        "id": "5",
        "name": "Pancakes integrales",
        "image": "pancakes_integrales",
        "category": "breakfast",
        "servings": 3,
        "ingredients": [
            {"id": "5-1", "name": "Harina integral", "amount": 200, "unit": "g", "category": "cereales"},
            {"id": "5-2", "name": "Huevos", "amount": 2, "unit": "unidades", "category": "lacteos"},
            {"id": "5-3", "name": "Leche", "amount": 250, "unit": "ml", "category": "lacteos"},
            {"id": "5-4", "name": "Mantequilla", "amount": 50, "unit": "g", "category": "lacteos"},
            {"id": "5-5", "name": "Miel", "amount": 3, "unit": "cucharadas", "category": "despensa"},
            {"id": "5-6", "name": "Polvo de hornear", "amount": 1, "unit": "cucharadita", "category": "despensa"},
        ],
    },
    {
        "id": "6",
        "name": "Salmón a la plancha",
        "image": "salmon_plancha",
        "category": "dinner",
        "servings": 2,
        "ingredients": [
            {"id": "6-1", "name": "Salmón", "amount": 500, "unit": "g", "category": "pescados"},
            {"id": "6-2", "name": "Brócoli", "amount": 300, "unit": "g", "category": "verduras"},
            {"id": "6-3", "name": "Espárragos", "amount": 200, "unit": "g", "category": "verduras"},
            {"id": "6-4", "name": "Limón", "amount": 1, "unit": "unidad", "category": "frutas"},
            {"id": "6-5", "name": "Aceite de oliva", "amount": 2, "unit": "cucharadas", "category": "despensa"},
        ],
    },
]


def seed_recipes(images: dict[str, str] | None = None) -> list[Recipe]:
    """Return a fresh copy of the built-in recipe catalog.

    ``images`` maps image slugs to the references the caller wants stored on
    the recipes; slugs without an entry get no image.
    """
    images = default_images() if images is None else images
    recipes = []
    for raw in _SEED:
        data = {**raw, "image": images.get(raw["image"])}
        recipes.append(Recipe.model_validate(data))
    return recipes
