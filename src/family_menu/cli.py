from __future__ import annotations
from datetime import date
from pathlib import Path
import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from family_menu.actions import (
    AddRecipe,
    ClearMeal,
    DeleteRecipe,
    GenerateShoppingList,
    SetCurrentWeek,
    SetMeal,
    ToggleShoppingItem,
)
from family_menu.assets import default_images
from family_menu.config import Config
from family_menu.formatter import format_shopping_list, format_week
from family_menu.models import Recipe
from family_menu.planner import MEAL_TYPES
from family_menu.seed import seed_recipes
from family_menu.storage import JsonFileStore, StateRepository, StorageError
from family_menu.store import Store

console = Console()
err_console = Console(stderr=True)


class RecipeSubmissionError(Exception):
    pass


def check_recipe_submission(recipe: Recipe) -> None:
    """Reject recipes the store should never see: blank name or a blank ingredient name."""
    if not recipe.name.strip():
        raise RecipeSubmissionError("Recipe name is required.")
    for ingredient in recipe.ingredients:
        if not ingredient.name.strip():
            raise RecipeSubmissionError(f"Ingredient '{ingredient.id}' has no name.")


def _fail(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}")
    raise SystemExit(1)


def _load_config() -> Config:
    try:
        return Config()
    except ValidationError as e:
        _fail(f"Invalid configuration: {e}")


def _repository(config: Config) -> StateRepository:
    try:
        file_store = JsonFileStore(base_dir=config.family_menu_dir)
    except StorageError as e:
        _fail(str(e))
    images = default_images(config.image_base)
    return StateRepository(file_store, key=config.storage_key, seed=lambda: seed_recipes(images))


def _open_store() -> tuple[Store, Config]:
    config = _load_config()
    return Store.open(_repository(config)), config


def _find_recipe(store: Store, recipe_id: str) -> Recipe | None:
    return next((r for r in store.state.recipes if r.id == recipe_id), None)


def _parse_day(ctx, param, value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a YYYY-MM-DD date.")


@click.group()
def cli():
    """Family Menu — plan two weeks of meals and build the shopping list."""
    pass


@cli.group("recipe")
def recipe():
    """Manage the recipe catalog."""
    pass


@recipe.command("list")
def recipe_list():
    """Show every recipe in the catalog."""
    store, _ = _open_store()
    if not store.state.recipes:
        console.print("No recipes. Use [bold]menu recipe add[/bold] to add some.")
        return

    table = Table(title="Recipes")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Meal")
    table.add_column("Servings", justify="right")
    table.add_column("Ingredients", justify="right")
    for r in store.state.recipes:
        table.add_row(r.id, r.name, r.category, str(r.servings), str(len(r.ingredients)))
    console.print(table)


@recipe.command("show")
@click.argument("recipe_id")
def recipe_show(recipe_id: str):
    """Show one recipe and its ingredients."""
    store, _ = _open_store()
    found = _find_recipe(store, recipe_id)
    if found is None:
        _fail(f"Recipe '{recipe_id}' not found.")

    console.print(f"\n[bold]{found.name}[/bold] ({found.category}, {found.servings} servings)\n")
    for ing in found.ingredients:
        console.print(f"  • {ing.amount:g} {ing.unit} {ing.name}", markup=False)
    if found.tags:
        console.print(f"\n  Tags: {', '.join(found.tags)}", markup=False)
    console.print()


@recipe.command("add")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def recipe_add(path: Path):
    """Add a recipe from a JSON file."""
    try:
        new_recipe = Recipe.model_validate_json(path.read_text(encoding="utf-8"))
        check_recipe_submission(new_recipe)
    except ValidationError as e:
        _fail(f"{path.name} is not a valid recipe: {e}")
    except RecipeSubmissionError as e:
        _fail(str(e))

    store, _ = _open_store()
    if _find_recipe(store, new_recipe.id) is not None:
        _fail(f"A recipe with id '{new_recipe.id}' already exists.")
    store.dispatch(AddRecipe(recipe=new_recipe))
    console.print(f"[green]✓[/green] Added recipe: [bold]{new_recipe.name}[/bold]")


@recipe.command("delete")
@click.argument("recipe_id")
def recipe_delete(recipe_id: str):
    """Delete a recipe. Planned meals that used it are skipped from then on."""
    store, _ = _open_store()
    found = _find_recipe(store, recipe_id)
    if found is None:
        _fail(f"Recipe '{recipe_id}' not found.")
    store.dispatch(DeleteRecipe(recipe_id=recipe_id))
    console.print(f"[green]✓[/green] Deleted recipe: [bold]{found.name}[/bold]")


@cli.group("plan")
def plan():
    """Assign recipes to days and meals."""
    pass


@plan.command("set")
@click.argument("day", callback=_parse_day)
@click.argument("meal", type=click.Choice(MEAL_TYPES))
@click.argument("recipe_id", required=False)
def plan_set(day: str, meal: str, recipe_id: str | None):
    """Plan RECIPE_ID for MEAL on DAY. Without RECIPE_ID the slot is left unselected."""
    store, _ = _open_store()
    if recipe_id is not None and _find_recipe(store, recipe_id) is None:
        _fail(f"Recipe '{recipe_id}' not found.")
    store.dispatch(SetMeal(day=day, meal_type=meal, recipe_id=recipe_id))
    label = _find_recipe(store, recipe_id).name if recipe_id else "nothing"
    console.print(f"[green]✓[/green] {day} {meal}: [bold]{label}[/bold]")


@plan.command("clear")
@click.argument("day", callback=_parse_day)
@click.argument("meal", type=click.Choice(MEAL_TYPES))
def plan_clear(day: str, meal: str):
    """Remove MEAL from DAY."""
    store, _ = _open_store()
    store.dispatch(ClearMeal(day=day, meal_type=meal))
    console.print(f"[green]✓[/green] Cleared {day} {meal}")


@plan.command("show")
@click.option("--week", type=click.IntRange(0, 1), default=0, show_default=True,
              help="0 for this week, 1 for next week")
def plan_show(week: int):
    """Show the meals planned for one week."""
    store, _ = _open_store()
    store.dispatch(SetCurrentWeek(week=week))
    console.print(f"\n[bold]Week {store.state.current_week + 1}[/bold]  (breakfast | lunch | dinner)\n")
    console.print(format_week(store.state, store.state.current_week), markup=False)
    console.print()


@cli.command("shopping")
@click.option("--check", "checked_names", multiple=True,
              help="Ingredient name to mark as already in the cart, in every unit it appears with (repeatable)")
@click.option("--output", "output_path", default=None, type=click.Path(dir_okay=False, path_type=Path),
              help="Also write the list to this file")
def shopping(checked_names: tuple[str, ...], output_path: Path | None):
    """Build the shopping list from every planned meal."""
    store, config = _open_store()
    store.dispatch(GenerateShoppingList())
    for name in dict.fromkeys(checked_names):
        for item in store.state.shopping_list:
            if item.name == name:
                store.dispatch(ToggleShoppingItem(item_id=item.id))

    items = store.state.shopping_list
    console.print(f"\n[bold]{len(items)}[/bold] items to buy.\n")
    output = format_shopping_list(items, config)
    console.print(output, markup=False)

    if output_path is not None:
        output_path.write_text(output, encoding="utf-8")
        console.print(f"\n[dim]Saved to {output_path}[/dim]")


@cli.command("reset")
@click.confirmation_option(prompt="Discard all saved recipes and meal plans?")
def reset():
    """Forget saved data; the next command starts from the built-in recipes."""
    config = _load_config()
    _repository(config).clear()
    console.print("[green]✓[/green] Saved data removed.")
