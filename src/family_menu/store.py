from __future__ import annotations
import logging
from typing import Callable, Optional, Protocol
from family_menu.actions import (
    Action,
    AddRecipe,
    ClearMeal,
    DeleteRecipe,
    GenerateShoppingList,
    LoadInitialData,
    SetCurrentWeek,
    SetMeal,
    ToggleShoppingItem,
    UpdateRecipe,
)
from family_menu.models import AppState, PersistedData
from family_menu.shopping import build_shopping_list

logger = logging.getLogger(__name__)


def _load_initial_data(state: AppState, action: LoadInitialData) -> AppState:
    return state.model_copy(
        update={"recipes": list(action.recipes), "calendar": dict(action.calendar or {})}
    )


def _add_recipe(state: AppState, action: AddRecipe) -> AppState:
    if any(r.id == action.recipe.id for r in state.recipes):
        logger.debug("Ignoring ADD_RECIPE for existing recipe id %s", action.recipe.id)
        return state
    return state.model_copy(update={"recipes": [*state.recipes, action.recipe]})


def _update_recipe(state: AppState, action: UpdateRecipe) -> AppState:
    recipes = [action.recipe if r.id == action.recipe.id else r for r in state.recipes]
    return state.model_copy(update={"recipes": recipes})


def _delete_recipe(state: AppState, action: DeleteRecipe) -> AppState:
    recipes = [r for r in state.recipes if r.id != action.recipe_id]
    return state.model_copy(update={"recipes": recipes})


def _set_meal(state: AppState, action: SetMeal) -> AppState:
    day = {**state.calendar.get(action.day, {}), action.meal_type: action.recipe_id}
    return state.model_copy(update={"calendar": {**state.calendar, action.day: day}})


def _clear_meal(state: AppState, action: ClearMeal) -> AppState:
    day = {k: v for k, v in state.calendar.get(action.day, {}).items() if k != action.meal_type}
    return state.model_copy(update={"calendar": {**state.calendar, action.day: day}})


def _generate_shopping_list(state: AppState, action: GenerateShoppingList) -> AppState:
    return state.model_copy(
        update={"shopping_list": build_shopping_list(state.recipes, state.calendar)}
    )


def _toggle_shopping_item(state: AppState, action: ToggleShoppingItem) -> AppState:
    items = [
        item.model_copy(update={"checked": not item.checked}) if item.id == action.item_id else item
        for item in state.shopping_list
    ]
    return state.model_copy(update={"shopping_list": items})


def _set_current_week(state: AppState, action: SetCurrentWeek) -> AppState:
    return state.model_copy(update={"current_week": action.week})


_HANDLERS: dict[type, Callable[[AppState, Action], AppState]] = {
    LoadInitialData: _load_initial_data,
    AddRecipe: _add_recipe,
    UpdateRecipe: _update_recipe,
    DeleteRecipe: _delete_recipe,
    SetMeal: _set_meal,
    ClearMeal: _clear_meal,
    GenerateShoppingList: _generate_shopping_list,
    ToggleShoppingItem: _toggle_shopping_item,
    SetCurrentWeek: _set_current_week,
}


def transition(state: AppState, action: Action) -> AppState:
    """Return the state that results from applying ``action`` to ``state``.

    ``state`` is never modified; fields the action does not touch are shared
    with the returned state. Anything that is not a known action leaves the
    state as it is.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        logger.debug("Ignoring unknown action %r", action)
        return state
    return handler(state, action)


class Repository(Protocol):
    def load(self) -> PersistedData: ...

    def save(self, state: AppState) -> None: ...


class Store:
    """Holds the current AppState and applies actions to it.

    When a repository is given, every transition that changes the recipes or
    the calendar is followed by ``repository.save``.
    """

    def __init__(self, state: AppState | None = None, repository: Optional[Repository] = None):
        self._state = state if state is not None else AppState()
        self._repository = repository

    @classmethod
    def open(cls, repository: Repository) -> Store:
        store = cls(repository=repository)
        data = repository.load()
        store.dispatch(LoadInitialData(recipes=data.recipes or [], calendar=data.calendar))
        return store

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        previous = self._state
        self._state = transition(previous, action)
        if self._repository is not None and _persisted_fields_changed(previous, self._state):
            self._repository.save(self._state)
        return self._state


def _persisted_fields_changed(before: AppState, after: AppState) -> bool:
    return before.recipes != after.recipes or before.calendar != after.calendar
