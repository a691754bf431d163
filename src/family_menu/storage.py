from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable
from pydantic import ValidationError
from family_menu.models import AppState, PersistedData, Recipe
from family_menu.seed import seed_recipes

logger = logging.getLogger(__name__)

DEFAULT_KEY = "familyMenuApp"


class StorageError(Exception):
    pass


def is_legacy_image(ref: str | None) -> bool:
    """Image references saved by older releases were hyphenated .jpg paths."""
    return bool(ref) and "-" in ref and ".jpg" in ref


class JsonFileStore:
    """A small durable key-value store: one JSON file per key."""

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = base_dir or (Path.home() / ".family_menu")
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except (FileExistsError, NotADirectoryError) as e:
            raise StorageError(f"Cannot use {self.base_dir} as a data directory: {e}") from e

    def _path(self, key: str) -> Path:
        return self.base_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._path(key).write_text(value, encoding="utf-8")

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class StateRepository:
    """Loads and saves the recipes and calendar under a single key."""

    def __init__(
        self,
        store: JsonFileStore,
        key: str = DEFAULT_KEY,
        seed: Callable[[], list[Recipe]] | None = None,
    ):
        self.store = store
        self.key = key
        self._seed = seed or seed_recipes

    def _seed_data(self) -> PersistedData:
        return PersistedData(recipes=self._seed(), calendar={})

    def load(self) -> PersistedData:
        try:
            raw = self.store.get(self.key)
            if raw is None:
                return self._seed_data()
            data = PersistedData.model_validate_json(raw)
        except (UnicodeDecodeError, ValidationError) as e:
            logger.warning("Discarding unreadable saved data under '%s': %s", self.key, e)
            self.store.remove(self.key)
            return self._seed_data()

        if data.recipes is not None and any(is_legacy_image(r.image) for r in data.recipes):
            logger.warning("Discarding saved data under '%s': recipes use old image paths", self.key)
            self.store.remove(self.key)
            return self._seed_data()

        if data.recipes is None:
            data.recipes = self._seed()
        return data

    def save(self, state: AppState) -> None:
        if not state.recipes:
            logger.debug("Not saving: recipe catalog is empty")
            return
        record = PersistedData(recipes=state.recipes, calendar=state.calendar)
        self.store.set(self.key, record.model_dump_json(indent=2))

    def clear(self) -> None:
        self.store.remove(self.key)
