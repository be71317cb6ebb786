"""StatusStore: cooked/gifted flags per recipe, persisted on every change."""

import logging
from collections.abc import Iterable
from typing import Protocol

from pydantic import ValidationError

from cookbook.models.status import (
    STATUSES_ADAPTER,
    STORAGE_KEY,
    AllRecipeStatuses,
    RecipeStatus,
)

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """What the store needs from a storage backend."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class StatusStore:
    """Tracks two independent flags per recipe id.

    The full mapping is read once at construction and written back after
    every mutation; there is no separate flush step. Single writer is
    assumed, concurrent writers get last-write-wins.

    Usage:
        store = StatusStore(JsonFileStorage(".cookbook/state.json"))
        store.set_cooked("roast-beef", True)
        store.get("roast-beef")  # RecipeStatus(cooked=True, gifted=False)
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = STORAGE_KEY,
        valid_ids: Iterable[str] | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._statuses: AllRecipeStatuses = self.load_all()
        if valid_ids is not None:
            self.prune(valid_ids)

    def get(self, recipe_id: str) -> RecipeStatus:
        """Return the status for a recipe, all False if never recorded."""
        return self._statuses.get(recipe_id, RecipeStatus())

    def all(self) -> AllRecipeStatuses:
        """Return a copy of the current mapping."""
        return dict(self._statuses)

    # --- Mutations ---

    def set_cooked(self, recipe_id: str, value: bool) -> RecipeStatus:
        """Set the cooked flag, keeping gifted as is."""
        return self._update(recipe_id, cooked=value)

    def set_gifted(self, recipe_id: str, value: bool) -> RecipeStatus:
        """Set the gifted flag, keeping cooked as is."""
        return self._update(recipe_id, gifted=value)

    def toggle_cooked(self, recipe_id: str) -> RecipeStatus:
        return self.set_cooked(recipe_id, not self.get(recipe_id).cooked)

    def toggle_gifted(self, recipe_id: str) -> RecipeStatus:
        return self.set_gifted(recipe_id, not self.get(recipe_id).gifted)

    def prune(self, valid_ids: Iterable[str]) -> list[str]:
        """Drop entries for ids not in `valid_ids`. Returns the removed ids."""
        keep = set(valid_ids)
        orphaned = sorted(rid for rid in self._statuses if rid not in keep)
        if orphaned:
            for rid in orphaned:
                del self._statuses[rid]
            self.persist(self._statuses)
            logger.info("Pruned %d orphaned status entries", len(orphaned))
        return orphaned

    def clear(self) -> None:
        """Forget every status and remove the persisted blob."""
        self._statuses = {}
        self._storage.remove_item(self._key)
        logger.info("Cleared all recipe statuses")

    # --- Persistence ---

    def load_all(self) -> AllRecipeStatuses:
        """Read the persisted mapping. Bad or missing data reads as empty."""
        raw = self._storage.get_item(self._key)
        if raw is None:
            return {}
        try:
            return STATUSES_ADAPTER.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding unreadable persisted statuses (%d error(s))",
                e.error_count(),
            )
            return {}

    def persist(self, statuses: AllRecipeStatuses) -> None:
        """Write the full mapping to storage."""
        self._storage.set_item(
            self._key, STATUSES_ADAPTER.dump_json(statuses).decode()
        )

    def _update(self, recipe_id: str, **flags: bool) -> RecipeStatus:
        status = self.get(recipe_id).model_copy(update=flags)
        self._statuses[recipe_id] = status
        self.persist(self._statuses)
        logger.debug("Status for %s is now %s", recipe_id, status)
        return status
