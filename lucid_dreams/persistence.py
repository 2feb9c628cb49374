"""Saving and loading the dream list model.

The whole list model lives under a single key in whatever key-value store
the caller hands to DataManager. Nothing stored means "no saved model" and
is reported as None; a stored value that doesn't decode raises DecodeError.
"""

from __future__ import annotations

import logging

from lucid_dreams.models import (
    Creature,
    DecodeError,
    Dream,
    DreamListModel,
    Effect,
    UnicornColor,
)
from lucid_dreams.storage import KeyValueStore, RemovableStore

logger = logging.getLogger(__name__)

MODEL_KEY = "Model"


def default_seed_dreams() -> list[Dream]:
    """The dreams a brand-new list starts with."""
    return [
        Dream(
            description="Dream 1",
            creature=Creature.unicorn(UnicornColor.PINK),
            effects=frozenset({Effect.FIRE_BREATHING}),
        ),
        Dream(
            description="Dream 2",
            creature=Creature.unicorn(UnicornColor.YELLOW),
            effects=frozenset({Effect.LASER_FOCUS, Effect.MAGIC}),
            number_of_creatures=2,
        ),
        Dream(
            description="Dream 3",
            creature=Creature.unicorn(UnicornColor.WHITE),
            effects=frozenset({Effect.FIRE_BREATHING, Effect.LASER_FOCUS}),
            number_of_creatures=3,
        ),
    ]


def default_model() -> DreamListModel:
    return DreamListModel(dreams=tuple(default_seed_dreams()))


class DataManager:
    default_seed_dreams = staticmethod(default_seed_dreams)

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    def save(self, model: DreamListModel) -> None:
        self._store.set(MODEL_KEY, model.encode())
        logger.debug(f"Saved list model with {len(model.dreams)} dreams")

    def load(self) -> DreamListModel | None:
        """Return the saved model, or None if nothing has been saved."""
        stored = self._store.get(MODEL_KEY)
        if stored is None:
            return None
        try:
            model = DreamListModel.decode(stored)
        except DecodeError as e:
            logger.warning(f"Stored list model could not be decoded: {e}")
            raise
        logger.debug(f"Loaded list model with {len(model.dreams)} dreams")
        return model

    def load_or_default(self) -> DreamListModel:
        model = self.load()
        if model is None:
            return default_model()
        return model

    def clear(self) -> None:
        """Forget the saved model. Stores without remove() can't be cleared."""
        store = self._store
        if not isinstance(store, RemovableStore):
            raise TypeError(f"{type(store).__name__} does not support remove()")
        store.remove(MODEL_KEY)
