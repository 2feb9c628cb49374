"""Tests for saving and loading the dream list model."""

import pytest

from lucid_dreams.models import Creature, DecodeError, Dream, DreamListModel, Effect
from lucid_dreams.persistence import (
    MODEL_KEY,
    DataManager,
    default_model,
    default_seed_dreams,
)
from lucid_dreams.storage import JsonFileStore, MemoryStore


def test_model_key():
    assert MODEL_KEY == "Model"


def test_default_seed_dreams():
    assert default_seed_dreams() == [
        Dream(
            description="Dream 1",
            creature=Creature.UNICORN_PINK,
            effects=frozenset({Effect.FIRE_BREATHING}),
            number_of_creatures=1,
        ),
        Dream(
            description="Dream 2",
            creature=Creature.UNICORN_YELLOW,
            effects=frozenset({Effect.LASER_FOCUS, Effect.MAGIC}),
            number_of_creatures=2,
        ),
        Dream(
            description="Dream 3",
            creature=Creature.UNICORN_WHITE,
            effects=frozenset({Effect.FIRE_BREATHING, Effect.LASER_FOCUS}),
            number_of_creatures=3,
        ),
    ]


def test_default_seed_dreams_is_fresh_each_call():
    first = default_seed_dreams()
    first.clear()
    assert len(default_seed_dreams()) == 3
    assert DataManager.default_seed_dreams() == default_seed_dreams()


def test_default_model():
    m = default_model()
    assert list(m.dreams) == default_seed_dreams()
    assert m.favorite_creature is Creature.UNICORN_PINK


def test_load_empty_returns_none(manager):
    """Nothing saved is the empty state, not an error."""
    assert manager.load() is None


def test_save_writes_encoded_model(manager, store):
    model = default_model()
    manager.save(model)
    assert store.get("Model") == model.encode()


def test_save_then_load(manager):
    model = default_model().with_favorite_creature(Creature.SHARK)
    manager.save(model)
    assert manager.load() == model


def test_save_replaces_previous(manager):
    manager.save(default_model())
    manager.save(DreamListModel())
    assert manager.load() == DreamListModel()


def test_load_corrupt_model_raises():
    store = MemoryStore({"Model": {"dreams": [{"description": "x", "creature": 6,
                                               "effects": [], "numberOfCreatures": 1}]}})
    with pytest.raises(DecodeError, match="creature"):
        DataManager(store).load()


def test_load_wrong_type_raises():
    store = MemoryStore({"Model": "not a model"})
    with pytest.raises(DecodeError):
        DataManager(store).load()


def test_load_or_default_when_empty(manager, store):
    assert manager.load_or_default() == default_model()
    assert store.get("Model") is None


def test_load_or_default_prefers_saved(manager):
    saved = DreamListModel(dreams=(default_seed_dreams()[2],))
    manager.save(saved)
    assert manager.load_or_default() == saved


def test_load_or_default_propagates_decode_error():
    manager = DataManager(MemoryStore({"Model": {"dreams": None}}))
    with pytest.raises(DecodeError):
        manager.load_or_default()


def test_clear(manager):
    manager.save(default_model())
    manager.clear()
    assert manager.load() is None


def test_clear_unsupported_store():
    class GetSetOnly:
        def get(self, key):
            return None

        def set(self, key, value):
            pass

    with pytest.raises(TypeError, match="remove"):
        DataManager(GetSetOnly()).clear()


def test_json_file_roundtrip(tmp_path):
    path = tmp_path / "defaults.json"
    model = default_model().without_dream(0)
    DataManager(JsonFileStore(path)).save(model)
    assert DataManager(JsonFileStore(path)).load() == model


def test_clear_json_file_store(tmp_path):
    store = JsonFileStore(tmp_path / "defaults.json")
    store.set("Other", 1)
    manager = DataManager(store)
    manager.save(default_model())
    manager.clear()
    assert manager.load() is None
    assert store.get("Other") == 1
