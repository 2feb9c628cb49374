import pytest

from lucid_dreams.persistence import DataManager
from lucid_dreams.storage import MemoryStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env or shell settings out of every test."""
    monkeypatch.delenv("LUCID_DREAMS_DATA_DIR", raising=False)
    monkeypatch.delenv("LUCID_DREAMS_STORE_FILE", raising=False)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def manager(store):
    return DataManager(store)
