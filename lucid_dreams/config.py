"""Where the dream store lives on disk.

Settings come from the environment (a .env file at the project root is
loaded first):

    LUCID_DREAMS_DATA_DIR    directory holding the store file (default ./data)
    LUCID_DREAMS_STORE_FILE  store file name (default defaults.json)
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from lucid_dreams.persistence import DataManager
from lucid_dreams.storage import JsonFileStore

ROOT = Path(__file__).parent.parent
load_dotenv(ROOT / ".env")

DEFAULT_DATA_DIR = Path("data")
DEFAULT_STORE_FILE = "defaults.json"


def store_path() -> Path:
    data_dir = Path(os.getenv("LUCID_DREAMS_DATA_DIR", str(DEFAULT_DATA_DIR)))
    return data_dir / os.getenv("LUCID_DREAMS_STORE_FILE", DEFAULT_STORE_FILE)


def open_data_manager(path: Path | None = None) -> DataManager:
    return DataManager(JsonFileStore(path or store_path()))
