"""Dream journal model layer: dream values, the dream list, and persistence."""

# Re-export the public surface so `import lucid_dreams` is enough.

from .models import (  # noqa: F401
    Creature,
    DecodeError,
    Dream,
    DreamListModel,
    Effect,
    UnicornColor,
)

from .storage import (  # noqa: F401
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    RemovableStore,
    StoreError,
)

from .persistence import (  # noqa: F401
    MODEL_KEY,
    DataManager,
    default_model,
    default_seed_dreams,
)
