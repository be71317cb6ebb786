from cookbook.status.storage import JsonFileStorage, MemoryStorage
from cookbook.status.store import KeyValueStorage, StatusStore

__all__ = [
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "StatusStore",
]
