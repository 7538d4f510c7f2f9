"""Key-value storage backends."""

from foliowatch.storage.factory import create_storage
from foliowatch.storage.file import JsonFileStorage
from foliowatch.storage.memory import MemoryStorage

__all__ = ["JsonFileStorage", "MemoryStorage", "create_storage"]
