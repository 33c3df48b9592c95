"""Module that defines the Array Stores the demo can run against"""

from .abstract_store import AbstractArrayStore, AbstractArrayStoreConfig
from .memory_store import MemoryStore, MemoryStoreConfig
from .mongodb_store import MongoDBStore, MongoDBStoreConfig

__all__ = [
    "AbstractArrayStore",
    "AbstractArrayStoreConfig",
    "MemoryStore",
    "MemoryStoreConfig",
    "MongoDBStore",
    "MongoDBStoreConfig",
]
