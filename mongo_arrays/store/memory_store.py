"""In memory Array Store

Behaves like a MongoDB collection for the operations the demo uses, without a
server. Collections live in a class level registry keyed by database and
collection name, so every store created in the same process for the same
collection sees the same documents.
"""
import copy
import logging
from typing import Any, ClassVar, Literal

from bson.objectid import ObjectId

from ..data_model.documents import ArrayDocument
from ..utility.logger import logger
from .abstract_store import AbstractArrayStore, AbstractArrayStoreConfig


class MemoryStore(AbstractArrayStore):
    """In memory Array Store"""

    collections: ClassVar[dict[tuple[str, str], list[dict[str, Any]]]] = {}

    def __init__(
        self, database_name: str = "altshiftmongo", collection_name: str = "arrays"
    ) -> None:
        super().__init__(database_name, collection_name)
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        """logger for the array store"""
        return self._logger

    @property
    def key(self) -> tuple[str, str]:
        """registry key of the collection"""
        return (self.database_name, self.collection_name)

    @property
    def documents(self) -> list[dict[str, Any]]:
        """The documents of the collection, created empty on first use"""
        self._check_connected()
        return self.collections.setdefault(self.key, [])

    @classmethod
    def reset(cls) -> None:
        """Remove every collection from the registry"""
        cls.collections.clear()

    def connect(self) -> None:
        self._connected = True
        self.logger.debug("Connected to memory://%s/%s", *self.key)

    def close(self) -> None:
        self._connected = False

    def count(self) -> int:
        return len(self.documents)

    def insert(self, document: ArrayDocument) -> str:
        stored = document.to_document()
        stored["_id"] = ObjectId()
        self.documents.append(stored)
        self.logger.debug("Document inserted with ObjectID: %s", stored["_id"])
        return str(stored["_id"])

    def drop(self) -> None:
        self._check_connected()
        self.collections.pop(self.key, None)
        self.logger.debug("Dropped collection %s", self.collection_name)

    def find_containing(self, field: str, value: Any) -> list[dict[str, Any]]:
        return [
            copy.deepcopy(doc)
            for doc in self.documents
            if self.matches(doc, field, value)
        ]

    @staticmethod
    def matches(document: dict[str, Any], field: str, value: Any) -> bool:
        """MongoDB equality semantics for a single field: an array matches if
        any of its elements equals value, anything else must equal value"""
        if field not in document:
            return False
        stored = document[field]
        if isinstance(stored, list):
            return any(
                MemoryStore.equal(element, value) for element in stored
            ) or MemoryStore.equal(stored, value)
        return MemoryStore.equal(stored, value)

    @staticmethod
    def equal(left: Any, right: Any) -> bool:
        """Value equality where booleans never equal numbers"""
        if isinstance(left, bool) != isinstance(right, bool):
            return False
        if isinstance(left, list) and isinstance(right, list):
            return len(left) == len(right) and all(
                MemoryStore.equal(lhs, rhs) for lhs, rhs in zip(left, right)
            )
        return left == right


class MemoryStoreConfig(AbstractArrayStoreConfig):
    """Configuration for In memory Array Store"""

    backend: Literal["memory"] = "memory"

    def init(self) -> MemoryStore:
        return MemoryStore(self.database_name, self.collection_name)
