"""
Abstract base class that defines the Array Store interface
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from ..data_model.documents import ArrayDocument
from ..errors import StoreNotConnectedError


class AbstractArrayStore(ABC):
    """
    Abstract base class that defines the Array Store interface

    A store is a handle to one collection of one database. Stores are used as
    context managers, entering connects the store and exiting closes it on
    every exit path.
    """

    def __init__(self, database_name: str, collection_name: str) -> None:
        self._database_name = database_name
        self._collection_name = collection_name
        self._connected = False

    @property
    def database_name(self) -> str:
        """Name of the database the store reads and writes"""
        return self._database_name

    @property
    def collection_name(self) -> str:
        """Name of the collection the store reads and writes"""
        return self._collection_name

    @property
    def connected(self) -> bool:
        """True between a successful connect and close"""
        return self._connected

    def _check_connected(self):
        if not self._connected:
            raise StoreNotConnectedError(self.collection_name)

    def __enter__(self):
        try:
            self.connect()
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @abstractmethod
    def connect(self) -> None:
        """Establish the connection to the store

        Raises:
            ConnectionFailedError: if the store can not be reached
        """

    @abstractmethod
    def close(self) -> None:
        """Release the connection, safe to call more than once"""

    @abstractmethod
    def count(self) -> int:
        """Count the documents in the collection

        Raises:
            CountError: if the count could not be obtained

        Returns:
            int: number of documents in the collection
        """

    @abstractmethod
    def insert(self, document: ArrayDocument) -> str:
        """Insert a new document, documents are always appended

        Args:
            document (ArrayDocument): the document to insert

        Raises:
            InsertError: if the document could not be inserted

        Returns:
            str: id of the inserted document
        """

    @abstractmethod
    def drop(self) -> None:
        """Remove the collection and all its documents

        Raises:
            DropError: if the collection could not be dropped
        """

    @abstractmethod
    def find_containing(self, field: str, value: Any) -> list[dict[str, Any]]:
        """Find the documents whose array field contains value

        Args:
            field (str): name of the array field
            value (Any): value that must be an element of the array

        Raises:
            FindError: if the query failed

        Returns:
            list[dict[str, Any]]: the matching documents, including their ids
        """


class AbstractArrayStoreConfig(ABC, BaseModel):
    """Configuration for ArrayStore"""

    database_name: str = "altshiftmongo"
    collection_name: str = "arrays"

    @abstractmethod
    def init(self) -> AbstractArrayStore:
        """Initialize array store from configuration"""
