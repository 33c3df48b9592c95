"""MongoDB Array Store"""
import logging
from typing import Any, Literal

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.results import InsertOneResult
from pymongo.server_api import ServerApi

from ..data_model.documents import ArrayDocument
from ..errors import (
    ConnectionFailedError,
    CountError,
    DropError,
    FindError,
    InsertError,
)
from ..utility.logger import logger
from .abstract_store import AbstractArrayStore, AbstractArrayStoreConfig

DEFAULT_CONNECTION_ADDRESS = "mongodb://127.0.0.1:27017"


class MongoDBStore(AbstractArrayStore):
    """MongoDB Array Store"""

    def __init__(
        self,
        connection_address: str = DEFAULT_CONNECTION_ADDRESS,
        database_name: str = "altshiftmongo",
        collection_name: str = "arrays",
        certificate: str = "",
        server_selection_timeout_ms: int | None = None,
    ) -> None:
        super().__init__(database_name, collection_name)
        self._connection_address = connection_address
        self._certificate = certificate
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self.client: MongoClient | None = None
        self._database: Database | None = None
        self._collection: Collection | None = None
        self._logger = logger

    @property
    def connection_address(self) -> str:
        """The address the store dials"""
        return self._connection_address

    @property
    def database(self) -> Database:
        """The MongoDB database the store is connected to"""
        self._check_connected()
        return self._database  # type: ignore

    @property
    def collection(self) -> Collection:
        """The MongoDB collection the store is connected to"""
        self._check_connected()
        return self._collection  # type: ignore

    @property
    def logger(self) -> logging.Logger:
        """logger for the array store"""
        return self._logger

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self._server_selection_timeout_ms is not None:
            kwargs["serverSelectionTimeoutMS"] = self._server_selection_timeout_ms
        if self._certificate:  # pragma: no cover
            # requires a server configured for x509 client certificates
            kwargs["tls"] = True
            kwargs["tlsCertificateKeyFile"] = self._certificate
            kwargs["server_api"] = ServerApi("1")
        return kwargs

    def connect(self) -> None:
        """Create the client and ping the server

        The client connects lazily, the ping makes an unreachable server fail
        here instead of at the first count.
        """
        self.logger.debug("Connecting to %s", self.connection_address)
        try:
            self.client = MongoClient(
                self.connection_address, **self._client_kwargs()
            )
            self.client.admin.command("ping")
        except (PyMongoError, ValueError) as err:
            # malformed addresses fail in the uri parser with a plain ValueError
            raise ConnectionFailedError(self.connection_address) from err
        self._database = self.client.get_database(self.database_name)
        self._collection = self._database.get_collection(self.collection_name)
        self._connected = True
        self.logger.debug(
            "Connected to %s.%s", self.database_name, self.collection_name
        )

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.logger.debug("Closed connection to %s", self.connection_address)
        self.client = None
        self._database = None
        self._collection = None
        self._connected = False

    def count(self) -> int:
        collection = self.collection
        try:
            return collection.count_documents({})
        except PyMongoError as err:
            raise CountError(self.collection_name) from err

    def insert(self, document: ArrayDocument) -> str:
        collection = self.collection
        try:
            result: InsertOneResult = collection.insert_one(document.to_document())
        except PyMongoError as err:
            raise InsertError(self.collection_name) from err
        self.logger.debug("Document inserted with ObjectID: %s", result.inserted_id)
        return str(result.inserted_id)

    def drop(self) -> None:
        collection = self.collection
        try:
            collection.drop()
        except PyMongoError as err:
            raise DropError(self.collection_name) from err
        self.logger.debug("Dropped collection %s", self.collection_name)

    def find_containing(self, field: str, value: Any) -> list[dict[str, Any]]:
        collection = self.collection
        # $eq against an array field matches any element of the array and keeps
        # operator shaped values literal
        query = {field: {"$eq": value}}
        try:
            return list(collection.find(query))
        except PyMongoError as err:
            raise FindError(self.collection_name) from err


class MongoDBStoreConfig(AbstractArrayStoreConfig):
    """Configuration for MongoDB Array Store"""

    backend: Literal["mongodb"] = "mongodb"
    connection_address: str = DEFAULT_CONNECTION_ADDRESS
    certificate: str = ""
    server_selection_timeout_ms: int | None = None

    def init(self) -> MongoDBStore:
        return MongoDBStore(**self.model_dump(exclude={"backend"}))
