"""Common test fixtures and other test configurations for mongo_arrays"""

import os

import pytest
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from mongo_arrays.store.memory_store import MemoryStore, MemoryStoreConfig
from mongo_arrays.store.mongodb_store import MongoDBStoreConfig

TEST_DATABASE = "altshiftmongo_test"
TEST_COLLECTION = "arrays"


@pytest.fixture(name="memory_cleanup", autouse=True)
def fixture_memory_cleanup():
    """Fixture that removes all in memory collections after each test"""
    yield
    MemoryStore.reset()


@pytest.fixture(name="memory_config")
def fixture_memory_config():
    """Config for a memory store using the default names"""
    yield MemoryStoreConfig()


@pytest.fixture(name="unreachable_config")
def fixture_unreachable_config():
    """Config for a MongoDB store that has no server listening"""
    yield MongoDBStoreConfig(
        connection_address="mongodb://127.0.0.1:1",
        database_name=TEST_DATABASE,
        server_selection_timeout_ms=200,
    )


@pytest.fixture(name="mongo_url", scope="session")
def fixture_mongo_url():
    """Address of the MongoDB server used for testing, tests using it are skipped
    if the server does not answer"""
    url = os.environ.get("MONGO_ARRAYS_TEST_URL", "mongodb://127.0.0.1:27017")
    client = MongoClient(url, serverSelectionTimeoutMS=500)
    try:
        client.admin.command("ping")
    except PyMongoError:
        pytest.skip(f"no MongoDB server at {url}")
    finally:
        client.close()
    yield url


@pytest.fixture(name="mdb_config")
def fixture_mdb_config(mongo_url):
    """Config for a MongoDB store on the test database, the collection is
    dropped before and after the test"""
    config = MongoDBStoreConfig(
        connection_address=mongo_url,
        database_name=TEST_DATABASE,
        collection_name=TEST_COLLECTION,
        server_selection_timeout_ms=2000,
    )
    client = MongoClient(mongo_url)
    client[TEST_DATABASE].drop_collection(TEST_COLLECTION)
    yield config
    client[TEST_DATABASE].drop_collection(TEST_COLLECTION)
    client.close()


@pytest.fixture(name="mdb_store")
def fixture_mdb_store(mdb_config: MongoDBStoreConfig):
    """Create a connected MongoDBStore for testing purposes"""
    with mdb_config.init() as mdb_store:
        yield mdb_store
