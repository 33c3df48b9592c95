"""Testing of the demo configuration"""

import json

import pytest

from mongo_arrays.config import DemoConfig
from mongo_arrays.errors import ConfigError
from mongo_arrays.runner import Variant, run_from_config
from mongo_arrays.store.memory_store import MemoryStore, MemoryStoreConfig
from mongo_arrays.store.mongodb_store import MongoDBStore, MongoDBStoreConfig


def test_defaults():
    """Without a file the demo runs the two document variant against the
    local server"""
    config = DemoConfig()
    assert isinstance(config.store, MongoDBStoreConfig)
    assert config.store.connection_address == "mongodb://127.0.0.1:27017"
    assert config.store.database_name == "altshiftmongo"
    assert config.store.collection_name == "arrays"
    assert config.variant == Variant.WITH_STRINGS
    assert config.drop is False
    assert config.contains is None


def test_from_file(tmp_path):
    """The backend field picks the store config"""
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "store": {"backend": "memory", "collection_name": "numbers"},
                "variant": "int-array",
                "contains": {"field": "some_array", "value": 2},
            }
        ),
        encoding="utf-8",
    )
    config = DemoConfig.from_file(path)
    assert isinstance(config.store, MemoryStoreConfig)
    assert isinstance(config.store.init(), MemoryStore)
    assert config.store.collection_name == "numbers"
    assert config.variant == Variant.INT_ARRAY
    assert config.contains.value == 2

    path.write_text(
        json.dumps({"store": {"backend": "mongodb", "connection_address": "localhost:27017"}}),
        encoding="utf-8",
    )
    store = DemoConfig.from_file(path).store.init()
    assert isinstance(store, MongoDBStore)
    assert store.connection_address == "localhost:27017"


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[1, 2]",
        json.dumps({"store": {"backend": "sqlite"}}),
        json.dumps({"variant": "floats"}),
    ],
)
def test_invalid_file(tmp_path, content):
    """Unreadable or invalid files raise ConfigError"""
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        DemoConfig.from_file(path)


def test_missing_file(tmp_path):
    """A missing file raises ConfigError naming the path"""
    path = tmp_path / "missing.json"
    with pytest.raises(ConfigError) as excinfo:
        DemoConfig.from_file(path)
    assert str(path) in str(excinfo.value)


def test_run_from_config():
    """run_from_config builds the store and passes the options on"""
    config = DemoConfig(store=MemoryStoreConfig(), variant=Variant.INT_ARRAY, drop=True)
    report = run_from_config(config)
    assert report.counts == [0, 1, 0]


def test_store_without_backend():
    """A store config without a backend is a MongoDB config"""
    config = DemoConfig(store={"connection_address": "localhost:27017"})
    assert isinstance(config.store, MongoDBStoreConfig)
    assert config.store.connection_address == "localhost:27017"
