"""Configuration for the arrays demo"""
import json
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError
from .runner import ContainsQuery, Variant
from .store.memory_store import MemoryStoreConfig
from .store.mongodb_store import MongoDBStoreConfig

CONFIG_PATH = Path("~/.mongo_arrays").expanduser()
DEMO_CONFIG_PATH = CONFIG_PATH / "config.json"


class DemoConfig(BaseModel):
    """Configuration of a demo run

    Example config file::

        {
            "store": {
                "backend": "mongodb",
                "connection_address": "mongodb://127.0.0.1:27017",
                "database_name": "altshiftmongo",
                "collection_name": "arrays"
            },
            "variant": "with-strings",
            "drop": false
        }
    """

    store: Union[MongoDBStoreConfig, MemoryStoreConfig] = Field(
        default_factory=MongoDBStoreConfig, discriminator="backend"
    )
    variant: Variant = Variant.WITH_STRINGS
    drop: bool = False
    contains: ContainsQuery | None = None

    @field_validator("store", mode="before")
    @classmethod
    def default_backend(cls, value):
        """store configs without a backend are MongoDB configs"""
        if isinstance(value, dict) and "backend" not in value:
            return {**value, "backend": "mongodb"}
        return value

    @classmethod
    def from_file(cls, path: str | Path) -> "DemoConfig":
        """Load a configuration from a json file

        Raises:
            ConfigError: if the file can't be read or doesn't describe a valid
                configuration
        """
        try:
            config_json = json.loads(Path(path).read_text(encoding="utf-8"))
            return cls(**config_json)
        except (OSError, json.JSONDecodeError, ValidationError, TypeError) as err:
            raise ConfigError(str(path)) from err
