"""Command line entry point for the arrays demo"""

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from .config import DEMO_CONFIG_PATH, DemoConfig
from .errors import ArraysDemoError, ConfigError
from .runner import ContainsQuery, Variant, run_from_config
from .store.memory_store import MemoryStoreConfig
from .utility.logger import logger

DEFAULT_LOG_FMT = "%(asctime)s - %(levelname)s %(message)s"

parser = argparse.ArgumentParser(
    prog="mongo-arrays",
    description="Count a collection and insert documents with array fields",
)
parser.add_argument(
    "-c",
    "--config",
    default=None,
    help=f"json config file (default: {DEMO_CONFIG_PATH} if it exists)",
)
parser.add_argument("-u", "--url", help="address of the MongoDB server")
parser.add_argument("-d", "--database", help="name of the database")
parser.add_argument("-n", "--collection", help="name of the collection")
parser.add_argument(
    "--variant",
    choices=[variant.value for variant in Variant],
    help="documents to insert (default: with-strings)",
)
parser.add_argument(
    "--drop", action="store_true", help="drop the collection after inserting"
)
parser.add_argument(
    "--contains",
    nargs=2,
    metavar=("FIELD", "VALUE"),
    help="find documents whose array FIELD contains VALUE (VALUE is parsed as json)",
)
parser.add_argument(
    "--memory",
    action="store_true",
    help="run against an in memory store instead of MongoDB",
)
parser.add_argument(
    "--timeout-ms",
    type=int,
    default=None,
    help="server selection timeout in milliseconds",
)
parser.add_argument(
    "--log-level",
    default="info",
    choices=["debug", "info", "warning", "error", "critical"],
    help="logging level (default: %(default)s)",
)


def parse_value(raw: str) -> Any:
    """Parse a command line value as json, plain words stay strings"""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def build_config(args: argparse.Namespace) -> DemoConfig:
    """Load the config file, if any, and apply the command line overrides"""
    if args.config is not None:
        config = DemoConfig.from_file(args.config)
    elif DEMO_CONFIG_PATH.exists():
        config = DemoConfig.from_file(DEMO_CONFIG_PATH)
    else:
        config = DemoConfig()

    store = config.store.model_dump()
    if args.memory:
        store = MemoryStoreConfig(
            database_name=store["database_name"],
            collection_name=store["collection_name"],
        ).model_dump()
    if args.url is not None:
        store["connection_address"] = args.url
    if args.timeout_ms is not None:
        store["server_selection_timeout_ms"] = args.timeout_ms
    if args.database is not None:
        store["database_name"] = args.database
    if args.collection is not None:
        store["collection_name"] = args.collection

    update: dict[str, Any] = {"store": store}
    if args.variant is not None:
        update["variant"] = args.variant
    if args.drop:
        update["drop"] = True
    if args.contains is not None:
        field, value = args.contains
        update["contains"] = ContainsQuery(field=field, value=parse_value(value))

    data = config.model_dump()
    # connection settings given to the memory store are ignored
    data.update(update)
    try:
        return DemoConfig.model_validate(data)
    except ValueError as err:
        raise ConfigError(str(args.config or "command line")) from err


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo, every demo error ends here: it is logged and the exit
    status is 1"""
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=DEFAULT_LOG_FMT)
    try:
        config = build_config(args)
        run_from_config(config)
    except ArraysDemoError as err:
        logger.critical("%s", err, exc_info=logger.isEnabledFor(logging.DEBUG))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
