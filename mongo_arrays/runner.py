"""
The arrays demo: a fixed, sequential script of collection operations.

Every step either succeeds or raises one of the errors from
:mod:`mongo_arrays.errors`, the runner never catches them. The store is
released by the ``with`` block on every exit path.
"""

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from .data_model.documents import (
    ArrayDocument,
    IntArrayDocument,
    StringArrayDocument,
)
from .store.abstract_store import AbstractArrayStore
from .utility.logger import logger

if TYPE_CHECKING:
    from .config import DemoConfig


class Variant(StrEnum):
    """Which documents a run inserts"""

    INT_ARRAY = "int-array"
    WITH_STRINGS = "with-strings"


class ContainsQuery(BaseModel):
    """Find documents whose array ``field`` has ``value`` as an element"""

    field: str
    value: Any


class RunReport(BaseModel):
    """What a run observed, in the order it happened"""

    counts: list[int] = Field(default_factory=list)
    inserted_ids: list[str] = Field(default_factory=list)
    matches: list[dict[str, Any]] = Field(default_factory=list)


def report_count(store: AbstractArrayStore, report: RunReport) -> int:
    """Count the collection, print the count and record it"""
    count = store.count()
    print(f"Connected to {store.collection_name}. Current count: {count}")
    report.counts.append(count)
    return count


def insert_and_count(
    store: AbstractArrayStore, document: ArrayDocument, report: RunReport
) -> str:
    """Insert a document and report the new count"""
    inserted_id = store.insert(document)
    logger.info("Inserted %s %s", type(document).__name__, inserted_id)
    report.inserted_ids.append(inserted_id)
    report_count(store, report)
    return inserted_id


def run(
    store: AbstractArrayStore,
    variant: Variant = Variant.WITH_STRINGS,
    drop: bool = False,
    contains: ContainsQuery | None = None,
) -> RunReport:
    """Run the demo against a store

    Args:
        store (AbstractArrayStore): store to run against, not yet connected
        variant (Variant, optional): documents to insert.
            Defaults to Variant.WITH_STRINGS.
        drop (bool, optional): drop the collection after inserting.
            Defaults to False.
        contains (ContainsQuery | None, optional): query to run last.
            Defaults to None.

    Returns:
        RunReport: counts, inserted ids and matched documents
    """
    report = RunReport()
    with store:
        print("Getting a database object")
        report_count(store, report)

        insert_and_count(store, IntArrayDocument.sample(), report)
        if variant == Variant.WITH_STRINGS:
            insert_and_count(store, StringArrayDocument.sample(), report)

        if drop:
            store.drop()
            logger.info("Dropped collection %s", store.collection_name)
            report_count(store, report)

        if contains is not None:
            report.matches = store.find_containing(contains.field, contains.value)
            print(
                f"Found {len(report.matches)} document(s) where "
                f"{contains.field} contains {contains.value!r}"
            )
    return report


def run_from_config(config: "DemoConfig") -> RunReport:
    """Build the store described by a DemoConfig and run the demo against it"""
    return run(
        config.store.init(),
        variant=config.variant,
        drop=config.drop,
        contains=config.contains,
    )
