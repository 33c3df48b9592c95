"""Test the demo errors"""

import pytest

from mongo_arrays.errors import (
    ArraysDemoError,
    ConfigError,
    ConnectionFailedError,
    CountError,
    DocumentShapeError,
    DropError,
    FindError,
    InsertError,
    StoreNotConnectedError,
)


@pytest.mark.parametrize(
    "error",
    [
        ConnectionFailedError,
        StoreNotConnectedError,
        CountError,
        InsertError,
        DropError,
        FindError,
        DocumentShapeError,
        ConfigError,
    ],
)
def test_errors_share_base(error):
    """Every error is caught by the top level handler and names its target"""
    err = error("arrays")
    assert isinstance(err, ArraysDemoError)
    assert str(err).endswith(" arrays")
    assert err.target == "arrays"


def test_custom_message():
    """A message given on construction replaces the default one"""
    assert str(CountError("arrays", "count timed out for")) == (
        "count timed out for arrays"
    )
