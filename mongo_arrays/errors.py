"""Custom Errors for the arrays demo"""


class ArraysDemoError(Exception):
    """Base class for all errors raised by the arrays demo"""

    _DEFAULT_MESSAGE = "arrays demo error"

    def __init__(self, target: str, msg: str = "") -> None:
        msg = msg if msg else self._DEFAULT_MESSAGE
        self.target = target
        self.msg = f"{msg} {target}"
        super().__init__(self.msg)

    def __str__(self) -> str:
        return self.msg


class ConnectionFailedError(ArraysDemoError):
    """Error raised if the database server can not be reached"""

    _DEFAULT_MESSAGE = (
        "Make sure your mongod is up and running, could not connect to:"
    )


class StoreNotConnectedError(ArraysDemoError):
    """Error raised if a store is used before it was connected or after it was
    closed"""

    _DEFAULT_MESSAGE = "Store is not connected for collection:"


class CountError(ArraysDemoError):
    """Error raised if counting the documents of a collection fails"""

    _DEFAULT_MESSAGE = "Could not count collection:"


class InsertError(ArraysDemoError):
    """Error raised if inserting a document into a collection fails"""

    _DEFAULT_MESSAGE = "Could not insert document into collection:"


class DropError(ArraysDemoError):
    """Error raised if dropping a collection fails"""

    _DEFAULT_MESSAGE = "Could not drop collection:"


class FindError(ArraysDemoError):
    """Error raised if querying a collection fails"""

    _DEFAULT_MESSAGE = "Could not query collection:"


class DocumentShapeError(ArraysDemoError):
    """Error raised if a stored document has none of the known array fields"""

    _DEFAULT_MESSAGE = "Document has no known array field, keys:"


class ConfigError(ArraysDemoError):
    """Error raised if a configuration can not be read or is invalid"""

    _DEFAULT_MESSAGE = "Invalid configuration:"
