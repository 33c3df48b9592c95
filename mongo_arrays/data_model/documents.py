"""
Pydantic models for the documents stored in the arrays collection
"""

from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict

from ..errors import DocumentShapeError

SAMPLE_INT_ARRAY = (1, 2, 3, 4)
SAMPLE_STRING_ARRAY = ("bernie", "ernie", "dottie")


class ArrayDocument(BaseModel):
    """Base model for documents that hold a single array field

    Subclasses declare the array field and set ``array_field`` to its name,
    the name is used both as the model field and as the key in the stored
    document.
    """

    model_config = ConfigDict(frozen=True)

    array_field: ClassVar[str]

    @property
    def array(self) -> tuple:
        """The values of the array field"""
        return getattr(self, self.array_field)

    def to_document(self) -> dict[str, Any]:
        """Serialize to a new dictionary that can be inserted into a collection

        Returns:
            dict[str, Any]: document with the array field as a list
        """
        return self.model_dump(mode="json")


class IntArrayDocument(ArrayDocument):
    """Document with an array of integers"""

    array_field: ClassVar[str] = "some_array"

    some_array: tuple[int, ...]

    @classmethod
    def sample(cls) -> "IntArrayDocument":
        """Create the document inserted by the demo"""
        return cls(some_array=SAMPLE_INT_ARRAY)


class StringArrayDocument(ArrayDocument):
    """Document with an array of strings, a different document type stored in
    the same collection"""

    array_field: ClassVar[str] = "string_array"

    string_array: tuple[str, ...]

    @classmethod
    def sample(cls) -> "StringArrayDocument":
        """Create the document inserted by the demo"""
        return cls(string_array=SAMPLE_STRING_ARRAY)


DOCUMENT_TYPES: dict[str, type[ArrayDocument]] = {
    IntArrayDocument.array_field: IntArrayDocument,
    StringArrayDocument.array_field: StringArrayDocument,
}


def parse_document(raw: Mapping[str, Any]) -> ArrayDocument:
    """Construct the value object matching a stored document

    The model is picked by which array field the document carries, other keys
    such as ``_id`` are ignored.

    Args:
        raw (Mapping[str, Any]): document as read from a collection

    Raises:
        DocumentShapeError: if the document has none of the known array fields

    Returns:
        ArrayDocument: the parsed document
    """
    for field, model in DOCUMENT_TYPES.items():
        if field in raw:
            return model.model_validate({field: raw[field]})
    raise DocumentShapeError(str(sorted(raw.keys())))
