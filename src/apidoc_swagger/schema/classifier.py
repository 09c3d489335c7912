"""Type classifier for raw apiDoc type strings.

apiDoc types are free text: ``String``, ``Number[]``, ``Object``,
``Object[]`` or the name of a shared definition such as ``Address``.
Only the exact spellings ``Object`` and ``Array`` are structural; any other
name is either a reference to a definition that is *already* registered or
a lower-cased primitive. A type naming a definition that is registered
later classifies as a scalar (forward references are unsupported).
"""

from collections.abc import Container
from enum import Enum
from typing import NamedTuple

OBJECT_TYPE = "Object"
ARRAY_TYPE = "Array"
ARRAY_SUFFIX = "[]"


class TypeKind(str, Enum):
    SCALAR = "scalar"
    ARRAY_OF_SCALAR = "array_of_scalar"
    OBJECT = "object"
    ARRAY_OF_OBJECT = "array_of_object"
    REFERENCE = "reference"
    ARRAY_OF_REFERENCE = "array_of_reference"


class ClassifiedType(NamedTuple):
    kind: TypeKind
    name: str  # primitive token, or definition name for references

    @property
    def is_array(self) -> bool:
        return self.kind in (TypeKind.ARRAY_OF_SCALAR, TypeKind.ARRAY_OF_OBJECT, TypeKind.ARRAY_OF_REFERENCE)


def is_array_type(raw: str | None) -> bool:
    return bool(raw) and raw.endswith(ARRAY_SUFFIX)


def classify_type(raw: str | None, definitions: Container[str]) -> ClassifiedType:
    """Classify a raw type string against the definitions registered so far."""
    raw = raw or ""

    if is_array_type(raw):
        item = raw[: -len(ARRAY_SUFFIX)]
        if item.lower() == "object":
            return ClassifiedType(TypeKind.ARRAY_OF_OBJECT, item)
        if item in definitions:
            return ClassifiedType(TypeKind.ARRAY_OF_REFERENCE, item)
        return ClassifiedType(TypeKind.ARRAY_OF_SCALAR, item.lower())

    if raw == OBJECT_TYPE:
        return ClassifiedType(TypeKind.OBJECT, raw)
    if raw == ARRAY_TYPE:
        return ClassifiedType(TypeKind.ARRAY_OF_OBJECT, raw)
    if raw in definitions:
        return ClassifiedType(TypeKind.REFERENCE, raw)
    return ClassifiedType(TypeKind.SCALAR, raw.lower())
