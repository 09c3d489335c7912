"""Definition tree builder.

Folds an ordered list of dotted fields into named object definitions::

    user          Object     -> definitions["user"]
    user.name     String     -> definitions["user"].properties["name"]
    user.address  Object     -> ... properties["address"] = {$ref: user.address}
    user.address.city String -> definitions["user.address"].properties["city"]

The first row elects the top-level definition, so callers put the root row
first.
"""

from collections.abc import Sequence

from pydantic import BaseModel

from apidoc_swagger.parser.base import AnnotatedField
from apidoc_swagger.schema.classifier import ARRAY_TYPE, OBJECT_TYPE, TypeKind, classify_type
from apidoc_swagger.schema.naming import definition_ref, remove_tags, split_nested_name
from apidoc_swagger.schema.registry import DefinitionRegistry

DEFAULT_SCALAR_TYPE = "string"


class DefinitionTree(BaseModel):
    """Where the folded tree starts and what shape its root has."""

    top_level_ref: str
    top_level_ref_type: str = ""  # "array", or the raw type of the first field


def build_definition_tree(
    fields: Sequence[AnnotatedField],
    definitions: DefinitionRegistry,
    top_level_ref: str,
    default_object_name: str,
    elect_root: bool = True,
) -> DefinitionTree:
    """Register every object described by ``fields`` in ``definitions``.

    With ``elect_root`` off the first row is an ordinary row and
    ``top_level_ref`` is kept as given.
    """
    result = DefinitionTree(top_level_ref=top_level_ref)

    for index, item in enumerate(fields):
        object_name, property_name = split_nested_name(item.field)
        if not object_name:
            object_name = default_object_name
        raw_type = item.type or ""

        if index == 0 and elect_root:
            result.top_level_ref_type = raw_type
            # A bare Object/Array first row names the whole payload
            if raw_type in (OBJECT_TYPE, ARRAY_TYPE):
                object_name = property_name
                property_name = None
                if raw_type == ARRAY_TYPE:
                    result.top_level_ref_type = "array"
            result.top_level_ref = object_name

        definitions.ensure(object_name)
        if not property_name:
            continue

        definitions.add_property(object_name, property_name, property_schema(item, definitions))
        if not item.optional:
            definitions.require(object_name, property_name)

    return result


def property_schema(item: AnnotatedField, definitions: DefinitionRegistry) -> dict:
    """Build the schema of one leaf property."""
    classified = classify_type(item.type, definitions)
    description = remove_tags(item.description)

    if classified.kind == TypeKind.OBJECT:
        return {"type": "object", "description": description, "$ref": definition_ref(item.field)}
    if classified.kind == TypeKind.ARRAY_OF_OBJECT:
        items = {"$ref": definition_ref(item.field)}
    elif classified.kind == TypeKind.ARRAY_OF_REFERENCE:
        items = {"$ref": definition_ref(classified.name)}
    elif classified.kind == TypeKind.ARRAY_OF_SCALAR:
        items = {"type": classified.name or DEFAULT_SCALAR_TYPE}
    elif classified.kind == TypeKind.REFERENCE:
        return {"type": classified.name.lower(), "description": description, "$ref": definition_ref(classified.name)}
    else:
        return {"type": classified.name or DEFAULT_SCALAR_TYPE, "description": description}
    return {"type": "array", "description": description, "items": items}
