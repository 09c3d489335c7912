"""Schema synthesizer.

Decides whether a field list is a scalar, an array or an object tree and
produces the schema node for it: inline for scalars, ``$ref`` (or an array
of ``$ref``) for anything registered through the tree builder.
"""

from collections.abc import Sequence

from apidoc_swagger.parser.base import AnnotatedField
from apidoc_swagger.schema.classifier import ARRAY_TYPE, TypeKind, classify_type, is_array_type
from apidoc_swagger.schema.naming import definition_ref
from apidoc_swagger.schema.registry import DefinitionRegistry
from apidoc_swagger.schema.tree import build_definition_tree


def create_schema(
    fields: Sequence[AnnotatedField],
    definitions: DefinitionRegistry,
    def_name: str,
    obj_name: str | None = None,
    is_result: bool = False,
) -> dict:
    """Build the schema for one body, response payload or shared group.

    Response payloads (``is_result``) always go through the tree builder,
    since success fields rarely declare their container type.
    """
    obj_name = obj_name or def_name
    field_type = (fields[0].type or "") if fields else ""
    lowered = field_type.lower()

    if "object" in lowered or lowered == "array" or is_result:
        if lowered == "object[]":
            fields = [fields[0].model_copy(update={"type": ARRAY_TYPE}), *fields[1:]]
        tree = build_definition_tree(fields, definitions, def_name, obj_name)
        if tree.top_level_ref_type.lower() == "array":
            return {"type": "array", "items": {"$ref": definition_ref(tree.top_level_ref)}}
        return {"$ref": definition_ref(tree.top_level_ref)}

    return inline_schema(field_type, definitions)


def inline_schema(raw_type: str, definitions: DefinitionRegistry) -> dict:
    """Schema for a scalar, a scalar array or a reference to a known definition."""
    classified = classify_type(raw_type, definitions)
    if is_array_type(raw_type):
        if classified.kind == TypeKind.ARRAY_OF_REFERENCE:
            return {"type": "array", "items": {"$ref": definition_ref(classified.name)}}
        return {"type": "array", "items": {"type": classified.name.lower()}}
    if classified.kind == TypeKind.REFERENCE:
        return {"$ref": definition_ref(classified.name)}
    return {"type": classified.name}
