"""Swagger parameter objects for path, query and header fields."""

from collections.abc import Iterable

from apidoc_swagger.parser.base import AnnotatedField
from apidoc_swagger.schema.naming import remove_tags

DEFAULT_PARAM_TYPE = "string"


def create_parameters(fields: Iterable[AnnotatedField], location: str) -> list[dict]:
    return [_create_parameter(item, location) for item in fields]


def _create_parameter(item: AnnotatedField, location: str) -> dict:
    param_type = item.type.lower() if item.type else DEFAULT_PARAM_TYPE
    param = {
        "name": item.field,
        "in": location,
        # Swagger 2.0 only allows required path parameters
        "required": True if location == "path" else not item.optional,
        "type": param_type,
        "description": remove_tags(item.description),
    }
    if param_type.endswith("[]"):
        param["type"] = "array"
        param["items"] = {"type": param_type[:-2] or DEFAULT_PARAM_TYPE}
    if item.allowed_values:
        param["enum"] = [_unquote(value) for value in item.allowed_values]
    if item.default_value is not None:
        param["default"] = _unquote(item.default_value)
    return param


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value
