"""Success and error response maps of an operation."""

from apidoc_swagger.generator.context import ConversionContext, MalformedFieldKind
from apidoc_swagger.parser.base import AnnotatedField, ApiDocEndpoint
from apidoc_swagger.schema.naming import remove_tags, to_camel_case
from apidoc_swagger.schema.synthesizer import create_schema

# apiDoc users write `@apiSuccess {null} null` to document an empty body
NO_BODY_SENTINEL = "null"
UNKNOWN_ERROR_CODE = "unknown"


def build_success_responses(endpoint: ApiDocEndpoint, context: ConversionContext) -> dict:
    """One response per success group, keyed by the group name ("Success 200")."""
    groups = endpoint.success.fields if endpoint.success else {}
    responses = {}
    for key, fields in groups.items():
        response = {"description": key}
        if _declares_payload(fields):
            name = endpoint.name + to_camel_case(key)
            response["schema"] = create_schema(fields, context.definitions, name, name, is_result=True)
        responses[key] = response
    return responses


def build_error_responses(endpoint: ApiDocEndpoint, context: ConversionContext) -> dict:
    """Error responses keyed by the code in "<code>: <text>" descriptions.

    Several errors with the same code share one response; their texts are
    joined with newlines in input order.
    """
    groups = endpoint.error.fields if endpoint.error else {}
    responses: dict[str, dict] = {}
    for fields in groups.values():
        for item in fields:
            code, text = _split_error(item, endpoint, context)
            if code in responses:
                responses[code]["description"] += "\n" + text
            else:
                responses[code] = {"description": text}
    return responses


def _declares_payload(fields: list[AnnotatedField]) -> bool:
    if not fields:
        return False
    first = fields[0]
    return bool(first.field) and first.field != NO_BODY_SENTINEL and bool(first.type) and first.type != NO_BODY_SENTINEL


def _split_error(item: AnnotatedField, endpoint: ApiDocEndpoint, context: ConversionContext) -> tuple[str, str]:
    description = remove_tags(item.description) or ""
    code, delimiter, text = description.partition(":")
    if not delimiter:
        context.report(
            MalformedFieldKind.MISSING_CODE_DELIMITER,
            f"error {item.field!r} has no '<code>: <text>' description: {description!r}",
            endpoint.name,
        )
        return UNKNOWN_ERROR_CODE, description
    return code.strip(), f"{item.field}:{text}"
