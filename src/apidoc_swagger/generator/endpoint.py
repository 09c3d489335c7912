"""Endpoint assembler: one apiDoc endpoint -> one Swagger operation."""

import logging

from apidoc_swagger.generator.context import ConversionContext
from apidoc_swagger.generator.parameters import create_parameters
from apidoc_swagger.generator.responses import build_error_responses, build_success_responses
from apidoc_swagger.parser.base import BODY_GROUP, AnnotatedField, ApiDocEndpoint
from apidoc_swagger.schema.classifier import OBJECT_TYPE
from apidoc_swagger.schema.naming import remove_tags
from apidoc_swagger.schema.synthesizer import create_schema

logger = logging.getLogger(__name__)

WRITE_VERBS = ("post", "put", "patch")
VERB_ALIASES = {"del": "delete"}
JSON_MEDIA_TYPE = "application/json"


def normalize_verb(verb: str) -> str:
    verb = verb.lower()
    return VERB_ALIASES.get(verb, verb)


def collect_parameter_fields(endpoint: ApiDocEndpoint, ignore_groups: list[str] | None) -> list[AnnotatedField]:
    """Fold the endpoint's parameter groups into one list.

    With ``ignore_groups`` None every group counts. Otherwise only the
    ignored groups do; the others were turned into shared definitions.
    """
    if not endpoint.parameter:
        return []
    fields = []
    for group, group_fields in endpoint.parameter.fields.items():
        if ignore_groups is None or group.lower() in ignore_groups:
            fields.extend(group_fields)
    return fields


def collect_header_fields(endpoint: ApiDocEndpoint) -> list[AnnotatedField]:
    if not endpoint.header:
        return []
    return [item for group_fields in endpoint.header.fields.values() for item in group_fields]


def is_body_field(item: AnnotatedField) -> bool:
    return item.group.lower() == BODY_GROUP.lower()


def assemble_operation(
    endpoint: ApiDocEndpoint,
    path_keys: list[str],
    context: ConversionContext,
    ignore_groups: list[str] | None,
) -> tuple[str, dict]:
    """Build the operation for ``endpoint``. Returns ``(verb, operation)``."""
    verb = normalize_verb(endpoint.type)
    fields = collect_parameter_fields(endpoint, ignore_groups)

    if verb in WRITE_VERBS:
        parameters = _write_parameters(endpoint, fields, path_keys, context)
    else:
        parameters = _read_parameters(fields, path_keys)
    parameters.extend(create_parameters(collect_header_fields(endpoint), "header"))

    operation = {
        "tags": [endpoint.group],
        "summary": remove_tags(endpoint.title),
        "description": remove_tags(endpoint.description),
        "consumes": [JSON_MEDIA_TYPE],
        "produces": [JSON_MEDIA_TYPE],
        "parameters": parameters,
        "responses": context.definitions.policy.merge_responses(
            build_success_responses(endpoint, context),
            build_error_responses(endpoint, context),
        ),
        "operationId": endpoint.name,
    }
    return verb, operation


def _read_parameters(fields: list[AnnotatedField], path_keys: list[str]) -> list[dict]:
    path_fields = [item for item in fields if item.field in path_keys]
    query_fields = [item for item in fields if item.field not in path_keys]
    return create_parameters(path_fields, "path") + create_parameters(query_fields, "query")


def _write_parameters(
    endpoint: ApiDocEndpoint,
    fields: list[AnnotatedField],
    path_keys: list[str],
    context: ConversionContext,
) -> list[dict]:
    path_fields = [item for item in fields if item.field in path_keys and not is_body_field(item)]
    parameters = create_parameters(path_fields, "path")

    body_name = endpoint.name + "Body"
    body_rows = _collapse_implicit_root([item for item in fields if is_body_field(item)])
    # Prefixing keeps nested body objects apart from other endpoints' definitions
    body_fields = [item.model_copy(update={"field": f"{body_name}.{item.field}"}) for item in body_rows]
    if body_fields:
        root = AnnotatedField(field=body_name, type=OBJECT_TYPE, group=BODY_GROUP)
        parameters.append(
            {
                "in": "body",
                "name": body_name,
                "description": remove_tags(endpoint.description),
                "required": True,
                "schema": create_schema([root, *body_fields], context.definitions, body_name, body_name),
            }
        )

    dropped = len(fields) - len(path_fields) - len(body_fields)
    if dropped:
        logger.debug("%s %s: %d parameter(s) are neither path nor body fields", endpoint.type, endpoint.url, dropped)
    return parameters


def _collapse_implicit_root(body_fields: list[AnnotatedField]) -> list[AnnotatedField]:
    """Drop a top-level prefix shared by every body row but declared by none.

    ``user.name`` and ``user.age`` without a ``user`` row describe the body
    itself, so they become ``name`` and ``age`` of the body definition.
    """
    if not body_fields or any("." not in item.field for item in body_fields):
        return body_fields
    prefixes = {item.field.split(".", 1)[0] for item in body_fields}
    if len(prefixes) != 1:
        return body_fields
    prefix = prefixes.pop()
    logger.debug("Body fields share the undeclared root %r; collapsing it", prefix)
    return [item.model_copy(update={"field": item.field[len(prefix) + 1:]}) for item in body_fields]
