"""Document orchestrator: apiDoc endpoints -> Swagger 2.0 document."""

import logging
import re

from apidoc_swagger.config import ConversionConfig
from apidoc_swagger.generator.context import ConversionContext
from apidoc_swagger.generator.endpoint import assemble_operation
from apidoc_swagger.parser.base import ApiDocEndpoint, ProjectInfo
from apidoc_swagger.schema.tree import build_definition_tree

logger = logging.getLogger(__name__)

SWAGGER_VERSION = "2.0"
DEFAULT_SCHEMES = ["http", "https"]

# apiDoc placeholders look like /users/:id; ports (":8080") are not placeholders
PATH_PARAM_PATTERN = re.compile(r":([A-Za-z_]\w*)")


def to_swagger(
    endpoints: list[ApiDocEndpoint],
    project: ProjectInfo | None = None,
    config: ConversionConfig | None = None,
    context: ConversionContext | None = None,
) -> dict:
    """Convert apiDoc endpoints into a Swagger 2.0 document.

    Pass a ``context`` to read the diagnostics collected along the way.
    """
    context = context or ConversionContext(config)
    config = config or context.config
    project = project or ProjectInfo()

    document: dict = {"swagger": SWAGGER_VERSION, "info": build_info(project)}
    if project.url:
        document.update(split_base_url(project.url))

    ignore_groups = config.ignore_groups()
    if ignore_groups is not None:
        extract_definitions(endpoints, context, ignore_groups)

    document["paths"] = extract_paths(endpoints, context, ignore_groups)
    document["definitions"] = context.definitions.to_dict()
    logger.info("Converted %d endpoints into %d paths and %d definitions",
                len(endpoints), len(document["paths"]), len(document["definitions"]))
    return document


def build_info(project: ProjectInfo) -> dict:
    return {
        "title": project.title or project.name,
        "version": project.version,
        "description": project.description,
    }


def split_base_url(url: str) -> dict:
    """Split ``https://api.example.com/v1`` into host, basePath and schemes."""
    result = {}
    scheme_end = url.find("://")
    if scheme_end >= 0:
        schemes = [url[:scheme_end]]
        url = url[scheme_end + 3:]
    else:
        schemes = list(DEFAULT_SCHEMES)

    path_start = url.find("/")
    if path_start >= 0:
        host, base_path = url[:path_start], url[path_start:]
    else:
        host, base_path = url, "/"
    if host:
        result["host"] = host
    result["basePath"] = base_path
    result["schemes"] = schemes
    return result


def to_path_template(url: str) -> tuple[str, list[str]]:
    """Rewrite ``/users/:id`` to ``/users/{id}``; also return the placeholder names."""
    keys = PATH_PARAM_PATTERN.findall(url)
    return PATH_PARAM_PATTERN.sub(r"{\1}", url), keys


def group_by_url(endpoints: list[ApiDocEndpoint]) -> dict[str, list[ApiDocEndpoint]]:
    groups: dict[str, list[ApiDocEndpoint]] = {}
    for endpoint in endpoints:
        groups.setdefault(endpoint.url, []).append(endpoint)
    return groups


def extract_definitions(endpoints: list[ApiDocEndpoint], context: ConversionContext, ignore_groups: list[str]) -> None:
    """Register every non-reserved parameter group as a shared definition.

    ``@apiParam (Address) {String} city`` becomes ``definitions["Address"]``
    with a ``city`` property; later endpoints can reference it by type.
    """
    for endpoint in endpoints:
        if not endpoint.parameter:
            continue
        for group, fields in endpoint.parameter.fields.items():
            if group.lower() in ignore_groups or not fields:
                continue
            # The group name is the root as-is, even when it contains dots (v1.Address)
            rows = [item.model_copy(update={"field": f"{group}.{item.field}"}) for item in fields]
            context.definitions.ensure(group)
            build_definition_tree(rows, context.definitions, group, group, elect_root=False)


def extract_paths(
    endpoints: list[ApiDocEndpoint],
    context: ConversionContext,
    ignore_groups: list[str] | None,
) -> dict[str, dict]:
    paths: dict[str, dict] = {}
    for url, verbs in group_by_url(endpoints).items():
        template, path_keys = to_path_template(url)
        path_item = paths.setdefault(template, {})
        for endpoint in verbs:
            verb, operation = assemble_operation(endpoint, path_keys, context, ignore_groups)
            context.definitions.policy.merge_operation(path_item, verb, operation)
    return paths
