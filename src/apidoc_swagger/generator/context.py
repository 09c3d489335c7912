"""Per-conversion state: the shared definitions and collected diagnostics."""

import logging
from enum import Enum

from pydantic import BaseModel

from apidoc_swagger.config import ConversionConfig
from apidoc_swagger.schema.registry import DefinitionRegistry

logger = logging.getLogger(__name__)


class MalformedFieldKind(str, Enum):
    """Non-fatal input problems the converter works around."""

    MISSING_CODE_DELIMITER = "missing_code_delimiter"  # error text without "<code>: "


class Diagnostic(BaseModel):
    kind: MalformedFieldKind
    message: str
    endpoint: str = ""


class ConversionContext:
    """Owns everything a conversion mutates.

    The document orchestrator creates one and hands it to the endpoint
    assembler; the schema engine only ever sees ``definitions``.
    """

    def __init__(self, config: ConversionConfig | None = None, definitions: DefinitionRegistry | None = None):
        self.config = config or ConversionConfig()
        self.definitions = definitions if definitions is not None else DefinitionRegistry()
        self.diagnostics: list[Diagnostic] = []

    def report(self, kind: MalformedFieldKind, message: str, endpoint: str = "") -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, message=message, endpoint=endpoint)
        logger.warning("%s: %s (%s)", endpoint or "<unnamed>", message, kind.value)
        self.diagnostics.append(diagnostic)
        return diagnostic
