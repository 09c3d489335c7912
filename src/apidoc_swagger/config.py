"""Conversion settings.

Settings come from an optional YAML/JSON file and CLI flags; flags win.

    generateDefinitions: true
    ignoredGroupNames:
      - Login
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from apidoc_swagger.parser.base import BODY_GROUP, HEADER_GROUP, PARAMETER_GROUP

RESERVED_GROUPS = (PARAMETER_GROUP, BODY_GROUP, HEADER_GROUP)


class ConversionConfig(BaseModel):
    """Options of the top-level conversion."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    generate_definitions: bool = Field(default=True, alias="generateDefinitions")
    ignored_group_names: list[str] = Field(default_factory=list, alias="ignoredGroupNames")

    def ignore_groups(self) -> list[str] | None:
        """Lower-cased group names kept out of shared definitions.

        None when definitions are disabled, meaning every group is treated
        as plain parameters.
        """
        if not self.generate_definitions:
            return None
        groups = [name.lower() for name in self.ignored_group_names]
        groups.extend(name.lower() for name in RESERVED_GROUPS if name.lower() not in groups)
        return groups


def load_config(file_path: Path) -> ConversionConfig:
    """Load a ConversionConfig from a YAML or JSON file."""
    data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    return ConversionConfig(**(data or {}))
