"""Shared definitions mapping and the merge rules applied to it.

One :class:`DefinitionRegistry` lives for a whole conversion. Every
endpoint may read it (reference detection) and extend it; nothing is ever
removed. All merging goes through a :class:`MergePolicy` so the rules can
be tested without walking a document:

* properties: keep the first schema written under a name
* required: union, each name at most once
* path items: a later operation for the same verb replaces the earlier one
* responses: a later entry's fields overwrite an earlier entry's fields
"""

import logging
from collections.abc import Iterator

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ObjectDefinition(BaseModel):
    """A named object schema under ``#/definitions``."""

    properties: dict[str, dict] = {}
    required: list[str] = []


class MergePolicy:
    """Merge rules for definitions, path items and responses."""

    def merge_property(self, definition: ObjectDefinition, name: str, schema: dict) -> bool:
        """Add a property unless one with that name exists. Returns True if added."""
        if name in definition.properties:
            return False
        definition.properties[name] = schema
        return True

    def merge_required(self, definition: ObjectDefinition, name: str) -> bool:
        if name in definition.required:
            return False
        definition.required.append(name)
        return True

    def merge_operation(self, path_item: dict, verb: str, operation: dict) -> dict:
        path_item[verb] = operation
        return path_item

    def merge_responses(self, *response_maps: dict) -> dict:
        merged: dict[str, dict] = {}
        for responses in response_maps:
            for key, entry in responses.items():
                merged.setdefault(key, {}).update(entry)
        return merged


class DefinitionRegistry:
    """The single, mutable ``definitions`` mapping of a conversion."""

    def __init__(self, policy: MergePolicy | None = None):
        self.policy = policy or MergePolicy()
        self._definitions: dict[str, ObjectDefinition] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __getitem__(self, name: str) -> ObjectDefinition:
        return self._definitions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def ensure(self, name: str) -> ObjectDefinition:
        """Return the definition called ``name``, creating an empty one if absent."""
        definition = self._definitions.get(name)
        if definition is None:
            logger.debug("Registering definition %r", name)
            definition = self._definitions[name] = ObjectDefinition()
        return definition

    def add_property(self, name: str, property_name: str, schema: dict) -> bool:
        added = self.policy.merge_property(self.ensure(name), property_name, schema)
        if not added:
            logger.debug("Keeping existing property %r of %r", property_name, name)
        return added

    def require(self, name: str, property_name: str) -> bool:
        return self.policy.merge_required(self.ensure(name), property_name)

    def to_dict(self) -> dict[str, dict]:
        return {name: definition.model_dump() for name, definition in self._definitions.items()}
