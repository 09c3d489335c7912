"""Name helpers: dotted field paths, definition names and description text."""

import re
from typing import NamedTuple

DEFINITIONS_PREFIX = "#/definitions/"

TAGS_PATTERN = re.compile(r"(<([^>]+)>)", re.IGNORECASE)


class NestedName(NamedTuple):
    """A dotted path split into its owning object and leaf property.

    ``object_name`` is None when the path has no dot; callers substitute
    their own container name.
    """

    object_name: str | None
    property_name: str


def split_nested_name(field: str) -> NestedName:
    """Split ``user.address.city`` into ``("user.address", "city")``."""
    segments = field.split(".")
    if len(segments) > 1:
        return NestedName(".".join(segments[:-1]), segments[-1])
    return NestedName(None, field)


def definition_ref(name: str) -> str:
    return DEFINITIONS_PREFIX + name


def to_camel_case(text: str) -> str:
    """'Some text value' -> 'SomeTextValue'."""
    return "".join(part[0].upper() + part[1:] if part else "" for part in text.split(" "))


def remove_tags(text: str | None) -> str | None:
    """Strip HTML tags (apiDoc wraps descriptions in <p>) from text."""
    return TAGS_PATTERN.sub("", text) if text else text
