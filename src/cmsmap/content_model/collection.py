"""Ordered, name-keyed collections of field definitions."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, Union

from cmsmap.content_model.fields import FIELD_TYPES, ContentField, FieldType
from cmsmap.errors import ConfigParsingError

if TYPE_CHECKING:
    from cmsmap.content_model.array_field import ArrayField

logger = logging.getLogger(__name__)

FieldDefinition = Union[ContentField, "ArrayField"]


class ContentFieldCollection:
    """Ordered set of field definitions with unique names.

    Shared by content types and array fields. Field names are unique per
    collection: adding a second field with an existing name raises
    :class:`ConfigParsingError` rather than overwriting the first.
    """

    def __init__(self) -> None:
        self._fields: dict[str, FieldDefinition] = {}

    # ── Validation ──────────────────────────────────────────────────

    def valid_content_fields(self, field_type: str) -> bool:
        """Is the passed name a known content field type?"""
        return field_type in FIELD_TYPES

    def parse_content_field_array(self, name: str, data: Mapping[str, Any]) -> FieldDefinition:
        """Build a field definition from raw content model data.

        Args:
            name: Field name.
            data: Raw definition, normally loaded from a content model file.
                  Must carry a ``type`` key; array fields carry their children
                  under ``content_fields``.

        Returns:
            A ContentField or ArrayField.

        Raises:
            ConfigParsingError: If the type is missing or unknown, or a child
                definition is invalid.
        """
        if not isinstance(data, Mapping):
            raise ConfigParsingError(f"Definition for field {name!r} must be a table")

        field_type = data.get("type")
        if not isinstance(field_type, str) or not self.valid_content_fields(field_type):
            raise ConfigParsingError(f"Invalid content field type {field_type!r} for field {name!r}")

        if field_type == FieldType.ARRAY:
            from cmsmap.content_model.array_field import ArrayField

            children = data.get("content_fields", {})
            if not isinstance(children, Mapping):
                raise ConfigParsingError(f"content_fields for array field {name!r} must be a table")
            return ArrayField(name, children)

        options = {k: v for k, v in data.items() if k != "type"}
        return ContentField(name, field_type, options)

    # ── Mutation ────────────────────────────────────────────────────

    def add_item(self, field: FieldDefinition) -> None:
        """Append a field definition.

        Raises ConfigParsingError if a field with the same name exists.
        """
        if field.name in self._fields:
            raise ConfigParsingError(f"Duplicate content field name {field.name!r}")
        self._fields[field.name] = field

    def add_content_fields(self, content_fields: Mapping[str, Any]) -> None:
        """Parse and append field definitions from a name → definition mapping."""
        for name, values in content_fields.items():
            self.add_item(self.parse_content_field_array(name, values))
        logger.debug("Added %d content fields", len(content_fields))

    # ── Access ──────────────────────────────────────────────────────

    def get(self, name: str) -> FieldDefinition | None:
        return self._fields.get(name)

    def names(self) -> list[str]:
        return list(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)
