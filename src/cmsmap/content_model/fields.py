"""Field definitions for the content model.

A field definition declares the name and type of one piece of content a
content type carries (e.g. a ``title`` text field). Values for these fields
live in :mod:`cmsmap.content`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from cmsmap.errors import ConfigParsingError


class FieldType(StrEnum):
    """Field types a content model may declare."""

    TEXT = "text"
    PLAINTEXT = "plaintext"
    NUMBER = "number"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    IMAGE = "image"
    DOCUMENT = "document"
    RELATION = "relation"
    ARRAY = "array"


FIELD_TYPES: frozenset[str] = frozenset(t.value for t in FieldType)


class ContentField:
    """A scalar field definition with a type tag and type-specific options.

    Options are whatever extra keys the content model file declares for the
    field, e.g. ``format`` for a date or ``content_type`` for a relation.
    """

    def __init__(self, name: str, field_type: str, options: dict[str, Any] | None = None) -> None:
        if field_type not in FIELD_TYPES:
            raise ConfigParsingError(f"Invalid content field type {field_type!r} for field {name!r}")
        if field_type == FieldType.ARRAY:
            raise ConfigParsingError(
                f"Field {name!r} is an array field, define it with ArrayField"
            )
        self.name = name
        self._type = FieldType(field_type)
        self._options: dict[str, Any] = dict(options or {})

    def get_type(self) -> str:
        return self._type.value

    def get_option(self, name: str) -> Any | None:
        """Return an option value, or None when the option is absent.

        Use :meth:`has_option` to tell an absent option from one set to None.
        """
        return self._options.get(name)

    def has_option(self, name: str) -> bool:
        return name in self._options

    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    def __repr__(self) -> str:
        return f"ContentField(name={self.name!r}, type={self._type.value!r})"
