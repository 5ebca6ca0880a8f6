"""Array field definitions: fields that hold a nested field collection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cmsmap.content_model.collection import ContentFieldCollection
from cmsmap.content_model.fields import FieldType
from cmsmap.errors import UnimplementedOperationError


class ArrayField(ContentFieldCollection):
    """A repeating group of child fields.

    Each row of an array field's value carries the child fields declared
    here. Children may themselves be array fields, nesting one level per
    ArrayField.
    """

    def __init__(self, name: str, content_fields: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self.name = name
        self._type = FieldType.ARRAY
        if content_fields:
            self.add_content_fields(content_fields)

    def get_type(self) -> str:
        return self._type.value

    def get_option(self, name: str) -> None:
        return None

    def has_option(self, name: str) -> bool:
        return False

    def valid_content_fields(self, field_type: str) -> bool:
        return super().valid_content_fields(field_type)

    def add_content_fields(self, content_fields: Mapping[str, Any]) -> None:
        """Add child fields from a name → definition mapping."""
        super().add_content_fields(content_fields)

    def get_api_endpoint(self) -> str:
        raise UnimplementedOperationError(
            f"{type(self).__name__}.get_api_endpoint is not implemented, "
            "only content types have an API endpoint"
        )

    def set_api_endpoint(self, api_endpoint: str) -> None:
        raise UnimplementedOperationError(
            f"{type(self).__name__}.set_api_endpoint is not implemented, "
            "only content types have an API endpoint"
        )

    def __repr__(self) -> str:
        return f"ArrayField(name={self.name!r}, fields={self.names()!r})"
