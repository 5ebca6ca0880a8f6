"""Field populators that map raw API payloads through the content model."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from cmsmap.content.fields import CONTENT_VALUE_TYPES, ArrayContent, ContentValue
from cmsmap.content.page import BaseContent, Page
from cmsmap.content_model.array_field import ArrayField
from cmsmap.content_model.collection import ContentFieldCollection, FieldDefinition
from cmsmap.content_model.fields import FieldType
from cmsmap.errors import ContentMappingError

logger = logging.getLogger(__name__)

# Field types whose raw value may be a mapping of attributes (url, alt, ...)
_ATTRIBUTE_TYPES = {FieldType.IMAGE, FieldType.DOCUMENT}


class SchemaFieldPopulator:
    """Populate content fields by walking the bound content type's fields.

    Expects a flat payload keyed by field name, with ``id``, ``title`` and
    ``slug`` read into the content object itself. Fields missing from the
    payload (or set to null) are skipped; payload keys with no field
    definition are ignored.
    """

    def set_content_fields(self, page: BaseContent, data: Mapping[str, Any]) -> None:
        content_type = page.get_content_type()

        if "id" in data:
            page.id = data["id"]
        if isinstance(data.get("title"), str):
            page.title = data["title"]
        if isinstance(page, Page) and isinstance(data.get("slug"), str):
            page.url_slug = data["slug"]

        for value in self.map_fields(content_type, data):
            page.add_content(value)

    def map_fields(
        self, fields: ContentFieldCollection, data: Mapping[str, Any]
    ) -> list[ContentValue]:
        """Map every defined field present in ``data`` to a content value."""
        values: list[ContentValue] = []
        for field in fields:
            raw = data.get(field.name)
            if raw is None:
                continue
            values.append(self.map_field(field, raw))
        return values

    def map_field(self, field: FieldDefinition, raw: Any) -> ContentValue:
        """Map one raw value to the content value for its field type.

        Raises:
            ContentMappingError: If the value does not fit the declared type.
        """
        if isinstance(field, ArrayField):
            return self._map_array(field, raw)

        field_type = FieldType(field.get_type())
        payload = self._build_payload(field, field_type, raw)
        try:
            return CONTENT_VALUE_TYPES[field_type].model_validate(payload)
        except ValidationError as exc:
            raise ContentMappingError(
                f"Cannot map value for field {field.name!r} to type {field_type.value!r}: {exc}"
            ) from exc

    def _map_array(self, field: ArrayField, raw: Any) -> ArrayContent:
        if not isinstance(raw, list):
            raise ContentMappingError(
                f"Array field {field.name!r} expects a list, got {type(raw).__name__}"
            )
        rows: list[dict[str, ContentValue]] = []
        for index, row in enumerate(raw):
            if not isinstance(row, Mapping):
                raise ContentMappingError(
                    f"Row {index} of array field {field.name!r} must be a mapping"
                )
            rows.append({value.name: value for value in self.map_fields(field, row)})
        logger.debug("Mapped %d rows for array field %s", len(rows), field.name)
        return ArrayContent(name=field.name, value=rows)

    def _build_payload(self, field: FieldDefinition, field_type: FieldType, raw: Any) -> dict:
        if field_type is FieldType.NUMBER and isinstance(raw, bool):
            raise ContentMappingError(f"Field {field.name!r} expects a number, got a boolean")

        if field_type in _ATTRIBUTE_TYPES:
            if isinstance(raw, Mapping):
                return {**raw, "name": field.name}
            return {"name": field.name, "url": raw}

        payload: dict[str, Any] = {"name": field.name, "value": raw}
        if field_type is FieldType.RELATION:
            if isinstance(raw, Mapping):
                payload["value"] = raw.get("id")
            related = field.get_option("content_type")
            if related:
                payload["content_type"] = related
        elif field_type in (FieldType.DATE, FieldType.DATETIME) and field.has_option("format"):
            payload["format"] = field.get_option("format")
        return payload
