"""Typed content values — what a field definition holds once populated.

Each value class carries a ``TYPE`` tag matching the
:class:`~cmsmap.content_model.FieldType` it is built for. Pydantic does the
coercion from raw API data (ISO date strings, numeric strings, etc.).
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal as _Decimal
from typing import Any, ClassVar

from pydantic import BaseModel, Field


class ContentValue(BaseModel):
    """Base class for populated content field values."""

    TYPE: ClassVar[str] = ""

    name: str

    def get_value(self) -> Any:
        return getattr(self, "value", None)

    def __str__(self) -> str:
        value = self.get_value()
        return "" if value is None else str(value)


class Text(ContentValue):
    """Rich text (may contain HTML)."""

    TYPE: ClassVar[str] = "text"

    value: str = ""


class PlainText(ContentValue):
    """Plain text with no markup."""

    TYPE: ClassVar[str] = "plaintext"

    value: str = ""


class Number(ContentValue):
    TYPE: ClassVar[str] = "number"

    value: int | float


class Decimal(ContentValue):
    TYPE: ClassVar[str] = "decimal"

    value: _Decimal


class Boolean(ContentValue):
    TYPE: ClassVar[str] = "boolean"

    value: bool


class Date(ContentValue):
    """A calendar date, with an optional display format from the field options."""

    TYPE: ClassVar[str] = "date"

    value: date
    format: str = "%Y-%m-%d"

    def __str__(self) -> str:
        return self.value.strftime(self.format)


class DateTime(ContentValue):
    TYPE: ClassVar[str] = "datetime"

    value: datetime
    format: str = "%Y-%m-%d %H:%M:%S"

    def __str__(self) -> str:
        return self.value.strftime(self.format)


class Image(ContentValue):
    """An image reference."""

    TYPE: ClassVar[str] = "image"

    url: str
    alt: str = ""
    width: int | None = None
    height: int | None = None

    def get_value(self) -> str:
        return self.url


class Document(ContentValue):
    """A downloadable file reference."""

    TYPE: ClassVar[str] = "document"

    url: str
    title: str = ""
    mime_type: str = ""
    file_size: int | None = None

    def get_value(self) -> str:
        return self.url


class Relation(ContentValue):
    """A reference to another piece of content by ID."""

    TYPE: ClassVar[str] = "relation"

    value: str | int
    content_type: str = ""


class ArrayContent(ContentValue):
    """A repeating group of child values, one mapping per row."""

    TYPE: ClassVar[str] = "array"

    value: list[dict[str, ContentValue]] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return f"{len(self.value)} items"


CONTENT_VALUE_TYPES: dict[str, type[ContentValue]] = {
    cls.TYPE: cls
    for cls in (
        Text,
        PlainText,
        Number,
        Decimal,
        Boolean,
        Date,
        DateTime,
        Image,
        Document,
        Relation,
        ArrayContent,
    )
}
