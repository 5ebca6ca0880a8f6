"""Content objects and typed field values produced from API data."""

from cmsmap.content.fields import (
    CONTENT_VALUE_TYPES,
    ArrayContent,
    Boolean,
    ContentValue,
    Date,
    DateTime,
    Decimal,
    Document,
    Image,
    Number,
    PlainText,
    Relation,
    Text,
)
from cmsmap.content.page import BaseContent, Page

__all__ = [
    "CONTENT_VALUE_TYPES",
    "ArrayContent",
    "BaseContent",
    "Boolean",
    "ContentValue",
    "Date",
    "DateTime",
    "Decimal",
    "Document",
    "Image",
    "Number",
    "Page",
    "PlainText",
    "Relation",
    "Text",
]
