"""Content model — content types and their field definitions."""

from cmsmap.content_model.array_field import ArrayField
from cmsmap.content_model.collection import ContentFieldCollection, FieldDefinition
from cmsmap.content_model.content_type import ContentType
from cmsmap.content_model.fields import FIELD_TYPES, ContentField, FieldType
from cmsmap.content_model.loader import load_content_model, parse_content_model
from cmsmap.content_model.model import ContentModel

__all__ = [
    "FIELD_TYPES",
    "ArrayField",
    "ContentField",
    "ContentFieldCollection",
    "ContentModel",
    "ContentType",
    "FieldDefinition",
    "FieldType",
    "load_content_model",
    "parse_content_model",
]
