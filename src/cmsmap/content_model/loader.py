"""Load a content model from a TOML definition file.

Format::

    [content_types.news]
    api_endpoint = "posts"

    [content_types.news.content_fields.intro]
    type = "plaintext"

    [content_types.news.content_fields.sections]
    type = "array"

    [content_types.news.content_fields.sections.content_fields.heading]
    type = "text"

Any error halts loading; a partially built model is never returned.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cmsmap.content_model.content_type import ContentType
from cmsmap.content_model.model import ContentModel
from cmsmap.errors import ConfigParsingError

logger = logging.getLogger(__name__)


def parse_content_model(data: Mapping[str, Any]) -> ContentModel:
    """Build a ContentModel from already-parsed content model data.

    Raises:
        ConfigParsingError: If the data is malformed, declares an unknown
            field type, or repeats a field name within one collection.
    """
    content_types = data.get("content_types")
    if not isinstance(content_types, Mapping) or not content_types:
        raise ConfigParsingError("Content model must declare at least one [content_types] table")

    model = ContentModel()
    for name, definition in content_types.items():
        if not isinstance(definition, Mapping):
            raise ConfigParsingError(f"Definition for content type {name!r} must be a table")
        api_endpoint = definition.get("api_endpoint", "")
        if not isinstance(api_endpoint, str):
            raise ConfigParsingError(f"api_endpoint for content type {name!r} must be a string")
        fields = definition.get("content_fields", {})
        if not isinstance(fields, Mapping):
            raise ConfigParsingError(f"content_fields for content type {name!r} must be a table")
        model.add_content_type(ContentType(name, api_endpoint, fields))
    return model


def load_content_model(path: str | Path) -> ContentModel:
    """Load a content model from a TOML file.

    Args:
        path: Path to the content model file.

    Returns:
        The fully validated ContentModel.

    Raises:
        ConfigParsingError: If the file cannot be read or parsed, or the
            definition is invalid.
    """
    model_path = Path(path)
    try:
        with open(model_path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        raise ConfigParsingError(f"Failed to read content model {model_path}: {exc}") from exc

    model = parse_content_model(data)
    logger.info("Loaded content model from %s (%d content types)", model_path, len(model))
    return model
