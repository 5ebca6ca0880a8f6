"""Content types: named schemas with fields and an API endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cmsmap.content_model.collection import ContentFieldCollection


class ContentType(ContentFieldCollection):
    """A named content type (e.g. news article, case study).

    Carries the field definitions for the type and the API endpoint the
    content is read from.
    """

    def __init__(
        self,
        name: str,
        api_endpoint: str = "",
        content_fields: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__()
        self.name = name
        self._api_endpoint = api_endpoint
        if content_fields:
            self.add_content_fields(content_fields)

    def get_api_endpoint(self) -> str:
        return self._api_endpoint

    def set_api_endpoint(self, api_endpoint: str) -> None:
        self._api_endpoint = api_endpoint

    def __repr__(self) -> str:
        return (
            f"ContentType(name={self.name!r}, api_endpoint={self._api_endpoint!r}, "
            f"fields={self.names()!r})"
        )
