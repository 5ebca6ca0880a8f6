"""The set of content types a site declares."""

from __future__ import annotations

from collections.abc import Iterator

from cmsmap.content_model.content_type import ContentType
from cmsmap.errors import ConfigParsingError


class ContentModel:
    """Mapping of content type name to ContentType.

    Names are unique and lookups are case-sensitive.
    """

    def __init__(self, content_types: list[ContentType] | None = None) -> None:
        self._content_types: dict[str, ContentType] = {}
        for content_type in content_types or []:
            self.add_content_type(content_type)

    def add_content_type(self, content_type: ContentType) -> None:
        """Register a content type.

        Raises ConfigParsingError if the name is already registered.
        """
        if content_type.name in self._content_types:
            raise ConfigParsingError(f"Duplicate content type name {content_type.name!r}")
        self._content_types[content_type.name] = content_type

    def has_content_type(self, name: str) -> bool:
        return name in self._content_types

    def get_content_type(self, name: str) -> ContentType | None:
        """Return a content type by name, or None if not found."""
        return self._content_types.get(name)

    def names(self) -> list[str]:
        return list(self._content_types)

    def __iter__(self) -> Iterator[ContentType]:
        return iter(self._content_types.values())

    def __len__(self) -> int:
        return len(self._content_types)
