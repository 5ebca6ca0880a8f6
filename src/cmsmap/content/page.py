"""Content objects handed to the presentation layer."""

from __future__ import annotations

from collections.abc import Iterator

from cmsmap.content.fields import ContentValue
from cmsmap.content_model.content_type import ContentType
from cmsmap.errors import ContentTypeNotSetError


class BaseContent:
    """A content object bound to one content type.

    Field values are added after the object is created and bound, never
    before.
    """

    def __init__(self) -> None:
        self.id: str | int | None = None
        self.title: str = ""
        self._content_type: ContentType | None = None
        self._content: dict[str, ContentValue] = {}

    def set_content_type(self, content_type: ContentType) -> None:
        self._content_type = content_type

    def get_content_type(self) -> ContentType:
        if self._content_type is None:
            raise ContentTypeNotSetError("Content type is not set on this content object")
        return self._content_type

    def has_content_type(self) -> bool:
        return self._content_type is not None

    def add_content(self, value: ContentValue) -> None:
        """Set a field value, replacing any existing value with the same name."""
        self._content[value.name] = value

    def get_content(self, name: str) -> ContentValue | None:
        return self._content.get(name)

    def has_content(self, name: str) -> bool:
        return name in self._content

    @property
    def content(self) -> dict[str, ContentValue]:
        return dict(self._content)

    def __getitem__(self, name: str) -> ContentValue:
        return self._content[name]

    def __iter__(self) -> Iterator[ContentValue]:
        return iter(self._content.values())

    def __len__(self) -> int:
        return len(self._content)


class Page(BaseContent):
    """A page of content (news article, case study, landing page...)."""

    def __init__(self) -> None:
        super().__init__()
        self.url_slug: str = ""

    def __repr__(self) -> str:
        content_type = self._content_type.name if self._content_type else None
        return f"Page(id={self.id!r}, content_type={content_type!r}, fields={list(self._content)!r})"
