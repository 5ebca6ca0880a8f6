"""Content repository — resolves content types and maps API data to pages.

A repository holds request-scoped state (the bound content model, the
resolved content type and an optional explicit cache key). Use one
instance per logical request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from cmsmap.cms import cache_key
from cmsmap.cms.cache import DEFAULT_CACHE_LIFETIME, CacheStore
from cmsmap.cms.populators import SchemaFieldPopulator
from cmsmap.content.page import BaseContent, Page
from cmsmap.content_model.content_type import ContentType
from cmsmap.content_model.model import ContentModel
from cmsmap.errors import CacheNotSetError, ContentTypeNotSetError

logger = logging.getLogger(__name__)


@runtime_checkable
class FieldPopulator(Protocol):
    """Maps a raw API payload onto the fields of a content object.

    The payload shape is API-specific, so each content source supplies its
    own populator. The content object is already bound to its content type.
    """

    def set_content_fields(self, page: BaseContent, data: Mapping[str, Any]) -> None:
        ...


class ContentRepository:
    """Reads content for a content model and maps it to content objects."""

    def __init__(
        self,
        content_model: ContentModel | None = None,
        *,
        populator: FieldPopulator | None = None,
        cache: CacheStore | None = None,
        cache_lifetime: int = DEFAULT_CACHE_LIFETIME,
    ) -> None:
        self._populator = populator if populator is not None else SchemaFieldPopulator()
        self._content_model: ContentModel | None = content_model
        self._content_type: ContentType | None = None
        self._cache_key: str | None = None
        self._cache: CacheStore | None = cache
        self.cache_lifetime = cache_lifetime

    # ── Content model & type ─────────────────────────────────────

    def set_content_model(self, content_model: ContentModel) -> None:
        self._content_model = content_model

    def get_content_model(self) -> ContentModel:
        if self._content_model is None:
            raise ContentTypeNotSetError("Content model is not set!")
        return self._content_model

    def set_content_type(self, name: str) -> None:
        """Resolve the requested content type.

        Unknown names leave the current content type unchanged. Check
        :meth:`has_content_type` to find out whether resolution succeeded.
        """
        if self.content_type_exists(name):
            self._content_type = self.get_content_model().get_content_type(name)
            logger.debug("Resolved content type %s", name)
        else:
            logger.debug("Content type %s not found in content model", name)

    def get_content_type(self) -> ContentType:
        """Return the resolved content type.

        Raises:
            ContentTypeNotSetError: If no content model is bound or no
                content type has been resolved.
        """
        if not self.has_content_type():
            raise ContentTypeNotSetError("Content type is not set!")
        assert self._content_type is not None
        return self._content_type

    def content_type_exists(self, name: str) -> bool:
        if self._content_model is None:
            return False
        return self._content_model.has_content_type(name)

    def has_content_type(self) -> bool:
        """Do we have a content model and a resolved content type?"""
        return isinstance(self._content_model, ContentModel) and isinstance(
            self._content_type, ContentType
        )

    # ── Cache keys ───────────────────────────────────────────────

    def filter_cache_key(self, value: object) -> str:
        return cache_key.filter_cache_key(value)

    def build_cache_key(self, *params: Any) -> str:
        return cache_key.build_cache_key(*params)

    def set_cache_key(self, key: str) -> None:
        """Set an explicit cache key for the current request."""
        self._cache_key = self.filter_cache_key(key)

    def get_cache_key(self, *params: Any) -> str:
        """Return the explicit cache key, or build one from ``params``.

        Derived keys are rebuilt on every call.
        """
        if not self._cache_key:
            return self.build_cache_key(*params)
        return self._cache_key

    def clear_cache_key(self) -> None:
        self._cache_key = None

    # ── Cache store ──────────────────────────────────────────────

    def set_cache(self, cache: CacheStore) -> None:
        self._cache = cache

    def get_cache(self) -> CacheStore:
        if self._cache is None:
            raise CacheNotSetError("Cache store is not set!")
        return self._cache

    def has_cache(self) -> bool:
        return self._cache is not None

    # ── Content objects ──────────────────────────────────────────

    def create_page(self, data: Mapping[str, Any]) -> Page:
        """Create a page bound to the current content type and populate it.

        Raises:
            ContentTypeNotSetError: If no content type has been resolved.
        """
        page = Page()
        page.set_content_type(self.get_content_type())
        self.set_content_fields(page, data)
        return page

    def set_content_fields(self, page: BaseContent, data: Mapping[str, Any]) -> None:
        """Set content from a raw data mapping onto the content object."""
        self._populator.set_content_fields(page, data)
