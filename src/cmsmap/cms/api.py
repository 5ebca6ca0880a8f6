"""Content repository backed by an external content API client."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from cmsmap.cms.cache import DEFAULT_CACHE_LIFETIME, CacheStore
from cmsmap.cms.repository import ContentRepository, FieldPopulator
from cmsmap.content.page import Page
from cmsmap.content_model.model import ContentModel
from cmsmap.errors import ApiError

logger = logging.getLogger(__name__)


@runtime_checkable
class ContentApi(Protocol):
    """Client for a headless CMS content API.

    Implementations own transport, authentication and retries; they return
    decoded JSON payloads keyed by field name.
    """

    def get_one(self, endpoint: str, content_id: str | int) -> Mapping[str, Any]:
        ...

    def list(self, endpoint: str, params: Mapping[str, Any]) -> list[Mapping[str, Any]]:
        ...


class ApiContentRepository(ContentRepository):
    """Reads pages for the current content type through a ContentApi.

    Payloads are cached under :meth:`get_cache_key` when a cache store is
    set. Mapping to pages always runs, so a cached payload is re-mapped
    through the current content model on every call.
    """

    def __init__(
        self,
        api: ContentApi,
        content_model: ContentModel | None = None,
        *,
        populator: FieldPopulator | None = None,
        cache: CacheStore | None = None,
        cache_lifetime: int = DEFAULT_CACHE_LIFETIME,
    ) -> None:
        super().__init__(
            content_model,
            populator=populator,
            cache=cache,
            cache_lifetime=cache_lifetime,
        )
        self._api = api

    def get_page(self, content_id: str | int) -> Page:
        """Fetch one item of the current content type and map it to a page.

        Raises:
            ContentTypeNotSetError: If no content type has been resolved.
            ApiError: If the API returns something other than a mapping.
        """
        content_type = self.get_content_type()
        key = self.get_cache_key(content_type.name, content_id)

        def check(data: Any) -> None:
            if not isinstance(data, Mapping):
                raise ApiError(
                    f"Expected a mapping for {content_type.name} {content_id!r}, "
                    f"got {type(data).__name__}"
                )

        data = self._fetch(
            key,
            lambda: self._api.get_one(content_type.get_api_endpoint(), content_id),
            check,
        )
        return self.create_page(data)

    def list_pages(self, **params: Any) -> list[Page]:
        """Fetch a list of items of the current content type.

        Keyword arguments are passed to the API as query parameters and
        form part of the cache key, so they must be flat scalars.
        """
        content_type = self.get_content_type()
        key = self.get_cache_key(content_type.name, "list", params)

        def check(rows: Any) -> None:
            if not isinstance(rows, list):
                raise ApiError(
                    f"Expected a list for {content_type.name}, got {type(rows).__name__}"
                )

        rows = self._fetch(
            key, lambda: self._api.list(content_type.get_api_endpoint(), params), check
        )
        return [self.create_page(row) for row in rows]

    def _fetch(
        self, key: str, fetch: Callable[[], Any], check: Callable[[Any], None]
    ) -> Any:
        """Return the cached payload for ``key`` or fetch, check and cache it.

        Payloads that fail ``check`` are never written to the cache.
        """
        if self.has_cache():
            cache = self.get_cache()
            if cache.has(key):
                logger.debug("Cache hit for %s", key)
                return cache.get(key)
            logger.debug("Cache miss for %s", key)

        data = fetch()
        check(data)

        if self.has_cache():
            self.get_cache().set(key, data, self.cache_lifetime)
        return data
