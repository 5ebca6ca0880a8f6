"""CMS layer — content repositories, cache keys and cache stores."""

from cmsmap.cms.api import ApiContentRepository, ContentApi
from cmsmap.cms.cache import DEFAULT_CACHE_LIFETIME, CacheStore, MemoryCacheStore
from cmsmap.cms.cache_key import (
    CacheKeyPart,
    build_cache_key,
    filter_cache_key,
    to_cache_key_part,
)
from cmsmap.cms.populators import SchemaFieldPopulator
from cmsmap.cms.repository import ContentRepository, FieldPopulator

__all__ = [
    "DEFAULT_CACHE_LIFETIME",
    "ApiContentRepository",
    "CacheKeyPart",
    "CacheStore",
    "ContentApi",
    "ContentRepository",
    "FieldPopulator",
    "MemoryCacheStore",
    "SchemaFieldPopulator",
    "build_cache_key",
    "filter_cache_key",
    "to_cache_key_part",
]
