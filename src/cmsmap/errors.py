"""Exceptions raised while building content models and mapping content."""

from __future__ import annotations


class CmsError(Exception):
    """Base error for cmsmap."""


class ContentTypeNotSetError(CmsError):
    """Raised when reading the current content type before one was resolved."""


class ApiError(CmsError):
    """Base error for problems building or issuing a content API request."""


class InvalidCacheKeyInputError(ApiError):
    """Raised when a cache key parameter is nested or of an unsupported kind."""


class UnimplementedOperationError(CmsError, NotImplementedError):
    """Raised when an operation is called on a node that cannot support it."""


class ConfigParsingError(CmsError):
    """Raised when a content model definition is invalid.

    Covers unknown field types, duplicate field or content type names and
    malformed content model files.
    """


class ContentMappingError(CmsError):
    """Raised when a raw API value cannot be mapped to its declared field type."""


class CacheNotSetError(CmsError):
    """Raised when reading the cache store of a repository that has none."""
