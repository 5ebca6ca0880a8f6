"""Cache key construction for content requests.

Parameters are converted at the call boundary into a small tagged union
(:data:`CacheKeyPart`) and the key is rendered from that union. Keys are
short, deterministic and safe for file and key-value cache backends.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Set
from dataclasses import dataclass
from typing import Any, TypeAlias, assert_never

from cmsmap.errors import InvalidCacheKeyInputError

DEFAULT_CACHE_KEY = "cache"
CACHE_KEY_SEPARATOR = "."

# Characters reserved in keys by common cache backends
_RESERVED_RE = re.compile(r"[{}()@:]")
_SEPARATOR_RE = re.compile(r"[\s/]")


@dataclass(frozen=True)
class StringPart:
    value: str


@dataclass(frozen=True)
class NumberPart:
    value: int | float


@dataclass(frozen=True)
class BoolPart:
    value: bool


@dataclass(frozen=True)
class NullPart:
    pass


ScalarPart: TypeAlias = StringPart | NumberPart | BoolPart | NullPart


@dataclass(frozen=True)
class MapPart:
    """A flat mapping of keys to scalar values, in insertion order."""

    items: tuple[tuple[str, ScalarPart], ...]


CacheKeyPart: TypeAlias = StringPart | NumberPart | BoolPart | NullPart | MapPart

_PART_TYPES = (StringPart, NumberPart, BoolPart, NullPart, MapPart)


def filter_cache_key(value: object) -> str:
    """Make a value safe to use in a cache key.

    Strips ``{}()@:`` and replaces whitespace and ``/`` with ``-``.
    """
    text = _RESERVED_RE.sub("", str(value))
    return _SEPARATOR_RE.sub("-", text)


def _is_composite(value: object) -> bool:
    return isinstance(value, (Mapping, list, tuple, Set))


def _to_scalar_part(value: object) -> ScalarPart:
    # bool before int: bool is an int subclass
    if isinstance(value, (StringPart, NumberPart, BoolPart, NullPart)):
        return value
    if value is None:
        return NullPart()
    if isinstance(value, bool):
        return BoolPart(value)
    if isinstance(value, (int, float)):
        return NumberPart(value)
    if isinstance(value, str):
        return StringPart(value)
    raise InvalidCacheKeyInputError(
        f"Cannot build cache key from passed param, type: {type(value).__name__}"
    )


def to_cache_key_part(value: Any) -> CacheKeyPart:
    """Convert a raw parameter into a cache key part.

    Accepts strings, numbers, booleans, None, flat mappings, and parts that
    were already converted. Mapping values may themselves be scalar parts;
    a MapPart as a mapping value counts as nested and is rejected.

    Raises:
        InvalidCacheKeyInputError: For nested mappings/sequences or any other
            unsupported kind.
    """
    if isinstance(value, _PART_TYPES):
        return value
    if isinstance(value, Mapping):
        items: list[tuple[str, ScalarPart]] = []
        for key, item in value.items():
            if _is_composite(item):
                raise InvalidCacheKeyInputError(
                    "Cannot build cache key from a multidimensional structure"
                )
            items.append((str(key), _to_scalar_part(item)))
        return MapPart(tuple(items))
    return _to_scalar_part(value)


def _render_scalar(part: ScalarPart) -> str | None:
    match part:
        case StringPart(value=value):
            return filter_cache_key(value) if value else None
        case NumberPart(value=value):
            return filter_cache_key(value)
        case BoolPart(value=value):
            return "true" if value else "false"
        case NullPart():
            return "NULL"
        case _:
            assert_never(part)


def _render_map_value(part: ScalarPart) -> str:
    # Empty strings still render inside a map so the key=value pair survives
    if isinstance(part, StringPart):
        return filter_cache_key(part.value)
    rendered = _render_scalar(part)
    return rendered if rendered is not None else ""


def build_cache_key(*params: Any) -> str:
    """Build a cache key from heterogeneous parameters.

    Non-empty strings and all numbers (zero included) are sanitized and
    added as-is, booleans become ``true``/``false``, None becomes ``NULL``
    and each entry of a flat mapping becomes ``key=value``. Elements are
    joined with ``.``. With nothing to add, the key is ``cache``.

    Scalars inside a mapping render the same way, so ``{"draft": False}``
    gives ``draft=false`` and ``{"tag": None}`` gives ``tag=NULL``. Keys built
    by PHP-style string casting would render those as ``draft=`` and
    ``tag=`` (and ``True`` as ``1``), so the two kinds of key do not match.

    >>> build_cache_key("news", 2, {"page": 1}, None)
    'news.2.page=1.NULL'

    Raises:
        InvalidCacheKeyInputError: If a parameter is nested or unsupported.
    """
    elements: list[str] = []
    for param in params:
        part = to_cache_key_part(param)
        match part:
            case MapPart(items=items):
                for key, value in items:
                    elements.append(f"{filter_cache_key(key)}={_render_map_value(value)}")
            case StringPart() | NumberPart() | BoolPart() | NullPart():
                rendered = _render_scalar(part)
                if rendered is not None:
                    elements.append(rendered)
            case _:
                assert_never(part)

    if not elements:
        elements.append(DEFAULT_CACHE_KEY)
    return CACHE_KEY_SEPARATOR.join(elements)
