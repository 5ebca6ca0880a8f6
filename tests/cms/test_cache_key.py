"""Tests for cache key construction."""

from __future__ import annotations

from collections import OrderedDict

import pytest

from cmsmap.cms.cache_key import (
    BoolPart,
    MapPart,
    NullPart,
    NumberPart,
    StringPart,
    build_cache_key,
    filter_cache_key,
    to_cache_key_part,
)
from cmsmap.errors import ApiError, InvalidCacheKeyInputError


class TestFilterCacheKey:
    @pytest.mark.parametrize("char", ["{", "}", "(", ")", "@", ":"])
    def test_strips_reserved_characters(self, char: str):
        assert filter_cache_key(f"a{char}b") == "ab"

    def test_replaces_spaces_and_slashes(self):
        assert filter_cache_key("news/2024 archive") == "news-2024-archive"

    def test_replaces_other_whitespace(self):
        assert filter_cache_key("a\tb\nc") == "a-b-c"

    def test_mixed(self):
        result = filter_cache_key("{user@example.com} (page: 2)/x")
        for char in "{}()@:":
            assert char not in result
        assert " " not in result
        assert "/" not in result
        assert result == "userexample.com-page-2-x"

    def test_coerces_to_string(self):
        assert filter_cache_key(42) == "42"
        assert filter_cache_key(1.5) == "1.5"


class TestBuildCacheKey:
    def test_no_params_defaults_to_cache(self):
        assert build_cache_key() == "cache"

    def test_empty_strings_are_skipped(self):
        assert build_cache_key("a", "", "b") == "a.b"

    def test_only_empty_strings_defaults_to_cache(self):
        assert build_cache_key("", "") == "cache"

    def test_strings_are_filtered(self):
        assert build_cache_key("news list", "page/2") == "news-list.page-2"

    def test_numbers_always_included(self):
        assert build_cache_key(0) == "0"
        assert build_cache_key("news", 0, 2.5) == "news.0.2.5"

    def test_booleans_and_none(self):
        assert build_cache_key(True, False, None) == "true.false.NULL"

    def test_flat_mapping_preserves_order(self):
        assert build_cache_key({"x": "1", "y": "2"}) == "x=1.y=2"
        assert build_cache_key(OrderedDict([("y", "2"), ("x", "1")])) == "y=2.x=1"

    def test_mapping_keys_and_values_are_filtered(self):
        assert build_cache_key({"search term": "a/b"}) == "search-term=a-b"

    def test_mapping_scalar_values(self):
        key = build_cache_key({"page": 1, "draft": False, "tag": None, "q": ""})
        assert key == "page=1.draft=false.tag=NULL.q="

    def test_mixed_params(self):
        assert build_cache_key("news", 2, {"page": 1}, None) == "news.2.page=1.NULL"

    def test_nested_mapping_raises(self):
        with pytest.raises(InvalidCacheKeyInputError, match="multidimensional"):
            build_cache_key({"x": {"nested": 1}})

    def test_nested_list_raises(self):
        with pytest.raises(InvalidCacheKeyInputError, match="multidimensional"):
            build_cache_key({"ids": [1, 2]})

    def test_unsupported_type_raises(self):
        with pytest.raises(InvalidCacheKeyInputError, match="type: object"):
            build_cache_key(object())

    def test_top_level_list_raises(self):
        with pytest.raises(InvalidCacheKeyInputError, match="type: list"):
            build_cache_key(["a", "b"])

    def test_error_is_an_api_error(self):
        with pytest.raises(ApiError):
            build_cache_key(b"bytes")

    def test_deterministic(self):
        params = ("news", 3, {"page": 2, "sort": "date"})
        assert build_cache_key(*params) == build_cache_key(*params)


class TestToCacheKeyPart:
    def test_scalar_kinds(self):
        assert to_cache_key_part("a") == StringPart("a")
        assert to_cache_key_part(3) == NumberPart(3)
        assert to_cache_key_part(True) == BoolPart(True)
        assert to_cache_key_part(None) == NullPart()

    def test_bool_is_not_a_number(self):
        assert isinstance(to_cache_key_part(False), BoolPart)

    def test_mapping(self):
        part = to_cache_key_part({"a": 1, 2: "b"})
        assert part == MapPart((("a", NumberPart(1)), ("2", StringPart("b"))))

    def test_parts_pass_through(self):
        part = StringPart("x")
        assert to_cache_key_part(part) is part

    def test_prebuilt_parts_render(self):
        assert build_cache_key(StringPart("news"), NumberPart(1), NullPart()) == "news.1.NULL"

    def test_prebuilt_parts_as_mapping_values(self):
        assert build_cache_key({"a": StringPart("x")}) == "a=x"
        assert build_cache_key({"on": BoolPart(False), "n": NullPart()}) == "on=false.n=NULL"

    def test_map_part_as_mapping_value_raises(self):
        with pytest.raises(InvalidCacheKeyInputError):
            build_cache_key({"a": MapPart((("b", NumberPart(1)),))})

    def test_mapping_values_render_as_words(self):
        assert build_cache_key({"draft": False, "live": True, "tag": None}) == (
            "draft=false.live=true.tag=NULL"
        )
