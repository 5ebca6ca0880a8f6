"""Tests for mapping raw API payloads onto pages."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from cmsmap.cms.populators import SchemaFieldPopulator
from cmsmap.cms.repository import FieldPopulator
from cmsmap.content import ArrayContent, Image, Page, PlainText, Relation
from cmsmap.content_model import ArrayField, ContentField, ContentType
from cmsmap.errors import ContentMappingError

_FIELDS = {
    "intro": {"type": "plaintext"},
    "body": {"type": "text"},
    "rating": {"type": "number"},
    "price": {"type": "decimal"},
    "featured": {"type": "boolean"},
    "published": {"type": "date", "format": "%d/%m/%Y"},
    "hero": {"type": "image"},
    "brochure": {"type": "document"},
    "author": {"type": "relation", "content_type": "person"},
    "sections": {
        "type": "array",
        "content_fields": {
            "heading": {"type": "plaintext"},
            "links": {
                "type": "array",
                "content_fields": {"url": {"type": "plaintext"}},
            },
        },
    },
}


def _make_page(fields: dict | None = None) -> Page:
    page = Page()
    page.set_content_type(ContentType("news", "posts", fields or _FIELDS))
    return page


class TestSchemaFieldPopulator:
    def test_satisfies_protocol(self):
        assert isinstance(SchemaFieldPopulator(), FieldPopulator)

    def test_maps_page_attributes(self):
        page = _make_page()
        SchemaFieldPopulator().set_content_fields(
            page, {"id": 7, "title": "Launch", "slug": "launch"}
        )
        assert page.id == 7
        assert page.title == "Launch"
        assert page.url_slug == "launch"

    def test_maps_scalar_fields(self):
        page = _make_page()
        SchemaFieldPopulator().set_content_fields(
            page,
            {
                "intro": "Short intro",
                "body": "<p>Body</p>",
                "rating": 4,
                "price": "19.99",
                "featured": True,
                "published": "2024-03-05",
            },
        )
        assert page["intro"].get_value() == "Short intro"
        assert page["body"].get_value() == "<p>Body</p>"
        assert page["rating"].get_value() == 4
        assert page["price"].get_value() == Decimal("19.99")
        assert page["featured"].get_value() is True
        assert page["published"].get_value() == date(2024, 3, 5)
        assert str(page["published"]) == "05/03/2024"

    def test_maps_attribute_fields(self):
        page = _make_page()
        SchemaFieldPopulator().set_content_fields(
            page,
            {
                "hero": {"url": "https://cdn.example.com/a.jpg", "alt": "Alt", "extra": 1},
                "brochure": "https://cdn.example.com/b.pdf",
            },
        )
        hero = page["hero"]
        assert isinstance(hero, Image)
        assert hero.alt == "Alt"
        assert page["brochure"].get_value() == "https://cdn.example.com/b.pdf"

    def test_maps_relation(self):
        page = _make_page()
        SchemaFieldPopulator().set_content_fields(page, {"author": {"id": 12, "name": "Sam"}})
        author = page["author"]
        assert isinstance(author, Relation)
        assert author.get_value() == 12
        assert author.content_type == "person"

    def test_maps_nested_arrays(self):
        page = _make_page()
        SchemaFieldPopulator().set_content_fields(
            page,
            {
                "sections": [
                    {"heading": "One", "links": [{"url": "/a"}, {"url": "/b"}]},
                    {"heading": "Two"},
                ]
            },
        )
        sections = page["sections"]
        assert isinstance(sections, ArrayContent)
        assert len(sections) == 2
        first = sections.value[0]
        assert isinstance(first["heading"], PlainText)
        assert first["heading"].get_value() == "One"
        assert [row["url"].get_value() for row in first["links"].value] == ["/a", "/b"]
        assert "links" not in sections.value[1]

    def test_skips_missing_and_null_fields(self):
        page = _make_page()
        SchemaFieldPopulator().set_content_fields(page, {"intro": None, "unknown": "x"})
        assert len(page) == 0

    def test_field_order_follows_content_type(self):
        page = _make_page()
        SchemaFieldPopulator().set_content_fields(page, {"body": "b", "intro": "i"})
        assert list(page.content) == ["intro", "body"]

    def test_wrong_type_raises_mapping_error(self):
        page = _make_page()
        with pytest.raises(ContentMappingError, match="'rating'"):
            SchemaFieldPopulator().set_content_fields(page, {"rating": "lots"})

    def test_boolean_is_not_a_number(self):
        page = _make_page()
        with pytest.raises(ContentMappingError, match="boolean"):
            SchemaFieldPopulator().set_content_fields(page, {"rating": True})

    def test_array_requires_list(self):
        page = _make_page()
        with pytest.raises(ContentMappingError, match="expects a list"):
            SchemaFieldPopulator().set_content_fields(page, {"sections": {"heading": "x"}})

    def test_array_rows_must_be_mappings(self):
        page = _make_page()
        with pytest.raises(ContentMappingError, match="Row 1"):
            SchemaFieldPopulator().set_content_fields(page, {"sections": [{}, "x"]})

    def test_map_field_directly(self):
        populator = SchemaFieldPopulator()
        value = populator.map_field(ContentField("intro", "plaintext"), "Hi")
        assert value.get_value() == "Hi"
        rows = populator.map_field(ArrayField("rows", {"n": {"type": "number"}}), [{"n": 1}])
        assert rows.value[0]["n"].get_value() == 1
