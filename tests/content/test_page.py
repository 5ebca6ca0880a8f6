"""Tests for content objects and typed content values."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from cmsmap.content import (
    CONTENT_VALUE_TYPES,
    ArrayContent,
    Date,
    DateTime,
    Image,
    Number,
    Page,
    PlainText,
)
from cmsmap.content_model import ContentType, FieldType
from cmsmap.errors import ContentTypeNotSetError


class TestContentValues:
    def test_every_field_type_has_a_value_class(self):
        assert set(CONTENT_VALUE_TYPES) == {t.value for t in FieldType}

    def test_type_tags(self):
        for tag, cls in CONTENT_VALUE_TYPES.items():
            assert cls.TYPE == tag

    def test_get_value_and_str(self):
        value = PlainText(name="intro", value="Hello")
        assert value.get_value() == "Hello"
        assert str(value) == "Hello"

    def test_number_coerces_numeric_strings(self):
        assert Number(name="n", value="42").get_value() == 42
        assert Number(name="n", value="4.5").get_value() == 4.5

    def test_date_parses_iso_and_formats(self):
        value = Date(name="published", value="2024-03-05", format="%d/%m/%Y")
        assert value.get_value() == date(2024, 3, 5)
        assert str(value) == "05/03/2024"

    def test_datetime_default_format(self):
        value = DateTime(name="starts", value="2024-03-05T09:30:00")
        assert value.get_value() == datetime(2024, 3, 5, 9, 30)
        assert str(value) == "2024-03-05 09:30:00"

    def test_image_value_is_url(self):
        image = Image(name="hero", url="https://cdn.example.com/a.jpg", alt="A")
        assert image.get_value() == "https://cdn.example.com/a.jpg"

    def test_array_content(self):
        rows = [{"heading": PlainText(name="heading", value="One")}, {}]
        value = ArrayContent(name="sections", value=rows)
        assert len(value) == 2
        assert str(value) == "2 items"
        assert isinstance(value.value[0]["heading"], PlainText)


class TestPage:
    def test_new_page_is_empty(self):
        page = Page()
        assert page.id is None
        assert page.title == ""
        assert page.url_slug == ""
        assert page.has_content_type() is False
        assert len(page) == 0

    def test_content_type_not_set_raises(self):
        with pytest.raises(ContentTypeNotSetError):
            Page().get_content_type()

    def test_bind_content_type(self):
        page = Page()
        news = ContentType("news", "posts")
        page.set_content_type(news)
        assert page.get_content_type() is news

    def test_add_and_get_content(self):
        page = Page()
        page.add_content(PlainText(name="intro", value="Hi"))
        page.add_content(PlainText(name="intro", value="Hello"))

        assert page.has_content("intro") is True
        assert page["intro"].get_value() == "Hello"
        assert page.get_content("missing") is None
        assert len(page) == 1
        assert [v.name for v in page] == ["intro"]
