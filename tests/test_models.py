"""Tests for the NewsItem model."""

import pytest
from pydantic import ValidationError
from quiz_news.news.models import NewsItem

SAMPLE_ITEM_JSON = {
    "id": "7",
    "title": "Quiz season opens",
    "summary": "Registrations are live.",
    "details": "Teams of up to four can register until Friday.",
}


def test_news_item_from_json() -> None:
    item = NewsItem.from_json(SAMPLE_ITEM_JSON)
    assert item.id == "7"
    assert item.title == "Quiz season opens"
    assert item.summary == "Registrations are live."
    assert item.details == "Teams of up to four can register until Friday."


def test_news_item_missing_fields_default_to_empty() -> None:
    item = NewsItem.from_json({"title": "Only a title"})
    assert item.title == "Only a title"
    assert item.id == ""
    assert item.summary == ""
    assert item.details == ""


def test_news_item_null_fields_default_to_empty() -> None:
    item = NewsItem.from_json({"id": None, "title": None, "summary": "s", "details": None})
    assert item == NewsItem(summary="s")


def test_news_item_ignores_unknown_fields() -> None:
    item = NewsItem.from_json({**SAMPLE_ITEM_JSON, "image": "x.png"})
    assert item.id == "7"


def test_news_item_is_immutable() -> None:
    item = NewsItem.from_json(SAMPLE_ITEM_JSON)
    with pytest.raises(ValidationError):
        item.title = "changed"  # type: ignore[misc]


def test_news_item_rejects_non_string_field() -> None:
    with pytest.raises(ValidationError):
        NewsItem.from_json({"id": 1})


@pytest.mark.parametrize("value", [0, False, [], {}])
def test_news_item_rejects_falsy_non_string_field(value: object) -> None:
    with pytest.raises(ValidationError):
        NewsItem.from_json({"title": value})
