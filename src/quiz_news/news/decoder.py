"""Decode the feed body into NewsItem records."""

import json
import logging
from typing import Any

from pydantic import ValidationError

from quiz_news.news.errors import DecodeError
from quiz_news.news.models import NewsItem

logger = logging.getLogger(__name__)


def decode_news(body: str) -> list[NewsItem]:
    """Parse ``body`` as a JSON array and map each element to a :class:`NewsItem`.

    Raises :class:`DecodeError` with kind ``malformed`` for invalid JSON and
    ``unexpected_shape`` when the top-level value is not an array (or an
    element is not an object).
    """
    try:
        parsed: Any = json.loads(body)
    except (json.JSONDecodeError, RecursionError) as exc:
        logger.warning("News feed is not valid JSON: %s", exc)
        msg = f"Malformed JSON: {exc}"
        raise DecodeError(msg, kind="malformed") from exc

    if not isinstance(parsed, list):
        logger.warning("News feed top-level value is %s, expected a list", type(parsed).__name__)
        raise DecodeError("Unexpected JSON format", kind="unexpected_shape")

    items: list[NewsItem] = []
    for entry in parsed:
        if not isinstance(entry, dict):
            raise DecodeError("Unexpected JSON format", kind="unexpected_shape")
        try:
            items.append(NewsItem.from_json(entry))
        except ValidationError as exc:
            msg = f"Unexpected JSON format: {exc.error_count()} invalid field(s)"
            raise DecodeError(msg, kind="unexpected_shape") from exc
    return items
