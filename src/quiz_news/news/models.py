"""Data models for news items."""

from typing import Any

from pydantic import BaseModel, ConfigDict


def _str_field(data: dict[str, Any], key: str) -> Any:
    """Extract an optional string field; only absent or null becomes empty string."""
    value = data.get(key)
    return "" if value is None else value


class NewsItem(BaseModel):
    """A single news entry from the feed."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str = ""
    summary: str = ""
    details: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "NewsItem":
        """Build an item from one feed object; absent or null fields become ``""``."""
        return cls(
            id=_str_field(data, "id"),
            title=_str_field(data, "title"),
            summary=_str_field(data, "summary"),
            details=_str_field(data, "details"),
        )
