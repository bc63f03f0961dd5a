"""View state and the one-shot load cycle behind every news screen.

A :class:`NewsView` is one view activation: it starts in :class:`Loading`,
performs exactly one fetch-and-decode, and settles on either
:class:`Success` or :class:`Failure`. Recovering from a failure means
creating a new view.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from quiz_news.news.decoder import decode_news
from quiz_news.news.errors import NewsError
from quiz_news.news.fetcher import download
from quiz_news.news.models import NewsItem

logger = logging.getLogger(__name__)

SUBJECTS: tuple[str, ...] = ("Mathematics", "Science", "History", "Geography", "Computer Science")

Fetch = Callable[..., str]


@dataclass(frozen=True)
class Loading:
    """The fetch has not resolved yet."""

    state: Literal["loading"] = "loading"


@dataclass(frozen=True)
class Success:
    """The feed loaded; ``items`` may be empty."""

    items: tuple[NewsItem, ...]
    state: Literal["success"] = "success"

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class Failure:
    """The fetch or decode failed; ``message`` is shown to the user as-is."""

    message: str
    state: Literal["error"] = "error"


LoadResult = Success | Failure
ViewState = Loading | Success | Failure


@dataclass(frozen=True)
class DetailView:
    """Contents of the dismissible per-item popup."""

    title: str
    details: str


async def load_news(url: str, *, timeout: float | None = None, fetch: Fetch = download) -> LoadResult:
    """Download and decode the feed once, folding any :class:`NewsError` into a :class:`Failure`."""
    try:
        body = await asyncio.to_thread(fetch, url, timeout=timeout)
        items = decode_news(body)
    except NewsError as exc:
        logger.info("News load failed: %s", exc, extra={"view_state": "error"})
        return Failure(message=str(exc))
    logger.info("Loaded %d news item(s)", len(items), extra={"view_state": "success"})
    return Success(items=tuple(items))


class NewsView:
    """A single activation of the news screen."""

    def __init__(self, url: str, *, timeout: float | None = None, fetch: Fetch = download) -> None:
        self._url = url
        self._timeout = timeout
        self._fetch = fetch
        self._state: ViewState = Loading()
        self._pending: asyncio.Future[LoadResult] | None = None
        self._closed = False

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    async def activate(self) -> ViewState:
        """Run the load cycle if it has not run yet and return the resulting state.

        Concurrent callers share the one in-flight fetch, and cancelling one
        caller leaves that fetch running for the others. Once settled the
        state never changes, so later calls return it without refetching.
        """
        if not isinstance(self._state, Loading) or self._closed:
            return self._state
        if self._pending is None:
            self._pending = asyncio.ensure_future(load_news(self._url, timeout=self._timeout, fetch=self._fetch))
        result = await asyncio.shield(self._pending)
        if self._closed:
            logger.debug("View closed before the load resolved; dropping result")
            return self._state
        self._state = result
        return self._state

    def close(self) -> None:
        """Discard the view. A load that resolves afterwards is ignored."""
        self._closed = True

    def detail(self, index: int) -> DetailView:
        """Return the popup contents for the item at ``index`` (0-based)."""
        if not isinstance(self._state, Success):
            msg = f"No news loaded (view is {self._state.state})"
            raise RuntimeError(msg)
        if index < 0 or index >= len(self._state.items):
            msg = f"No news item at index {index}"
            raise IndexError(msg)
        item = self._state.items[index]
        return DetailView(title=item.title, details=item.details)


def serialize_state(state: ViewState) -> dict[str, Any]:
    """Convert a view state to a JSON-friendly dict tagged by ``state``."""
    if isinstance(state, Success):
        return {
            "state": state.state,
            "empty": state.is_empty,
            "items": [item.model_dump() for item in state.items],
        }
    if isinstance(state, Failure):
        return {"state": state.state, "message": state.message}
    return {"state": state.state}


def subject_names() -> list[str]:
    """Return the fixed list of subjects shown on the subjects screen."""
    return list(SUBJECTS)


def open_subject(name: str) -> str:
    """Acknowledge a subject selection. Subjects have no destination yet."""
    if name not in SUBJECTS:
        msg = f"Unknown subject: {name}"
        raise ValueError(msg)
    return f"Open {name} (not implemented)"
