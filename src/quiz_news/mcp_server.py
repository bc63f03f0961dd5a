"""MCP server exposing the news feed and subjects as tools for AI agents."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from quiz_news import __version__, presenter
from quiz_news.config import AppConfig, load_config
from quiz_news.news.fetcher import download
from quiz_news.presenter import Failure, Fetch, NewsView, serialize_state

logger = logging.getLogger(__name__)

# Module-level config path; override via configure() before calling mcp.run().
_config_path: Path = Path("config.yaml")


@dataclass
class AppContext:
    """Shared state for all MCP tools."""

    config: AppConfig
    fetch: Fetch = download


@asynccontextmanager
async def _app_lifespan(_server: FastMCP) -> AsyncIterator[AppContext]:
    cfg = load_config(_config_path) if _config_path.exists() else AppConfig()
    yield AppContext(config=cfg)


mcp = FastMCP("quiz-news", lifespan=_app_lifespan)


def configure(config_path: Path) -> None:
    """Set the config path before running the server."""
    global _config_path  # noqa: PLW0603
    _config_path = config_path


def _get_ctx() -> AppContext:
    """Retrieve the shared AppContext from the MCP lifespan."""
    ctx: AppContext = mcp.get_context().request_context.lifespan_context
    return ctx


def _new_view(ctx: AppContext) -> NewsView:
    return NewsView(ctx.config.news.url, timeout=ctx.config.news.timeout, fetch=ctx.fetch)


@mcp.tool()
async def get_news() -> dict[str, Any]:
    """Download the news feed and return its items.

    The result has ``state`` set to ``success`` (with ``items``) or ``error``
    (with ``message``). Each call downloads the feed again.
    """
    view = _new_view(_get_ctx())
    return serialize_state(await view.activate())


@mcp.tool()
async def get_news_detail(index: int) -> dict[str, Any]:
    """Return the title and full details of the news item at ``index`` (0-based)."""
    view = _new_view(_get_ctx())
    state = await view.activate()
    if isinstance(state, Failure):
        return {"error": state.message}
    try:
        return asdict(view.detail(index))
    except IndexError as exc:
        return {"error": str(exc)}


@mcp.tool()
def get_subjects() -> list[str]:
    """List the quiz subjects."""
    return presenter.subject_names()


@mcp.tool()
def open_subject(name: str) -> dict[str, Any]:
    """Select a subject. Subjects have no content yet, so this only acknowledges the choice."""
    try:
        return {"message": presenter.open_subject(name)}
    except ValueError as exc:
        return {"error": str(exc)}


@mcp.tool()
def health_check() -> dict[str, Any]:
    """Report server version and the configured feed URL."""
    ctx = _get_ctx()
    return {"status": "ok", "version": __version__, "news_url": ctx.config.news.url}
