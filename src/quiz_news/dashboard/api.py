"""FastAPI HTTP API serving the news and subjects screens."""

from dataclasses import asdict
from pathlib import Path
from typing import Any

from quiz_news import __version__
from quiz_news.config import AppConfig
from quiz_news.news.fetcher import download
from quiz_news.presenter import Failure, Fetch, NewsView, open_subject, serialize_state, subject_names

_STATIC_DIR = Path(__file__).parent / "static"


def create_app(config: AppConfig, *, fetch: Fetch = download) -> Any:
    """Create and return the FastAPI application.

    Every news request is its own view activation, so each one triggers a
    fresh download of the feed.

    Args:
        config: Application config; ``config.news`` selects the feed.
        fetch: Download function, replaceable in tests.

    Returns:
        A FastAPI application instance.
    """
    from fastapi import FastAPI  # noqa: PLC0415
    from fastapi.responses import FileResponse, JSONResponse  # noqa: PLC0415

    app = FastAPI(title="Quiz News", version=__version__)

    def _new_view() -> NewsView:
        return NewsView(config.news.url, timeout=config.news.timeout, fetch=fetch)

    @app.get("/api/health")
    def api_health() -> JSONResponse:
        return JSONResponse({"status": "ok", "version": __version__})

    @app.get("/api/news")
    async def api_news() -> JSONResponse:
        view = _new_view()
        state = await view.activate()
        return JSONResponse(serialize_state(state))

    @app.get("/api/news/{index}")
    async def api_news_detail(index: int) -> JSONResponse:
        view = _new_view()
        state = await view.activate()
        if isinstance(state, Failure):
            return JSONResponse({"state": state.state, "message": state.message}, status_code=502)
        try:
            detail = view.detail(index)
        except IndexError as exc:
            return JSONResponse({"error": str(exc)}, status_code=404)
        return JSONResponse(asdict(detail))

    @app.get("/api/subjects")
    def api_subjects() -> JSONResponse:
        return JSONResponse(subject_names())

    @app.post("/api/subjects/{name}/open")
    def api_open_subject(name: str) -> JSONResponse:
        try:
            message = open_subject(name)
        except ValueError as exc:
            return JSONResponse({"error": str(exc)}, status_code=404)
        return JSONResponse({"message": message})

    @app.get("/")
    def news_page() -> FileResponse:
        return FileResponse(_STATIC_DIR / "news.html", media_type="text/html")

    return app
