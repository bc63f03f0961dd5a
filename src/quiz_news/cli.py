"""CLI entry point for quiz-news."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

from quiz_news import __version__
from quiz_news.config import AppConfig, load_config
from quiz_news.monitoring.logging import setup_logging
from quiz_news.news.fetcher import download
from quiz_news.presenter import Failure, NewsView, open_subject, subject_names
from quiz_news.ui.text import render_detail, render_state, render_subjects

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"quiz-news {__version__}")
        raise typer.Exit()


app = typer.Typer(name="quiz-news", help="Quiz News: browse the quiz news feed")


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option("--version", "-V", help="Show version and exit", callback=_version_callback, is_eager=True)
    ] = False,
) -> None:
    """Quiz News: browse the quiz news feed."""


DEFAULT_CONFIG = Path("config.yaml")

_LIST_HINTS = (
    "Details: quiz-news show N",
    "Subjects: quiz-news subjects",
)

ConfigOption = Annotated[Path, typer.Option("--config", "-c", help="Path to config.yaml")]


def _load_config(config_path: Path) -> AppConfig:
    """Load config from file, warning if the file does not exist."""
    if config_path.exists():
        return load_config(config_path)
    logger.warning("Config file %s not found, using defaults", config_path)
    return AppConfig()


def _new_view(cfg: AppConfig) -> NewsView:
    return NewsView(cfg.news.url, timeout=cfg.news.timeout, fetch=download)


def _activate_view(cfg: AppConfig) -> NewsView:
    """Create a news view and run its single load cycle to completion."""
    view = _new_view(cfg)
    asyncio.run(view.activate())
    return view


@app.command()
def news(config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Download the news feed and list its items."""
    cfg = _load_config(config)
    setup_logging(cfg.monitoring, level=logging.WARNING)
    view = _new_view(cfg)
    typer.echo(render_state(view.state))
    asyncio.run(view.activate())
    typer.echo(render_state(view.state, footer=_LIST_HINTS))
    if isinstance(view.state, Failure):
        raise typer.Exit(code=1)


@app.command()
def show(
    index: Annotated[int, typer.Argument(help="Item number as shown by `quiz-news news`")],
    config: ConfigOption = DEFAULT_CONFIG,
) -> None:
    """Show the full details of one news item."""
    cfg = _load_config(config)
    setup_logging(cfg.monitoring, level=logging.WARNING)
    view = _activate_view(cfg)
    if isinstance(view.state, Failure):
        typer.echo(render_state(view.state))
        raise typer.Exit(code=1)
    try:
        detail = view.detail(index - 1)
    except IndexError:
        typer.echo(f"No news item {index}")
        raise typer.Exit(code=1) from None
    typer.echo(render_detail(detail))


@app.command()
def subjects(
    open_name: Annotated[str | None, typer.Option("--open", help="Select a subject by name")] = None,
) -> None:
    """List the quiz subjects."""
    if open_name is None:
        typer.echo(render_subjects(subject_names()))
        return
    try:
        typer.echo(open_subject(open_name))
    except ValueError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from None


@app.command()
def dashboard(
    config: ConfigOption = DEFAULT_CONFIG,
    host: Annotated[str | None, typer.Option("--host", help="Dashboard bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", help="Dashboard port")] = None,
) -> None:
    """Serve the news screens over HTTP."""
    cfg = _load_config(config)
    setup_logging(cfg.monitoring)

    # Fall back to config values when CLI flags are not provided
    resolved_host = host if host is not None else cfg.monitoring.dashboard_host
    resolved_port = port if port is not None else cfg.monitoring.dashboard_port

    try:
        import uvicorn  # noqa: PLC0415

        from quiz_news.dashboard.api import create_app  # noqa: PLC0415
    except ImportError:
        typer.echo("Dashboard requires optional dependencies: pip install quiz-news[dashboard]")
        raise typer.Exit(code=1) from None

    typer.echo(f"Dashboard starting on http://{resolved_host}:{resolved_port}")
    uvicorn.run(create_app(cfg), host=resolved_host, port=resolved_port, log_level="info")


@app.command()
def mcp(config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Run the MCP server (stdio transport) for AI agent integration."""
    from quiz_news.mcp_server import configure  # noqa: PLC0415
    from quiz_news.mcp_server import mcp as mcp_server  # noqa: PLC0415

    configure(config_path=config)
    mcp_server.run()
