"""Configuration loading and validation."""

from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_NEWS_URL = "https://varanasi-software-junction.github.io/pictures-json/quizjson/news.json"


class NewsConfig(BaseModel):
    """News feed source configuration."""

    url: str = DEFAULT_NEWS_URL
    timeout: float | None = None


class MonitoringConfig(BaseModel):
    """Logging and dashboard configuration."""

    structured_logging: bool = False
    log_file: str | None = None
    dashboard_host: str = "127.0.0.1"
    dashboard_port: int = 8080


class AppConfig(BaseModel):
    """Top-level application configuration."""

    news: NewsConfig = Field(default_factory=NewsConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)


def load_config(path: Path) -> AppConfig:
    """Load config from a YAML file."""
    load_dotenv(path.parent / ".env", override=False)
    return AppConfig(**(yaml.safe_load(path.read_text()) or {}))
