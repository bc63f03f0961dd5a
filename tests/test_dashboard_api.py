"""Tests for the dashboard HTTP API."""

from typing import Any

import pytest
from quiz_news.config import AppConfig, NewsConfig
from quiz_news.news.errors import FetchError

MOCK_BODY = (
    '[{"id":"1","title":"Quiz opens","summary":"Sign up","details":"Teams of four"},'
    '{"id":"2","title":"Results","summary":"Winners announced","details":"Full scoreboard"}]'
)


class _FakeFetch:
    def __init__(self, body: str = MOCK_BODY, error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.calls: list[tuple[str, Any]] = []

    def __call__(self, url: str, *, timeout: float | None = None) -> str:
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.body


class TestDashboardAPI:
    """Test the FastAPI dashboard endpoints."""

    @pytest.fixture(autouse=True)
    def _setup_app(self) -> None:
        try:
            from fastapi.testclient import TestClient  # noqa: PLC0415

            from quiz_news.dashboard.api import create_app  # noqa: PLC0415
        except ImportError:
            pytest.skip("fastapi not installed")

        self.fetch = _FakeFetch()
        config = AppConfig(news=NewsConfig(url="https://example.com/news.json", timeout=2.0))
        self.client = TestClient(create_app(config, fetch=self.fetch))

    def test_health_endpoint(self) -> None:
        resp = self.client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert "version" in data

    def test_news_endpoint(self) -> None:
        resp = self.client.get("/api/news")
        assert resp.status_code == 200
        data = resp.json()
        assert data["state"] == "success"
        assert data["empty"] is False
        assert [item["title"] for item in data["items"]] == ["Quiz opens", "Results"]
        assert self.fetch.calls == [("https://example.com/news.json", 2.0)]

    def test_each_request_refetches(self) -> None:
        self.client.get("/api/news")
        self.client.get("/api/news")
        assert len(self.fetch.calls) == 2

    def test_news_endpoint_empty(self) -> None:
        self.fetch.body = "[]"
        data = self.client.get("/api/news").json()
        assert data == {"state": "success", "empty": True, "items": []}

    def test_news_endpoint_error(self) -> None:
        self.fetch.error = FetchError("Failed to download data: HTTP 404", kind="status_code", status_code=404)
        resp = self.client.get("/api/news")
        assert resp.status_code == 200
        data = resp.json()
        assert data["state"] == "error"
        assert "404" in data["message"]

    def test_news_detail(self) -> None:
        resp = self.client.get("/api/news/0")
        assert resp.status_code == 200
        assert resp.json() == {"title": "Quiz opens", "details": "Teams of four"}

    def test_news_detail_not_found(self) -> None:
        resp = self.client.get("/api/news/5")
        assert resp.status_code == 404

    def test_news_detail_on_error(self) -> None:
        self.fetch.body = "not json"
        resp = self.client.get("/api/news/0")
        assert resp.status_code == 502
        assert resp.json()["state"] == "error"

    def test_subjects_endpoint(self) -> None:
        resp = self.client.get("/api/subjects")
        assert resp.status_code == 200
        assert resp.json() == ["Mathematics", "Science", "History", "Geography", "Computer Science"]

    def test_open_subject(self) -> None:
        resp = self.client.post("/api/subjects/Science/open")
        assert resp.status_code == 200
        assert resp.json() == {"message": "Open Science (not implemented)"}

    def test_open_subject_with_space(self) -> None:
        resp = self.client.post("/api/subjects/Computer%20Science/open")
        assert resp.json() == {"message": "Open Computer Science (not implemented)"}

    def test_open_unknown_subject(self) -> None:
        resp = self.client.post("/api/subjects/Art/open")
        assert resp.status_code == 404

    def test_index_page(self) -> None:
        resp = self.client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "Next: Subjects" in resp.text
