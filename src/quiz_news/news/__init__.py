"""News feed package: fetching, decoding and the NewsItem model."""

from quiz_news.news.decoder import decode_news
from quiz_news.news.errors import DecodeError, FetchError, NewsError
from quiz_news.news.fetcher import download
from quiz_news.news.models import NewsItem

__all__ = ["DecodeError", "FetchError", "NewsError", "NewsItem", "decode_news", "download"]
