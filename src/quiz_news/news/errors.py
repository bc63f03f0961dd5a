"""Error types raised while loading the news feed."""

from typing import Literal

FetchErrorKind = Literal["transport", "status_code"]
DecodeErrorKind = Literal["malformed", "unexpected_shape"]


class NewsError(Exception):
    """Base class for failures that end a news load."""


class FetchError(NewsError):
    """The GET request failed at the transport level or returned a non-200 status."""

    def __init__(self, message: str, *, kind: FetchErrorKind, status_code: int | None = None) -> None:
        super().__init__(message)
        self.kind: FetchErrorKind = kind
        self.status_code = status_code


class DecodeError(NewsError):
    """The response body was not a JSON array of news objects."""

    def __init__(self, message: str, *, kind: DecodeErrorKind) -> None:
        super().__init__(message)
        self.kind: DecodeErrorKind = kind
