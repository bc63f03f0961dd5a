"""HTTP download of the raw news feed."""

import logging

import requests

from quiz_news.news.errors import FetchError

logger = logging.getLogger(__name__)


def download(
    url: str,
    *,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> str:
    """GET ``url`` and return the response body unchanged.

    Only HTTP 200 counts as success. Any other status raises a
    :class:`FetchError` of kind ``status_code``; connection, DNS, timeout and
    invalid-URL failures raise one of kind ``transport``. ``timeout=None``
    leaves the transport default in place. No retries are attempted.
    """
    http = session if session is not None else requests
    logger.debug("Downloading news feed from %s", url, extra={"url": url})
    try:
        resp = http.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("News feed request to %s failed: %s", url, exc, extra={"url": url})
        msg = f"Failed to download data: {exc}"
        raise FetchError(msg, kind="transport") from exc

    if resp.status_code != 200:
        logger.warning(
            "News feed download failed (HTTP %s): %s",
            resp.status_code,
            url,
            extra={"url": url, "status_code": resp.status_code},
        )
        msg = f"Failed to download data: HTTP {resp.status_code}"
        raise FetchError(msg, kind="status_code", status_code=resp.status_code)

    return resp.text
