"""Load song markup from a file, standard input or a URL."""

import logging
import sys
from pathlib import Path

import httpx

from .exceptions import FetchError

logger = logging.getLogger(__name__)

FETCH_TIMEOUT = 15


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def fetch(url: str) -> str:
    """GET *url* and return its body as text.

    Raises FetchError on HTTP-level failures (status 0 for transport errors).
    """
    logger.debug("Fetching %s", url)
    try:
        resp = httpx.get(url, follow_redirects=True, timeout=FETCH_TIMEOUT)
    except httpx.RequestError as exc:
        raise FetchError(url, 0) from exc
    if resp.status_code != 200:
        raise FetchError(url, resp.status_code)
    return resp.text


def load_text(location: str) -> str:
    """Return markup from a URL, ``-`` (stdin) or a local path."""
    if is_url(location):
        return fetch(location)
    if location == "-":
        return sys.stdin.read()
    return Path(location).read_text(encoding="utf-8")
