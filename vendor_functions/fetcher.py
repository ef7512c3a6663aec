from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import DEFAULT_USER_AGENT
from .exceptions import FeedFetchError


logger = logging.getLogger(__name__)


def fetch_feed(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = 10.0,
    user_agent: str = DEFAULT_USER_AGENT,
) -> bytes:
    """
    Fetch a single feed URL and return the raw body.

    Raises FeedFetchError on network errors or when the upstream answers with a
    non-success status.
    """
    http = session or requests.Session()
    try:
        response = http.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.RequestException as e:
        raise FeedFetchError(f"Failed to fetch feed: {url} ({e})") from e

    if not response.ok:
        raise FeedFetchError(f"Feed request failed with status {response.status_code}: {url}")

    logger.debug("Fetched %d bytes from %s", len(response.content), url)
    return response.content
