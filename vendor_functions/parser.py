from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Union
import io

import feedparser


logger = logging.getLogger(__name__)


def _first_media_url(entry: Dict[str, Any]) -> Optional[str]:
    # media:content wins over media:thumbnail
    for key in ("media_content", "media_thumbnail"):
        media = entry.get(key)
        if isinstance(media, list) and media:
            url = media[0].get("url") if isinstance(media[0], dict) else None
            if isinstance(url, str) and url.strip():
                return url.strip()
    return None


def parse_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a raw feed entry (from feedparser) to a dict with the fields the
    normalizer needs.
    Fields: title, link, pub_date, description (str|None), media_url (str|None)
    """
    title = (entry.get("title") or "").strip()
    link = (entry.get("link") or "").strip()
    pub_date = entry.get("published") or ""

    description = None
    for key in ("summary", "description"):
        v = entry.get(key)
        if isinstance(v, str):
            description = v
            break

    return {
        "title": title,
        "link": link,
        "pub_date": pub_date,
        "description": description,
        "media_url": _first_media_url(entry),
    }


def iter_entries(content: Union[str, bytes]) -> Iterator[Dict[str, Any]]:
    """
    Yield parsed entries from a feed document, in document order.

    Malformed documents never raise: feedparser recovers what it can and
    anything it cannot read simply produces no entries.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    # A stream keeps feedparser from treating the document as a URL or path
    feed = feedparser.parse(io.BytesIO(content))
    if getattr(feed, "bozo", 0):
        logger.debug("Feed is not well-formed (%s)", getattr(feed, "bozo_exception", None))

    entries = getattr(feed, "entries", None)
    if not isinstance(entries, list):
        return
    for entry in entries:
        yield parse_entry(entry)


def parse_entries(content: Union[str, bytes]) -> List[Dict[str, Any]]:
    return list(iter_entries(content))
