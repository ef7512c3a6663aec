from __future__ import annotations

import html
import re
from typing import Any, Dict, Optional, Tuple

from .models import NewsArticle


SOURCE_DELIMITER = " - "

_TAG_RE = re.compile(r"<[^>]*>")
_IMG_SRC_RE = re.compile(r"""<img[^>]+src=["']([^"']+)["']""", re.IGNORECASE)


def split_source(title: str, fallback: str) -> Tuple[str, str]:
    """
    Split a Google News style "Title - Source" headline.

    The last " - " segment is the source; everything before it, rejoined with
    " - ", is the title. Without a delimiter the title is returned untouched
    together with `fallback`.
    """
    parts = title.split(SOURCE_DELIMITER)
    if len(parts) > 1:
        return SOURCE_DELIMITER.join(parts[:-1]), parts[-1]
    return title, fallback


def clean_description(raw: Optional[str], limit: int) -> Optional[str]:
    if raw is None:
        return None
    text = html.unescape(_TAG_RE.sub("", raw)).strip()
    return text[:limit]


def extract_image(raw_description: Optional[str]) -> Optional[str]:
    if not raw_description:
        return None
    m = _IMG_SRC_RE.search(raw_description)
    return m.group(1) if m else None


def to_news_article(
    entry: Dict[str, Any],
    *,
    fallback_source: str,
    description_limit: int,
) -> Optional[NewsArticle]:
    """
    Convert a parsed entry dict into a NewsArticle.

    Returns None when the entry lacks a title or a link; callers skip those.
    """
    raw_title = entry.get("title") or ""
    link = entry.get("link") or ""
    if not raw_title or not link:
        return None

    title, source = split_source(raw_title, fallback_source)
    if not title:
        return None

    raw_description = entry.get("description")
    image = entry.get("media_url") or extract_image(raw_description)

    return NewsArticle(
        title=title,
        link=link,
        pub_date=entry.get("pub_date") or "",
        source=source,
        description=clean_description(raw_description, description_limit),
        image=image,
    )
