from __future__ import annotations

import logging
from typing import List, Optional, Union
from urllib.parse import quote

import requests

from .config import Settings
from .exceptions import FeedFetchError, MissingParameterError
from .fetcher import fetch_feed
from .models import NewsArticle, SearchResult
from .normalizer import to_news_article
from .parser import iter_entries


logger = logging.getLogger(__name__)


def extract_articles(
    content: Union[str, bytes],
    *,
    fallback_source: str = "Google News",
    description_limit: int = 200,
    limit: int = 10,
) -> List[NewsArticle]:
    """
    Parse a feed document into at most `limit` articles, preserving feed order.
    Entries without a title or link are skipped.
    """
    articles: List[NewsArticle] = []
    if limit <= 0:
        return articles
    for entry in iter_entries(content):
        article = to_news_article(
            entry,
            fallback_source=fallback_source,
            description_limit=description_limit,
        )
        if article is None:
            continue
        articles.append(article)
        if len(articles) >= limit:
            break
    return articles


class NewsSearcher:
    """
    High-level API: search the news feed for a vendor and return normalized articles.

    Pipeline: validate query → build feed URL → fetch → parse → normalize → cap
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.session = session or requests.Session()

    def effective_query(self, query: str) -> str:
        suffix = self.settings.news_query_suffix.strip()
        return f"{query} {suffix}" if suffix else query

    def feed_url(self, effective_query: str) -> str:
        url = f"{self.settings.news_feed_url}?q={quote(effective_query, safe='')}"
        if self.settings.news_locale:
            url += f"&{self.settings.news_locale}"
        return url

    def search(self, query: Optional[str]) -> SearchResult:
        """
        Run one search. Raises MissingParameterError for a blank query; upstream
        failures are reported as an empty article list.
        """
        if query is None or not query.strip():
            raise MissingParameterError("q")

        effective = self.effective_query(query.strip())
        url = self.feed_url(effective)
        logger.info("Searching news for %r", effective)

        try:
            content = fetch_feed(
                url,
                session=self.session,
                timeout=self.settings.news_fetch_timeout,
                user_agent=self.settings.news_user_agent,
            )
        except FeedFetchError as e:
            logger.warning("News feed unavailable: %s", e)
            return SearchResult(articles=[], query=effective, upstream_ok=False)

        articles = extract_articles(
            content,
            fallback_source=self.settings.news_fallback_source,
            description_limit=self.settings.news_description_limit,
            limit=self.settings.news_max_articles,
        )
        logger.info("Returning %d articles for %r", len(articles), effective)
        return SearchResult(articles=articles, query=effective)
