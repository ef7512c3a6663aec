from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional
import os


DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

FULL_ACCESS = "full-access"
VENDOR_ONLY = "vendor-only"
BLOG_ONLY = "blog-only"


def parse_admin_tokens(raw: Optional[str]) -> Dict[str, str]:
    """
    Parse `token:permission,token:permission` into a dict.
    Blank pairs and pairs without a permission are ignored.
    """
    tokens: Dict[str, str] = {}
    if not raw:
        return tokens
    for pair in raw.split(","):
        token, sep, permission = pair.strip().partition(":")
        if not sep or not token.strip() or not permission.strip():
            continue
        tokens[token.strip()] = permission.strip()
    return tokens


@dataclass
class Settings:
    news_feed_url: str = "https://news.google.com/rss/search"
    news_query_suffix: str = "Goa wedding"
    news_locale: str = "hl=en-IN&gl=IN&ceid=IN:en"
    news_fallback_source: str = "Google News"
    news_max_articles: int = 10
    news_description_limit: int = 200
    news_cache_max_age: int = 1800
    news_fetch_timeout: float = 10.0
    news_user_agent: str = DEFAULT_USER_AGENT
    google_maps_api_key: Optional[str] = None
    google_maps_timeout: float = 10.0
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    admin_tokens: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            news_feed_url=os.getenv("NEWS_FEED_URL", defaults.news_feed_url),
            news_query_suffix=os.getenv("NEWS_QUERY_SUFFIX", defaults.news_query_suffix),
            news_locale=os.getenv("NEWS_LOCALE", defaults.news_locale),
            news_fallback_source=os.getenv("NEWS_FALLBACK_SOURCE", defaults.news_fallback_source),
            news_max_articles=int(os.getenv("NEWS_MAX_ARTICLES", defaults.news_max_articles)),
            news_description_limit=int(os.getenv("NEWS_DESCRIPTION_LIMIT", defaults.news_description_limit)),
            news_cache_max_age=int(os.getenv("NEWS_CACHE_MAX_AGE", defaults.news_cache_max_age)),
            news_fetch_timeout=float(os.getenv("NEWS_FETCH_TIMEOUT", defaults.news_fetch_timeout)),
            news_user_agent=os.getenv("NEWS_USER_AGENT", defaults.news_user_agent),
            google_maps_api_key=os.getenv("GOOGLE_MAPS_API_KEY") or None,
            google_maps_timeout=float(os.getenv("GOOGLE_MAPS_TIMEOUT", defaults.google_maps_timeout)),
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_anon_key=os.getenv("SUPABASE_ANON_KEY") or None,
            admin_tokens=parse_admin_tokens(os.getenv("ADMIN_TOKENS")),
        )
