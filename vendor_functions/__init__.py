"""
vendor_functions

HTTP handlers backing the wedding-vendor directory: a Google News search proxy,
a Google Maps place lookup, and admin tasks that tidy vendor images in Supabase.

Core ideas:
- Input: a vendor name (news), a Place ID (maps), an admin token (vendor tasks)
- Process: fetch → parse → normalize → cap (news search)
- Output: JSON consumed by the frontend

Example
-------
from vendor_functions import NewsSearcher

searcher = NewsSearcher()
result = searcher.search("Golden Hour Studios")

for article in result.articles:
    print(article.pub_date, article.source, article.title)
"""
from .models import NewsArticle, SearchResult, PlaceDetails
from .config import Settings
from .core import NewsSearcher, extract_articles
from .api import create_app

__all__ = [
    "NewsArticle",
    "SearchResult",
    "PlaceDetails",
    "Settings",
    "NewsSearcher",
    "extract_articles",
    "create_app",
]
