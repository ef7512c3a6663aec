"""Tests for vendor_functions.core and the feed parser behind it."""

import pytest
import requests

from vendor_functions import Settings
from vendor_functions.core import NewsSearcher, extract_articles
from vendor_functions.exceptions import MissingParameterError
from vendor_functions.parser import parse_entries

from conftest import http_response, rss_feed, rss_item


class TestParseEntries:
    def test_reads_fields_in_order(self) -> None:
        feed = rss_feed(
            rss_item(title="First - A", link="https://n.example.com/1"),
            rss_item(title="Second - B", link="https://n.example.com/2"),
        )
        entries = parse_entries(feed)
        assert [e["title"] for e in entries] == ["First - A", "Second - B"]
        assert entries[0]["link"] == "https://n.example.com/1"
        assert entries[0]["pub_date"] == "Mon, 01 Jan 2024 12:00:00 GMT"

    def test_absent_description_is_none(self) -> None:
        entries = parse_entries(rss_feed(rss_item()))
        assert entries[0]["description"] is None

    def test_media_content_url(self) -> None:
        extra = '<media:content url="https://img.example.com/m.jpg" medium="image" />'
        entries = parse_entries(rss_feed(rss_item(extra=extra)))
        assert entries[0]["media_url"] == "https://img.example.com/m.jpg"

    def test_garbage_yields_nothing(self) -> None:
        assert parse_entries("this is not a feed") == []
        assert parse_entries(b"") == []


class TestExtractArticles:
    def test_empty_channel(self) -> None:
        assert extract_articles(rss_feed()) == []

    def test_caps_at_limit(self) -> None:
        items = [rss_item(title=f"Story {i} - Source", link=f"https://n.example.com/{i}") for i in range(15)]
        articles = extract_articles(rss_feed(*items))
        assert len(articles) == 10
        assert articles[-1].title == "Story 9"

    def test_skips_items_without_title_or_link(self) -> None:
        feed = rss_feed(
            rss_item(title=None, link="https://n.example.com/no-title"),
            rss_item(title="No link - Source", link=None),
            rss_item(title="Kept - Source", link="https://n.example.com/kept"),
        )
        articles = extract_articles(feed)
        assert [a.title for a in articles] == ["Kept"]

    def test_skipped_items_do_not_count_toward_limit(self) -> None:
        items = [rss_item(title=None, link=f"https://n.example.com/x{i}") for i in range(5)]
        items += [rss_item(title=f"Story {i} - S", link=f"https://n.example.com/{i}") for i in range(3)]
        assert len(extract_articles(rss_feed(*items), limit=3)) == 3

    def test_truncates_description(self) -> None:
        feed = rss_feed(rss_item(description="y" * 500))
        [article] = extract_articles(feed)
        assert len(article.description) == 200

    def test_image_from_description(self) -> None:
        feed = rss_feed(rss_item(description='<p>Text</p><img src="https://img.example.com/d.jpg">'))
        [article] = extract_articles(feed)
        assert article.image == "https://img.example.com/d.jpg"
        assert article.description == "Text"

    def test_fallback_source_is_configurable(self) -> None:
        [article] = extract_articles(rss_feed(rss_item(title="No delimiter here")), fallback_source="Wire")
        assert article.source == "Wire"
        assert article.title == "No delimiter here"


class TestNewsSearcher:
    def test_blank_query_raises(self, session) -> None:
        searcher = NewsSearcher(Settings(), session=session)
        with pytest.raises(MissingParameterError):
            searcher.search(None)
        with pytest.raises(MissingParameterError):
            searcher.search("   ")
        session.get.assert_not_called()

    def test_builds_feed_url(self, session) -> None:
        session.get.return_value = http_response(content=rss_feed())
        result = NewsSearcher(Settings(), session=session).search("Golden Hour Studios")

        url = session.get.call_args[0][0]
        assert url == (
            "https://news.google.com/rss/search?q=Golden%20Hour%20Studios%20Goa%20wedding"
            "&hl=en-IN&gl=IN&ceid=IN:en"
        )
        assert result.query == "Golden Hour Studios Goa wedding"

    def test_sends_user_agent_and_timeout(self, session) -> None:
        session.get.return_value = http_response(content=rss_feed())
        settings = Settings(news_user_agent="TestAgent/1.0", news_fetch_timeout=3.5)
        NewsSearcher(settings, session=session).search("Caterer")

        kwargs = session.get.call_args[1]
        assert kwargs["headers"] == {"User-Agent": "TestAgent/1.0"}
        assert kwargs["timeout"] == 3.5

    def test_encodes_special_characters(self, session) -> None:
        session.get.return_value = http_response(content=rss_feed())
        NewsSearcher(Settings(news_query_suffix=""), session=session).search("Rose & Co")
        assert "q=Rose%20%26%20Co&" in session.get.call_args[0][0]

    def test_non_success_status_returns_empty(self, session) -> None:
        session.get.return_value = http_response(status=503, reason="Service Unavailable")
        result = NewsSearcher(Settings(), session=session).search("Caterer")
        assert result.articles == []
        assert result.upstream_ok is False

    def test_network_error_returns_empty(self, session) -> None:
        session.get.side_effect = requests.ConnectionError("boom")
        result = NewsSearcher(Settings(), session=session).search("Caterer")
        assert result.articles == []
        assert result.error is None

    def test_respects_max_articles_setting(self, session) -> None:
        items = [rss_item(title=f"S{i} - X", link=f"https://n.example.com/{i}") for i in range(6)]
        session.get.return_value = http_response(content=rss_feed(*items))
        result = NewsSearcher(Settings(news_max_articles=4), session=session).search("Caterer")
        assert len(result.articles) == 4
