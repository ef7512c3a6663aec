from typing import Optional
from unittest.mock import Mock

import pytest

from vendor_functions import Settings, create_app


def rss_item(
    title: Optional[str] = "Headline - Example Times",
    link: Optional[str] = "https://news.example.com/a",
    pub_date: Optional[str] = "Mon, 01 Jan 2024 12:00:00 GMT",
    description: Optional[str] = None,
    extra: str = "",
) -> str:
    parts = ["<item>"]
    if title is not None:
        parts.append(f"<title><![CDATA[{title}]]></title>")
    if link is not None:
        parts.append(f"<link>{link}</link>")
    if pub_date is not None:
        parts.append(f"<pubDate>{pub_date}</pubDate>")
    if description is not None:
        parts.append(f"<description><![CDATA[{description}]]></description>")
    parts.append(extra)
    parts.append("</item>")
    return "".join(parts)


def rss_feed(*items: str) -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">'
        "<channel><title>Search results</title><link>https://news.example.com</link>"
        + "".join(items)
        + "</channel></rss>"
    ).encode("utf-8")


def http_response(status: int = 200, content: bytes = b"", json_data=None, reason: str = "OK") -> Mock:
    response = Mock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.reason = reason
    response.content = content
    response.text = content.decode("utf-8", errors="replace")
    response.json.return_value = json_data
    return response


@pytest.fixture
def session() -> Mock:
    return Mock()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        google_maps_api_key="maps-key",
        supabase_url="https://project.supabase.co",
        supabase_anon_key="anon-key",
        admin_tokens={
            "admin-token": "full-access",
            "vendor-token": "vendor-only",
            "blog-token": "blog-only",
        },
    )


@pytest.fixture
def client(settings, session):
    app = create_app(settings, session=session)
    app.testing = True
    return app.test_client()
