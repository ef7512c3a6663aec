from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class NewsArticle:
    """
    Normalized news article returned by the search endpoint.

    The wire format (see `to_dict`) is consumed by the frontend as-is;
    do not rename keys without updating the client.
    """
    title: str
    link: str
    pub_date: str
    source: str
    description: Optional[str] = None
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "title": self.title,
            "link": self.link,
            "pubDate": self.pub_date,
            "source": self.source,
        }
        if self.description is not None:
            out["description"] = self.description
        if self.image is not None:
            out["image"] = self.image
        return out


@dataclass(frozen=True)
class SearchResult:
    articles: List[NewsArticle]
    query: str
    error: Optional[str] = None
    # False when the upstream feed could not be read
    upstream_ok: bool = True

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"articles": [a.to_dict() for a in self.articles]}
        if self.error is not None:
            out["error"] = self.error
        else:
            out["query"] = self.query
        return out


@dataclass(frozen=True)
class PlaceDetails:
    address: str = ""
    name: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def location(self) -> str:
        return self.city or self.state

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "address": self.address,
            "name": self.name,
            "city": self.city,
            "state": self.state,
            "country": self.country,
            "postalCode": self.postal_code,
            "location": self.location,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass
class CleanupReport:
    vendors_cleaned: int = 0
    placeholders_removed: int = 0
    failed_vendor_ids: List[Any] = field(default_factory=list)

    @property
    def message(self) -> str:
        return (
            f"Removed {self.placeholders_removed} placeholder images "
            f"from {self.vendors_cleaned} vendors"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "vendorsCleaned": self.vendors_cleaned,
            "totalPlaceholdersRemoved": self.placeholders_removed,
            "message": self.message,
        }
