from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List

from .exceptions import SupabaseError
from .models import CleanupReport
from .supabase import SupabaseClient


logger = logging.getLogger(__name__)

# YouTube default thumbnails and thumbnails built from blank video ids
_PLACEHOLDER_MARKERS = ("mqdefault.jpg", "default.jpg", "/vi/%20")

GOOGLE_PHOTO_HOST = "googleapis.com"
MAX_VENDOR_IMAGES = 50


def is_placeholder_image(url: Any) -> bool:
    if not isinstance(url, str) or not url:
        return True
    if not url.startswith("http"):
        return True
    return any(marker in url for marker in _PLACEHOLDER_MARKERS)


def strip_placeholders(images: Iterable[Any]) -> List[str]:
    """Remove placeholder images, keeping the original order of the rest."""
    return [img for img in images if not is_placeholder_image(img)]


def merge_google_photos(photos: List[str], existing: Iterable[Any], cap: int = MAX_VENDOR_IMAGES) -> List[str]:
    """
    New photos first, followed by existing images not hosted by Google Maps,
    capped at `cap` entries.
    """
    kept = [img for img in existing if isinstance(img, str) and GOOGLE_PHOTO_HOST not in img]
    return (list(photos) + kept)[:cap]


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def clean_vendor_images(client: SupabaseClient) -> CleanupReport:
    """
    Strip placeholder images from every vendor that has images.

    Listing vendors failing raises SupabaseError; a failed update of a single
    vendor is logged and skipped.
    """
    logger.info("Starting placeholder cleanup for all vendors")
    vendors = client.select_vendors("id,images", {"images": "not.is.null"})

    report = CleanupReport()
    for vendor in vendors:
        images = vendor.get("images") or []
        cleaned = strip_placeholders(images)
        removed = len(images) - len(cleaned)
        if removed <= 0:
            continue

        try:
            client.update_vendor(vendor["id"], {"images": cleaned, "updated_at": now_iso()})
        except SupabaseError as e:
            logger.error("Failed to update vendor %s: %s", vendor.get("id"), e)
            report.failed_vendor_ids.append(vendor.get("id"))
            continue

        report.vendors_cleaned += 1
        report.placeholders_removed += removed
        logger.info("Cleaned %d placeholders from vendor %s", removed, vendor["id"])

    logger.info(report.message)
    return report
