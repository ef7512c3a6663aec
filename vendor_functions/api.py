from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional

import requests
from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS

from .config import FULL_ACCESS, VENDOR_ONLY, Settings
from .core import NewsSearcher
from .exceptions import MissingParameterError, PlacesError, SupabaseError
from .models import SearchResult
from .placeholders import clean_vendor_images, merge_google_photos, now_iso
from .places import PlacesClient
from .supabase import SupabaseClient


logger = logging.getLogger(__name__)

VENDOR_PERMISSIONS = {FULL_ACCESS, VENDOR_ONLY}

news_bp = Blueprint("news", __name__, url_prefix="/api/news")
places_bp = Blueprint("google_maps", __name__, url_prefix="/api/google-maps")
vendors_bp = Blueprint("vendors", __name__, url_prefix="/api/vendors")


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _session() -> requests.Session:
    return current_app.config["HTTP_SESSION"]


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def _supabase() -> SupabaseClient:
    settings = _settings()
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise SupabaseError("Supabase is not configured")
    return SupabaseClient(settings.supabase_url, settings.supabase_anon_key, session=_session())


def require_vendor_access(view: Callable[..., Any]) -> Callable[..., Any]:
    """Reject requests whose X-Admin-Token does not grant vendor management."""
    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        token = request.headers.get("X-Admin-Token", "")
        permission = _settings().admin_tokens.get(token) if token else None
        if permission not in VENDOR_PERMISSIONS:
            logger.warning("Rejected admin request to %s", request.path)
            return "Unauthorized", 401
        return view(*args, **kwargs)
    return wrapper


@news_bp.route("/search", methods=["GET"])
def search_news():
    settings = _settings()
    try:
        result = NewsSearcher(settings, session=_session()).search(request.args.get("q"))
    except MissingParameterError as e:
        return _error(str(e), 400)
    except Exception as e:
        logger.exception("News search failed")
        result = SearchResult(articles=[], query="", error=str(e) or e.__class__.__name__)

    response = jsonify(result.to_dict())
    if result.error is None and result.upstream_ok:
        response.headers["Cache-Control"] = f"public, max-age={settings.news_cache_max_age}"
    return response


@places_bp.route("/place-details", methods=["GET"])
def place_details():
    place_id = request.args.get("place_id")
    if not place_id:
        return _error("place_id parameter is required", 400)

    settings = _settings()
    if not settings.google_maps_api_key:
        return _error("Google Maps API key not configured", 500)

    client = PlacesClient(
        settings.google_maps_api_key,
        session=_session(),
        timeout=settings.google_maps_timeout,
    )
    try:
        details = client.get_details(place_id)
    except PlacesError as e:
        return _error(str(e), e.status)
    except Exception as e:
        logger.exception("Place details fetch failed")
        return _error(str(e) or "Failed to fetch place details", 500)
    return jsonify(details.to_dict())


@vendors_bp.route("/clean-placeholders", methods=["POST"])
@require_vendor_access
def clean_placeholders():
    try:
        report = clean_vendor_images(_supabase())
    except Exception as e:
        logger.exception("Placeholder cleanup failed")
        return _error(str(e) or "Failed to clean placeholders", 500)
    return jsonify(report.to_dict())


@vendors_bp.route("/<int:vendor_id>/sync-google-maps", methods=["POST"])
@require_vendor_access
def sync_google_maps(vendor_id: int):
    settings = _settings()
    try:
        supabase = _supabase()
        vendor = supabase.get_vendor(vendor_id, "id,google_maps_place_id,images")
        if not vendor:
            return _error("Vendor not found", 404)

        place_id = vendor.get("google_maps_place_id")
        if not place_id:
            return _error("No Google Maps Place ID configured for this vendor", 400)

        if not settings.google_maps_api_key:
            return _error("Google Maps API key not configured", 500)

        logger.info("Starting Google Maps sync for vendor %s", vendor_id)
        places = PlacesClient(
            settings.google_maps_api_key,
            session=_session(),
            timeout=settings.google_maps_timeout,
        )
        photos = places.get_photo_urls(place_id)
        if not photos:
            return _error("No photos found for this location", 404)

        images = merge_google_photos(photos, vendor.get("images") or [])
        supabase.update_vendor(vendor_id, {"images": images, "updated_at": now_iso()})
    except Exception as e:
        logger.exception("Google Maps sync failed for vendor %s", vendor_id)
        return _error(str(e) or "Failed to sync Google Maps photos", 500)

    logger.info("Google Maps sync completed for vendor %s: %d photos added", vendor_id, len(photos))
    return jsonify({
        "success": True,
        "photosAdded": len(photos),
        "totalImages": len(images),
        "message": f"Added {len(photos)} photos from Google Maps",
    })


def health_check():
    return jsonify({"status": "ok"})


def create_app(
    settings: Optional[Settings] = None,
    *,
    session: Optional[requests.Session] = None,
) -> Flask:
    """
    Build the Flask application.

    `session` is shared by every outbound call (news feed, Google Maps,
    Supabase); tests pass a mock here.
    """
    app = Flask(__name__)
    CORS(app)
    app.config["SETTINGS"] = settings or Settings.from_env()
    app.config["HTTP_SESSION"] = session or requests.Session()

    app.register_blueprint(news_bp)
    app.register_blueprint(places_bp)
    app.register_blueprint(vendors_bp)
    app.add_url_rule("/api/health", "health_check", health_check)
    return app
