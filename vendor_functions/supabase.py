from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .exceptions import SupabaseError


logger = logging.getLogger(__name__)


class SupabaseClient:
    """
    Minimal client for the Supabase REST (PostgREST) API, limited to the
    `vendors` table operations the admin handlers need.
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = url.rstrip("/") + "/rest/v1"
        self.session = session or requests.Session()
        self.headers = {
            "apikey": anon_key,
            "Authorization": f"Bearer {anon_key}",
        }
        self.timeout = timeout

    def select_vendors(self, select: str, filters: Optional[Dict[str, str]] = None) -> List[Dict[str, Any]]:
        params = {"select": select}
        params.update(filters or {})
        response = self.session.get(f"{self.base_url}/vendors", params=params, headers=self.headers, timeout=self.timeout)
        if not response.ok:
            raise SupabaseError(f"Failed to fetch vendors: {response.reason}")
        return response.json()

    def get_vendor(self, vendor_id: Any, select: str) -> Optional[Dict[str, Any]]:
        rows = self.select_vendors(select, {"id": f"eq.{vendor_id}"})
        return rows[0] if rows else None

    def update_vendor(self, vendor_id: Any, fields: Dict[str, Any]) -> None:
        response = self.session.patch(
            f"{self.base_url}/vendors",
            params={"id": f"eq.{vendor_id}"},
            json=fields,
            headers={**self.headers, "Prefer": "return=minimal"},
            timeout=self.timeout,
        )
        if not response.ok:
            raise SupabaseError(f"Failed to update vendor {vendor_id}: {response.reason}")
