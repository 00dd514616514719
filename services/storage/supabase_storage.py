"""
Supabase storage implementation.
Talks to the hosted vendors table through its REST (PostgREST) interface.
"""

from __future__ import annotations
import logging
import os
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class SupabaseError(Exception):
    """Raised when Supabase operations fail."""

    def __init__(self, message: str, auth_failed: bool = False):
        super().__init__(message)
        self.auth_failed = auth_failed


class SupabaseStorage:
    """Handles Supabase REST operations for vendor rows."""

    def __init__(
        self,
        url: Optional[str] = None,
        api_key: Optional[str] = None,
        table: Optional[str] = None,
        timeout: float = 15,
    ):
        self.url = (url or self._get_secret("SUPABASE_URL") or "").rstrip("/")
        self.api_key = api_key or self._get_secret("SUPABASE_ANON_KEY")
        self.table = table or self._get_secret("SUPABASE_TABLE") or "vendors"
        self.timeout = timeout
        self._disabled = False

    @staticmethod
    def _get_secret(name: str) -> Optional[str]:
        """Get secret from environment or Streamlit secrets."""
        value = os.environ.get(name)
        if value:
            return value
        try:
            import streamlit as st
            return st.secrets.get(name)
        except Exception:
            return None

    def is_available(self) -> bool:
        """Check if Supabase is configured and not disabled."""
        disable_flag = self._get_secret("DISABLE_SUPABASE") or ""
        if str(disable_flag).strip() in ("1", "true", "True"):
            return False
        return bool(self.url and self.api_key) and not self._disabled

    def disable(self) -> None:
        """Disable Supabase for this session (after auth error)."""
        self._disabled = True

    def _endpoint(self) -> str:
        return f"{self.url}/rest/v1/{self.table}"

    def _headers(self) -> Dict[str, str]:
        """Build headers for REST requests."""
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.api_key:
            headers["apikey"] = self.api_key
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    @staticmethod
    def _check(response: requests.Response, action: str) -> None:
        if response.status_code in (401, 403):
            raise SupabaseError(
                f"Supabase {action} unauthorized (HTTP {response.status_code})",
                auth_failed=True,
            )
        if response.status_code >= 400:
            try:
                body = response.json()
                detail = body.get("message", "") if isinstance(body, dict) else ""
            except ValueError:
                detail = response.text[:200]
            raise SupabaseError(
                f"Supabase {action} failed (HTTP {response.status_code}) {detail}".strip()
            )

    def list_rows(self) -> List[Dict[str, Any]]:
        """
        Fetch all vendor rows ordered by id.

        Raises:
            SupabaseError: If fetch fails
        """
        if not self.url:
            raise SupabaseError("Missing SUPABASE_URL")

        try:
            response = requests.get(
                self._endpoint(),
                headers=self._headers(),
                params={"select": "*", "order": "id.asc"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise SupabaseError(f"Supabase fetch error: {e}")

        self._check(response, "fetch")

        try:
            rows = response.json()
        except ValueError:
            raise SupabaseError("Supabase fetch returned invalid JSON")

        if not isinstance(rows, list):
            return []
        return [r for r in rows if isinstance(r, dict)]

    def insert_row(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert one vendor row and return it as stored.

        The store assigns the primary key.

        Raises:
            SupabaseError: If insert fails
        """
        if not self.url:
            raise SupabaseError("Missing SUPABASE_URL")

        headers = self._headers()
        headers["Prefer"] = "return=representation"

        try:
            response = requests.post(
                self._endpoint(),
                headers=headers,
                json=[payload],
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise SupabaseError(f"Supabase insert error: {e}")

        self._check(response, "insert")

        try:
            rows = response.json()
        except ValueError:
            raise SupabaseError("Supabase insert returned invalid JSON")

        if isinstance(rows, dict):
            rows = [rows]
        if not rows or not isinstance(rows[0], dict):
            raise SupabaseError("Supabase insert returned no row")

        logger.info("Inserted vendor row id=%s into %s", rows[0].get("id"), self.table)
        return rows[0]
