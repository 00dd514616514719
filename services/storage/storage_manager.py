"""
Storage Manager - Orchestrates Supabase and Local storage.
Reads: Supabase (primary) → Local (cache).
Writes: Supabase when configured, otherwise Local (offline mode).
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..utils.path_utils import get_cache_path
from .supabase_storage import SupabaseStorage, SupabaseError
from .local_storage import LocalStorage

logger = logging.getLogger(__name__)


class StorageManager:
    """Coordinates Supabase and Local storage with fallback logic."""

    def __init__(
        self,
        local_path: Optional[Path] = None,
        remote: Optional[SupabaseStorage] = None,
    ):
        """
        Initialize storage manager.

        Args:
            local_path: Path to local cache file. If None, uses default.
            remote: Supabase client. If None, one is built from secrets.
        """
        self.local_path = local_path or get_cache_path()
        self.remote = remote or SupabaseStorage()
        self.local = LocalStorage(self.local_path)
        self._last_warning: Optional[str] = None

    def get_last_warning(self) -> Optional[str]:
        """Get last warning message (for UI display)."""
        return self._last_warning

    def _set_warning(self, message: str) -> None:
        logger.warning(message)
        self._last_warning = message

    def list_rows(self) -> List[Dict[str, Any]]:
        """
        Load vendor rows.

        Strategy:
        1. Try Supabase (primary source)
        2. On success: refresh local cache and return
        3. On failure: fall back to local cache
        """
        if self.remote.is_available():
            try:
                rows = self.remote.list_rows()
            except SupabaseError as e:
                if e.auth_failed:
                    self.remote.disable()
                self._set_warning(f"Database unavailable: {e}. Using local cache.")
            else:
                self._last_warning = None
                try:
                    self.local.replace_rows(rows)
                except OSError as e:
                    self._set_warning(f"Local cache not updated: {e}")
                return rows

        return self.local.list_rows()

    def insert_row(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a vendor row.

        Returns:
            The stored row, including its assigned id

        Raises:
            SupabaseError: If the configured database rejects the insert
        """
        if self.remote.is_available():
            try:
                row = self.remote.insert_row(payload)
            except SupabaseError as e:
                if e.auth_failed:
                    self.remote.disable()
                raise
            self._last_warning = None
            try:
                self.local.append_row(row)
            except OSError as e:
                self._set_warning(f"Registration saved, but local cache not updated: {e}")
            return row

        row = self.local.insert_row(payload)
        self._set_warning("Database not configured. Registration saved locally only.")
        return row

    def get_path(self) -> Path:
        """Get path to local cache file."""
        return self.local_path

    def get_mtime(self) -> str:
        """Get last modification time of local cache."""
        return self.local.get_mtime()
