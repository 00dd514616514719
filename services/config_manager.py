"""
Configuration manager - Facade for storage, repository and registration.
UI code goes through these functions only.
"""

from __future__ import annotations
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from .storage import StorageManager, SupabaseError
from .repositories import StallRepository
from .registration import RegistrationError, build_vendor_payload, to_submitted, validate_form
from .catalog import type_options
from .utils import StallNumbers, next_stall_numbers as _next_stall_numbers

logger = logging.getLogger(__name__)


# ============================================================================
# Module-level storage instance (singleton pattern)
# ============================================================================
_storage: Optional[StorageManager] = None


def _get_storage() -> StorageManager:
    """Get or create storage manager instance."""
    global _storage
    if _storage is None:
        _storage = StorageManager()
    return _storage


def set_storage(storage: Optional[StorageManager]) -> None:
    """Swap the storage manager (None rebuilds it from secrets on next use)."""
    global _storage
    _storage = storage


# ============================================================================
# Public API - Load
# ============================================================================

def load_stalls() -> List[Dict[str, Any]]:
    """
    Load stall records (Supabase → local cache fallback).

    Returns:
        Stall records sorted by database id
    """
    return StallRepository.list_all(_get_storage().list_rows())


def get_cache_path() -> Path:
    """Get path to local vendors cache."""
    return _get_storage().get_path()


def cache_mtime() -> str:
    """Get last modification time of the local cache."""
    return _get_storage().get_mtime()


def get_last_warning() -> Optional[str]:
    """Get last warning message (for UI display)."""
    return _get_storage().get_last_warning()


# ============================================================================
# Stall numbering
# ============================================================================

def next_stall_numbers(stall_type: Optional[str] = None) -> StallNumbers:
    """Next stall-<n> id and Stall <n> name from the latest snapshot."""
    return _next_stall_numbers(load_stalls(), stall_type)


# ============================================================================
# Registration
# ============================================================================

def register_vendor(form: Dict[str, Any], today: Optional[date] = None) -> Dict[str, Any]:
    """
    Validate and persist a vendor registration.

    Args:
        form: Raw form values (vendor, contact, type, monthlyRent)
        today: Registration date, defaults to today

    Returns:
        Submitted record as stored (see registration.to_submitted)

    Raises:
        ValidationError: If the form is invalid
        RegistrationError: If the database rejects or cannot take the insert
    """
    stalls = load_stalls()
    cleaned = validate_form(form, type_options(stalls))

    payload = build_vendor_payload(cleaned, stalls, today)

    try:
        row = _get_storage().insert_row(payload)
    except (SupabaseError, OSError) as e:
        logger.error("Registration for %r failed: %s", cleaned["vendor"], e)
        raise RegistrationError(f"Registration failed: {e}") from e

    return to_submitted(row, cleaned)
