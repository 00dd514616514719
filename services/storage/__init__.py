"""Storage layer for vendor persistence."""

from .supabase_storage import SupabaseStorage, SupabaseError
from .local_storage import LocalStorage
from .storage_manager import StorageManager

__all__ = ["SupabaseStorage", "SupabaseError", "LocalStorage", "StorageManager"]
