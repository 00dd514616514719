"""Path utilities."""

from __future__ import annotations
import os
from pathlib import Path


def get_project_root() -> Path:
    """
    Get project root directory.

    Returns:
        Path to project root (where app.py is located)
    """
    # services/utils/path_utils.py -> project_root/
    return Path(__file__).resolve().parents[2]


def get_data_dir() -> Path:
    """Get data directory path."""
    return get_project_root() / "data"


def get_cache_path() -> Path:
    """Vendors cache file: VENDORS_CACHE_PATH or data/vendors.json."""
    env_path = os.environ.get("VENDORS_CACHE_PATH")
    if env_path:
        return Path(env_path).expanduser().resolve()
    return (get_data_dir() / "vendors.json").resolve()
