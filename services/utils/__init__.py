"""Utility functions."""

from .id_generator import (
    StallNumbers,
    extract_number,
    format_stall_id,
    format_stall_name,
    next_stall_numbers,
    normalize_type,
    slugify,
)
from .path_utils import get_project_root, get_data_dir, get_cache_path

__all__ = [
    "StallNumbers",
    "extract_number",
    "format_stall_id",
    "format_stall_name",
    "next_stall_numbers",
    "normalize_type",
    "slugify",
    "get_project_root",
    "get_data_dir",
    "get_cache_path",
]
