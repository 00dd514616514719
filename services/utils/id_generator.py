"""ID generation utilities."""

from __future__ import annotations
import re
from typing import Any, Dict, Iterable, NamedTuple, Optional


STALL_ID_PATTERN = re.compile(r"stall-(\d+)", re.ASCII)
STALL_NAME_PATTERN = re.compile(r"Stall\s+(\d+)", re.IGNORECASE | re.ASCII)


class StallNumbers(NamedTuple):
    """Next free numbers for the internal id and the display name."""

    next_id_number: int
    next_name_number: int


def slugify(text: str) -> str:
    """
    Convert text to URL-safe slug.

    Examples:
        'Maria Santos' -> 'maria_santos'
        'Fish & Co. 2' -> 'fish_co_2'
    """
    text = (text or "").strip().lower()
    text = re.sub(r"[^a-z0-9]+", "_", text)
    text = re.sub(r"_+", "_", text).strip("_")
    return text or "item"


def normalize_type(value: Any) -> str:
    """Fold a stall type for comparison."""
    return str(value or "").strip().lower()


def extract_number(pattern: re.Pattern, text: Any) -> Optional[int]:
    """Return the first captured integer of pattern in text, or None."""
    if not isinstance(text, str):
        return None
    match = pattern.search(text)
    return int(match.group(1)) if match else None


def next_stall_numbers(
    stalls: Iterable[Dict[str, Any]],
    stall_type: Optional[str] = None,
) -> StallNumbers:
    """
    Compute the next stall numbers from the known records.

    Args:
        stalls: Stall records (dicts with 'id', 'name', 'type')
        stall_type: Optional type; scopes the name numbering only

    Returns:
        StallNumbers(next_id_number, next_name_number)
    """
    wanted = normalize_type(stall_type) if stall_type is not None else None

    highest_id = 0
    highest_name = 0
    for stall in stalls:
        id_number = extract_number(STALL_ID_PATTERN, stall.get("id"))
        if id_number is not None:
            highest_id = max(highest_id, id_number)

        if wanted is not None and normalize_type(stall.get("type")) != wanted:
            continue

        name_number = extract_number(STALL_NAME_PATTERN, stall.get("name"))
        if name_number is not None:
            highest_name = max(highest_name, name_number)

    return StallNumbers(highest_id + 1, highest_name + 1)


def format_stall_id(number: int) -> str:
    return f"stall-{int(number)}"


def format_stall_name(number: int) -> str:
    return f"Stall {int(number)}"
