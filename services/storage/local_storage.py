"""
Local file storage implementation.
Keeps a JSON cache of vendor rows and serves as the offline store.
"""

from __future__ import annotations
import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


def _empty() -> Dict[str, Any]:
    return {"vendors": []}


class LocalStorage:
    """Handles local file operations for the vendors cache."""

    def __init__(self, file_path: Path):
        """
        Initialize local storage.

        Args:
            file_path: Path to the vendors JSON file
        """
        self.file_path = file_path

    def exists(self) -> bool:
        """Check if cache file exists."""
        return self.file_path.exists()

    def load(self) -> Dict[str, Any]:
        """
        Load cache from local file.

        Returns:
            Dict with a 'vendors' list
        """
        if not self.file_path.exists():
            return _empty()

        try:
            with self.file_path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read %s: %s", self.file_path, e)
            return _empty()

        if not isinstance(data, dict):
            return _empty()

        vendors = data.get("vendors")
        if not isinstance(vendors, list):
            data["vendors"] = []
        return data

    def list_rows(self) -> List[Dict[str, Any]]:
        return [r for r in self.load()["vendors"] if isinstance(r, dict)]

    def save(self, data: Dict[str, Any]) -> Path:
        """
        Save cache to local file with atomic write.

        Raises:
            IOError: If write fails
        """
        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        tmp_path = self.file_path.with_suffix(".json.tmp")

        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, self.file_path)

        if not self.file_path.exists():
            raise IOError(f"Failed to write vendors cache to {self.file_path}")

        return self.file_path

    def replace_rows(self, rows: List[Dict[str, Any]]) -> Path:
        """Overwrite the cached rows."""
        return self.save({"vendors": list(rows)})

    def append_row(self, row: Dict[str, Any]) -> Path:
        """Add a row to the cache, replacing one with the same id."""
        data = self.load()
        vendors = [r for r in data["vendors"] if not (isinstance(r, dict) and r.get("id") == row.get("id"))]
        vendors.append(row)
        data["vendors"] = vendors
        return self.save(data)

    def insert_row(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a row, assigning the next integer id (offline mode).

        Returns:
            The stored row
        """
        data = self.load()
        highest = 0
        for r in data["vendors"]:
            try:
                highest = max(highest, int(r.get("id")))
            except (AttributeError, TypeError, ValueError):
                continue

        row = dict(payload)
        row["id"] = highest + 1
        data["vendors"].append(row)
        self.save(data)
        return row

    def get_mtime(self) -> str:
        """
        Get last modification time as formatted string.

        Returns:
            Formatted timestamp or '(not created yet)'
        """
        if not self.file_path.exists():
            return "(not created yet)"

        timestamp = datetime.fromtimestamp(self.file_path.stat().st_mtime)
        return timestamp.strftime("%Y-%m-%d %H:%M:%S")
