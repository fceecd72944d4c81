"""
Details Loader — reads a details record from a JSON file.
"""

from __future__ import annotations

import json
from pathlib import Path

from letter_studio.models import UserDetails


def load_details(path: str | Path) -> UserDetails:
    """
    Load a details record from a JSON object file.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the file is not a JSON object
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object of details fields")
    return UserDetails.from_dict(data)


def save_details(details: UserDetails, path: str | Path) -> str:
    """Write a details record as JSON. Returns the path written."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(details.to_dict(), f, indent=2, ensure_ascii=False)
    return str(path)
