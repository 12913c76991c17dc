"""Fetch input files that are missing locally."""

from __future__ import annotations

from pathlib import Path

import requests

DEFAULT_BASE_URL = (
    "https://raw.githubusercontent.com/ScottSauers/Needleman-Wunsch-Aligner/main/"
)


def ensure_local_file(
    file_path: Path, base_url: str = DEFAULT_BASE_URL, timeout: float = 30
) -> Path:
    """Download file_path from base_url unless it already exists."""
    file_path = Path(file_path)
    if file_path.exists():
        print(f"[fetch] File '{file_path}' already exists.")
        return file_path

    url = f"{base_url.rstrip('/')}/{file_path.name}"
    print(f"[fetch] File '{file_path}' not found. Downloading {url}")
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        print(f"[error] Failed to download '{file_path}': {e}")
        raise

    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(response.text, encoding="utf-8")
    print(f"[fetch] File '{file_path}' downloaded successfully.")
    return file_path


__all__ = ["DEFAULT_BASE_URL", "ensure_local_file"]
