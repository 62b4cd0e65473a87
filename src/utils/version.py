"""Utilities for retrieving the application version string."""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import metadata
from pathlib import Path

from utils.files import resource_path

DISTRIBUTION_NAME = "music-collection-manager"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Return the application version: installed metadata first, then a VERSION file."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        pass

    candidate_paths = [
        resource_path("VERSION"),
        Path(__file__).resolve().parents[2] / "VERSION",
    ]
    for path in candidate_paths:
        if not os.path.exists(path):
            continue
        with open(path, "r", encoding="utf-8") as handle:
            content = handle.read().strip()
        if content:
            return content

    return "unknown"
