"""
Runtime configuration for the CarePrice API.

Everything is read from the environment once, at import time.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

API_TITLE = "CarePrice API"
API_VERSION = "0.1.0"

# Optional JSON snapshot ({"procedures": [...], "hospitals": [...]}).
# When unset, the built-in catalog under careprice/data/catalog is used.
_catalog_path = os.environ.get("CAREPRICE_CATALOG_PATH")
CATALOG_PATH: Optional[Path] = Path(_catalog_path) if _catalog_path else None

CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.environ.get("CAREPRICE_CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]


def parse_log_level(value: str) -> str:
    """Return the logging level name for value, or INFO if logging does not know it."""
    name = value.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


LOG_LEVEL_SETTING = os.environ.get("CAREPRICE_LOG_LEVEL", "INFO")
LOG_LEVEL = parse_log_level(LOG_LEVEL_SETTING)
