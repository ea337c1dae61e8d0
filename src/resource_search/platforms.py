"""Known hosting platforms, used to tell a platform tag from an integration."""
from __future__ import annotations

import logging
from pathlib import Path

import yaml

from resource_search.config import settings

logger = logging.getLogger(__name__)


def load_platforms(path: str) -> list[str]:
    """Parse a YAML file with a top-level ``platforms`` list."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.warning("Platforms config not found: %s", path)
        return []

    platforms: list[str] = []
    for item in (data or {}).get("platforms") or []:
        name = str(item).strip()
        if name:
            platforms.append(name)

    logger.debug("Loaded %d platforms from %s", len(platforms), path)
    return platforms


def known_platforms() -> list[str]:
    path = settings.platforms_config_path
    if path and Path(path).exists():
        return load_platforms(path)
    return list(settings.platforms)
