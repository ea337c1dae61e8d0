from __future__ import annotations

from resource_search.config import settings
from resource_search.url import get_related_search_params, get_url_search


def get_discover_redirect(url: str) -> str:
    """Target for a /resources index request, keeping only meaningful params."""
    search = get_related_search_params(get_url_search(url))
    pathname = settings.discover_pathname
    return f"{pathname}?{search}" if search else pathname
