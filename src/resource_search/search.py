"""Translate between discovery URLs and SearchOptions."""
from __future__ import annotations

import logging
import re
from urllib.parse import parse_qsl, urljoin, urlsplit

from resource_search.config import settings
from resource_search.models import (
    DEFAULT_LIST,
    DEFAULT_SORT,
    RESOURCE_ID_PARAM,
    RESOURCES_PATHNAME,
    SearchOptions,
)
from resource_search.url import encode_search

logger = logging.getLogger(__name__)

# /{owner} or /{owner}/{list}. The second group repeats, so with 3+ segments
# only the first and the last one are captured.
_OWNER_PATH_RE = re.compile(r"/([a-z0-9-]+)(?:/([a-z0-9-]+))*", re.IGNORECASE)

# Query key for each serialized field, in output order
_QUERY_KEYS = {
    "keyword": "q",
    "author": "author",
    "site": "site",
    "category": "category",
    "platform": "platform",
}


def _split_url(url: str) -> tuple[str, list[tuple[str, str]]]:
    """Resolve url against the base origin, return (pathname, query pairs)."""
    try:
        resolved = urljoin(settings.base_origin, url)
        parts = urlsplit(resolved)
        path = parts.path
        if "/." in path and not path.startswith("//"):
            # Absolute input skips dot-segment removal in urljoin
            path = urlsplit(urljoin(resolved, path)).path
    except ValueError as e:
        logger.warning("Invalid URL %r: %s", url, e)
        return "/", []
    return path or "/", parse_qsl(parts.query, keep_blank_values=True)


def _is_resources_path(pathname: str) -> bool:
    return (
        pathname == "/"
        or pathname == RESOURCES_PATHNAME
        or pathname.startswith(RESOURCES_PATHNAME + "/")
    )


def get_search_options(url: str) -> SearchOptions:
    """Parse a (possibly relative) URL into SearchOptions."""
    pathname, pairs = _split_url(url)

    params: dict[str, str] = {}
    integrations: list[str] = []
    for key, value in pairs:
        if key == "integration":
            integrations.append(value)
        else:
            params.setdefault(key, value)

    owner = None
    list_name = None
    if not _is_resources_path(pathname):
        m = _OWNER_PATH_RE.fullmatch(pathname)
        if m:
            owner = m.group(1)
            list_name = m.group(2) or DEFAULT_LIST
        else:
            logger.debug("No owner in pathname %s", pathname)

    return SearchOptions(
        keyword=params.get("q"),
        author=params.get("author"),
        owner=owner,
        list=list_name,
        site=params.get("site"),
        category=params.get("category"),
        platform=params.get("platform"),
        integrations=integrations,
        sort=params.get("sort", DEFAULT_SORT),
    )


def get_resource_pathname(options: SearchOptions) -> str:
    if options.owner:
        return f"/{options.owner}/{options.list}"
    return RESOURCES_PATHNAME


def _search_pairs(options: SearchOptions) -> list[tuple[str, str]]:
    pairs = []
    for field, key in _QUERY_KEYS.items():
        value = getattr(options, field)
        if value:
            pairs.append((key, value))
    pairs.extend(("integration", v) for v in options.integrations)
    if options.sort:
        pairs.append(("sort", options.sort))
    return pairs


def get_resource_search_params(options: SearchOptions) -> str:
    """Serialize the query part of options. owner/list live in the path."""
    return encode_search(_search_pairs(options))


def get_resource_url(options: SearchOptions, resource_id: str | None = None) -> str:
    pairs = _search_pairs(options)
    pathname = get_resource_pathname(options)

    if resource_id:
        if pathname == RESOURCES_PATHNAME:
            pathname = f"{pathname}/{resource_id}"
        else:
            pairs.append((RESOURCE_ID_PARAM, resource_id))

    search = encode_search(pairs)
    return f"{pathname}?{search}" if search else pathname


def get_action(options: SearchOptions, resource_id: str | None = None) -> str:
    """Form action for bookmarking: the list path, plus the resource when both are known."""
    action = get_resource_pathname(options)
    if options.list and resource_id:
        action = f"{action}?{RESOURCE_ID_PARAM}={resource_id}"
    return action
