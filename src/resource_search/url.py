"""Query string utilities: whitelisting, dialog toggling and tag searches."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from urllib.parse import parse_qsl, quote_plus, urlencode, urljoin, urlsplit

from resource_search.config import settings
from resource_search.models import OPEN_PARAM, SUPPORTED_PARAMS
from resource_search.platforms import known_platforms

logger = logging.getLogger(__name__)


def _form_quote(string, safe="", encoding=None, errors=None) -> str:
    # application/x-www-form-urlencoded: "*" stays literal, "~" is escaped
    return quote_plus(string, safe="*", encoding=encoding, errors=errors).replace("~", "%7E")


def encode_search(pairs) -> str:
    """Encode query pairs the way browsers serialize URLSearchParams."""
    return urlencode(pairs, quote_via=_form_quote)


def get_url_search(url: str) -> str:
    """Query string of url, resolved against the base origin. Fragments are ignored."""
    try:
        return urlsplit(urljoin(settings.base_origin, url)).query
    except ValueError as e:
        logger.warning("Invalid URL %r: %s", url, e)
        return ""


def _parse_search(search: str | None) -> list[tuple[str, str]]:
    """Split a raw query string into pairs, accepting a leading ``?``."""
    if not search:
        return []
    if search.startswith("?"):
        search = search[1:]
    return parse_qsl(search, keep_blank_values=True)


def get_related_search_params(search: str | None) -> str:
    """Keep only whitelisted, non-empty pairs of a query string.

    Filtering is per pair, so repeated keys such as ``integration`` survive.
    """
    kept = []
    for key, value in _parse_search(search):
        if key not in SUPPORTED_PARAMS or value == "":
            logger.debug("Dropping search param %r=%r", key, value)
            continue
        kept.append((key, value))
    return encode_search(kept)


def get_site(url: str) -> str:
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        logger.warning("Invalid URL, no site: %s", url)
        return ""


def create_integration_search(value: str, platforms: Sequence[str] | None = None) -> str:
    """Build a top-sorted search for a single tag.

    Known platforms search by ``platform``, everything else by ``integration``.
    """
    if platforms is None:
        platforms = known_platforms()
    key = "platform" if value in platforms else "integration"
    return encode_search([("sort", "top"), (key, value)])


def toggle_search_params(search: str | None, key: str) -> str:
    """Clear the ``open`` marker if it equals key, otherwise set it."""
    pairs = _parse_search(search)
    current = next((v for k, v in pairs if k == OPEN_PARAM), None)

    if current == key:
        pairs = [(k, v) for k, v in pairs if k != OPEN_PARAM]
    elif current is None:
        pairs.append((OPEN_PARAM, key))
    else:
        # Replace the first marker in place, drop any duplicates
        updated = []
        replaced = False
        for k, v in pairs:
            if k != OPEN_PARAM:
                updated.append((k, v))
            elif not replaced:
                updated.append((k, key))
                replaced = True
        pairs = updated

    return encode_search(pairs)
