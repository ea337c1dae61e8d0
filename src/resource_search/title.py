"""Display titles for discovery pages."""
from __future__ import annotations

from collections.abc import Callable

from resource_search.helpers import capitalize as _capitalize
from resource_search.models import CATEGORY_LABELS, Category, SearchOptions

DEFAULT_TITLE = "Discover"
MULTIPLE_TITLE = "Search Result"


def get_category_list_name(
    category: str, capitalize: Callable[[str], str] = _capitalize
) -> str:
    try:
        return CATEGORY_LABELS[Category(category)]
    except ValueError:
        return capitalize(category)


def get_title_by_search_options(
    options: SearchOptions, capitalize: Callable[[str], str] = _capitalize
) -> str:
    """Single matching phrase, "Search Result" for several, "Discover" for none."""
    phrases: list[str] = []

    if options.author:
        phrases.append(f"Made by {options.author}")
    if options.category:
        phrases.append(get_category_list_name(options.category, capitalize))
    if options.keyword and options.keyword.strip():
        phrases.append(f"Mentioned {options.keyword}")
    if options.platform:
        phrases.append(f"Hosted on {options.platform}")
    if options.list:
        phrases.append(capitalize(options.list))
    if options.integrations:
        phrases.append(f"Built with {', '.join(options.integrations)}")
    if options.site:
        phrases.append(f"Published on {options.site}")

    if len(phrases) > 1:
        return MULTIPLE_TITLE
    return phrases[0] if phrases else DEFAULT_TITLE
