from __future__ import annotations

import enum
from typing import Tuple

from pydantic import BaseModel, field_validator

# Query keys that survive sanitizing; "open" tracks the dialog state
SUPPORTED_PARAMS = (
    "list",
    "q",
    "category",
    "platform",
    "integration",
    "author",
    "site",
    "sort",
    "open",
)

DEFAULT_SORT = "new"
DEFAULT_LIST = "bookmarks"

RESOURCES_PATHNAME = "/resources"
OPEN_PARAM = "open"
RESOURCE_ID_PARAM = "resourceId"


class Category(str, enum.Enum):
    PACKAGE = "package"
    REPOSITORY = "repository"
    OTHERS = "others"


CATEGORY_LABELS = {
    Category.PACKAGE: "Packages",
    Category.REPOSITORY: "Examples",
    Category.OTHERS: "Others",
}


class SearchOptions(BaseModel):
    """Discovery query derived from a URL path and query string.

    Scalar fields are ``None`` when absent, never ``""``. ``owner`` and
    ``list`` only ever come from the pathname, the rest only from the query.
    """

    model_config = {"frozen": True}

    keyword: str | None = None      # ?q=
    author: str | None = None
    owner: str | None = None        # /{owner}
    list: str | None = None         # /{owner}/{list}
    site: str | None = None         # hostname
    category: str | None = None     # usually a Category value, not enforced
    platform: str | None = None
    integrations: Tuple[str, ...] = ()  # display order
    sort: str | None = DEFAULT_SORT

    @field_validator(
        "keyword", "author", "owner", "list", "site", "category", "platform", "sort",
        mode="before",
    )
    @classmethod
    def _empty_to_none(cls, value):
        return value or None

    @field_validator("integrations", mode="before")
    @classmethod
    def _drop_empty_integrations(cls, value):
        return tuple(v for v in value or () if v)
