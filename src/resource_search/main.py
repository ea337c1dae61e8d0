"""Command-line inspector: show how a discovery URL is understood."""
from __future__ import annotations

import argparse
import json
import logging
import sys

from resource_search.config import settings
from resource_search.redirect import get_discover_redirect
from resource_search.search import get_action, get_resource_url, get_search_options
from resource_search.title import get_title_by_search_options
from resource_search.url import get_related_search_params, get_url_search


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="resource-search",
        description="Parse a discovery URL and print its canonical forms",
    )
    parser.add_argument("url", help="absolute or relative URL, e.g. /acme/starred?q=auth")
    parser.add_argument("--resource-id", default=None, help="resource to link to")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser.parse_args(argv)


def build_report(url: str, resource_id: str | None = None) -> dict:
    options = get_search_options(url)
    return {
        "options": options.model_dump(),
        "title": get_title_by_search_options(options),
        "url": get_resource_url(options, resource_id),
        "action": get_action(options, resource_id),
        "search": get_related_search_params(get_url_search(url)),
        "redirect": get_discover_redirect(url),
    }


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    _setup_logging(args.log_level)
    logger = logging.getLogger(__name__)
    logger.debug("Inspecting %s", args.url)

    report = build_report(args.url, args.resource_id)
    print(json.dumps(report, indent=2, ensure_ascii=False))
    sys.exit(0)


if __name__ == "__main__":
    main()
