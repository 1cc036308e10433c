#!/usr/bin/env python3
"""
Command-line entry point.

Usage:
    sitesearch search INDEX QUERY [--json] [--lang ja]
    sitesearch annotate PAGE.html "https://site/page#search=term"
    sitesearch serve [--host 0.0.0.0] [--port 8000]
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict

from sitesearch.annotate import HtmlSurface, PageAnnotator
from sitesearch.core.config import settings
from sitesearch.search import SearchEngine, SearchIndex, SearchState

logger = logging.getLogger(__name__)


async def _search(index_source: str, query: str, lang: str):
    engine = SearchEngine(SearchIndex(index_source, timeout=settings.INDEX_TIMEOUT))
    if not await engine.load():
        return None
    return engine.search(query, lang=lang)


def cmd_search(args: argparse.Namespace) -> int:
    result = asyncio.run(_search(args.index, args.query, args.lang))
    if result is None:
        print(f"Could not load index: {args.index}", file=sys.stderr)
        return 1

    if args.json:
        payload = asdict(result)
        payload["total"] = result.total
        print(json.dumps(payload, ensure_ascii=False, indent=2, default=str))
        return 0

    if result.state != SearchState.RESULTS:
        if result.message:
            print(result.message)
        return 0

    print(result.announcement)
    for rank, hit in enumerate(result.hits, start=1):
        print(f"{rank:>3}. [{hit.score}] {hit.title_html}")
        if hit.excerpt_html:
            print(f"     {hit.excerpt_html}")
        print(f"     {hit.href}")
    return 0


async def _annotate(html: str, url: str) -> tuple[str, str, bool]:
    surface = HtmlSurface(html, url)
    annotator = PageAnnotator()
    highlight = annotator.annotate(surface)
    # Output is a static snapshot; the fade/remove steps never run
    annotator.teardown()
    return surface.html, surface.url, highlight is not None


def cmd_annotate(args: argparse.Namespace) -> int:
    with open(args.page, "r", encoding="utf-8") as f:
        html = f.read()
    annotated, url, found = asyncio.run(_annotate(html, args.url))
    if not found:
        logger.info("No highlight applied")
    print(annotated)
    print(f"URL: {url}", file=sys.stderr)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from sitesearch.web.main import run

    run(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitesearch", description="Search a page index and highlight matches"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_search = sub.add_parser("search", help="Search an index file or URL")
    p_search.add_argument("index", help="Path or http(s) URL of the index JSON")
    p_search.add_argument("query")
    p_search.add_argument("--json", action="store_true", help="Print JSON")
    p_search.add_argument("--lang", default="en", help="Message language")
    p_search.set_defaults(func=cmd_search)

    p_annotate = sub.add_parser(
        "annotate", help="Highlight the #search= query of URL in an HTML page"
    )
    p_annotate.add_argument("page", help="HTML file")
    p_annotate.add_argument("url", help="Navigation URL carrying #search=<query>")
    p_annotate.set_defaults(func=cmd_annotate)

    p_serve = sub.add_parser("serve", help="Run the search web frontend")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
