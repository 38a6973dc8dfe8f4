"""Fetch encyclopedia pages concurrently and summarise their text."""

from __future__ import annotations

import argparse
import json
import os
import time
import urllib.parse
import urllib.request
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

API_URL = "https://en.wikipedia.org/w/api.php"
TIMEOUT_SECONDS = 30.0

PAGES = (
    "Giannis Antetokounmpo",
    "James Harden",
    "Russell Westbrook",
    "Stephen Curry",
    "Kevin Durant",
    "LeBron James",
    "Kobe Bryant",
    "Michael Jordan",
    "Shaquille O'Neal",
)


@dataclass(frozen=True)
class ProcessedPage:
    """The title and plain text of one page."""

    title: str
    data: str

    def first_sentence(self) -> str:
        """Text up to the first full stop."""
        return self.data.split(".", 1)[0]

    def word_count(self) -> int:
        """Number of whitespace separated words."""
        return len(self.data.split())


def fetch_page(title: str) -> ProcessedPage:
    """Download the plain text of the page called ``title``."""
    query = urllib.parse.urlencode(
        {
            "action": "query",
            "prop": "extracts",
            "explaintext": 1,
            "redirects": 1,
            "format": "json",
            "titles": title,
        }
    )
    request = urllib.request.Request(
        f"{API_URL}?{query}", headers={"User-Agent": "tidbits-wikicrawl"}
    )
    with urllib.request.urlopen(request, timeout=TIMEOUT_SECONDS) as response:
        payload = json.load(response)
    pages = payload.get("query", {}).get("pages", {})
    for page in pages.values():
        if "missing" in page or "invalid" in page:
            break
        return ProcessedPage(page.get("title", title), page.get("extract", ""))
    raise LookupError(f"no page titled {title!r}")


def _default_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


def crawl(
    titles: Iterable[str] = PAGES,
    fetch: Callable[[str], ProcessedPage] = fetch_page,
    workers: int | None = None,
) -> list[ProcessedPage]:
    """Fetch every title concurrently; results keep the order of ``titles``."""
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    with ThreadPoolExecutor(max_workers=workers or _default_workers()) as pool:
        return list(pool.map(fetch, titles))


def _duration(seconds: float) -> str:
    return f"{seconds * 1000:.3f}ms"


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch the pages, print a summary of each and timing statistics."""
    parser = argparse.ArgumentParser(description="Crawl pages concurrently")
    parser.add_argument("--workers", type=int, default=None, help="Number of threads")
    args = parser.parse_args(argv)
    workers = args.workers or _default_workers()
    start = time.perf_counter()
    pages = crawl(PAGES, fetch_page, workers)
    for page in pages:
        page_start = time.perf_counter()
        print(f"Title: {page.title}")
        print(f"First sentence: {page.first_sentence()}")
        print(f"Word count: {page.word_count()}")
        print(f"Page time: {_duration(time.perf_counter() - page_start)}")
    total = time.perf_counter() - start
    print(f"Total time: {_duration(total)}")
    print(f"Average time per page: {_duration(total / len(PAGES))}")
    print(f"Total number of pages: {len(PAGES)}")
    print(f"Number of threads: {workers}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())