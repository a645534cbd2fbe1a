"""Cursor-driven paging over Data API ``list`` endpoints."""

from __future__ import annotations

from typing import Any, Iterator

from yt_revenue.config import MAX_PAGE_SIZE, PAGE_SIZE


def iter_pages(resource: Any, page_size: int = PAGE_SIZE, **params: Any) -> Iterator[dict[str, Any]]:
    """Yield raw list responses until the server stops handing out a ``nextPageToken``.

    ``resource`` is a collection such as ``youtube.playlists()``. The first request goes
    out without a page token; each following one reuses the previous token unchanged.
    """
    max_results = min(page_size, MAX_PAGE_SIZE)
    next_page_token: str | None = None
    while True:
        response = resource.list(maxResults=max_results, pageToken=next_page_token, **params).execute()
        yield response
        next_page_token = response.get("nextPageToken")
        if not next_page_token:
            break


def iter_items(resource: Any, page_size: int = PAGE_SIZE, **params: Any) -> Iterator[dict[str, Any]]:
    for response in iter_pages(resource, page_size, **params):
        yield from response.get("items", [])


def fetch_all(resource: Any, page_size: int = PAGE_SIZE, **params: Any) -> list[dict[str, Any]]:
    return list(iter_items(resource, page_size, **params))
