"""Continuation-token pagination over list operations.

``fetch_page`` is any list method that accepts ``continuation_token=`` (for
example ``client.nodes.list``). Pages may be raw JSON mappings or parsed paged
models; fetching stops once a page carries no continuation token.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any

from .errors import PaginationError, ServiceFabricError
from .protocols import AsyncPageFetcher, PageFetcher

logger = logging.getLogger(__name__)

_ITEM_KEYS = ("Items", "items", "SubNames", "Properties")
_TOKEN_KEYS = ("ContinuationToken", "continuationToken")


def page_items(page: Any) -> list[Any]:
    if page is None:
        return []
    if isinstance(page, dict):
        for key in _ITEM_KEYS:
            value = page.get(key)
            if isinstance(value, list):
                return value
        return []
    if isinstance(page, list):
        return page
    items = getattr(page, "items", None)
    return list(items) if isinstance(items, list) else []


def page_token(page: Any) -> str | None:
    if isinstance(page, dict):
        for key in _TOKEN_KEYS:
            value = page.get(key)
            if isinstance(value, str) and value:
                return value
        return None
    value = getattr(page, "continuation_token", None)
    return value if isinstance(value, str) and value else None


def _next_token(page: Any, previous: str | None, page_number: int) -> str | None:
    token = page_token(page)
    if token is not None and token == previous:
        raise PaginationError(f"continuation token repeated on page {page_number}", page=page_number)
    return token


def iter_pages(fetch_page: PageFetcher, **kwargs: Any) -> Iterator[Any]:
    token: str | None = kwargs.pop("continuation_token", None)
    page_number = 0
    while True:
        page_number += 1
        try:
            page = fetch_page(continuation_token=token, **kwargs)
        except ServiceFabricError as error:
            logger.error("pagination failed at page %d", page_number)
            raise PaginationError(f"pagination failed at page {page_number}: {error}", page=page_number) from error

        logger.debug("fetched page %d with %d items", page_number, len(page_items(page)))
        yield page

        token = _next_token(page, token, page_number)
        if token is None:
            logger.debug("pagination complete after %d pages", page_number)
            return


def iter_items(fetch_page: PageFetcher, **kwargs: Any) -> Iterator[Any]:
    for page in iter_pages(fetch_page, **kwargs):
        yield from page_items(page)


def collect_all(fetch_page: PageFetcher, **kwargs: Any) -> list[Any]:
    return list(iter_items(fetch_page, **kwargs))


async def aiter_pages(fetch_page: AsyncPageFetcher, **kwargs: Any) -> AsyncIterator[Any]:
    token: str | None = kwargs.pop("continuation_token", None)
    page_number = 0
    while True:
        page_number += 1
        try:
            page = await fetch_page(continuation_token=token, **kwargs)
        except ServiceFabricError as error:
            logger.error("pagination failed at page %d", page_number)
            raise PaginationError(f"pagination failed at page {page_number}: {error}", page=page_number) from error

        logger.debug("fetched page %d with %d items", page_number, len(page_items(page)))
        yield page

        token = _next_token(page, token, page_number)
        if token is None:
            logger.debug("pagination complete after %d pages", page_number)
            return


async def aiter_items(fetch_page: AsyncPageFetcher, **kwargs: Any) -> AsyncIterator[Any]:
    async for page in aiter_pages(fetch_page, **kwargs):
        for item in page_items(page):
            yield item


async def acollect_all(fetch_page: AsyncPageFetcher, **kwargs: Any) -> list[Any]:
    return [item async for item in aiter_items(fetch_page, **kwargs)]


__all__ = [
    "acollect_all",
    "aiter_items",
    "aiter_pages",
    "collect_all",
    "iter_items",
    "iter_pages",
    "page_items",
    "page_token",
]
