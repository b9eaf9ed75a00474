from __future__ import annotations

import asyncio
import logging
import math
from typing import Awaitable, Callable, List, Optional, TypeVar

from .credentials import Credential
from .logging import get_logger
from .pagination import Page, PageRequest, make_config, make_request

T = TypeVar("T")

DEFAULT_INITIAL_PAGE_SIZE = 500

PageFetcher = Callable[[Credential, PageRequest], Awaitable[Page[T]]]


async def fetch_all(
    fetch_page: PageFetcher[T],
    credential: Credential,
    *,
    initial_page_size: int = DEFAULT_INITIAL_PAGE_SIZE,
    logger: Optional[logging.Logger] = None,
) -> List[T]:
    """Fetch every page of a collection and return the items in page order.

    The first page is requested with ``initial_page_size``. The number of
    items the server actually returned becomes the page size for the
    remaining requests, which are issued concurrently. The first failure
    cancels the outstanding requests and is re-raised.
    """
    if initial_page_size <= 0:
        raise ValueError("initial_page_size must be > 0")
    log = get_logger(logger)

    first = await fetch_page(credential, make_request(make_config(initial_page_size), 1))
    page_size = len(first.items)
    if page_size == 0:
        log.debug(
            "First page empty; nothing more to fetch",
            extra={"total": first.total},
        )
        return list(first.items)

    total_pages = math.ceil(first.total / page_size)
    log.debug(
        "Discovered pagination",
        extra={
            "total": first.total,
            "page_size": page_size,
            "total_pages": total_pages,
        },
    )

    config = make_config(page_size)
    requests = [make_request(config, number) for number in range(2, total_pages + 1)]
    tasks = [asyncio.ensure_future(fetch_page(credential, request)) for request in requests]
    try:
        rest = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    items: List[T] = list(first.items)
    for page in rest:
        items.extend(page.items)
    return items
