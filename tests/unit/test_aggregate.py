import asyncio

import pytest

from jira_rest.aggregate import fetch_all
from jira_rest.credentials import anonymous
from jira_rest.errors import TransportError
from jira_rest.pagination import Page, PageRequest

CREDENTIAL = anonymous("https://example.atlassian.net")


def _capped_server(total: int, cap: int, delays: dict | None = None, fail_pages: set | None = None):
    """Fake single-page fetcher that never returns more than ``cap`` items."""
    calls: list[PageRequest] = []

    async def fetch_page(credential, request: PageRequest) -> Page[int]:
        assert credential is CREDENTIAL
        calls.append(request)
        if delays and request.page_number in delays:
            await asyncio.sleep(delays[request.page_number])
        if fail_pages and request.page_number in fail_pages:
            raise TransportError(status_code=500, body_snippet="boom")
        size = min(request.items_per_page, cap)
        start = request.start_at
        items = tuple(range(start, min(start + size, total)))
        return Page(
            max_results=size,
            start_at=start,
            total=total,
            is_last=start + len(items) >= total,
            items=items,
        )

    return fetch_page, calls


@pytest.mark.anyio
async def test_fetch_all_uses_page_size_returned_by_server():
    fetch_page, calls = _capped_server(total=120, cap=40)

    items = await fetch_all(fetch_page, CREDENTIAL)

    assert items == list(range(120))
    assert calls[0] == PageRequest(items_per_page=500, page_number=1)
    assert [c.to_query_params() for c in calls[1:]] == [
        {"startAt": 40, "maxResults": 40},
        {"startAt": 80, "maxResults": 40},
    ]


@pytest.mark.anyio
async def test_fetch_all_preserves_page_order_regardless_of_completion():
    fetch_page, _ = _capped_server(total=100, cap=25, delays={2: 0.05, 3: 0.02})

    items = await fetch_all(fetch_page, CREDENTIAL)

    assert items == list(range(100))


@pytest.mark.anyio
async def test_fetch_all_empty_collection_makes_single_request():
    fetch_page, calls = _capped_server(total=0, cap=40)

    assert await fetch_all(fetch_page, CREDENTIAL) == []
    assert len(calls) == 1


@pytest.mark.anyio
async def test_fetch_all_single_page_makes_single_request():
    fetch_page, calls = _capped_server(total=30, cap=500)

    assert await fetch_all(fetch_page, CREDENTIAL) == list(range(30))
    assert len(calls) == 1


@pytest.mark.anyio
async def test_fetch_all_fails_when_a_later_page_fails():
    fetch_page, _ = _capped_server(total=120, cap=40, fail_pages={2})

    with pytest.raises(TransportError):
        await fetch_all(fetch_page, CREDENTIAL)


@pytest.mark.anyio
async def test_fetch_all_cancels_outstanding_pages_on_failure():
    cancelled: list[int] = []
    base_fetch, _ = _capped_server(total=120, cap=40)

    async def fetch_page(credential, request):
        if request.page_number == 2:
            raise TransportError(status_code=503, body_snippet="unavailable")
        if request.page_number == 3:
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(3)
                raise
        return await base_fetch(credential, request)

    with pytest.raises(TransportError):
        await fetch_all(fetch_page, CREDENTIAL)
    assert cancelled == [3]


@pytest.mark.anyio
async def test_fetch_all_first_page_failure_propagates():
    fetch_page, calls = _capped_server(total=120, cap=40, fail_pages={1})

    with pytest.raises(TransportError):
        await fetch_all(fetch_page, CREDENTIAL)
    assert len(calls) == 1


@pytest.mark.anyio
async def test_fetch_all_custom_initial_page_size():
    fetch_page, calls = _capped_server(total=10, cap=100)

    assert await fetch_all(fetch_page, CREDENTIAL, initial_page_size=4) == list(range(10))
    assert [c.start_at for c in calls] == [0, 4, 8]


@pytest.mark.anyio
async def test_fetch_all_rejects_non_positive_initial_page_size():
    fetch_page, _ = _capped_server(total=10, cap=100)

    with pytest.raises(ValueError):
        await fetch_all(fetch_page, CREDENTIAL, initial_page_size=0)
