from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from .errors import DecodeError

T = TypeVar("T")
U = TypeVar("U")

_ITEM_KEYS = ("values", "issues")


@dataclass(frozen=True)
class PaginationConfig:
    items_per_page: int


@dataclass(frozen=True)
class PageRequest:
    items_per_page: int
    page_number: int

    @property
    def start_at(self) -> int:
        return (self.page_number - 1) * self.items_per_page

    def to_query_params(self) -> Dict[str, int]:
        return {"startAt": self.start_at, "maxResults": self.items_per_page}


def make_config(items_per_page: int) -> PaginationConfig:
    return PaginationConfig(items_per_page=items_per_page)


def make_request(config: PaginationConfig, page_number: int) -> PageRequest:
    return PageRequest(items_per_page=config.items_per_page, page_number=page_number)


def to_query_params(request: PageRequest) -> Dict[str, int]:
    return request.to_query_params()


def _expect_int(obj: Any, path: str) -> int:
    if not isinstance(obj, int) or isinstance(obj, bool):
        raise DecodeError(f"Expected integer at {path}")
    return obj


def _decode_items(
    item_decoder: Callable[[Any], T],
    payload: Dict[str, Any],
) -> Tuple[str, List[T]]:
    # first key holding a list of decodable items wins
    failure: Optional[DecodeError] = None
    for key in _ITEM_KEYS:
        if key not in payload:
            continue
        raw_items = payload[key]
        if not isinstance(raw_items, list):
            failure = DecodeError(f"Expected list at page.{key}")
            continue
        items: List[T] = []
        try:
            for idx, raw in enumerate(raw_items):
                try:
                    items.append(item_decoder(raw))
                except DecodeError as exc:
                    raise DecodeError(f"page.{key}[{idx}]: {exc}") from exc
        except DecodeError as exc:
            failure = exc
            continue
        return key, items
    if failure is not None:
        raise failure
    raise DecodeError("Expected list at page.values or page.issues")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a paginated collection.

    ``items`` is stored as a tuple so a decoded page cannot be mutated.
    """

    max_results: int
    start_at: int
    total: int
    is_last: bool
    items: Tuple[T, ...]

    @classmethod
    def decode(cls, item_decoder: Callable[[Any], T], payload: Any) -> "Page[T]":
        if not isinstance(payload, dict):
            raise DecodeError("Expected object at page")
        max_results = _expect_int(payload.get("maxResults"), "page.maxResults")
        start_at = _expect_int(payload.get("startAt"), "page.startAt")
        total = _expect_int(payload.get("total"), "page.total")

        key, items = _decode_items(item_decoder, payload)
        if len(items) > max_results:
            raise DecodeError(
                f"page.{key} holds {len(items)} items but maxResults is {max_results}"
            )

        raw_is_last = payload.get("isLast")
        if raw_is_last is None:
            is_last = start_at + len(items) >= total
        elif isinstance(raw_is_last, bool):
            is_last = raw_is_last
        else:
            raise DecodeError("Expected boolean at page.isLast")

        return cls(
            max_results=max_results,
            start_at=start_at,
            total=total,
            is_last=is_last,
            items=tuple(items),
        )

    @property
    def page_number(self) -> int:
        if self.max_results <= 0:
            return 1
        return math.ceil(self.start_at / self.max_results) + 1

    @property
    def total_pages(self) -> int:
        if self.max_results <= 0:
            return 0
        return math.ceil(self.total / self.max_results)

    def next_page(self) -> Optional[PageRequest]:
        if self.is_last:
            return None
        return make_request(make_config(self.max_results), self.page_number + 1)

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return replace(self, items=tuple(fn(item) for item in self.items))


def decode_page(item_decoder: Callable[[Any], T], payload: Any) -> Page[T]:
    return Page.decode(item_decoder, payload)


def next_page(page: Page[Any]) -> Optional[PageRequest]:
    return page.next_page()


def map_page(fn: Callable[[T], U], page: Page[T]) -> Page[U]:
    return page.map(fn)
