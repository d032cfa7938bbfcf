from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

ELLIPSIS = "..."


@dataclass(frozen=True)
class PageView(Generic[T]):
    items: list[T]
    page: int
    total_pages: int
    total_items: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def total_pages(count: int, page_size: int) -> int:
    return max(1, math.ceil(max(0, count) / max(1, page_size)))


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), max(1, pages))


def paginate(items: Sequence[T], page: int, page_size: int) -> PageView[T]:
    pages = total_pages(len(items), page_size)
    current = clamp_page(page, pages)
    start = (current - 1) * page_size
    return PageView(items=list(items[start : start + page_size]), page=current, total_pages=pages, total_items=len(items))


def page_numbers(current: int, pages: int) -> list[int | str]:
    """Page buttons with ellipsis gaps, at most first/last plus a window of three."""
    if pages <= 5:
        return list(range(1, pages + 1))

    numbers: list[int | str] = [1]
    if current > 3:
        numbers.append(ELLIPSIS)
    numbers.extend(range(max(2, current - 1), min(pages - 1, current + 1) + 1))
    if current < pages - 2:
        numbers.append(ELLIPSIS)
    numbers.append(pages)
    return numbers
