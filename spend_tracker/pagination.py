# spend_tracker/pagination.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence, TypeVar, Union

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = (5, 10, 25, 50, 100)
PAGE_GAP = "..."


def _check_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise ValueError(f"page_size must be greater than 0, got {page_size}")


def total_pages(total_rows: int, page_size: int) -> int:
    """Number of pages needed for ``total_rows``; an empty table still has one."""
    _check_page_size(page_size)
    return max(1, -(-total_rows // page_size))


def page_slice(rows: Sequence[T], page: int, page_size: int) -> List[T]:
    _check_page_size(page_size)
    if page < 1:
        raise ValueError(f"page must be 1 or greater, got {page}")
    start = (page - 1) * page_size
    return list(rows[start:start + page_size])


def page_numbers(current: int, last: int) -> List[Union[int, str]]:
    """Pages to offer in a page picker.

    Always the first and last page plus the neighbours of ``current``; each
    run of hidden pages becomes a single ``PAGE_GAP`` marker.
    """
    shown = [p for p in range(1, last + 1) if p in (1, last) or abs(p - current) <= 1]
    items: List[Union[int, str]] = []
    for idx, page in enumerate(shown):
        if idx and page - shown[idx - 1] > 1:
            items.append(PAGE_GAP)
        items.append(page)
    return items


@dataclass(frozen=True)
class Pagination:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        _check_page_size(self.page_size)
        if self.page < 1:
            raise ValueError(f"page must be 1 or greater, got {self.page}")

    def total_pages(self, total_rows: int) -> int:
        return total_pages(total_rows, self.page_size)

    def with_page_size(self, page_size: int) -> "Pagination":
        return Pagination(page=1, page_size=page_size)

    def go_to(self, page: int, total_rows: int) -> "Pagination":
        last = self.total_pages(total_rows)
        return replace(self, page=min(max(page, 1), last))

    def next(self, total_rows: int) -> "Pagination":
        return self.go_to(self.page + 1, total_rows)

    def previous(self, total_rows: int) -> "Pagination":
        return self.go_to(self.page - 1, total_rows)

    def clamp(self, total_rows: int) -> "Pagination":
        return self.go_to(self.page, total_rows)

    def slice(self, rows: Sequence[T]) -> List[T]:
        return page_slice(rows, self.page, self.page_size)

    def page_numbers(self, total_rows: int) -> List[Union[int, str]]:
        return page_numbers(self.page, self.total_pages(total_rows))
