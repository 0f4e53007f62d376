# spend_tracker/view.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Union

from spend_tracker.core.models import Transaction
from spend_tracker.pagination import Pagination
from spend_tracker.sorting import SortState


@dataclass(frozen=True)
class TableState:
    """Serializable UI state of the transaction table."""

    sort: SortState = field(default_factory=SortState)
    pagination: Pagination = field(default_factory=Pagination)

    def sort_by(self, sort_field, multi: bool = False) -> "TableState":
        return TableState(
            sort=self.sort.select(sort_field, multi=multi),
            pagination=replace(self.pagination, page=1),
        )

    def clear_sort(self) -> "TableState":
        return TableState(sort=self.sort.clear(), pagination=replace(self.pagination, page=1))

    def with_page_size(self, page_size: int) -> "TableState":
        return replace(self, pagination=self.pagination.with_page_size(page_size))

    def go_to_page(self, page: int, total_rows: int) -> "TableState":
        return replace(self, pagination=self.pagination.go_to(page, total_rows))

    def to_dict(self) -> dict:
        return {
            "sort": self.sort.to_list(),
            "page": self.pagination.page,
            "page_size": self.pagination.page_size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TableState":
        sort = SortState.from_list(data["sort"]) if data.get("sort") else SortState()
        pagination = Pagination(
            page=int(data.get("page", 1)),
            page_size=int(data.get("page_size", Pagination().page_size)),
        )
        return cls(sort=sort, pagination=pagination)


@dataclass(frozen=True)
class TablePage:
    rows: List[Transaction]
    page: int
    page_size: int
    total_pages: int
    total_rows: int
    page_numbers: List[Union[int, str]]

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def compose_page(transactions: Iterable[Transaction], state: TableState) -> TablePage:
    """Sort the snapshot with ``state.sort`` and cut out the requested page.

    A page beyond the end (e.g. after rows were removed) is clamped to the
    last page.
    """
    ordered = state.sort.apply(transactions)
    pagination = state.pagination.clamp(len(ordered))
    return TablePage(
        rows=pagination.slice(ordered),
        page=pagination.page,
        page_size=pagination.page_size,
        total_pages=pagination.total_pages(len(ordered)),
        total_rows=len(ordered),
        page_numbers=pagination.page_numbers(len(ordered)),
    )
