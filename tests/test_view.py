from datetime import date, timedelta
from decimal import Decimal

from spend_tracker.core.models import Category, Transaction, TransactionType
from spend_tracker.pagination import PAGE_GAP, Pagination
from spend_tracker.sorting import SortDirection, SortField, SortKey, SortState
from spend_tracker.view import TableState, compose_page


def _snapshot(count=23):
    start = date(2024, 1, 1)
    return [
        Transaction(
            str(i),
            start + timedelta(days=i),
            Category.GROCERIES,
            TransactionType.EXPENSE,
            Decimal(i % 4),
        )
        for i in range(count)
    ]


def test_default_view_is_newest_first():
    view = compose_page(_snapshot(), TableState())
    assert [tx.id for tx in view.rows] == [str(i) for i in range(22, 12, -1)]
    assert view.page == 1
    assert view.total_pages == 3
    assert view.total_rows == 23
    assert view.page_numbers == [1, 2, 3]
    assert not view.has_previous
    assert view.has_next


def test_last_page_is_partial():
    state = TableState(pagination=Pagination(page=3, page_size=10))
    view = compose_page(_snapshot(), state)
    assert [tx.id for tx in view.rows] == ["2", "1", "0"]
    assert view.has_previous
    assert not view.has_next


def test_page_past_the_end_is_clamped():
    state = TableState(pagination=Pagination(page=9, page_size=10))
    view = compose_page(_snapshot(5), state)
    assert view.page == 1
    assert len(view.rows) == 5


def test_empty_snapshot_has_one_empty_page():
    view = compose_page([], TableState())
    assert view.rows == []
    assert view.total_pages == 1
    assert view.page_numbers == [1]


def test_concatenated_pages_equal_the_sorted_snapshot():
    snapshot = _snapshot()
    sort = SortState((SortKey(SortField.AMOUNT, SortDirection.DESC), SortKey(SortField.DATE)))
    rows = []
    for page in range(1, 6):
        view = compose_page(snapshot, TableState(sort=sort, pagination=Pagination(page, 5)))
        rows.extend(view.rows)
    assert rows == sort.apply(snapshot)


def test_sort_click_resets_to_the_first_page():
    state = TableState(pagination=Pagination(page=3, page_size=5))
    clicked = state.sort_by("amount")
    assert clicked.pagination.page == 1
    assert clicked.sort.keys == (SortKey(SortField.AMOUNT),)
    multi = clicked.go_to_page(2, 23).sort_by("date", multi=True)
    assert multi.pagination.page == 1
    assert len(multi.sort.keys) == 2
    assert multi.clear_sort().sort == SortState()


def test_page_size_change_resets_page():
    state = TableState(pagination=Pagination(page=3, page_size=5)).with_page_size(25)
    assert state.pagination == Pagination(page=1, page_size=25)


def test_state_round_trips_through_a_dict():
    state = TableState().sort_by("amount", multi=True).with_page_size(50).go_to_page(2, 120)
    data = state.to_dict()
    assert data == {
        "sort": [
            {"field": "date", "direction": "desc"},
            {"field": "amount", "direction": "asc"},
        ],
        "page": 2,
        "page_size": 50,
    }
    assert TableState.from_dict(data) == state
    assert TableState.from_dict({}) == TableState()


def test_large_table_page_picker():
    state = TableState(pagination=Pagination(page=5, page_size=2))
    view = compose_page(_snapshot(), state)
    assert view.total_pages == 12
    assert view.page_numbers == [1, PAGE_GAP, 4, 5, 6, PAGE_GAP, 12]
