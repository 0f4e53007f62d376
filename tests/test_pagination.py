import pytest

from spend_tracker.pagination import (
    PAGE_GAP,
    Pagination,
    page_numbers,
    page_slice,
    total_pages,
)


@pytest.mark.parametrize(
    "rows, size, expected",
    [(0, 10, 1), (1, 10, 1), (10, 10, 1), (11, 10, 2), (47, 5, 10), (100, 100, 1)],
)
def test_total_pages(rows, size, expected):
    assert total_pages(rows, size) == expected


def test_page_slice_is_clipped():
    rows = list(range(23))
    assert page_slice(rows, 1, 10) == list(range(10))
    assert page_slice(rows, 3, 10) == [20, 21, 22]
    assert page_slice(rows, 4, 10) == []
    assert page_slice([], 1, 10) == []


@pytest.mark.parametrize("n", [0, 1, 9, 10, 11, 37, 100])
@pytest.mark.parametrize("size", [1, 5, 10, 25])
def test_pages_cover_every_row_exactly_once(n, size):
    rows = list(range(n))
    pages = [page_slice(rows, p, size) for p in range(1, total_pages(n, size) + 1)]
    assert [row for page in pages for row in page] == rows


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        total_pages(10, 0)
    with pytest.raises(ValueError):
        Pagination(page_size=0)
    with pytest.raises(ValueError):
        Pagination(page=0)


def test_changing_page_size_resets_to_the_first_page():
    p = Pagination(page=4, page_size=10)
    assert p.with_page_size(25) == Pagination(page=1, page_size=25)


def test_navigation_is_clamped():
    p = Pagination(page=1, page_size=10)
    assert p.previous(35) == Pagination(1, 10)
    assert p.next(35) == Pagination(2, 10)
    assert p.go_to(99, 35) == Pagination(4, 10)
    assert p.go_to(-3, 35) == Pagination(1, 10)
    assert Pagination(4, 10).next(35) == Pagination(4, 10)
    assert Pagination(3, 10).clamp(5) == Pagination(1, 10)
    assert Pagination(1, 10).next(0) == Pagination(1, 10)


def test_page_numbers_collapse_gaps():
    assert page_numbers(1, 1) == [1]
    assert page_numbers(1, 3) == [1, 2, 3]
    assert page_numbers(1, 10) == [1, 2, PAGE_GAP, 10]
    assert page_numbers(5, 10) == [1, PAGE_GAP, 4, 5, 6, PAGE_GAP, 10]
    assert page_numbers(10, 10) == [1, PAGE_GAP, 9, 10]
    assert page_numbers(3, 10) == [1, 2, 3, 4, PAGE_GAP, 10]
    assert page_numbers(2, 4) == [1, 2, 3, 4]


def test_pagination_page_numbers():
    assert Pagination(page=6, page_size=5).page_numbers(47) == [1, PAGE_GAP, 5, 6, 7, PAGE_GAP, 10]
