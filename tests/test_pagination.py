import pytest

from weirdbites.core.pagination import (
    calculate_pagination_offset,
    calculate_pagination_meta,
    validate_pagination_params,
    parse_page_params,
)


@pytest.mark.parametrize("page,page_size,expected", [
    (1, 12, (0, 12)),
    (2, 12, (12, 12)),
    (5, 20, (80, 20)),
])
def test_offset(page, page_size, expected):
    assert calculate_pagination_offset(page, page_size) == expected


def test_meta_rounds_pages_up():
    meta = calculate_pagination_meta(2, 12, 50)

    assert meta.current_page == 2
    assert meta.page_size == 12
    assert meta.total_items == 50
    assert meta.total_pages == 5


def test_meta_exact_and_empty():
    assert calculate_pagination_meta(1, 12, 24).total_pages == 2
    assert calculate_pagination_meta(1, 12, 0).total_pages == 0


def test_validate_accepts_valid_params():
    assert validate_pagination_params(1, 12) is None
    assert validate_pagination_params(3, 100) is None


@pytest.mark.parametrize("page", [0, -1, "1", None])
def test_validate_rejects_bad_page(page):
    assert validate_pagination_params(page, 12) == "Page must be a number greater than 0"


@pytest.mark.parametrize("page_size", [0, 101, None])
def test_validate_rejects_bad_page_size(page_size):
    assert validate_pagination_params(1, page_size) == "Page size must be between 1 and 100"


@pytest.mark.parametrize("page,page_size,expected", [
    (None, None, (1, 12)),
    ("3", "24", (3, 24)),
    ("abc", "xyz", (1, 12)),
    ("0", "0", (1, 12)),
    ("2", "101", (2, 12)),
])
def test_parse_page_params(page, page_size, expected):
    assert parse_page_params(page, page_size, 12, 100) == expected
