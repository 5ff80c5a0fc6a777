"""Tests for sort-token resolution and page/limit handling."""

import pytest
from pymongo import ASCENDING, DESCENDING

from sales_dashboard.config.setting import settings
from sales_dashboard.core.pagination import build_pagination_info, resolve_pagination
from sales_dashboard.core.sort_resolver import resolve_sort
from sales_dashboard.models.errors import InvalidParameter
from sales_dashboard.models.query import PaginationDirective, SortDirection


@pytest.mark.parametrize(
    "token, field, direction",
    [
        ("amount_asc", "amount", SortDirection.ASC),
        ("id_desc", "transactionID", SortDirection.DESC),
        ("name_desc", "customerName", SortDirection.DESC),
        ("customer_asc", "customerName", SortDirection.ASC),
        ("category_desc", "productCategory", SortDirection.DESC),
        ("finalAmount_desc", "finalAmount", SortDirection.DESC),
        (None, "date", SortDirection.DESC),
    ],
)
def test_sort_tokens_resolve_through_alias_table(token, field, direction) -> None:
    directive = resolve_sort(token)

    assert directive.field == field
    assert directive.direction == direction


def test_direction_other_than_exact_desc_is_ascending() -> None:
    assert resolve_sort("amount_DESC").direction == SortDirection.ASC
    assert resolve_sort("amount").direction == SortDirection.ASC
    assert resolve_sort("amount").field == "amount"


def test_unknown_sort_field_passes_through() -> None:
    assert resolve_sort("brand_desc").field == "brand"


def test_operator_like_sort_field_is_rejected() -> None:
    with pytest.raises(InvalidParameter):
        resolve_sort("$where_desc")
    with pytest.raises(InvalidParameter):
        resolve_sort("_desc")


def test_sort_directive_renders_pymongo_key_list() -> None:
    assert resolve_sort("amount_desc").to_mongo() == [("amount", DESCENDING), ("transactionID", DESCENDING)]
    assert resolve_sort("age_asc").to_mongo() == [("age", ASCENDING), ("transactionID", ASCENDING)]


def test_id_sort_has_no_duplicate_tie_break() -> None:
    assert resolve_sort("id_asc").to_mongo() == [("transactionID", ASCENDING)]


def test_pagination_defaults() -> None:
    pagination = resolve_pagination()

    assert (pagination.page, pagination.limit, pagination.offset) == (1, 10, 0)


def test_non_numeric_pagination_falls_back_to_defaults() -> None:
    pagination = resolve_pagination("two", "lots")

    assert (pagination.page, pagination.limit) == (1, 10)


def test_offset_from_page_and_limit() -> None:
    assert resolve_pagination("3", "20").offset == 40


@pytest.mark.parametrize("page, limit", [("0", "10"), ("-2", "10"), ("1", "0")])
def test_values_below_one_are_rejected(page, limit) -> None:
    with pytest.raises(InvalidParameter):
        resolve_pagination(page, limit)


def test_limit_is_capped() -> None:
    pagination = resolve_pagination("1", str(settings.MAX_PAGE_SIZE + 500))

    assert pagination.limit == settings.MAX_PAGE_SIZE


def test_page_with_oversized_offset_is_rejected() -> None:
    with pytest.raises(InvalidParameter) as excinfo:
        resolve_pagination("99999999999999999999", "20")

    assert excinfo.value.parameter == "page"


def test_pagination_info_flags() -> None:
    info = build_pagination_info(PaginationDirective(page=3, limit=20), total_count=95)

    assert info.total_pages == 5
    assert info.has_next_page is True
    assert info.has_prev_page is True

    last = build_pagination_info(PaginationDirective(page=5, limit=20), total_count=95)
    assert last.has_next_page is False


def test_pagination_info_for_empty_result() -> None:
    info = build_pagination_info(PaginationDirective(page=1, limit=10), total_count=0)

    assert info.total_pages == 0
    assert info.has_next_page is False
    assert info.has_prev_page is False
