# sales_dashboard/core/query_builder.py
from typing import Any

from loguru import logger

from ..constants import LIMIT_PARAM, PAGE_PARAM
from ..models.query import PaginationDirective, TransactionQuery
from .filter_compiler import compile_filter
from .param_normalizer import normalize_params, read_raw_params, text_value
from .pagination import resolve_pagination
from .sort_resolver import resolve_sort


def build_transaction_query(params: Any, paginate: bool = True) -> TransactionQuery:
    """
    Main entry point - turn request parameters into a TransactionQuery

    Args:
        params: QueryParams or a mapping of name -> str | list[str]
        paginate: read page/limit; when False the first page of the default
            size is attached and callers apply their own cap

    Returns:
        TransactionQuery with predicate, sort and pagination directives
    """
    filters = normalize_params(params)

    if paginate:
        raw = read_raw_params(params)
        pagination = resolve_pagination(
            text_value(raw[PAGE_PARAM]) if PAGE_PARAM in raw else None,
            text_value(raw[LIMIT_PARAM]) if LIMIT_PARAM in raw else None,
        )
    else:
        pagination = PaginationDirective()

    query = TransactionQuery(
        predicate=compile_filter(filters),
        sort=resolve_sort(filters.sort_by),
        pagination=pagination,
    )
    logger.info(
        f"Built query: {len(query.predicate)} clause(s), sort={query.sort.field}:{query.sort.direction.value}, "
        f"page={query.pagination.page}, limit={query.pagination.limit}"
    )
    return query
