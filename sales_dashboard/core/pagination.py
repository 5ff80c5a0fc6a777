# sales_dashboard/core/pagination.py
import math
from typing import Any, Optional

from loguru import logger

from ..config.setting import settings
from ..constants import LIMIT_PARAM, PAGE_PARAM
from ..models.database import PaginationInfo
from ..models.errors import InvalidParameter
from ..models.query import PaginationDirective

# skip() is sent as a BSON int64
MAX_OFFSET = 2 ** 63 - 1


def _parse_int(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, (list, tuple)):
        raw = raw[-1] if raw else None
        if raw is None:
            return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def resolve_pagination(page: Any = None, limit: Any = None,
                       default_limit: int = None, max_limit: int = None) -> PaginationDirective:
    """
    Page/limit from raw values.

    Missing or non-numeric values fall back to the defaults. Values below 1
    are rejected and limit is capped at max_limit. A page whose offset does
    not fit a 64-bit skip is rejected too.
    """
    default_limit = default_limit or settings.DEFAULT_PAGE_SIZE
    max_limit = max_limit or settings.MAX_PAGE_SIZE

    page_number = _parse_int(page)
    page_size = _parse_int(limit)

    if page_number is None:
        page_number = settings.DEFAULT_PAGE
    if page_size is None:
        page_size = default_limit

    if page_number < 1:
        raise InvalidParameter(PAGE_PARAM, "page must be 1 or greater")
    if page_size < 1:
        raise InvalidParameter(LIMIT_PARAM, "limit must be 1 or greater")
    if page_size > max_limit:
        logger.warning(f"limit {page_size} capped at {max_limit}")
        page_size = max_limit
    if (page_number - 1) * page_size > MAX_OFFSET:
        raise InvalidParameter(PAGE_PARAM, f"page {page_number} is out of range")

    return PaginationDirective(page=page_number, limit=page_size)


def build_pagination_info(pagination: PaginationDirective, total_count: int) -> PaginationInfo:
    """Pagination block for a listing response"""
    total_pages = math.ceil(total_count / pagination.limit) if pagination.limit else 0
    return PaginationInfo(
        page=pagination.page,
        limit=pagination.limit,
        total_count=total_count,
        total_pages=total_pages,
        has_next_page=pagination.page < total_pages,
        has_prev_page=pagination.page > 1,
    )
