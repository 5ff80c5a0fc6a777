# sales_dashboard/core/helpers/query_helpers.py
from typing import Dict, Iterable, Optional
import re

from ...models.query import DateRange, NumericRange
from .date_utils import end_of_day, start_of_day


def build_keyword_clause(keyword: Optional[str], fields: Iterable[str]) -> Dict:
    """Case-insensitive substring match on any of the fields, as one $or group"""
    if not keyword:
        return {}
    pattern = re.escape(keyword)
    return {"$or": [{field: {"$regex": pattern, "$options": "i"}} for field in fields]}


def build_in_clause(field: str, values: Iterable[str]) -> Dict:
    """Field value must be one of the selected values (for arrays: share one)"""
    selected = sorted(set(values))
    if not selected:
        return {}
    return {field: {"$in": selected}}


def build_range_clause(field: str, bounds: Optional[NumericRange]) -> Dict:
    """Inclusive range; an open side adds no operator"""
    if bounds is None:
        return {}
    condition = {}
    if bounds.min is not None:
        condition["$gte"] = bounds.min
    if bounds.max is not None:
        condition["$lte"] = bounds.max
    return {field: condition} if condition else {}


def build_date_clause(field: str, date_range: Optional[DateRange]) -> Dict:
    """Whole-day inclusive range: start of startDate through end of endDate (UTC)"""
    if date_range is None:
        return {}
    condition = {}
    if date_range.start_date is not None:
        condition["$gte"] = start_of_day(date_range.start_date)
    if date_range.end_date is not None:
        condition["$lte"] = end_of_day(date_range.end_date)
    return {field: condition} if condition else {}
