# sales_dashboard/utilities/helpers/database_helpers.py
from typing import Dict, List, Optional, Union

from ...models.database import RangeBounds


def get_count(collection, match_query: Dict) -> int:
    """Get document count for match query"""
    return collection.count_documents(match_query)


def get_sorted_distinct(collection, field: str) -> List:
    """Distinct non-null values of a field, ascending"""
    return sorted(value for value in collection.distinct(field) if value is not None)


def get_range(collection, field: str, default: RangeBounds) -> RangeBounds:
    """Min/max of a numeric field, or the default on an empty collection"""
    result = list(collection.aggregate([
        {"$group": {"_id": None, "min": {"$min": f"${field}"}, "max": {"$max": f"${field}"}}}
    ]))
    if not result:
        return default
    bounds = result[0]
    return RangeBounds(
        min=_or_default(bounds.get("min"), default.min),
        max=_or_default(bounds.get("max"), default.max),
    )


def _or_default(value: Optional[Union[int, float]], default: Union[int, float]) -> Union[int, float]:
    return default if value is None else value
