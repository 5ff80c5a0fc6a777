# sales_dashboard/core/sort_resolver.py
from typing import Optional

from loguru import logger

from ..constants import DEFAULT_SORT_FIELD, SORT_FIELD_ALIASES, SORT_PARAM
from ..models.errors import InvalidParameter
from ..models.query import SortDirection, SortDirective

DEFAULT_SORT = SortDirective(field=DEFAULT_SORT_FIELD, direction=SortDirection.DESC)


def resolve_sort(sort_by: Optional[str]) -> SortDirective:
    """
    Resolve a ``<field>_<direction>`` token, e.g. ``amount_desc``.

    Only an exact ``desc`` sorts descending. Field names outside the alias
    table are passed through as-is.
    """
    if not sort_by:
        return DEFAULT_SORT

    field_token, separator, direction_token = sort_by.rpartition("_")
    if not separator:
        # no underscore: the whole token names the field
        field_token, direction_token = direction_token, ""

    if not field_token or field_token.startswith("$"):
        raise InvalidParameter(SORT_PARAM, f"'{sort_by}' does not name a sortable field")

    field = SORT_FIELD_ALIASES.get(field_token, field_token)
    if field_token not in SORT_FIELD_ALIASES:
        logger.debug(f"Unknown sort field '{field_token}' passed through")

    direction = SortDirection.DESC if direction_token == "desc" else SortDirection.ASC
    return SortDirective(field=field, direction=direction)
