# sales_dashboard/core/filter_compiler.py
from typing import Dict, List

from loguru import logger

from ..constants import DATE_FIELD, KEYWORD_SEARCH_FIELDS, TAGS_FIELD
from ..models.query import FilterRequest
from .helpers.query_helpers import (
    build_date_clause,
    build_in_clause,
    build_keyword_clause,
    build_range_clause,
)


def compile_clauses(filters: FilterRequest) -> List[Dict]:
    """
    One clause per active filter, in a fixed order.

    Inactive filters contribute nothing, so an empty selection never turns
    into a "match nothing" clause.
    """
    clauses = [build_keyword_clause(filters.keyword, KEYWORD_SEARCH_FIELDS)]
    clauses += [build_in_clause(field, values) for field, values in sorted(filters.categories.items())]
    clauses.append(build_in_clause(TAGS_FIELD, filters.tags))
    clauses += [build_range_clause(field, bounds) for field, bounds in sorted(filters.ranges.items())]
    clauses.append(build_date_clause(DATE_FIELD, filters.date_range))
    return [clause for clause in clauses if clause]


def compile_filter(filters: FilterRequest) -> Dict:
    """
    Compile a FilterRequest into a single MongoDB filter document.

    Clauses are AND-ed. Each one targets a different key ($or for the
    keyword group, field names for the rest), so they merge into one flat
    document; an empty document matches every transaction.
    """
    predicate: Dict = {}
    for clause in compile_clauses(filters):
        predicate.update(clause)
    logger.debug(f"Compiled predicate: {predicate}")
    return predicate
