# sales_dashboard/models/query.py
from datetime import date
from enum import Enum
from pydantic import BaseModel, Field
from typing import Dict, FrozenSet, List, Optional, Tuple
from pymongo import ASCENDING, DESCENDING

from ..constants import TIE_BREAK_FIELD


class NumericRange(BaseModel):
    """Inclusive range; a missing bound leaves that side open"""
    min: Optional[float] = None
    max: Optional[float] = None

    class Config:
        frozen = True

    @property
    def is_empty(self) -> bool:
        return self.min is None and self.max is None


class DateRange(BaseModel):
    start_date: Optional[date] = Field(None, description="Inclusive, from start of day")
    end_date: Optional[date] = Field(None, description="Inclusive, through end of day")

    class Config:
        frozen = True

    @property
    def is_empty(self) -> bool:
        return self.start_date is None and self.end_date is None


class FilterRequest(BaseModel):
    """Typed filters for one request, produced by the parameter normalizer"""
    keyword: Optional[str] = None
    categories: Dict[str, FrozenSet[str]] = Field(default_factory=dict)
    tags: FrozenSet[str] = frozenset()
    ranges: Dict[str, NumericRange] = Field(default_factory=dict)
    date_range: DateRange = Field(default_factory=DateRange)
    sort_by: Optional[str] = None

    class Config:
        frozen = True


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def pymongo_order(self) -> int:
        return DESCENDING if self is SortDirection.DESC else ASCENDING


class SortDirective(BaseModel):
    field: str
    direction: SortDirection

    class Config:
        frozen = True

    def to_mongo(self) -> List[Tuple[str, int]]:
        """Key list accepted by Cursor.sort, ties broken by transactionID"""
        keys = [(self.field, self.direction.pymongo_order)]
        if self.field != TIE_BREAK_FIELD:
            keys.append((TIE_BREAK_FIELD, self.direction.pymongo_order))
        return keys


class PaginationDirective(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1)

    class Config:
        frozen = True

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class TransactionQuery(BaseModel):
    """Everything the data-access layer needs to run one read"""
    predicate: Dict = Field(default_factory=dict)
    sort: SortDirective
    pagination: PaginationDirective

    class Config:
        frozen = True
