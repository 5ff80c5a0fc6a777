# sales_dashboard/models/__init__.py
from .query import (
    FilterRequest, NumericRange, DateRange, SortDirection, SortDirective,
    PaginationDirective, TransactionQuery
)
from .transaction import Transaction
from .database import (
    PaginationInfo, TransactionListResponse, TransactionResponse, RangeBounds,
    FilterOptions, FilterOptionsResponse, StatusBreakdownItem, CategoryBreakdownItem,
    RegionBreakdownItem, TransactionStats, TransactionStatsResponse, HealthResponse
)
from .errors import ErrorResponse, SalesDashboardError, InvalidParameter, UpstreamFailure

__all__ = [
    # Query models
    "FilterRequest", "NumericRange", "DateRange", "SortDirection", "SortDirective",
    "PaginationDirective", "TransactionQuery",
    
    # Record model
    "Transaction",
    
    # Response models
    "PaginationInfo", "TransactionListResponse", "TransactionResponse", "RangeBounds",
    "FilterOptions", "FilterOptionsResponse", "StatusBreakdownItem", "CategoryBreakdownItem",
    "RegionBreakdownItem", "TransactionStats", "TransactionStatsResponse", "HealthResponse",
    
    # Errors
    "ErrorResponse", "SalesDashboardError", "InvalidParameter", "UpstreamFailure"
]
