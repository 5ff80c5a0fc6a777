# sales_dashboard/models/database.py
from pydantic import BaseModel, Field
from typing import List, Optional, Dict, Any, Union


class PaginationInfo(BaseModel):
    """Pagination block returned with every listing"""
    page: int
    limit: int
    total_count: int = Field(..., alias="totalCount")
    total_pages: int = Field(..., alias="totalPages")
    has_next_page: bool = Field(..., alias="hasNextPage")
    has_prev_page: bool = Field(..., alias="hasPrevPage")

    class Config:
        populate_by_name = True


class TransactionListResponse(BaseModel):
    success: bool = True
    data: List[Dict[str, Any]] = Field(default_factory=list)
    pagination: PaginationInfo


class TransactionResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]


class RangeBounds(BaseModel):
    """Observed min/max; integer fields stay integers"""
    min: Union[int, float]
    max: Union[int, float]


class FilterOptions(BaseModel):
    """Distinct values for every filter dropdown"""
    regions: List[str] = Field(default_factory=list)
    genders: List[str] = Field(default_factory=list)
    payment_methods: List[str] = Field(default_factory=list, alias="paymentMethods")
    statuses: List[str] = Field(default_factory=list)
    product_categories: List[str] = Field(default_factory=list, alias="productCategories")
    delivery_types: List[str] = Field(default_factory=list, alias="deliveryTypes")
    store_locations: List[str] = Field(default_factory=list, alias="storeLocations")
    tags: List[str] = Field(default_factory=list)
    age_range: RangeBounds = Field(default_factory=lambda: RangeBounds(min=0, max=100), alias="ageRange")
    amount_range: RangeBounds = Field(default_factory=lambda: RangeBounds(min=0, max=100000), alias="amountRange")

    class Config:
        populate_by_name = True


class FilterOptionsResponse(BaseModel):
    success: bool = True
    data: FilterOptions


class StatusBreakdownItem(BaseModel):
    status: Optional[str] = None
    count: int


class CategoryBreakdownItem(BaseModel):
    category: Optional[str] = None
    count: int
    revenue: float


class RegionBreakdownItem(BaseModel):
    region: Optional[str] = None
    count: int
    revenue: float


class TransactionStats(BaseModel):
    total_transactions: int = Field(0, alias="totalTransactions")
    total_revenue: float = Field(0, alias="totalRevenue")
    total_quantity: int = Field(0, alias="totalQuantity")
    total_discount: float = Field(0, alias="totalDiscount")
    status_breakdown: List[StatusBreakdownItem] = Field(default_factory=list, alias="statusBreakdown")
    category_breakdown: List[CategoryBreakdownItem] = Field(default_factory=list, alias="categoryBreakdown")
    region_breakdown: List[RegionBreakdownItem] = Field(default_factory=list, alias="regionBreakdown")

    class Config:
        populate_by_name = True


class TransactionStatsResponse(BaseModel):
    success: bool = True
    data: TransactionStats


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "healthy"
    service: str = "retail-sales-dashboard-api"
    timestamp: Optional[str] = None
    mongodb: str = "connected"
