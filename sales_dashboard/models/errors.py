# sales_dashboard/models/errors.py
from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    """Standard error response"""
    success: bool = False
    message: str
    error: Optional[str] = None
    parameter: Optional[str] = None


class SalesDashboardError(Exception):
    """Base exception for dashboard API errors"""
    pass


class InvalidParameter(SalesDashboardError):
    """A request parameter could not be used to build the query"""

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        self.message = message
        super().__init__(f"Invalid parameter '{parameter}': {message}")


class UpstreamFailure(SalesDashboardError):
    """The document store failed while reading or aggregating"""

    def __init__(self, message: str, operation: Optional[str] = None):
        self.message = message
        self.operation = operation
        super().__init__(message)
