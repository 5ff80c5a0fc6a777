# sales_dashboard/api/dependencies.py
from fastapi import Request
from typing import Any

from ..services.transaction_service import TransactionService, transaction_service


def get_transaction_service() -> TransactionService:
    """Transaction service dependency"""
    return transaction_service


def get_query_params(request: Request) -> Any:
    """Raw (possibly repeated) query-string parameters"""
    return request.query_params
