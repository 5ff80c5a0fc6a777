# sales_dashboard/api/routes/transactions.py
import time
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from loguru import logger

from ..dependencies import get_query_params, get_transaction_service
from ...core.query_builder import build_transaction_query
from ...models.database import (
    FilterOptionsResponse,
    TransactionListResponse,
    TransactionResponse,
    TransactionStatsResponse,
)
from ...models.errors import InvalidParameter, UpstreamFailure
from ...services.transaction_service import TransactionService
from ...utilities.helpers.data_formatters import format_error_response

router = APIRouter()


@router.get("/filters", response_model=FilterOptionsResponse)
def get_filter_options(service: TransactionService = Depends(get_transaction_service)):
    """Unique values for the filter dropdowns"""
    try:
        return FilterOptionsResponse(data=service.get_filter_options())
    except UpstreamFailure as e:
        return format_error_response("Failed to fetch filter options", e.message)


@router.get("/export")
def export_transactions(
    params: Any = Depends(get_query_params),
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Matching transactions as a CSV download (no paging, capped)
    """
    query = build_transaction_query(params, paginate=False)
    try:
        chunks = service.export_transactions(query)
    except UpstreamFailure as e:
        return format_error_response("Failed to export transactions", e.message)

    filename = f"transactions_{int(time.time() * 1000)}.csv"
    return StreamingResponse(
        chunks,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@router.get("/stats", response_model=TransactionStatsResponse)
def get_transaction_stats(
    params: Any = Depends(get_query_params),
    service: TransactionService = Depends(get_transaction_service)
):
    """Totals and breakdowns for the filtered set"""
    query = build_transaction_query(params, paginate=False)
    try:
        return TransactionStatsResponse(data=service.get_stats(query.predicate))
    except UpstreamFailure as e:
        return format_error_response("Failed to fetch statistics", e.message)


@router.get("", response_model=TransactionListResponse)
@router.get("/", response_model=TransactionListResponse, include_in_schema=False)
def list_transactions(
    params: Any = Depends(get_query_params),
    service: TransactionService = Depends(get_transaction_service)
):
    """
    Paginated transactions with search, filter and sort

    Query parameters: page, limit, keyword, region, gender, paymentMethod,
    status, productCategory, deliveryType, storeLocation, tags, minAge, maxAge,
    minAmount, maxAmount, minFinalAmount, maxFinalAmount, startDate, endDate,
    sortBy (e.g. date_desc, amount_asc). Multi-select filters may repeat.
    """
    query = build_transaction_query(params)
    try:
        return service.list_transactions(query)
    except UpstreamFailure as e:
        return format_error_response("Failed to fetch transactions", e.message)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service)
):
    """Single transaction by transactionID"""
    try:
        numeric_id = int(transaction_id)
    except ValueError:
        raise InvalidParameter("id", f"'{transaction_id}' is not a transaction ID")

    try:
        transaction = service.get_by_id(numeric_id)
    except UpstreamFailure as e:
        return format_error_response("Failed to fetch transaction", e.message)

    if transaction is None:
        return format_error_response("Transaction not found", status_code=404)

    logger.debug(f"Fetched transaction {numeric_id}")
    return TransactionResponse(data=transaction.to_response())
