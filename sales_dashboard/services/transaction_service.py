# sales_dashboard/services/transaction_service.py
import time
from typing import Callable, Dict, Iterator, Optional

from loguru import logger
from pymongo.errors import PyMongoError

from ..config.database import get_transactions_collection
from ..config.logging_config import log_query_performance
from ..config.setting import settings
from ..constants import EXPORT_COLUMNS, TAGS_FIELD
from ..core.pagination import build_pagination_info
from ..models.database import (
    CategoryBreakdownItem,
    FilterOptions,
    RangeBounds,
    RegionBreakdownItem,
    StatusBreakdownItem,
    TransactionListResponse,
    TransactionStats,
)
from ..models.errors import UpstreamFailure
from ..models.query import TransactionQuery
from ..models.transaction import Transaction
from ..utilities.helpers.data_formatters import format_transactions, iter_transactions_csv
from ..utilities.helpers.database_helpers import get_count, get_range, get_sorted_distinct

# filter options key -> record field
FILTER_OPTION_FIELDS = {
    "regions": "region",
    "genders": "gender",
    "payment_methods": "paymentMethod",
    "statuses": "status",
    "product_categories": "productCategory",
    "delivery_types": "deliveryType",
    "store_locations": "storeLocation",
    "tags": TAGS_FIELD,
}

EXPORT_PROJECTION = {field: 1 for _, field in EXPORT_COLUMNS}
EXPORT_PROJECTION["_id"] = 0


class TransactionService:
    """
    Runs TransactionQuery objects against the transactions collection
    """

    def __init__(self, collection_provider: Callable = None):
        self._collection_provider = collection_provider or get_transactions_collection

    def _collection(self):
        return self._collection_provider()

    def list_transactions(self, query: TransactionQuery) -> TransactionListResponse:
        """
        Filtered, sorted page of transactions plus the total match count

        Raises:
            UpstreamFailure: the collection read failed
        """
        started = time.perf_counter()
        try:
            collection = self._collection()
            cursor = (
                collection.find(query.predicate)
                .sort(query.sort.to_mongo())
                .skip(query.pagination.offset)
                .limit(query.pagination.limit)
            )
            raw_data = list(cursor)
            total_count = get_count(collection, query.predicate)
        except PyMongoError as e:
            logger.error(f"Transaction listing failed: {e}")
            raise UpstreamFailure(str(e), "list")

        log_query_performance("list", time.perf_counter() - started, len(raw_data))
        return TransactionListResponse(
            data=format_transactions(raw_data),
            pagination=build_pagination_info(query.pagination, total_count),
        )

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """
        Single transaction by its numeric transactionID

        Returns:
            Transaction if found, None otherwise
        """
        try:
            result = self._collection().find_one({"transactionID": transaction_id})
        except PyMongoError as e:
            logger.error(f"Failed to get transaction {transaction_id}: {e}")
            raise UpstreamFailure(str(e), "get")

        if result:
            return Transaction.from_mongo(result)
        logger.info(f"Transaction {transaction_id} not found")
        return None

    def get_filter_options(self) -> FilterOptions:
        """Distinct values for every dropdown plus the age/amount bounds"""
        try:
            collection = self._collection()
            values = {key: get_sorted_distinct(collection, field)
                      for key, field in FILTER_OPTION_FIELDS.items()}
            age_range = get_range(collection, "age", RangeBounds(min=0, max=100))
            amount_range = get_range(collection, "amount", RangeBounds(min=0, max=100000))
        except PyMongoError as e:
            logger.error(f"Failed to fetch filter options: {e}")
            raise UpstreamFailure(str(e), "filters")

        return FilterOptions(age_range=age_range, amount_range=amount_range, **values)

    def export_transactions(self, query: TransactionQuery, max_records: int = None) -> Iterator[str]:
        """
        Read up to max_records matching transactions and return CSV chunks

        The read completes before any chunk is produced, so a store failure
        surfaces here rather than halfway through a download.
        """
        max_records = max_records or settings.EXPORT_MAX_RECORDS
        started = time.perf_counter()
        try:
            docs = list(
                self._collection()
                .find(query.predicate, EXPORT_PROJECTION)
                .sort(query.sort.to_mongo())
                .limit(max_records)
            )
        except PyMongoError as e:
            logger.error(f"Transaction export failed: {e}")
            raise UpstreamFailure(str(e), "export")

        log_query_performance("export", time.perf_counter() - started, len(docs))
        return iter_transactions_csv(docs)

    def get_stats(self, predicate: Dict) -> TransactionStats:
        """Totals and status/category/region breakdowns for the matching set"""
        match = {"$match": predicate}
        try:
            collection = self._collection()
            total_transactions = get_count(collection, predicate)
            totals = list(collection.aggregate([
                match,
                {"$group": {
                    "_id": None,
                    "totalRevenue": {"$sum": "$finalAmount"},
                    "totalQuantity": {"$sum": "$quantity"},
                    "totalDiscount": {"$sum": {"$subtract": ["$amount", "$finalAmount"]}},
                }},
            ]))
            status_breakdown = list(collection.aggregate([
                match,
                {"$group": {"_id": "$status", "count": {"$sum": 1}}},
                {"$sort": {"count": -1}},
            ]))
            category_breakdown = list(collection.aggregate([
                match,
                {"$group": {"_id": "$productCategory", "count": {"$sum": 1}, "revenue": {"$sum": "$finalAmount"}}},
                {"$sort": {"revenue": -1}},
                {"$limit": settings.STATS_TOP_CATEGORIES},
            ]))
            region_breakdown = list(collection.aggregate([
                match,
                {"$group": {"_id": "$region", "count": {"$sum": 1}, "revenue": {"$sum": "$finalAmount"}}},
                {"$sort": {"revenue": -1}},
            ]))
        except PyMongoError as e:
            logger.error(f"Failed to compute statistics: {e}")
            raise UpstreamFailure(str(e), "stats")

        summary = totals[0] if totals else {}
        return TransactionStats(
            total_transactions=total_transactions,
            total_revenue=summary.get("totalRevenue") or 0,
            total_quantity=summary.get("totalQuantity") or 0,
            total_discount=summary.get("totalDiscount") or 0,
            status_breakdown=[StatusBreakdownItem(status=s["_id"], count=s["count"]) for s in status_breakdown],
            category_breakdown=[
                CategoryBreakdownItem(category=c["_id"], count=c["count"], revenue=c["revenue"])
                for c in category_breakdown
            ],
            region_breakdown=[
                RegionBreakdownItem(region=r["_id"], count=r["count"], revenue=r["revenue"])
                for r in region_breakdown
            ],
        )


# Global service instance
transaction_service = TransactionService()
