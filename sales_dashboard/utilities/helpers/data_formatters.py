# sales_dashboard/utilities/helpers/data_formatters.py
import csv
import io
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, List

from fastapi.responses import JSONResponse

from ...constants import EXPORT_COLUMNS
from ...models.errors import ErrorResponse
from ...models.transaction import Transaction

CSV_BATCH_SIZE = 1000


def format_transactions(raw_data: List[Dict]) -> List[Dict[str, Any]]:
    """Raw transaction documents -> JSON-ready dicts with camelCase keys"""
    return [Transaction.from_mongo(doc).to_response() for doc in raw_data]


def _export_cell(field: str, value: Any) -> Any:
    if value is None:
        return ""
    if field == "date" and isinstance(value, datetime):
        return value.strftime("%Y-%m-%d")
    if field == "tags":
        return ",".join(value)
    return value


def _write_rows(rows: Iterable[List[Any]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def transaction_to_csv_row(doc: Dict) -> List[Any]:
    return [_export_cell(field, doc.get(field)) for _, field in EXPORT_COLUMNS]


def iter_transactions_csv(docs: Iterable[Dict], batch_size: int = CSV_BATCH_SIZE) -> Iterator[str]:
    """
    Yield a CSV document in chunks: the header line, then rows in batches.

    Strings (tags joined with commas) are double-quoted, numbers are not.
    """
    yield _write_rows([[header for header, _ in EXPORT_COLUMNS]])

    batch = []
    for doc in docs:
        batch.append(transaction_to_csv_row(doc))
        if len(batch) >= batch_size:
            yield _write_rows(batch)
            batch = []
    if batch:
        yield _write_rows(batch)


def format_error_response(message: str, error: Any = None, status_code: int = 500,
                          parameter: str = None) -> JSONResponse:
    """Standard failure body: {success: false, message, error}"""
    body = ErrorResponse(
        message=message,
        error=str(error) if error is not None else None,
        parameter=parameter,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))
