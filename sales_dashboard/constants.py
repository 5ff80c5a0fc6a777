"""Field tables for the transactions collection"""

# Fields matched by the free-text keyword, OR-ed together
KEYWORD_SEARCH_FIELDS = ("customerName", "phone", "productName", "customerID")

# Multi-select filters; the query parameter shares the record field's name
CATEGORICAL_FIELDS = (
    "region",
    "gender",
    "paymentMethod",
    "status",
    "productCategory",
    "deliveryType",
    "storeLocation",
)

TAGS_FIELD = "tags"

# record field -> (min param, max param)
RANGE_PARAMS = {
    "age": ("minAge", "maxAge"),
    "amount": ("minAmount", "maxAmount"),
    "finalAmount": ("minFinalAmount", "maxFinalAmount"),
}

DATE_FIELD = "date"
START_DATE_PARAM = "startDate"
END_DATE_PARAM = "endDate"

KEYWORD_PARAM = "keyword"
SORT_PARAM = "sortBy"
PAGE_PARAM = "page"
LIMIT_PARAM = "limit"

# External sort names -> record fields
SORT_FIELD_ALIASES = {
    "date": "date",
    "amount": "amount",
    "finalAmount": "finalAmount",
    "age": "age",
    "name": "customerName",
    "customer": "customerName",
    "quantity": "quantity",
    "id": "transactionID",
    "category": "productCategory",
}

DEFAULT_SORT_FIELD = "date"

# unique key appended to every sort so skip/limit pages are stable
TIE_BREAK_FIELD = "transactionID"

# (header, record field) in export column order
EXPORT_COLUMNS = (
    ("Transaction ID", "transactionID"),
    ("Date", "date"),
    ("Customer ID", "customerID"),
    ("Customer Name", "customerName"),
    ("Phone", "phone"),
    ("Gender", "gender"),
    ("Age", "age"),
    ("Region", "region"),
    ("Product Category", "productCategory"),
    ("Tags", "tags"),
    ("Amount", "amount"),
    ("Final Amount", "finalAmount"),
    ("Payment Method", "paymentMethod"),
    ("Status", "status"),
    ("Delivery Type", "deliveryType"),
    ("Store Location", "storeLocation"),
)
