"""End-to-end tests for the /api/transactions endpoints."""

from fastapi.testclient import TestClient

from sales_dashboard.api.dependencies import get_transaction_service
from sales_dashboard.main import app
from sales_dashboard.services.transaction_service import TransactionService

from tests.fakes import FakeCollection, make_transaction


def _client_for(docs) -> TestClient:
    collection = FakeCollection(docs)
    app.dependency_overrides[get_transaction_service] = lambda: TransactionService(lambda: collection)
    return TestClient(app)


def test_list_default_page(client) -> None:
    response = client.get("/api/transactions")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert len(body["data"]) == 10
    assert body["pagination"] == {
        "page": 1,
        "limit": 10,
        "totalCount": 120,
        "totalPages": 12,
        "hasNextPage": True,
        "hasPrevPage": False,
    }


def test_filtered_sorted_second_page_returns_ranks_six_to_ten() -> None:
    docs = [make_transaction(i) for i in range(200)]
    client = _client_for(docs)
    try:
        response = client.get(
            "/api/transactions",
            params={"region": ["North"], "minAge": 25, "maxAge": 40, "sortBy": "amount_desc", "page": 2, "limit": 5},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    ranked = sorted(
        (d for d in docs if d["region"] == "North" and 25 <= d["age"] <= 40),
        key=lambda d: d["amount"],
        reverse=True,
    )
    assert len(ranked) >= 10
    assert [row["transactionID"] for row in response.json()["data"]] == [d["transactionID"] for d in ranked[5:10]]
    assert response.json()["pagination"]["totalCount"] == len(ranked)


def test_repeated_multi_select_params(client, transactions) -> None:
    response = client.get("/api/transactions?status=Pending&status=Returned&limit=500")

    statuses = {row["status"] for row in response.json()["data"]}
    assert statuses == {"Pending", "Returned"}
    assert response.json()["pagination"]["totalCount"] == sum(
        1 for r in transactions if r["status"] in {"Pending", "Returned"}
    )


def test_keyword_search(client) -> None:
    response = client.get("/api/transactions", params={"keyword": "customer 11", "limit": 50})

    ids = {row["transactionID"] for row in response.json()["data"]}
    assert ids == {1011} | set(range(1110, 1120))


def test_get_single_transaction(client) -> None:
    response = client.get("/api/transactions/1042")

    assert response.status_code == 200
    assert response.json()["data"]["transactionID"] == 1042


def test_missing_transaction_is_404(client) -> None:
    response = client.get("/api/transactions/424242")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Transaction not found"}


def test_filter_options_endpoint(client) -> None:
    body = client.get("/api/transactions/filters").json()

    assert body["success"] is True
    assert body["data"]["regions"] == ["Central", "East", "North", "South", "West"]
    assert set(body["data"]) >= {"paymentMethods", "productCategories", "storeLocations", "ageRange", "amountRange"}


def test_stats_endpoint_honours_filters(client, transactions) -> None:
    body = client.get("/api/transactions/stats", params={"productCategory": "Beauty"}).json()

    assert body["success"] is True
    assert body["data"]["totalTransactions"] == sum(1 for r in transactions if r["productCategory"] == "Beauty")
    assert [c["category"] for c in body["data"]["categoryBreakdown"]] == ["Beauty"]


def test_export_csv_format(client) -> None:
    response = client.get("/api/transactions/export", params={"region": "West", "sortBy": "id_asc"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"].startswith("attachment; filename=transactions_")

    lines = response.text.splitlines()
    assert lines[0].startswith('"Transaction ID","Date","Customer ID","Customer Name"')
    assert lines[1] == (
        '1003,"2023-01-04","CUST-00003","Customer 3","9800000003","Male",21,"West","Electronics",'
        '"casual,cotton",214.0,181.9,"Wallet","Returned","Standard","Mumbai"'
    )


def test_export_is_capped_at_fifty_thousand_rows() -> None:
    docs = [{"transactionID": i, "customerName": "Bulk", "tags": ["a", "b"], "region": "North"} for i in range(60000)]
    client = _client_for(docs)
    try:
        response = client.get("/api/transactions/export")
    finally:
        app.dependency_overrides.clear()

    lines = response.text.splitlines()
    assert len(lines) == 50001
    assert '"a,b"' in lines[1]


def test_store_failure_returns_500_body() -> None:
    app.dependency_overrides[get_transaction_service] = lambda: TransactionService(
        lambda: FakeCollection(fail_with="server selection timeout")
    )
    try:
        response = TestClient(app).get("/api/transactions")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "Failed to fetch transactions",
        "error": "server selection timeout",
    }


def test_unknown_route_is_404(client) -> None:
    response = client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["success"] is False


def test_integer_fields_serialize_as_integers(client, transactions) -> None:
    age_range = client.get("/api/transactions/filters").json()["data"]["ageRange"]
    stats = client.get("/api/transactions/stats").json()["data"]

    assert age_range == {"min": 18, "max": 67}
    assert isinstance(age_range["min"], int) and isinstance(age_range["max"], int)
    assert stats["totalQuantity"] == sum(r["quantity"] for r in transactions)
    assert isinstance(stats["totalQuantity"], int)
