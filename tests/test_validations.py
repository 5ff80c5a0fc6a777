"""Request validation: malformed parameters are rejected with 400."""

import pytest


def test_invalid_start_date_names_the_parameter(client):
    response = client.get("/api/transactions", params={"startDate": "31-31-2023"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["parameter"] == "startDate"
    assert "31-31-2023" in body["error"]


def test_invalid_end_date_rejected_on_export_and_stats(client):
    assert client.get("/api/transactions/export", params={"endDate": "soon"}).status_code == 400
    assert client.get("/api/transactions/stats", params={"endDate": "soon"}).status_code == 400


@pytest.mark.parametrize("params, parameter", [
    ({"page": "0"}, "page"),
    ({"page": "-1"}, "page"),
    ({"limit": "0"}, "limit"),
])
def test_page_and_limit_below_one(client, params, parameter):
    response = client.get("/api/transactions", params=params)

    assert response.status_code == 400
    assert response.json()["parameter"] == parameter


def test_operator_sort_field_rejected(client):
    response = client.get("/api/transactions", params={"sortBy": "$natural_desc"})

    assert response.status_code == 400
    assert response.json()["parameter"] == "sortBy"


def test_non_numeric_transaction_id(client):
    response = client.get("/api/transactions/abc")

    assert response.status_code == 400
    assert response.json()["parameter"] == "id"


def test_bad_numeric_bound_is_ignored_not_rejected(client):
    response = client.get("/api/transactions", params={"minAge": "old", "maxAge": "30", "limit": 200})

    assert response.status_code == 200
    assert all(row["age"] <= 30 for row in response.json()["data"])


def test_oversized_limit_is_capped(client):
    from sales_dashboard.config.setting import settings

    response = client.get("/api/transactions", params={"limit": settings.MAX_PAGE_SIZE * 10})

    assert response.json()["pagination"]["limit"] == settings.MAX_PAGE_SIZE


def test_page_beyond_skip_range_names_the_parameter(client):
    response = client.get("/api/transactions", params={"page": "99999999999999999999"})

    assert response.status_code == 400
    assert response.json()["parameter"] == "page"
