"""Shared fixtures: an in-memory transactions collection wired into the app."""

import os

os.environ.setdefault("ENVIRONMENT", "DEV")
os.environ["LOG_TO_FILE"] = "false"

import pytest
from fastapi.testclient import TestClient

from sales_dashboard.api.dependencies import get_transaction_service
from sales_dashboard.main import app
from sales_dashboard.services.transaction_service import TransactionService

from tests.fakes import FakeCollection, make_transaction


@pytest.fixture
def transactions():
    return [make_transaction(i) for i in range(120)]


@pytest.fixture
def collection(transactions):
    return FakeCollection(transactions)


@pytest.fixture
def service(collection):
    return TransactionService(collection_provider=lambda: collection)


@pytest.fixture
def client(service):
    app.dependency_overrides[get_transaction_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
