"""Pytest fixtures for FakturoidPy tests."""

from typing import Any

import pytest

from fakturoidpy import FakturoidClient


@pytest.fixture
def account() -> str:
    """Return a test account slug."""
    return "test-account"


@pytest.fixture
def email() -> str:
    """Return the e-mail of the test user."""
    return "test@example.com"


@pytest.fixture
def api_token() -> str:
    """Return a test API token."""
    return "test_api_token_12345"


@pytest.fixture
def base_url(account: str) -> str:
    """Return the account API URL."""
    return f"https://app.fakturoid.cz/api/v1/{account}/"


@pytest.fixture
def sync_client(account: str, email: str, api_token: str) -> FakturoidClient:
    """Create a FakturoidClient for testing."""
    return FakturoidClient(account, email, api_token)


@pytest.fixture
def mock_subject() -> dict[str, Any]:
    """Return mock subject data."""
    return {
        "id": 28,
        "custom_id": None,
        "type": "customer",
        "name": "Apple Czech s.r.o.",
        "street": "Klimentská 1216/46",
        "city": "Praha",
        "zip": "11000",
        "country": "CZ",
        "registration_no": "28897501",
        "vat_no": "CZ28897501",
        "email": "pokus@test.cz",
        "html_url": "https://app.fakturoid.cz/test-account/subjects/28",
        "url": "https://app.fakturoid.cz/api/v1/test-account/subjects/28.json",
        "updated_at": "2012-06-02T09:34:47+02:00",
    }


@pytest.fixture
def mock_invoice() -> dict[str, Any]:
    """Return mock invoice data."""
    return {
        "id": 214,
        "proforma": False,
        "number": "2012-0021",
        "variable_symbol": "20120021",
        "subject_id": 28,
        "status": "open",
        "issued_on": "2012-06-02",
        "due": 14,
        "due_on": "2012-06-16",
        "currency": "CZK",
        "lines": [
            {
                "id": 1304,
                "name": "Disk 2TB",
                "quantity": "2.0",
                "unit_name": "ks",
                "unit_price": "1000.0",
                "vat_rate": 21,
            }
        ],
        "subtotal": "2000.0",
        "total": "2420.0",
    }
