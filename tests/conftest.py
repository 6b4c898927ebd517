"""Shared pytest fixtures for the storefront tests."""

import pytest
from fastapi.testclient import TestClient

from GREENCROSS.Cart.cart import CartStore
from GREENCROSS.Cart.storage import MemoryStorage
from GREENCROSS.core.rate_limit import limiter
from GREENCROSS.main import app


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Each test starts with fresh rate limit counters."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def cart(storage):
    return CartStore(storage=storage)


@pytest.fixture
def sent_emails(monkeypatch):
    """Replace the mail relay; collects every PreorderRequest handed to it."""
    sent = []

    def fake_send(req):
        sent.append(req)

    monkeypatch.setattr("GREENCROSS.Preorder.preorder.send_preorder_email", fake_send)
    return sent


@pytest.fixture
def form_values():
    return {
        "fullName": "John Doe",
        "phoneNumber": "(713) 555-0123",
        "email": "john@example.com",
        "pickupLocation": "GreenCross Midtown",
        "pickupDate": "2026-10-20",
        "pickupTime": "12:00 PM",
        "specialInstructions": "",
    }


@pytest.fixture
def preorder_payload(form_values):
    return {
        "customer": form_values,
        "items": [
            {"productId": "blue-dream", "name": "Blue Dream", "price": 45, "quantity": 2, "lineTotal": 90},
        ],
        "total": 90,
    }
