import copy

import pytest
from fastapi.testclient import TestClient

from receipt_processor.main import app
from receipt_processor.ratelimit import limiter
from receipt_processor.store.memory import InMemoryReceiptStore

TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "Klarbrunn 12PK 12 FL OZ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


@pytest.fixture
def target_receipt():
    return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def corner_market_receipt():
    return copy.deepcopy(CORNER_MARKET_RECEIPT)


@pytest.fixture
def store(monkeypatch):
    fresh = InMemoryReceiptStore()
    monkeypatch.setattr(app.state, "store", fresh)
    return fresh


@pytest.fixture
def client(store):
    limiter.reset()
    with TestClient(app) as c:
        yield c
