from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add repository root to sys.path so the top-level modules import when running from tests/
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# Keep test runs from writing into ./logs
os.environ.setdefault(
    "RECEIPT_LOGFILEPATH",
    str(Path(tempfile.gettempdir()) / "receipt-processor-tests" / "logs.out"),
)

from fastapi.testclient import TestClient  # noqa: E402

from app import createApp  # noqa: E402
from storage import ReceiptStorage  # noqa: E402


@pytest.fixture
def storage() -> ReceiptStorage:
    return ReceiptStorage()


@pytest.fixture
def client(storage: ReceiptStorage) -> TestClient:
    return TestClient(createApp(storage))


@pytest.fixture
def exampleOne() -> dict:
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
        "total": "35.35",
    }


@pytest.fixture
def exampleTwo() -> dict:
    return {
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "items": [{"shortDescription": "Gatorade", "price": "2.25"} for _ in range(4)],
        "total": "9.00",
    }


@pytest.fixture
def morningReceipt() -> dict:
    return {
        "retailer": "Walgreens",
        "purchaseDate": "2022-01-02",
        "purchaseTime": "08:13",
        "total": "2.65",
        "items": [
            {"shortDescription": "Pepsi - 12-oz", "price": "1.25"},
            {"shortDescription": "Dasani", "price": "1.40"},
        ],
    }
