"""
Shared fixtures: an in-memory DataSource and a small, internally consistent
set of datasets in the published JSON shape.
"""

import copy

import pytest

from storefront.config import set_config_for_test
from storefront.data.errors import ResourceLoadError


class MemoryDataSource:
    """DataSource serving canned JSON arrays; records every load."""

    def __init__(self, datasets, failing=()):
        self.datasets = datasets
        self.failing = set(failing)
        self.loaded = []

    def describe(self):
        return "memory"

    async def load(self, name):
        self.loaded.append(name)
        if name in self.failing:
            raise ResourceLoadError(name, self.describe(), "simulated failure")
        if name not in self.datasets:
            raise ResourceLoadError(name, self.describe(), "no such dataset")
        return copy.deepcopy(self.datasets[name])


SAMPLE_DATASETS = {
    "customers": [
        {"CustomerID": 1, "CustomerName": "Ayşe Yılmaz", "City": "İstanbul"},
        {"CustomerID": 2, "CustomerName": "Mehmet <b>Kaya</b>", "City": "Ankara"},
    ],
    "products": [
        {"ProductID": 10, "Brand": "Arçelik", "Model": "Buzdolabı 570", "WarrantyPeriod": 24},
        {"ProductID": 11, "Brand": "Vestel", "Model": "Smart TV 55U", "WarrantyPeriod": 36},
    ],
    "orders": [
        {"OrderID": 1, "CustomerID": 1, "StoreID": 3, "OrderDate": "2024-03-01", "Status": "Delivered", "TotalAmount": 1234.5},
        {"OrderID": 2, "CustomerID": 2, "StoreID": 1, "OrderDate": "2024-03-02", "Status": "Shipped", "TotalAmount": 500},
        {"OrderID": 3, "CustomerID": 999, "StoreID": 1, "OrderDate": "2024-03-03", "Status": "Delivered", "TotalAmount": 80},
    ],
    "order_items": [
        {"OrderID": 1, "ProductID": 10, "Quantity": 1, "UnitPrice": 1000},
        {"OrderID": 1, "ProductID": 77, "Quantity": 3, "UnitPrice": 78.16},
        {"OrderID": 2, "ProductID": 11, "Quantity": 1, "UnitPrice": 500},
    ],
    "payments": [
        {"OrderID": 1, "PaymentMethod": "Credit Card", "Amount": 1234.5},
        {"OrderID": 2, "PaymentMethod": "Bank Transfer", "Amount": 500},
        {"OrderID": 3, "PaymentMethod": "Credit Card", "Amount": 80},
    ],
    "deliveries": [
        {"OrderID": 1, "ShippingCompany": "Aras Kargo", "TrackingNumber": "TR123<x>", "Status": "Delivered"},
        {"OrderID": 2, "ShippingCompany": "MNG Kargo", "TrackingNumber": "TR456", "Status": "In Transit"},
    ],
    "service_requests": [
        {"ServiceID": 5, "CustomerID": 1, "ProductID": 10, "Status": "Open", "RequestDate": "2024-04-01",
         "IssueDescription": "<script>alert(1)</script> leaks water"},
        {"ServiceID": 6, "CustomerID": 404, "ProductID": 10, "Status": "Closed", "RequestDate": "2024-04-02",
         "IssueDescription": "Noise"},
        {"ServiceID": 7, "CustomerID": 2, "ProductID": 55, "Status": "In Progress", "RequestDate": "2024-04-03",
         "IssueDescription": "Does not start"},
    ],
}


@pytest.fixture(autouse=True)
def test_config():
    set_config_for_test(log_level="DEBUG", data_source="file", data_dir="data")
    yield


@pytest.fixture
def datasets():
    return copy.deepcopy(SAMPLE_DATASETS)


@pytest.fixture
def memory_source(datasets):
    return MemoryDataSource(datasets)


@pytest.fixture
def make_source():
    def _make(data, failing=()):
        return MemoryDataSource(data, failing=failing)
    return _make
