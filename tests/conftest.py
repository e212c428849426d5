"""
Shared pytest fixtures for bid catalog tests.
"""

import csv
import os
import tempfile

import pytest

from bidtree import Bid, Catalog
from bidtree.models.trees import AmountIndex, KeyIndex


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def csv_path(temp_dir):
    """Provide a path for a bids CSV file."""
    return os.path.join(temp_dir, "bids.csv")


@pytest.fixture
def catalog():
    """Provide a fresh, empty Catalog."""
    return Catalog()


@pytest.fixture
def key_index():
    return KeyIndex()


@pytest.fixture
def amount_index():
    return AmountIndex()


@pytest.fixture
def scenario_bids():
    """Three bids with distinct ids and amounts."""
    return [
        Bid(bid_id="A1", title="Desk", fund="General", amount=500),
        Bid(bid_id="B2", title="Chair", fund="General", amount=300),
        Bid(bid_id="C3", title="Lamp", fund="Enterprise", amount=750),
    ]


@pytest.fixture
def scenario_catalog(scenario_bids):
    """Provide a Catalog holding the three scenario bids."""
    return Catalog(scenario_bids)


@pytest.fixture
def large_sample_bids():
    """Provide a larger sample with repeated amounts for stress testing."""
    return [
        Bid(bid_id=f"bid{i:04d}", title=f"Item {i}", fund="General", amount=float((i * 37) % 101))
        for i in range(1000)
    ]


CSV_HEADER = [
    "ArticleTitle", "ArticleID", "Department", "CloseDate", "WinningBid",
    "InventoryID", "VehicleID", "ReceiptNumber", "Fund",
]


def make_row(title, bid_id, amount, fund="General Fund"):
    """Build a row in the eBid monthly sales export layout."""
    return [title, bid_id, "Dept", "12/1/2016", amount, "inv", "", "rcpt", fund]


@pytest.fixture
def write_csv(csv_path):
    """Provide a function writing rows (plus optional header) to csv_path."""

    def write(rows, header=CSV_HEADER):
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            if header is not None:
                writer.writerow(header)
            writer.writerows(rows)
        return csv_path

    return write


@pytest.fixture
def row():
    return make_row
