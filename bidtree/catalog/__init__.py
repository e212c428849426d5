"""
Catalog facade and bid loading.
"""

from bidtree.catalog.catalog import Catalog
from bidtree.catalog.loader import CsvLayout, LoadReport, load_bids, parse_amount, read_bids

__all__ = ["Catalog", "CsvLayout", "LoadReport", "load_bids", "parse_amount", "read_bids"]
