"""
Data models for the bid catalog.
"""

from bidtree.models.bid import Bid
from bidtree.models.exceptions import (
    CatalogError,
    DuplicateKeyError,
    InvalidAmountError,
    InvalidRangeError,
)

__all__ = [
    "Bid",
    "CatalogError",
    "DuplicateKeyError",
    "InvalidAmountError",
    "InvalidRangeError",
]
