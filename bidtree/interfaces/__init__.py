"""
Abstract base classes for the bid indexes.
"""

from bidtree.interfaces.bid_index import BidIndex
from bidtree.interfaces.range_iterable import RangeIterable

__all__ = ["BidIndex", "RangeIterable"]
