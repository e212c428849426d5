"""
Dual-indexed in-memory bid catalog.

This package indexes bid records in two unbalanced binary search trees:
- lookup(bid_id) - exact match by identifier, O(h)
- list_by_key() - ascending identifier order
- list_by_amount() - ascending amount order
- range_by_amount(low, high) - inclusive amount range, ascending
- remove(bid_id) - removes the record from both trees
"""

from bidtree.catalog.catalog import Catalog
from bidtree.models.bid import Bid

__all__ = ["Bid", "Catalog"]
