"""
Binary search tree indexes over bids.
"""

from bidtree.models.trees.amount_index import AmountIndex
from bidtree.models.trees.key_index import KeyIndex

__all__ = ["AmountIndex", "KeyIndex"]
