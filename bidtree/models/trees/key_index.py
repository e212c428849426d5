"""
KeyIndex - bid tree ordered by identifier.
"""

from bidtree.models.bid import Bid
from bidtree.models.trees.binary_search_tree import BinarySearchTree


class KeyIndex(BinarySearchTree):
    """
    Binary search tree keyed by bid id under lexicographic order.

    The tree itself accepts duplicate ids (routed right); keeping ids unique
    is the catalog's job, and lookup only ever returns the first copy met
    on the way down.
    """

    def _key(self, bid: Bid) -> str:
        return bid.bid_id

    def lookup(self, bid_id: str) -> Bid | None:
        """Return the bid with this id, or None if absent. O(h)"""
        node = self._find_node(bid_id)
        return node.bid if node else None

    def has(self, bid_id: str) -> bool:
        return self._find_node(bid_id) is not None

    def remove(self, bid_id: str) -> bool:
        """Remove the bid with this id. O(h)"""
        return self._remove(bid_id, lambda bid: True)
