"""
AmountIndex - bid tree ordered by amount.
"""

import math
from collections.abc import Iterator

from bidtree.models.bid import Bid
from bidtree.models.exceptions import InvalidRangeError
from bidtree.models.trees.binary_search_tree import BinarySearchTree


class AmountIndex(BinarySearchTree):
    """
    Binary search tree keyed by bid amount.

    Many bids may share an amount. Equal amounts are inserted into the right
    subtree, so bids with the same amount are listed in insertion order
    until removals reshape the tree.
    """

    def _key(self, bid: Bid) -> float:
        return bid.amount

    def range_query(self, low: float, high: float) -> Iterator[Bid]:
        """
        Return bids with low <= amount <= high in ascending amount order.

        Args:
            low: Lowest amount (inclusive).
            high: Highest amount (inclusive).

        Returns:
            Lazy iterator over the matching bids.

        Raises:
            InvalidRangeError: If low > high or either bound is NaN. Raised
                by this call, before any traversal.
        """
        if math.isnan(low) or math.isnan(high) or low > high:
            raise InvalidRangeError(low, high)
        return self.iterator(low, high)

    def remove(self, amount: float, bid_id: str) -> bool:
        """
        Remove the bid with this amount and id.

        The id picks out one bid among those sharing the amount.

        Returns:
            True if the bid was found and removed, False otherwise.
        """
        return self._remove(amount, lambda bid: bid.bid_id == bid_id)
