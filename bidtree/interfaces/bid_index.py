"""
BidIndex abstract base class for the bid search trees.
"""

from abc import abstractmethod
from collections.abc import Iterator

from bidtree.interfaces.range_iterable import RangeIterable
from bidtree.models.bid import Bid


class BidIndex(RangeIterable):
    """
    Abstract base class for a tree indexing bids by one key.

    Operations run in O(h) where h is the tree height. The trees are not
    self-balancing, so h is O(N) for sorted insertion order.

    Implementations:
    - KeyIndex: ordered by bid id
    - AmountIndex: ordered by bid amount
    """

    @abstractmethod
    def insert(self, bid: Bid) -> None:
        """
        Add a bid. Equal keys are placed in the right subtree.

        Args:
            bid: The bid to index.
        """
        pass

    @abstractmethod
    def in_order(self) -> Iterator[Bid]:
        """
        Return a lazy iterator over every bid in ascending key order.

        Each call starts a fresh traversal.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of indexed bids.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Release every node in the tree."""
        pass
