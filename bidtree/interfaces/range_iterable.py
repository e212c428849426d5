"""
RangeIterable protocol for indexes that support ordered range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from bidtree.models.bid import Bid


class RangeIterable(ABC):
    """
    Protocol for indexes that can be walked in key order.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Bid]:
        """Return an iterator over all bids in ascending key order."""
        pass

    @abstractmethod
    def iterator(self, start: Any = None, end: Any = None) -> Iterator[Bid]:
        """
        Return an iterator over bids whose key lies in the specified range.

        Args:
            start: Lowest key (inclusive). If None, starts from the beginning.
            end: Highest key (inclusive). If None, iterates to the end.

        Returns:
            Iterator yielding bids in ascending key order.
        """
        pass
