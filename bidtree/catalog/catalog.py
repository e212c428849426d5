"""
Catalog - Main bid catalog API.
"""

import logging
from collections.abc import Iterable, Iterator

from bidtree.models.bid import Bid
from bidtree.models.exceptions import CatalogError, DuplicateKeyError
from bidtree.models.trees import AmountIndex, KeyIndex

logger = logging.getLogger(__name__)


class Catalog:
    """
    In-memory bid catalog indexed by id and by amount.

    Provides:
    - insert(bid): Add a bid to both indexes
    - remove(bid_id): Remove a bid from both indexes
    - lookup(bid_id): Retrieve a bid by id
    - list_by_key(): All bids in ascending id order
    - list_by_amount(): All bids in ascending amount order
    - range_by_amount(low, high): Bids with amount in [low, high]

    Architecture:
    - A KeyIndex and an AmountIndex hold the same set of bids
    - Every mutation goes through this class and is applied to both trees
    - Reads are served by whichever tree is ordered for the query

    The catalog is not safe for concurrent use. Mutating it while one of its
    iterators is in progress leaves that iterator's output undefined.
    """

    def __init__(self, bids: Iterable[Bid] | None = None) -> None:
        """
        Initialize the catalog.

        Args:
            bids: Optional bids to insert up front. Any invalid or duplicate
                  bid raises, as with insert().
        """
        self._key_index = KeyIndex()
        self._amount_index = AmountIndex()

        for bid in bids or ():
            self.insert(bid)

    def insert(self, bid: Bid) -> None:
        """
        Add a bid to both indexes.

        Args:
            bid: The bid to add.

        Raises:
            ValueError: If the bid id is empty or not a string.
            InvalidAmountError: If the amount is negative or not finite.
            DuplicateKeyError: If a bid with the same id is already present.
        """
        bid.validate()
        if self._key_index.has(bid.bid_id):
            raise DuplicateKeyError(bid.bid_id)

        self._key_index.insert(bid)
        self._amount_index.insert(bid)
        logger.debug("Inserted bid %s (amount %s)", bid.bid_id, bid.amount)

    def insert_many(self, bids: Iterable[Bid]) -> list[bool]:
        """
        Insert multiple bids, skipping the ones that are rejected.

        Args:
            bids: Bids to insert, in order.

        Returns:
            List of success indicators for each bid.
        """
        results = []
        for bid in bids:
            try:
                self.insert(bid)
            except (CatalogError, ValueError) as e:
                logger.warning("Skipping bid: %s", e)
                results.append(False)
            else:
                results.append(True)
        return results

    def remove(self, bid_id: str) -> bool:
        """
        Remove a bid from both indexes.

        Args:
            bid_id: Id of the bid to remove.

        Returns:
            True if the bid was removed, False if it was not present.
        """
        bid = self._key_index.lookup(bid_id)
        if bid is None:
            return False

        self._key_index.remove(bid_id)
        if not self._amount_index.remove(bid.amount, bid_id):
            raise CatalogError(f"Bid {bid_id!r} was missing from the amount index")

        logger.debug("Removed bid %s", bid_id)
        return True

    def lookup(self, bid_id: str) -> Bid | None:
        """
        Retrieve a bid by id.

        Returns:
            The bid if found, None otherwise.
        """
        return self._key_index.lookup(bid_id)

    def list_by_key(self) -> Iterator[Bid]:
        """Return a lazy iterator over all bids in ascending id order."""
        return self._key_index.in_order()

    def list_by_amount(self) -> Iterator[Bid]:
        """Return a lazy iterator over all bids in ascending amount order."""
        return self._amount_index.in_order()

    def range_by_amount(self, low: float, high: float) -> Iterator[Bid]:
        """
        Return a lazy iterator over bids with low <= amount <= high.

        Raises:
            InvalidRangeError: If low > high or either bound is NaN.
        """
        return self._amount_index.range_query(low, high)

    def clear(self) -> None:
        """Drop every bid from both indexes."""
        self._key_index.clear()
        self._amount_index.clear()

    def heights(self) -> tuple[int, int]:
        """Return the (id tree, amount tree) heights."""
        return self._key_index.height(), self._amount_index.height()

    def __len__(self) -> int:
        return self._key_index.size()

    def __contains__(self, bid_id: object) -> bool:
        return isinstance(bid_id, str) and self._key_index.has(bid_id)

    def __iter__(self) -> Iterator[Bid]:
        return self.list_by_key()
