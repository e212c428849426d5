"""
Custom exceptions for the bid catalog.
"""


class CatalogError(Exception):
    """Base class for errors reported by the catalog and its indexes."""


class DuplicateKeyError(CatalogError):
    """
    Raised when inserting a bid whose id is already indexed.

    Neither index is modified when this is raised.
    """

    def __init__(self, bid_id: str):
        self.bid_id = bid_id
        super().__init__(f"Bid id {bid_id!r} is already in the catalog")


class InvalidAmountError(CatalogError, ValueError):
    """
    Raised when a bid amount is negative, NaN, infinite or not a number.
    """

    def __init__(self, amount: object, bid_id: str | None = None):
        self.amount = amount
        self.bid_id = bid_id
        target = f" for bid {bid_id!r}" if bid_id is not None else ""
        super().__init__(
            f"Invalid amount {amount!r}{target}: "
            f"must be a finite, non-negative number"
        )


class InvalidRangeError(CatalogError, ValueError):
    """
    Raised when an amount range has low > high or a NaN bound.

    Reported before any traversal starts.
    """

    def __init__(self, low: float, high: float):
        self.low = low
        self.high = high
        super().__init__(f"Invalid amount range [{low!r}, {high!r}]: low must be <= high")
