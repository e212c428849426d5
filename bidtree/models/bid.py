"""
Bid record indexed by the catalog.
"""

import math
from dataclasses import dataclass
from numbers import Real

from bidtree.models.exceptions import InvalidAmountError


@dataclass(frozen=True)
class Bid:
    """
    An immutable bid record.

    Attributes:
        bid_id: Unique identifier, compared lexicographically.
        title: Free text payload.
        fund: Free text payload.
        amount: Finite, non-negative bid amount.

    Only bid_id and amount take part in indexing; title and fund are opaque.
    """

    bid_id: str
    title: str = ""
    fund: str = ""
    amount: float = 0.0

    def validate(self) -> None:
        """
        Check that the bid can be indexed.

        Raises:
            ValueError: If bid_id is not a non-empty string.
            InvalidAmountError: If amount is not a finite, non-negative number.
        """
        if not isinstance(self.bid_id, str) or not self.bid_id:
            raise ValueError(f"bid_id must be a non-empty string, got {self.bid_id!r}")

        # bool is a Real subclass but never a meaningful amount
        if isinstance(self.amount, bool) or not isinstance(self.amount, Real):
            raise InvalidAmountError(self.amount, self.bid_id)
        if not math.isfinite(self.amount) or self.amount < 0:
            raise InvalidAmountError(self.amount, self.bid_id)
