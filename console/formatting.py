import time
from dataclasses import dataclass, field

from bidtree.models.bid import Bid


def format_bid(bid: Bid) -> str:
    """Render a bid as `id: title | amount | fund`"""
    return f"{bid.bid_id}: {bid.title} | {bid.amount:g} | {bid.fund}"


@dataclass
class Stopwatch:
    """Context manager measuring elapsed time in nanosecond ticks"""

    ticks: int = 0
    _started: int = field(default=0, init=False, repr=False)

    def __enter__(self) -> 'Stopwatch':
        self._started = time.perf_counter_ns()
        return self

    def __exit__(self, *exc_info) -> None:
        self.ticks = time.perf_counter_ns() - self._started

    @property
    def seconds(self) -> float:
        return self.ticks / 1_000_000_000

    def report(self) -> list[str]:
        return [
            f"time: {self.ticks} clock ticks",
            f"time: {self.seconds} seconds",
        ]
