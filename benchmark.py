#!/usr/bin/env python3
"""
Performance Script for the Bid Catalog

Tests:
1. Insert throughput (random and sorted id order)
2. Lookup throughput
3. Full listing by id and by amount
4. Amount range query performance
5. Remove throughput

Sorted insertion builds degenerate trees (height == N), so the sorted runs
show the worst case of the unbalanced indexes.

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Tree heights
"""

import random
import statistics
import sys
import time
from typing import List

from bidtree import Bid, Catalog


class PerformanceTest:
    def __init__(self, count: int, seed: int = 42):
        self.count = count
        self.rng = random.Random(seed)
        self.catalog = Catalog()

    @staticmethod
    def generate_id(i: int) -> str:
        """Generate a zero-padded id so string order matches numeric order."""
        return f"{i:08d}"

    def generate_bids(self, sorted_ids: bool) -> List[Bid]:
        bids = [
            Bid(
                bid_id=self.generate_id(i),
                title=f"Item {i}",
                fund="General Fund",
                amount=round(self.rng.uniform(0, 10_000), 2),
            )
            for i in range(self.count)
        ]
        if not sorted_ids:
            self.rng.shuffle(bids)
        return bids

    @staticmethod
    def calculate_stats(latencies: List[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "mean_ms": statistics.mean(latencies) / 1_000_000,
            "median_ms": statistics.median(latencies) / 1_000_000,
            "p95_ms": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000_000,
            "p99_ms": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000_000,
        }

    def timed(self, name: str, operations) -> dict:
        """Run each callable in `operations`, recording per-call latency."""
        latencies = []
        start_time = time.perf_counter_ns()
        for op in operations:
            op_start = time.perf_counter_ns()
            op()
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": name,
            "count": len(latencies),
            "elapsed_sec": elapsed,
            "ops_per_sec": len(latencies) / elapsed if elapsed else float("inf"),
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def run(self, sorted_ids: bool) -> List[dict]:
        order = "Sorted" if sorted_ids else "Random"
        print(f"\n{'='*60}")
        print(f"{order} insertion order: {self.count} bids")
        print(f"{'='*60}")

        self.catalog.clear()
        bids = self.generate_bids(sorted_ids)
        ids = [bid.bid_id for bid in bids]

        results = [self.timed(f"{order} Insert", [lambda b=b: self.catalog.insert(b) for b in bids])]

        key_height, amount_height = self.catalog.heights()
        print(f"  Heights: id tree {key_height}, amount tree {amount_height}")

        lookups = self.rng.sample(ids, min(len(ids), 1000))
        results.append(self.timed("Lookup", [lambda i=i: self.catalog.lookup(i) for i in lookups]))

        results.append(self.timed("List by id", [lambda: sum(1 for _ in self.catalog.list_by_key())]))
        results.append(self.timed("List by amount", [lambda: sum(1 for _ in self.catalog.list_by_amount())]))

        ranges = []
        for _ in range(100):
            low = self.rng.uniform(0, 9_000)
            ranges.append((low, low + 500))
        results.append(
            self.timed("Range query", [lambda r=r: list(self.catalog.range_by_amount(*r)) for r in ranges])
        )

        removals = self.rng.sample(ids, min(len(ids), 1000))
        results.append(self.timed("Remove", [lambda i=i: self.catalog.remove(i) for i in removals]))
        return results

    @staticmethod
    def print_results(results: dict):
        """Print formatted results."""
        print(f"\n{results['test']}:")
        print(f"  Operations: {results['count']}")
        print(f"  Elapsed: {results['elapsed_sec']:.4f}s")
        print(f"  Throughput: {results['ops_per_sec']:.2f} ops/sec")
        if "median_ms" in results:
            print(f"  Latency (p50/p95/p99): {results['median_ms']:.3f}/{results['p95_ms']:.3f}/{results['p99_ms']:.3f} ms")


def run_tests(count: int):
    test = PerformanceTest(count)
    test.run(sorted_ids=False)
    test.run(sorted_ids=True)

    print(f"\n{'#'*60}")
    print(f"# Performance Tests Complete!")
    print(f"{'#'*60}\n")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_tests(2_000)
    else:
        run_tests(20_000)
