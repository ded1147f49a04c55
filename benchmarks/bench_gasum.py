#!/usr/bin/env python3
"""
Benchmark the gasum reduction paths.

Measures the unrolled (unit stride), strided, and accessor-protocol paths
against NumPy's vectorized abs-sum on the same data.
"""

import time
import numpy as np
import gasum as ga
from typing import Callable, List, Dict

# Test sizes (number of elements)
SIZES = [100, 1000, 10000, 100000]
ITERATIONS = 20  # Number of iterations per test


def time_call(fn: Callable[[], object], iterations: int) -> float:
    """Return the mean time of ``fn`` in seconds."""
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    end = time.perf_counter()

    return (end - start) / iterations


def run_benchmarks() -> List[Dict]:
    """Run all benchmarks and collect results."""
    results = []

    print("=" * 80)
    print("gasum Reduction Path Benchmarks")
    print("=" * 80)
    print()

    rng = np.random.default_rng(0)

    for size in SIZES:
        print(f"\nTesting size: {size:,} elements")
        print("-" * 80)

        data = rng.standard_normal(2 * size)
        values = data.tolist()
        accessor = ga.AccessorArray(values)

        t_numpy = time_call(lambda: np.abs(data[:size]).sum(), ITERATIONS)
        t_unrolled = time_call(lambda: ga.gasum_ndarray(size, values, 1, 0), ITERATIONS)
        t_strided = time_call(lambda: ga.gasum_ndarray(size, values, 2, 0), ITERATIONS)
        t_accessor = time_call(lambda: ga.gasum_ndarray(size, accessor, 1, 0), ITERATIONS)

        print(f"  NumPy abs().sum():     {t_numpy * 1e6:10.2f} µs")
        print(f"  Unrolled (stride 1):   {t_unrolled * 1e6:10.2f} µs")
        print(f"  Strided (stride 2):    {t_strided * 1e6:10.2f} µs")
        print(f"  Accessor (stride 1):   {t_accessor * 1e6:10.2f} µs")
        print(f"  Accessor overhead:     {t_accessor / t_unrolled:10.1f}x")

        results.append({
            "size": size,
            "numpy_us": t_numpy * 1e6,
            "unrolled_us": t_unrolled * 1e6,
            "strided_us": t_strided * 1e6,
            "accessor_us": t_accessor * 1e6,
        })

    return results


def print_summary(results: List[Dict]):
    """Print a summary table."""
    print("\n" + "=" * 80)
    print("Summary")
    print("=" * 80)
    print(f"{'Size':>10} {'NumPy':>12} {'Unrolled':>12} {'Strided':>12} {'Accessor':>12}")
    print("-" * 80)
    for r in results:
        print(
            f"{r['size']:>10,} {r['numpy_us']:>10.1f}µs {r['unrolled_us']:>10.1f}µs "
            f"{r['strided_us']:>10.1f}µs {r['accessor_us']:>10.1f}µs"
        )


if __name__ == "__main__":
    print_summary(run_benchmarks())
