"""Benchmark difference-equation filtering and convolution."""

import time
from typing import Dict

import numpy as np

import sigmat as sm


def benchmark_filter(
    n_samples: int,
    n_columns: int = 1,
    order: int = 4,
    repeats: int = 20,
) -> Dict[str, float]:
    """Benchmark IIR filtering of random data.

    Args:
        n_samples: Samples per column.
        n_columns: Number of independent signals (matrix columns).
        order: Filter order (len(a) - 1).
        repeats: Timed repetitions.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(0)
    x = sm.Matrix.from_array(rng.standard_normal((n_samples, n_columns)))
    b = sm.Matrix.from_array(rng.standard_normal(order + 1))
    # Poles at 0.5 keep the filter stable.
    a = sm.Matrix.from_array(np.poly(np.full(order, 0.5)))

    # Warmup
    sm.filter(b, a, x)

    start = time.perf_counter()
    for _ in range(repeats):
        sm.filter(b, a, x)
    total_time = time.perf_counter() - start

    return {
        "n_samples": n_samples,
        "n_columns": n_columns,
        "total_time_sec": total_time,
        "time_per_call_sec": total_time / repeats,
        "samples_per_sec": repeats * n_samples * n_columns / total_time,
    }


def benchmark_conv(n_samples: int, taps: int, repeats: int = 20) -> Dict[str, float]:
    """Benchmark FIR convolution through conv()."""
    rng = np.random.default_rng(1)
    x = sm.Matrix.from_array(rng.standard_normal(n_samples))
    h = sm.Matrix.from_array(rng.standard_normal(taps))

    sm.conv(x, h)

    start = time.perf_counter()
    for _ in range(repeats):
        sm.conv(x, h)
    total_time = time.perf_counter() - start

    return {
        "n_samples": n_samples,
        "taps": taps,
        "time_per_call_sec": total_time / repeats,
    }


if __name__ == "__main__":
    print("Benchmarking filter...")
    for n in (1_000, 10_000):
        results = benchmark_filter(n_samples=n, n_columns=4)
        print(f"filter ({n} samples x 4 columns, order 4):")
        print(f"  Time per call: {results['time_per_call_sec']*1e3:.2f} ms")
        print(f"  Samples per second: {results['samples_per_sec']:.0f}")

    print("Benchmarking conv...")
    results = benchmark_conv(n_samples=10_000, taps=64)
    print(f"conv (10000 samples, 64 taps): {results['time_per_call_sec']*1e3:.2f} ms")
