"""Benchmark the per-sample streaming engine."""

import time
from typing import Dict

import numpy as np

from firstream.dsp.fir import FilterSpec, design_filter
from firstream.dsp.stream import FilterBank, StreamingFIR
from firstream.dsp.utils import mirror_coefficients


def benchmark_streaming_fir(
    length: int,
    n_samples: int = 10000,
    capacity: int = 1024,
) -> Dict[str, float]:
    """Benchmark StreamingFIR.process on white noise.

    Args:
        length: Odd filter length.
        n_samples: Number of samples to stream.
        capacity: Circular buffer capacity.

    Returns:
        Dictionary with timing results.
    """
    coefficients = design_filter(FilterSpec("lowpass", length, 1000.0, 8000.0))
    fir = StreamingFIR(coefficients, capacity=capacity)
    x = np.random.default_rng(0).standard_normal(n_samples)

    # Warmup
    for sample in x[:100]:
        fir.process(sample)
    fir.reset()

    start = time.perf_counter()
    for sample in x:
        fir.process(sample)
    end = time.perf_counter()

    total_time = end - start
    return {
        "length": length,
        "n_samples": n_samples,
        "total_time_sec": total_time,
        "time_per_sample_sec": total_time / n_samples,
        "samples_per_sec": n_samples / total_time,
    }


def benchmark_naive_fir(length: int, n_samples: int = 10000) -> Dict[str, float]:
    """Benchmark a full-length dot product per sample, for comparison."""
    kernel = mirror_coefficients(
        design_filter(FilterSpec("lowpass", length, 1000.0, 8000.0))
    )
    history = np.zeros(length)
    x = np.random.default_rng(0).standard_normal(n_samples)

    start = time.perf_counter()
    for sample in x:
        history = np.roll(history, 1)
        history[0] = sample
        float(kernel @ history)
    end = time.perf_counter()

    total_time = end - start
    return {
        "length": length,
        "n_samples": n_samples,
        "total_time_sec": total_time,
        "time_per_sample_sec": total_time / n_samples,
        "samples_per_sec": n_samples / total_time,
    }


def benchmark_filter_bank(
    n_filters: int, length: int = 101, n_samples: int = 5000
) -> Dict[str, float]:
    """Benchmark a FilterBank of identical-length filters on one stream."""
    spec = FilterSpec("lowpass", length, 1000.0, 8000.0)
    windows = ["rectangular", "bartlett", "hanning", "hamming", "blackman"]
    sets = [design_filter(spec, windows[i % len(windows)]) for i in range(n_filters)]
    bank = FilterBank(sets)
    x = np.random.default_rng(0).standard_normal(n_samples)

    start = time.perf_counter()
    for sample in x:
        bank.process(sample)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_filters": n_filters,
        "length": length,
        "n_samples": n_samples,
        "total_time_sec": total_time,
        "samples_per_sec": n_samples / total_time,
    }


if __name__ == "__main__":
    print("Benchmarking streaming FIR...")

    for length in (21, 101, 179, 511):
        sym = benchmark_streaming_fir(length)
        naive = benchmark_naive_fir(length)
        print(f"Length {length}:")
        print(f"  Symmetric engine: {sym['time_per_sample_sec']*1e6:.2f} μs/sample")
        print(f"  Naive full dot:   {naive['time_per_sample_sec']*1e6:.2f} μs/sample")

    bank = benchmark_filter_bank(n_filters=5)
    print(f"\nFilterBank (5 x 101 taps, shared buffer):")
    print(f"  Samples per second: {bank['samples_per_sec']:.0f}")
