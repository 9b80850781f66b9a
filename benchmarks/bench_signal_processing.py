"""Benchmarks for streaming filtering, morphology and peak detection.

Each benchmark times a torchdsp operator against its closest scipy
counterpart on the same data.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import scipy.ndimage
import scipy.signal
import torch

from torchdsp.morphology import dilation, opening
from torchdsp.signal_processing.filter import StreamingIIRFilter, lfilter
from torchdsp.signal_processing.peak_detection import find_peaks


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Timing statistics in seconds under ``'mean'``, ``'std'``, ``'min'``
        and ``'max'``.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    torchdsp_time: dict[str, float],
    scipy_time: dict[str, float],
) -> None:
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchdsp: {format_time(torchdsp_time['mean'])} "
        f"+/- {format_time(torchdsp_time['std'])}"
    )
    print(
        f"  scipy:    {format_time(scipy_time['mean'])} "
        f"+/- {format_time(scipy_time['std'])}"
    )

    ratio = scipy_time["mean"] / torchdsp_time["mean"]
    if ratio >= 1:
        print(f"  Ratio:    {ratio:.2f}x faster")
    else:
        print(f"  Ratio:    {1 / ratio:.2f}x slower")


def _filter_stream(b, a, blocks):
    streaming_filter = StreamingIIRFilter(b, a)
    for block in blocks:
        streaming_filter.apply(block)


def _filter_stream_scipy(b, a, blocks):
    zi = np.zeros(max(len(a), len(b)) - 1)
    for block in blocks:
        _, zi = scipy.signal.lfilter(b, a, block, zi=zi)


class BenchSignalProcessing:
    """Benchmarks for the torchdsp operators."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        """Initialize benchmark runner.

        Parameters
        ----------
        warmup : int, optional
            Number of warmup iterations. Default is 3.
        iterations : int, optional
            Number of timed iterations. Default is 10.
        """
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_lfilter(
        self, signal_length: int = 10000, order: int = 4
    ) -> None:
        """Benchmark lfilter vs scipy.signal.lfilter.

        Parameters
        ----------
        signal_length : int, optional
            Length of input signal. Default is 10000.
        order : int, optional
            Filter order. Default is 4.
        """
        b_np, a_np = scipy.signal.butter(order, 0.3, output="ba")
        x = torch.randn(signal_length, dtype=torch.float64)

        torchdsp_time = self._bench(
            lfilter, torch.from_numpy(b_np), torch.from_numpy(a_np), x
        )
        scipy_time = self._bench(scipy.signal.lfilter, b_np, a_np, x.numpy())

        print_comparison(
            f"lfilter (length={signal_length}, order={order})",
            torchdsp_time,
            scipy_time,
        )

    def bench_streaming_filter(
        self,
        signal_length: int = 10000,
        block_size: int = 256,
        device: str = "cpu",
    ) -> None:
        """Benchmark block-wise filtering against scipy with ``zi``.

        Parameters
        ----------
        signal_length : int, optional
            Total stream length. Default is 10000.
        block_size : int, optional
            Samples per :meth:`StreamingIIRFilter.apply` call. Default is
            256.
        device : str, optional
            Device the blocks are placed on. The filter state follows them.
            Default is ``"cpu"``.
        """
        b_np, a_np = scipy.signal.butter(4, 0.3, output="ba")
        x = torch.randn(signal_length, dtype=torch.float64)

        blocks = list(torch.split(x.to(device), block_size))
        blocks_np = [block.numpy() for block in torch.split(x, block_size)]

        torchdsp_time = self._bench(
            _filter_stream,
            torch.from_numpy(b_np),
            torch.from_numpy(a_np),
            blocks,
        )
        scipy_time = self._bench(_filter_stream_scipy, b_np, a_np, blocks_np)

        print_comparison(
            f"streaming filter (length={signal_length}, "
            f"block={block_size}, device={device})",
            torchdsp_time,
            scipy_time,
        )

    def bench_dilation(
        self, signal_length: int = 100000, window_length: int = 15
    ) -> None:
        """Benchmark dilation vs scipy.ndimage.grey_dilation."""
        x = torch.randn(signal_length, dtype=torch.float64)

        torchdsp_time = self._bench(dilation, x, window_length)
        scipy_time = self._bench(
            scipy.ndimage.grey_dilation,
            x.numpy(),
            size=window_length,
            mode="nearest",
        )

        print_comparison(
            f"dilation (length={signal_length}, window={window_length})",
            torchdsp_time,
            scipy_time,
        )

    def bench_opening(
        self, signal_length: int = 100000, window_length: int = 15
    ) -> None:
        """Benchmark opening vs scipy.ndimage.grey_opening."""
        x = torch.randn(signal_length, dtype=torch.float64)

        torchdsp_time = self._bench(opening, x, window_length)
        scipy_time = self._bench(
            scipy.ndimage.grey_opening,
            x.numpy(),
            size=window_length,
            mode="nearest",
        )

        print_comparison(
            f"opening (length={signal_length}, window={window_length})",
            torchdsp_time,
            scipy_time,
        )

    def bench_find_peaks(
        self,
        signal_length: int = 10000,
        min_peak_distance: int = 10,
        min_peak_prominence: float = 1.0,
    ) -> None:
        """Benchmark find_peaks vs scipy.signal.find_peaks."""
        x = torch.randn(signal_length, dtype=torch.float64)

        torchdsp_time = self._bench(
            find_peaks,
            x,
            min_peak_distance=min_peak_distance,
            min_peak_prominence=min_peak_prominence,
        )
        scipy_time = self._bench(
            scipy.signal.find_peaks,
            x.numpy(),
            distance=min_peak_distance + 1,
            prominence=min_peak_prominence,
        )

        print_comparison(
            f"find_peaks (length={signal_length})",
            torchdsp_time,
            scipy_time,
        )

    def run_all(self) -> None:
        """Run all benchmarks."""
        print("=" * 60)
        print("SIGNAL PROCESSING BENCHMARKS")
        print("=" * 60)

        print("\n--- Filtering ---")
        self.bench_lfilter()
        self.bench_streaming_filter()

        print("\n--- Morphology ---")
        self.bench_dilation()
        self.bench_opening()

        print("\n--- Peak Detection ---")
        self.bench_find_peaks()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Block Size Scaling (streaming filter) ---")
        for block_size in [16, 256, 4096]:
            self.bench_streaming_filter(block_size=block_size)

        if torch.cuda.is_available():
            print("\n--- Device (streaming filter) ---")
            self.bench_streaming_filter(device="cuda")

        print("\n--- Window Length Scaling (dilation) ---")
        for window_length in [3, 15, 101]:
            self.bench_dilation(window_length=window_length)


if __name__ == "__main__":
    bench = BenchSignalProcessing(warmup=2, iterations=5)
    bench.run_all()
    print("\n")
    bench.run_scaling()
