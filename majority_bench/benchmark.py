"""
Benchmark harness around find_majority.

- run_single / run_sizes: one metered call per size, optional CSV row
- measure_average: warm-up then repeated timed calls on one array
- run_concurrent: many threads sharing a single MetricsCounters sink
"""
from __future__ import annotations

import random
import statistics
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from tqdm import tqdm

from majority_bench.algorithm import ALGORITHM_NAME, find_majority
from majority_bench.csv_logger import ResultsCSVLogger
from majority_bench.metrics import MetricsCounters, MetricsSnapshot

Generator = Callable[[int, random.Random], list[int]]


@dataclass(frozen=True)
class BenchmarkResult:
    algorithm: str
    size: int
    elapsed_ns: int
    result: int | None
    metrics: MetricsSnapshot

    @property
    def time_ms(self) -> float:
        return self.elapsed_ns / 1e6

    def summary_line(self) -> str:
        result_str = "No majority" if self.result is None else str(self.result)
        return f"Size: {self.size}, Time: {self.time_ms:.2f} ms, Result: {result_str}, Metrics: {self.metrics}"

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "n": self.size,
            "time_ms": self.time_ms,
            "result": self.result,
            **self.metrics.to_dict(),
        }


@dataclass(frozen=True)
class TimingStats:
    runs: int
    mean_us: float
    min_us: float
    max_us: float
    stdev_us: float

    def to_dict(self) -> dict:
        return {
            "runs": self.runs,
            "mean_us": self.mean_us,
            "min_us": self.min_us,
            "max_us": self.max_us,
            "stdev_us": self.stdev_us,
        }


def run_single(
    size: int,
    generator: Generator,
    rng: random.Random | None = None,
    logger: ResultsCSVLogger | None = None,
) -> BenchmarkResult:
    """Generate one array of `size`, time a single metered call, optionally log it."""
    rng = rng or random.Random()
    metrics = MetricsCounters()
    arr = generator(size, rng)

    start = time.perf_counter_ns()
    result = find_majority(arr, metrics)
    elapsed_ns = time.perf_counter_ns() - start

    if logger is not None:
        logger.log_result(ALGORITHM_NAME, size, elapsed_ns, metrics)

    return BenchmarkResult(
        algorithm=ALGORITHM_NAME,
        size=size,
        elapsed_ns=elapsed_ns,
        result=result,
        metrics=metrics.snapshot(),
    )


def run_sizes(
    sizes: Iterable[int],
    generator: Generator,
    rng: random.Random | None = None,
    logger: ResultsCSVLogger | None = None,
    progress: bool = False,
) -> list[BenchmarkResult]:
    rng = rng or random.Random()
    sizes = list(sizes)
    iterator = tqdm(sizes, desc="Sizes") if progress else sizes
    return [run_single(size, generator, rng, logger) for size in iterator]


def measure_average(
    sequence: Sequence[int],
    warmup: int = 5,
    runs: int = 10,
    metrics: MetricsCounters | None = None,
    progress: bool = False,
) -> TimingStats:
    """
    Time `runs` calls on the same sequence after `warmup` untimed calls.

    The sink is reset after every measured call, so on return it holds the
    totals of a single call. Calls never overlap, which keeps reset() safe.
    """
    if warmup < 0:
        raise ValueError(f"warmup must be >= 0, got {warmup}")
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")
    metrics = metrics or MetricsCounters()

    for _ in range(warmup):
        find_majority(sequence, metrics)
    metrics.reset()

    samples_us: list[float] = []
    iterator = tqdm(range(runs), desc=f"n={len(sequence)}", leave=False) if progress else range(runs)
    for i in iterator:
        if i:
            metrics.reset()
        start = time.perf_counter_ns()
        find_majority(sequence, metrics)
        samples_us.append((time.perf_counter_ns() - start) / 1e3)

    return TimingStats(
        runs=runs,
        mean_us=statistics.fmean(samples_us),
        min_us=min(samples_us),
        max_us=max(samples_us),
        stdev_us=statistics.stdev(samples_us) if runs > 1 else 0.0,
    )


def run_concurrent(
    sequence: Sequence[int],
    metrics: MetricsCounters,
    workers: int = 4,
    calls_per_worker: int = 10,
) -> list[int | None]:
    """Call find_majority from `workers` threads, all writing into one shared sink."""
    if workers < 1 or calls_per_worker < 0:
        raise ValueError("workers must be >= 1 and calls_per_worker >= 0")

    def _worker() -> list[int | None]:
        return [find_majority(sequence, metrics) for _ in range(calls_per_worker)]

    with ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(_worker) for _ in range(workers)]
        results: list[int | None] = []
        for fut in futures:
            results.extend(fut.result())
    return results
