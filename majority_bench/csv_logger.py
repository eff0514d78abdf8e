"""
Results CSV for benchmark runs.

One header row, then one row per measurement:
    Algorithm_Name,n,timeMs,comparisons,arrayAccesses,assignments,allocations,maxDepth

Every row fills all eight columns. allocations and maxDepth are always 0
(the algorithm is iterative and allocates nothing per element). Older files
whose rows stopped after `assignments,` still load via load_results; the
missing columns come back as NaN.
"""
from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd

from majority_bench.metrics import MetricsCounters, MetricsSnapshot

HEADER = [
    "Algorithm_Name",
    "n",
    "timeMs",
    "comparisons",
    "arrayAccesses",
    "assignments",
    "allocations",
    "maxDepth",
]


class ResultsCSVLogger:
    """Append-or-overwrite writer; use as a context manager."""

    def __init__(self, path: str | Path, append: bool = False) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        existed = self.path.exists() and self.path.stat().st_size > 0
        self._fh = open(self.path, "a" if append else "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._fh, lineterminator="\n")
        if not existed or not append:
            self._writer.writerow(HEADER)
            self._fh.flush()

    def log_result(
        self,
        algorithm_name: str,
        n: int,
        elapsed_ns: int,
        metrics: MetricsCounters | MetricsSnapshot,
    ) -> None:
        time_ms = elapsed_ns / 1e6
        self._writer.writerow([
            algorithm_name,
            n,
            time_ms,
            metrics.comparisons,
            metrics.array_accesses,
            metrics.assignments,
            0,
            0,
        ])
        self._fh.flush()

    def close(self) -> None:
        if not self._fh.closed:
            self._fh.close()

    def __enter__(self) -> "ResultsCSVLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_results(path: str | Path) -> pd.DataFrame:
    df = pd.read_csv(path)
    missing = [c for c in HEADER[:6] if c not in df.columns]
    if missing:
        raise ValueError(f"Results file {path} is missing columns: {missing}")
    return df
