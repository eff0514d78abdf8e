from __future__ import annotations

import os
import random
from dataclasses import dataclass

DEFAULT_SIZES = (100, 500, 1000, 5000, 10000)


def _opt_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


def _opt_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


def parse_sizes(raw: str) -> tuple[int, ...]:
    """Parse "100, 500,1000" into (100, 500, 1000); sizes must be >= 0."""
    try:
        sizes = tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError:
        raise RuntimeError(f"Sizes must be a comma-separated list of integers, got {raw!r}") from None
    if not sizes or any(s < 0 for s in sizes):
        raise RuntimeError(f"Sizes must be a non-empty list of non-negative integers, got {raw!r}")
    return sizes


@dataclass(frozen=True)
class Settings:
    results_csv: str
    sizes: tuple[int, ...]
    seed: int | None
    append: bool
    warmup: int
    runs: int
    workers: int
    trace: bool


def load_settings() -> Settings:
    sizes_raw = os.getenv("BENCH_SIZES", "").strip()
    sizes = parse_sizes(sizes_raw) if sizes_raw else DEFAULT_SIZES

    warmup = _opt_int("BENCH_WARMUP", 5)
    runs = _opt_int("BENCH_RUNS", 10)
    workers = _opt_int("BENCH_WORKERS", 4)
    if warmup < 0 or runs < 1 or workers < 1:
        raise RuntimeError("BENCH_WARMUP must be >= 0, BENCH_RUNS and BENCH_WORKERS must be >= 1")

    return Settings(
        results_csv=os.getenv("BENCH_RESULTS_CSV", "results.csv").strip() or "results.csv",
        sizes=sizes,
        seed=_opt_int("BENCH_SEED", None),
        append=_opt_bool("BENCH_APPEND", False),
        warmup=warmup,
        runs=runs,
        workers=workers,
        trace=_opt_bool("BENCH_TRACE", False),
    )


def make_rng(seed: int | None = None) -> random.Random:
    return random.Random(seed)
