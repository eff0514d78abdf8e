"""
Interactive benchmark menu.

Usage:
    majority-bench                       # menu on stdin
    majority-bench --choice 2 --size 500 # non-interactive
    majority-bench --choice 1 --csv out/results.csv --append --seed 7
"""
from __future__ import annotations

import argparse
import sys
from typing import Callable

from dotenv import load_dotenv

from majority_bench.benchmark import BenchmarkResult, run_single
from majority_bench.config import load_settings, make_rng
from majority_bench.csv_logger import ResultsCSVLogger
from majority_bench.generators import generate_fixed_majority, generate_random_majority
from majority_bench.tracing import log_benchmark_trace

MENU = """--- Boyer-Moore Benchmark CLI ---
1) Run ALL benchmarks for different sizes (fixed majority = 1)
2) Run single size benchmark (fixed majority = 1 for correctness)
3) Run single size benchmark (random majority)
4) Exit"""


def _read_int(prompt: str, input_fn: Callable[[str], str]) -> int:
    raw = input_fn(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Expected an integer, got {raw!r}") from None


def _report(result: BenchmarkResult, trace: bool) -> None:
    print(result.summary_line())
    if trace:
        trace_id = log_benchmark_trace(result, run_name="cli")
        if trace_id:
            print(f"  trace: {trace_id}")


def main(argv: list[str] | None = None, input_fn: Callable[[str], str] = input) -> int:
    load_dotenv()

    p = argparse.ArgumentParser(description="Benchmark the Boyer-Moore majority vote")
    p.add_argument("--csv", type=str, default=None, help="Results CSV path (default: BENCH_RESULTS_CSV or results.csv)")
    p.add_argument("--append", action="store_true", help="Append to the CSV instead of overwriting it")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible arrays")
    p.add_argument("--choice", type=int, default=None, help="Menu option (skips the prompt)")
    p.add_argument("--size", type=int, default=None, help="Array size for options 2 and 3")
    p.add_argument("--trace", action="store_true", help="Send each run to Langfuse")
    args = p.parse_args(argv)

    try:
        settings = load_settings()
    except RuntimeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    csv_path = args.csv or settings.results_csv
    append = args.append or settings.append
    seed = args.seed if args.seed is not None else settings.seed
    trace = args.trace or settings.trace
    rng = make_rng(seed)

    print(MENU)
    try:
        choice = args.choice if args.choice is not None else _read_int("Choose option: ", input_fn)
        if choice == 4:
            print("Exiting...")
            return 0
        if choice not in (1, 2, 3):
            print("Invalid option")
            return 0

        size = None
        if choice in (2, 3):
            size = args.size if args.size is not None else _read_int(
                "Enter array size (e.g., 100, 500, etc.): ", input_fn
            )
            if size < 0:
                raise ValueError(f"Array size must be >= 0, got {size}")
    except (ValueError, EOFError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    with ResultsCSVLogger(csv_path, append=append) as logger:
        if choice == 1:
            for n in settings.sizes:
                _report(run_single(n, generate_fixed_majority, rng, logger), trace)
            print(f"CSV results written to {csv_path}")
        elif choice == 2:
            _report(run_single(size, generate_fixed_majority, rng, logger), trace)
        else:
            _report(run_single(size, generate_random_majority, rng, logger), trace)

    print(f"Benchmarks finished, results written to {csv_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
