"""
Batch benchmark: for each size, average timing over repeated calls, one
metered run written to the results CSV, and a JSON report.

Usage (from project root):
    python scripts/run_benchmarks.py --sizes 100,1000,10000 --runs 20 --seed 42
    python scripts/run_benchmarks.py --generator random --concurrent
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))
from majority_bench.benchmark import measure_average, run_concurrent, run_single
from majority_bench.config import load_settings, make_rng, parse_sizes
from majority_bench.csv_logger import ResultsCSVLogger
from majority_bench.generators import GENERATORS
from majority_bench.metrics import MetricsCounters
from majority_bench.tracing import log_benchmark_trace


def main() -> None:
    load_dotenv()

    try:
        settings = load_settings()
    except RuntimeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    p = argparse.ArgumentParser(description="Run majority-vote benchmarks over several sizes")
    p.add_argument("--sizes", type=str, default=",".join(str(s) for s in settings.sizes))
    p.add_argument("--generator", choices=sorted(GENERATORS), default="fixed")
    p.add_argument("--seed", type=int, default=settings.seed)
    p.add_argument("--warmup", type=int, default=settings.warmup)
    p.add_argument("--runs", type=int, default=settings.runs)
    p.add_argument("--csv", type=str, default=settings.results_csv)
    p.add_argument("--append", action="store_true", default=settings.append)
    p.add_argument("--out_json", type=str, default="reports/benchmark_results.json")
    p.add_argument("--concurrent", action="store_true", help="Also check shared-sink totals across threads")
    p.add_argument("--workers", type=int, default=settings.workers)
    p.add_argument("--trace", action="store_true", default=settings.trace)
    args = p.parse_args()

    try:
        sizes = parse_sizes(args.sizes)
    except RuntimeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    generator = GENERATORS[args.generator]
    rng = make_rng(args.seed)
    rows = []

    with ResultsCSVLogger(args.csv, append=args.append) as logger:
        for n in sizes:
            single = run_single(n, generator, rng, logger)
            print(single.summary_line())

            arr = generator(n, rng)
            timing = measure_average(arr, warmup=args.warmup, runs=args.runs, progress=True)
            print(f"  avg {timing.mean_us:.2f} us (min {timing.min_us:.2f}, max {timing.max_us:.2f}) over {timing.runs} runs")

            row = {**single.to_dict(), "timing": timing.to_dict()}

            if args.concurrent:
                shared = MetricsCounters()
                run_concurrent(arr, shared, workers=args.workers, calls_per_worker=args.runs)
                solo = MetricsCounters()
                run_concurrent(arr, solo, workers=1, calls_per_worker=1)
                calls = args.workers * args.runs
                consistent = all(
                    shared.read(name) == solo.read(name) * calls
                    for name in solo.snapshot().to_dict()
                )
                row["concurrent"] = {"calls": calls, "totals": shared.snapshot().to_dict(), "consistent": consistent}
                print(f"  concurrent: {calls} calls, totals consistent: {consistent}")

            if args.trace:
                row["trace_id"] = log_benchmark_trace(single, run_name="run_benchmarks", timing=timing)

            rows.append(row)

    out_path = Path(args.out_json)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(
        {
            "generator": args.generator,
            "seed": args.seed,
            "sizes": list(sizes),
            "results": rows,
        },
        indent=2,
    ))

    print("Wrote:", Path(args.csv).resolve())
    print("Wrote:", out_path.resolve())


if __name__ == "__main__":
    main()
