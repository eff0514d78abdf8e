"""
Summarize a results CSV: per-size means, counters per element, and plots.

Usage:
    python scripts/summarize_results.py --results results.csv --out_dir reports
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

sys.path.insert(0, str(Path(__file__).parent.parent))
from majority_bench.csv_logger import load_results

COUNTERS = ["comparisons", "arrayAccesses", "assignments"]


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean time and counters per (algorithm, n), plus counters divided by n."""
    summary = (
        df.groupby(["Algorithm_Name", "n"], as_index=False)[["timeMs", *COUNTERS]]
        .mean()
        .sort_values(["Algorithm_Name", "n"])
    )
    runs = df.groupby(["Algorithm_Name", "n"]).size().rename("runs").reset_index()
    summary = summary.merge(runs, on=["Algorithm_Name", "n"])
    for col in COUNTERS:
        summary[f"{col}_per_n"] = summary[col] / summary["n"].where(summary["n"] > 0)
    return summary.reset_index(drop=True)


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--results", type=str, default="results.csv", help="Results CSV written by the benchmarks")
    p.add_argument("--out_dir", type=str, default="reports")
    args = p.parse_args()

    results_path = Path(args.results)
    if not results_path.exists():
        print(f"ERROR: results file not found: {results_path}", file=sys.stderr)
        sys.exit(1)

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    df = load_results(results_path)
    if df.empty:
        print(f"ERROR: no rows in {results_path}", file=sys.stderr)
        sys.exit(1)

    summary = summarize(df)
    summary.to_csv(out_dir / "summary.csv", index=False)
    print(summary.to_string(index=False))

    # Plot: time vs n
    plt.figure()
    for name, grp in summary.groupby("Algorithm_Name"):
        plt.plot(grp["n"], grp["timeMs"], marker="o", label=name)
    plt.title("Mean time vs input size")
    plt.xlabel("n")
    plt.ylabel("Time (ms)")
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_dir / "time_vs_n.png", dpi=150)
    plt.close()

    # Plot: counters vs n
    plt.figure()
    for col in COUNTERS:
        plt.plot(summary["n"], summary[col], marker="o", label=col)
    plt.title("Operation counts vs input size")
    plt.xlabel("n")
    plt.ylabel("Count")
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_dir / "counters_vs_n.png", dpi=150)
    plt.close()

    print("Wrote reports to:", out_dir.resolve())


if __name__ == "__main__":
    main()
