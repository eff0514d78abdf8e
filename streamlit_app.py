from __future__ import annotations

from pathlib import Path

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st
from dotenv import load_dotenv

from majority_bench.benchmark import measure_average, run_single
from majority_bench.config import load_settings, make_rng, parse_sizes
from majority_bench.csv_logger import load_results
from majority_bench.generators import GENERATORS
from majority_bench.tracing import log_benchmark_trace

st.set_page_config(page_title="Boyer-Moore Majority Vote Benchmark", layout="wide")

_PLOTLY_THEME = "plotly_white"
_COUNTERS = ["comparisons", "arrayAccesses", "assignments"]


# ---------------------------------------------------------------------------
# Benchmark execution (cached per parameter set)
# ---------------------------------------------------------------------------

@st.cache_data(show_spinner=False)
def _run_benchmarks(sizes: tuple[int, ...], generator_name: str, seed: int | None,
                    warmup: int, runs: int, trace: bool) -> pd.DataFrame:
    """Return one row per size: single metered run plus averaged timing."""
    generator = GENERATORS[generator_name]
    rng = make_rng(seed)
    rows = []
    for n in sizes:
        single = run_single(n, generator, rng)
        timing = measure_average(generator(n, rng), warmup=warmup, runs=runs)
        if trace:
            log_benchmark_trace(single, run_name="streamlit", timing=timing)
        rows.append({
            **single.to_dict(),
            "result": "No majority" if single.result is None else str(single.result),
            "mean_us": timing.mean_us,
            "min_us": timing.min_us,
            "max_us": timing.max_us,
            "stdev_us": timing.stdev_us,
        })
    return pd.DataFrame(rows)


def _line(df: pd.DataFrame, x: str, ys: list[str], title: str, ylabel: str) -> go.Figure:
    long_df = df.melt(id_vars=[x], value_vars=ys, var_name="series", value_name="value")
    fig = px.line(
        long_df, x=x, y="value", color="series", markers=True,
        title=title, labels={"value": ylabel, x: "n"},
        template=_PLOTLY_THEME,
    )
    fig.update_layout(
        margin=dict(l=10, r=10, t=40, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        height=320,
    )
    return fig


def _run_tab(settings) -> None:
    st.subheader("Run benchmark")

    sizes_raw = st.sidebar.text_input("Sizes (comma-separated)", ",".join(str(s) for s in settings.sizes))
    generator_name = st.sidebar.radio("Majority value", sorted(GENERATORS), format_func=lambda g: {
        "fixed": "fixed (1)", "random": "random [0, 100)"}[g])
    seed_raw = st.sidebar.text_input("Seed (blank = random)", "" if settings.seed is None else str(settings.seed))
    warmup = st.sidebar.number_input("Warm-up calls", min_value=0, value=settings.warmup)
    runs = st.sidebar.number_input("Timed runs", min_value=1, value=settings.runs)
    trace = st.sidebar.checkbox("Log to Langfuse", value=settings.trace)

    if not st.button("Run benchmark", type="primary"):
        st.info("Choose sizes in the sidebar and press Run benchmark.")
        return

    try:
        sizes = parse_sizes(sizes_raw)
        seed = int(seed_raw) if seed_raw.strip() else None
    except (RuntimeError, ValueError) as e:
        st.error(str(e))
        return

    with st.spinner("Running…"):
        df = _run_benchmarks(sizes, generator_name, seed, int(warmup), int(runs), trace)

    c1, c2, c3 = st.columns(3)
    c1.metric("Sizes", len(df))
    c2.metric("Majority found", int((df["result"] != "No majority").sum()))
    c3.metric("Max accesses / n", f"{(df['arrayAccesses'] / df['n'].where(df['n'] > 0)).max():.2f}")

    st.dataframe(df, use_container_width=True, hide_index=True)

    left, right = st.columns(2)
    with left:
        st.plotly_chart(_line(df, "n", ["mean_us", "min_us", "max_us"], "Time vs n", "µs"),
                        use_container_width=True)
    with right:
        st.plotly_chart(_line(df, "n", _COUNTERS, "Counters vs n", "count"), use_container_width=True)


def _file_tab(settings) -> None:
    st.subheader("Results file")
    path = Path(st.text_input("Results CSV", settings.results_csv))
    if not path.exists():
        st.info(f"No results file at {path}")
        return
    try:
        df = load_results(path)
    except ValueError as e:
        st.error(str(e))
        return
    st.dataframe(df, use_container_width=True, hide_index=True)
    if df.empty:
        return
    means = df.groupby("n", as_index=False)[["timeMs", *_COUNTERS]].mean()
    st.plotly_chart(_line(means, "n", _COUNTERS, "Mean counters vs n", "count"), use_container_width=True)
    st.plotly_chart(_line(means, "n", ["timeMs"], "Mean time vs n", "ms"), use_container_width=True)


def main() -> None:
    load_dotenv()
    try:
        settings = load_settings()
    except RuntimeError as e:
        st.error(str(e))
        st.stop()

    st.sidebar.title("Majority vote benchmark")
    tab1, tab2 = st.tabs(["Run benchmark", "Results file"])
    with tab1:
        _run_tab(settings)
    with tab2:
        _file_tab(settings)


if __name__ == "__main__":
    main()
