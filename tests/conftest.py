"""Shared pytest configuration — adds project root to sys.path."""
import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so `from majority_bench.xxx import` works
# regardless of where pytest is invoked from.
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

BENCH_ENV_VARS = (
    "BENCH_RESULTS_CSV",
    "BENCH_SIZES",
    "BENCH_SEED",
    "BENCH_APPEND",
    "BENCH_WARMUP",
    "BENCH_RUNS",
    "BENCH_WORKERS",
    "BENCH_TRACE",
    "LANGFUSE_PUBLIC_KEY",
    "LANGFUSE_SECRET_KEY",
    "LANGFUSE_HOST",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove benchmark/Langfuse settings so tests see the defaults."""
    for name in BENCH_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
