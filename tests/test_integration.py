"""
Integration tests — send real benchmark traces to Langfuse.

Run with:
    pytest tests/test_integration.py -v -m integration

Skipped automatically if LANGFUSE_PUBLIC_KEY / LANGFUSE_SECRET_KEY are not set in the environment or .env file.
"""
from __future__ import annotations

import os
import random

import pytest
from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Skip the entire module if no credentials are available
# ---------------------------------------------------------------------------
pytestmark = pytest.mark.integration

if not (os.getenv("LANGFUSE_PUBLIC_KEY") and os.getenv("LANGFUSE_SECRET_KEY")):
    pytest.skip("LANGFUSE_* keys not set — skipping integration tests", allow_module_level=True)

from majority_bench.benchmark import measure_average, run_single
from majority_bench.generators import generate_fixed_majority
from majority_bench.tracing import log_benchmark_trace


class TestLangfuseTrace:
    def test_single_run_returns_trace_id(self):
        result = run_single(1000, generate_fixed_majority, random.Random(12345))
        assert result.result == 1
        trace_id = log_benchmark_trace(result, run_name="integration")
        assert isinstance(trace_id, str) and trace_id

    def test_trace_with_timing(self):
        rng = random.Random(12345)
        result = run_single(100, generate_fixed_majority, rng)
        timing = measure_average(generate_fixed_majority(100, rng), warmup=2, runs=3)
        assert log_benchmark_trace(result, run_name="integration", timing=timing)
