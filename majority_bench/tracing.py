"""Langfuse observability logging for benchmark runs."""
import os
from typing import Optional

from langfuse import Langfuse

from majority_bench.benchmark import BenchmarkResult, TimingStats


def _get_client():
    """Get Langfuse client if credentials available."""
    public_key = os.environ.get('LANGFUSE_PUBLIC_KEY', '')
    secret_key = os.environ.get('LANGFUSE_SECRET_KEY', '')
    host = os.environ.get('LANGFUSE_HOST', 'https://cloud.langfuse.com')
    if public_key and secret_key:
        return Langfuse(public_key=public_key, secret_key=secret_key, host=host)
    return None


def log_benchmark_trace(
    result: BenchmarkResult,
    run_name: Optional[str] = None,
    timing: Optional[TimingStats] = None,
) -> Optional[str]:
    """Log one benchmark measurement as a Langfuse trace. Returns trace_id or None."""
    client = _get_client()
    if client is None:
        return None

    counters = result.metrics.to_dict()
    trace = client.trace(
        name=f"majority-vote-n{result.size}",
        input={"algorithm": result.algorithm, "n": result.size},
        output={"result": result.result, "metrics": counters},
        metadata={"run_name": run_name},
    )

    trace.span(
        name="find_majority",
        input={"n": result.size},
        output={"result": result.result, "found": result.result is not None},
        metadata={"time_ms": result.time_ms},
    )

    if timing is not None:
        trace.span(
            name="timing",
            input={"n": result.size, "runs": timing.runs},
            output=timing.to_dict(),
        )

    for name, value in counters.items():
        trace.score(name=name, value=float(value))
    trace.score(name="time_ms", value=result.time_ms)
    if result.size:
        trace.score(name="accesses_per_element", value=counters["arrayAccesses"] / result.size)

    client.flush()
    return trace.id
