"""
Boyer–Moore majority vote, instrumented with step-level counters.

Phase 1 picks a candidate in one pass with O(1) extra space: a matching
value raises the running count, any other value lowers it, and when the
count hits zero the candidate is dropped and the next value is adopted.
Phase 2 verifies the candidate by counting its occurrences, stopping as
soon as the count exceeds n // 2.

Accounting (one unit per event):
  arrayAccesses  every read of sequence[i], in both passes
  comparisons    value == candidate, and occurrences > threshold
  assignments    binding the read value, candidate/flag/count writes,
                 and occurrence increments
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from majority_bench.metrics import ARRAY_ACCESSES, ASSIGNMENTS, COMPARISONS, MetricsCounters

ALGORITHM_NAME = "Boyer_Moore"


class InvalidArgumentError(ValueError):
    """Raised when the input sequence itself is missing (None)."""


@dataclass
class _CandidateState:
    candidate: int = 0
    has_candidate: bool = False
    count: int = 0


def find_majority(sequence: Optional[Sequence[int]], metrics: MetricsCounters | None = None) -> int | None:
    """
    Return the value occurring more than len(sequence) // 2 times, or None.

    A fresh MetricsCounters is used when metrics is None. Raises
    InvalidArgumentError for a None sequence, before touching any counter.
    """
    if sequence is None:
        raise InvalidArgumentError("Input sequence must not be None")
    if metrics is None:
        metrics = MetricsCounters()
    return _boyer_moore(sequence, metrics)


def _boyer_moore(sequence: Sequence[int], metrics: MetricsCounters) -> int | None:
    n = len(sequence)
    if n == 0:
        return None
    if n == 1:
        metrics.increment(ARRAY_ACCESSES)
        metrics.increment(ASSIGNMENTS)
        return sequence[0]

    candidate = _select_candidate(sequence, metrics)
    if candidate is None:
        return None
    return candidate if _verify(sequence, candidate, metrics) else None


def _select_candidate(sequence: Sequence[int], metrics: MetricsCounters) -> int | None:
    state = _CandidateState()

    for i in range(len(sequence)):
        metrics.increment(ARRAY_ACCESSES)
        value = sequence[i]
        metrics.increment(ASSIGNMENTS)

        if not state.has_candidate:
            state.candidate = value
            state.has_candidate = True
            state.count = 1
            metrics.add(ASSIGNMENTS, 3)
            continue

        metrics.increment(COMPARISONS)
        if value == state.candidate:
            state.count += 1
            metrics.increment(ASSIGNMENTS)
        else:
            state.count -= 1
            metrics.increment(ASSIGNMENTS)
            if state.count == 0:
                # candidate is replaced on the next iteration
                state.has_candidate = False
                metrics.increment(ASSIGNMENTS)

    return state.candidate if state.has_candidate else None


def _verify(sequence: Sequence[int], candidate: int, metrics: MetricsCounters) -> bool:
    threshold = len(sequence) // 2
    occurrences = 0

    for i in range(len(sequence)):
        metrics.increment(ARRAY_ACCESSES)
        metrics.increment(COMPARISONS)
        if sequence[i] == candidate:
            occurrences += 1
            metrics.increment(ASSIGNMENTS)
            metrics.increment(COMPARISONS)
            if occurrences > threshold:
                break

    return occurrences > threshold
