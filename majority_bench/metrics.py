"""
Step-level cost counters for the majority vote.

Three monotonic counters (comparisons, array accesses, assignments), each
guarded by its own lock so that several find_majority calls may share one
sink and still produce exact totals.

reset() zeroes the counters one at a time. It is NOT atomic as a group:
only call it between measurement rounds, when no call is in flight.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass

COMPARISONS = "comparisons"
ARRAY_ACCESSES = "arrayAccesses"
ASSIGNMENTS = "assignments"

COUNTER_NAMES = (COMPARISONS, ARRAY_ACCESSES, ASSIGNMENTS)


@dataclass(frozen=True)
class MetricsSnapshot:
    comparisons: int = 0
    array_accesses: int = 0
    assignments: int = 0

    def to_dict(self) -> dict:
        return {
            COMPARISONS: self.comparisons,
            ARRAY_ACCESSES: self.array_accesses,
            ASSIGNMENTS: self.assignments,
        }

    def __str__(self) -> str:
        return (
            f"comparisons={self.comparisons},"
            f"arrayAccesses={self.array_accesses},"
            f"assignments={self.assignments}"
        )


class MetricsCounters:
    """
    Shared counter sink.

    Usage:
        metrics = MetricsCounters()
        metrics.increment(COMPARISONS)
        metrics.add(ARRAY_ACCESSES, 10)
        metrics.read(ARRAY_ACCESSES)  # 10
    """

    def __init__(self) -> None:
        self._values = dict.fromkeys(COUNTER_NAMES, 0)
        self._locks = {name: threading.Lock() for name in COUNTER_NAMES}

    def _check(self, name: str) -> None:
        if name not in self._values:
            raise ValueError(f"Unknown counter: {name!r} (expected one of {COUNTER_NAMES})")

    def increment(self, name: str) -> None:
        self.add(name, 1)

    def add(self, name: str, delta: int) -> None:
        self._check(name)
        if delta < 0:
            raise ValueError(f"Counters are monotonic, got negative delta {delta} for {name!r}")
        with self._locks[name]:
            self._values[name] += delta

    def read(self, name: str) -> int:
        self._check(name)
        with self._locks[name]:
            return self._values[name]

    def reset(self) -> None:
        for name in COUNTER_NAMES:
            with self._locks[name]:
                self._values[name] = 0

    @property
    def comparisons(self) -> int:
        return self.read(COMPARISONS)

    @property
    def array_accesses(self) -> int:
        return self.read(ARRAY_ACCESSES)

    @property
    def assignments(self) -> int:
        return self.read(ASSIGNMENTS)

    def snapshot(self) -> MetricsSnapshot:
        """Copy of the three values, read one after the other (not jointly atomic)."""
        return MetricsSnapshot(
            comparisons=self.comparisons,
            array_accesses=self.array_accesses,
            assignments=self.assignments,
        )

    def __str__(self) -> str:
        return str(self.snapshot())

    def __repr__(self) -> str:
        return f"MetricsCounters({self.snapshot()})"
