"""Shuffled test arrays with a guaranteed majority element."""
from __future__ import annotations

import random

FILLER_UPPER = 100  # filler values are drawn from [0, FILLER_UPPER)
FIXED_MAJORITY = 1


def generate_with_majority(size: int, majority: int, rng: random.Random | None = None) -> list[int]:
    """
    Return `size` ints where `majority` fills size // 2 + 1 slots.

    The remaining slots get random values in [0, 100) and the whole list is
    shuffled uniformly. Pass a seeded random.Random for reproducible output.
    """
    if size < 0:
        raise ValueError(f"size must be >= 0, got {size}")
    rng = rng or random.Random()

    n_major = min(size, size // 2 + 1)
    arr = [majority] * n_major
    arr.extend(rng.randrange(FILLER_UPPER) for _ in range(size - n_major))
    rng.shuffle(arr)
    return arr


def generate_fixed_majority(size: int, rng: random.Random | None = None) -> list[int]:
    return generate_with_majority(size, FIXED_MAJORITY, rng)


def generate_random_majority(size: int, rng: random.Random | None = None) -> list[int]:
    rng = rng or random.Random()
    return generate_with_majority(size, rng.randrange(FILLER_UPPER), rng)


GENERATORS = {
    "fixed": generate_fixed_majority,
    "random": generate_random_majority,
}
