# cringe_horoscope/prng.py
"""
Mulberry32 PRNG for deterministic horoscope generation.

- One step routine (`mulberry32_step`) does all the math.
- `PRNG` (stateful object) and `mulberry32` (bare closure) both wrap it, so the
  same seed always yields the same sequence from either form.
- Every operation is unsigned 32-bit wrapping integer math. Do not swap any of
  it for float arithmetic, sequences will drift from other implementations.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, List, MutableSequence, Sequence, Tuple, TypeVar, Any

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF
TWO_POW_32 = 4294967296
MULBERRY_INCREMENT = 0x6D2B79F5

# ----------------------- CORE STEP ----------------------- #
def _imul(a: int, b: int) -> int:
    """Low 32 bits of a*b (C-style uint32 multiply)."""
    return (a * b) & MASK_32


def mulberry32_step(state: int) -> Tuple[int, float]:
    """Advance `state` once. Returns (new_state, float in [0, 1))."""
    state = (state + MULBERRY_INCREMENT) & MASK_32
    t = _imul(state ^ (state >> 15), state | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
    out = (t ^ (t >> 14)) & MASK_32
    return state, out / TWO_POW_32


# ----------------------- CLASS FORM ---------------------- #
class PRNG:
    """Caller-owned seeded generator. Never share one across requests."""

    def __init__(self, seed: int):
        self._state = int(seed) & MASK_32

    @property
    def state(self) -> int:
        return self._state

    def reset(self, seed: int) -> None:
        self._state = int(seed) & MASK_32

    def next(self) -> float:
        self._state, value = mulberry32_step(self._state)
        return value

    def next_int(self, lo: int, hi: int) -> int:
        """Inclusive on both ends."""
        if lo > hi:
            raise ValueError("min must be <= max")
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def next_float(self, lo: float = 0.0, hi: float = 1.0) -> float:
        return lo + self.next() * (hi - lo)

    def choose(self, items: Sequence[T]) -> T:
        if len(items) == 0:
            raise ValueError("Array cannot be empty")
        return items[self.next_int(0, len(items) - 1)]

    def probability(self, chance: float) -> bool:
        if chance < 0 or chance > 1:
            raise ValueError("Probability must be between 0 and 1")
        return self.next() < chance

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates, in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(0, i)
            items[i], items[j] = items[j], items[i]
        return items

    def generate_sequence(self, count: int) -> List[float]:
        return [self.next() for _ in range(count)]


# ----------------------- CLOSURE FORM -------------------- #
def mulberry32(seed: int) -> Callable[[], float]:
    state = int(seed) & MASK_32

    def _next() -> float:
        nonlocal state
        state, value = mulberry32_step(state)
        return value

    return _next


# ----------------------- DIAGNOSTICS --------------------- #
def _correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    if len(xs) != len(ys) or not xs:
        return 0.0
    n = len(xs)
    sum_x, sum_y = sum(xs), sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2 = sum(x * x for x in xs)
    sum_y2 = sum(y * y for y in ys)
    numerator = n * sum_xy - sum_x * sum_y
    spread = (n * sum_x2 - sum_x * sum_x) * (n * sum_y2 - sum_y * sum_y)
    if spread <= 0:
        return 0.0
    return numerator / math.sqrt(spread)


def compare_seed_sequences(seed1: int, seed2: int, length: int = 10) -> Dict[str, Any]:
    """Side-by-side first `length` draws for two seeds (used by the seed debug endpoint)."""
    rng1 = mulberry32(seed1)
    rng2 = mulberry32(seed2)
    seq1 = [rng1() for _ in range(length)]
    seq2 = [rng2() for _ in range(length)]
    return {
        "seed1": seed1,
        "seed2": seed2,
        "sequence1": seq1,
        "sequence2": seq2,
        "identical": seq1 == seq2,
        "correlation": _correlation(seq1, seq2),
    }
