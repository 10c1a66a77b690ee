"""Taillard's uniform random generator.

Minimal-standard Lehmer generator ``x' = 16807 * x mod (2**31 - 1)``,
computed with Schrage's decomposition, followed by a single-precision
normalisation to ``[0, 1)``. Published instances depend on the float32
rounding of that normalisation, so the quotient is formed with
``numpy.float32`` and only then widened to double for the scaling.
"""

from __future__ import annotations

from typing import List

import numpy as np

from taillard.errors import InvalidSeedError

MODULUS = 2147483647  # m = 2**31 - 1
MULTIPLIER = 16807  # a
SCHRAGE_Q = 127773  # b = m // a
SCHRAGE_R = 2836  # c = m % a

_MODULUS_F32 = np.float32(MODULUS)


def next_seed(seed: int) -> int:
    """Advance the generator state by one step."""
    k = seed // SCHRAGE_Q
    seed = MULTIPLIER * (seed % SCHRAGE_Q) - k * SCHRAGE_R
    if seed < 0:
        seed += MODULUS
    return seed


def unif(seed: int, low: int, high: int) -> tuple[int, int]:
    """One draw in ``[low, high]``.

    Returns:
        Tuple ``(value, next_seed)``; the caller carries ``next_seed`` into
        the following draw.
    """
    seed = next_seed(seed)
    value_0_1 = float(np.float32(seed) / _MODULUS_F32)
    return low + int(value_0_1 * (high - low + 1)), seed


def check_seed(seed: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidSeedError(f"seed must be int, got {type(seed).__name__}")
    if not (0 < seed < MODULUS):
        raise InvalidSeedError(f"seed {seed} outside [1, {MODULUS - 1}]")
    return seed


class UnifGenerator:
    """Stateful cursor over the Taillard random stream.

    Each instance owns its state; create one per generated matrix.

    >>> gen = UnifGenerator(873654221)
    >>> [gen.unif(1, 99) for _ in range(3)]
    [54, 83, 15]
    """

    __slots__ = ("_seed",)

    def __init__(self, seed: int):
        self._seed = check_seed(seed)

    @property
    def seed(self) -> int:
        """Current state (the seed of the next draw)."""
        return self._seed

    def unif(self, low: int, high: int) -> int:
        value, self._seed = unif(self._seed, low, high)
        return value

    def draws(self, count: int, low: int, high: int) -> List[int]:
        """Next ``count`` values in ``[low, high]``, in stream order.

        The states are advanced with exact integer arithmetic and normalised
        in one vectorised float32 divide, which rounds each element exactly
        like the scalar path in :meth:`unif`.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        states = np.empty(count, dtype=np.int64)
        seed = self._seed
        for idx in range(count):
            seed = next_seed(seed)
            states[idx] = seed
        self._seed = seed
        value_0_1 = (states.astype(np.float32) / _MODULUS_F32).astype(np.float64)
        values = low + (value_0_1 * (high - low + 1)).astype(np.int64)
        return values.tolist()
