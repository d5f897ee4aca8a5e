from __future__ import annotations
"""Seedable random source shared by every generation step.

All randomness in the engine flows through :class:`Sampler` so a caller can
reproduce an exact batch of items from a fixed seed.  The sampler wraps a
:class:`numpy.random.Generator`; drawing advances its internal state, so one
instance must not be shared between concurrent generation calls.
"""

from typing import Optional

import numpy as np

__all__ = ["Sampler"]


class Sampler:
    """Thin wrapper around :func:`numpy.random.default_rng`."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int]) -> None:
        """Restart the random sequence from ``seed``."""
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        """Return a float drawn uniformly from ``[low, high)``."""
        return float(self._rng.uniform(low, high))

    def random(self) -> float:
        return float(self._rng.random())

    def chance(self, probability: float) -> bool:
        """Return ``True`` with the given ``probability``.

        ``0`` never passes and ``1`` always passes because :meth:`random`
        draws from the half-open interval ``[0, 1)``.
        """
        return self.random() < probability

    def index(self, n: int) -> int:
        """Return an index drawn uniformly from ``range(n)``."""
        if n <= 0:
            raise ValueError("n must be > 0")
        return int(self._rng.integers(n))
