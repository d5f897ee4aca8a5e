from __future__ import annotations

"""Insertion-ordered weighted registry with cumulative-weight draws."""

import logging
from typing import Dict, Generic, Hashable, Iterator, List, Tuple, TypeVar

from .errors import EmptyRegistryError
from .sampler import Sampler

__all__ = ["WeightedRegistry"]

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


class WeightedRegistry(Generic[T]):
    """Mapping of labels to integer weights supporting weighted random draws.

    Iteration order is the order in which labels were first set.  That order
    decides which label a given random value lands on, so replacing a weight
    keeps the label at its original position.
    """

    def __init__(self, name: str = "registry") -> None:
        self.name = name
        self._weights: Dict[T, int] = {}

    def set(self, label: T, weight: int) -> None:
        """Insert ``label`` or replace its weight (never accumulates)."""
        weight = int(weight)
        if weight < 0:
            logger.warning(
                "Negative weight %d for %r in %s registry stored as 0",
                weight,
                label,
                self.name,
            )
            weight = 0
        self._weights[label] = weight

    def weight(self, label: T) -> int:
        return self._weights.get(label, 0)

    def total_weight(self) -> int:
        return sum(self._weights.values())

    def labels(self) -> List[T]:
        return list(self._weights)

    def items(self) -> List[Tuple[T, int]]:
        return list(self._weights.items())

    def to_dict(self) -> Dict[T, int]:
        return dict(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __contains__(self, label: object) -> bool:
        return label in self._weights

    def __iter__(self) -> Iterator[T]:
        return iter(self._weights)

    def __repr__(self) -> str:
        return f"WeightedRegistry({self.name!r}, {self._weights!r})"

    def draw(self, sampler: Sampler) -> T:
        """Return a label with probability proportional to its weight.

        Raises
        ------
        EmptyRegistryError
            If the registry is empty or every weight is zero.
        """
        total = self.total_weight()
        if total <= 0:
            raise EmptyRegistryError(self.name)
        r = sampler.uniform(0, total)
        upto = 0
        last_positive = None
        for label, weight in self._weights.items():
            if weight <= 0:
                continue
            upto += weight
            last_positive = label
            if upto > r:
                return label
        # Only reachable when rounding pushes ``r`` onto ``total``.
        return last_positive
