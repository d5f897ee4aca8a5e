from __future__ import annotations

"""Exceptions raised by the loot generation engine."""

__all__ = [
    "GenerationError",
    "EmptyRegistryError",
    "NoNameCandidatesError",
    "InvalidOptionsError",
]


class GenerationError(RuntimeError):
    """Base error for a failed :func:`loot.pipeline.generate_loot` call."""


class EmptyRegistryError(GenerationError):
    """Raised when a weighted registry has no selectable entry at draw time."""

    def __init__(self, registry: str) -> None:
        self.registry = registry
        super().__init__(f"Registry {registry!r} has no entries with a positive weight")


class NoNameCandidatesError(GenerationError):
    """Raised when no display name is registered for a type/subtype pair."""

    def __init__(self, item_type: str, subtype: str) -> None:
        self.item_type = item_type
        self.subtype = subtype
        super().__init__(f"No item names registered for ({item_type!r}, {subtype!r})")


class InvalidOptionsError(GenerationError, ValueError):
    """Raised when generator options fall outside their allowed ranges."""
