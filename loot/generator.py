from __future__ import annotations

"""Host-facing loot generator.

:class:`LootGenerator` bundles a :class:`~loot.state.GeneratorState` with its
own :class:`~loot.sampler.Sampler` and exposes the registration calls a host
engine makes during setup, plus a dictionary-in/dictionary-out generation
call for hosts that do not want to deal with the engine's dataclasses.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .item import GeneratedItem, ItemAttribute
from .options import GeneratorOptions, GeneratorOverrides
from .pipeline import OptionsLike, OverridesLike, generate_loot
from .sampler import Sampler
from .state import GeneratorState

__all__ = ["LootGenerator"]


class LootGenerator:
    """Registration surface plus generation for a single host."""

    def __init__(self, state: Optional[GeneratorState] = None, *, seed: Optional[int] = None) -> None:
        self.state = state if state is not None else GeneratorState()
        self.sampler = Sampler(seed)

    @classmethod
    def from_json(cls, path: str | Path, *, seed: Optional[int] = None) -> "LootGenerator":
        return cls(GeneratorState.from_json(path), seed=seed)

    def reseed(self, seed: Optional[int]) -> None:
        self.sampler.reseed(seed)

    # -----------------
    # Registration
    # -----------------
    def set_quality(self, name: str, weight: int) -> None:
        self.state.set_quality(name, weight)

    def set_item_type(self, name: str, weight: int) -> None:
        self.state.set_item_type(name, weight)

    def set_item_subtype(self, item_type: str, subtype: str, weight: int) -> None:
        self.state.set_item_subtype(item_type, subtype, weight)

    def set_attribute(self, item_type: str, subtype: str, attribute: ItemAttribute) -> None:
        self.state.set_attribute(item_type, subtype, attribute)

    def add_attribute(
        self,
        item_type: str,
        subtype: str,
        attr_name: str,
        initial_value: float,
        min: float,
        max: float,
        required: bool,
        scaling_factor: float = 1.0,
        chance: float = 1.0,
    ) -> ItemAttribute:
        """Build an :class:`ItemAttribute` from flat values and register it."""
        attribute = ItemAttribute(
            name=attr_name,
            initial_value=float(initial_value),
            min=float(min),
            max=float(max),
            required=bool(required),
            scaling_factor=float(scaling_factor),
            chance=float(chance),
        )
        self.state.set_attribute(item_type, subtype, attribute)
        return attribute

    def set_item_names(self, item_type: str, subtype: str, names: Iterable[str]) -> None:
        self.state.set_item_names(item_type, subtype, names)

    # -----------------
    # Generation
    # -----------------
    def generate_loot(
        self,
        options: OptionsLike = None,
        overrides: OverridesLike = None,
        context: str = "main",
    ) -> List[GeneratedItem]:
        return generate_loot(self.state, options, overrides, context, sampler=self.sampler)

    def generate_loot_dicts(
        self,
        options: Optional[Mapping[str, Any]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        context: str = "main",
    ) -> List[Dict[str, Any]]:
        """Generate from loose mappings and return plain dictionaries.

        Missing options take their defaults (see
        :data:`loot.options.DEFAULT_OPTIONS`).
        """
        opts = GeneratorOptions.from_dict(options)
        forced = GeneratorOverrides.from_dict(overrides)
        return [item.to_dict() for item in self.generate_loot(opts, forced, context)]
