"""Attribute templates and generated item value objects."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Mapping

__all__ = ["ItemAttribute", "GeneratedItem"]


# ---------------------------------------------------------------------------
# Attribute templates


@dataclass(frozen=True, slots=True)
class ItemAttribute:
    """Template for one numeric attribute of a generated item.

    ``initial_value * scaling_factor`` is the level 1 value.  The final value
    is always clamped into ``[min, max]``.  Non-required attributes appear
    with probability ``chance`` times the generator's ``affix_chance``.
    """

    name: str
    initial_value: float
    min: float
    max: float
    required: bool = False
    scaling_factor: float = 1.0
    chance: float = 1.0

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise ValueError("Attribute needs a non-empty string 'name'.")
        if float(self.min) > float(self.max):
            raise ValueError(
                f"Attribute {self.name!r} has min {self.min} greater than max {self.max}."
            )
        if not (0.0 <= float(self.chance) <= 1.0):
            raise ValueError(f"Attribute {self.name!r} chance must be between 0.0 and 1.0.")

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ItemAttribute":
        try:
            return cls(
                name=str(d["name"]),
                initial_value=float(d["initial_value"]),
                min=float(d["min"]),
                max=float(d["max"]),
                required=bool(d.get("required", False)),
                scaling_factor=float(d.get("scaling_factor", 1.0)),
                chance=float(d.get("chance", 1.0)),
            )
        except KeyError as exc:
            raise ValueError(f"Attribute is missing field: {exc.args[0]}") from exc

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Generation output


@dataclass(frozen=True, slots=True)
class GeneratedItem:
    name: str
    quality: str
    item_type: str
    subtype: str
    attributes: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the plain dictionary handed to hosts.

        The item type is published under ``"type"``.
        """
        return {
            "name": self.name,
            "quality": self.quality,
            "type": self.item_type,
            "subtype": self.subtype,
            "attributes": dict(self.attributes),
        }
