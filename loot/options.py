from __future__ import annotations
"""Per-call generator options and selection overrides."""

import math
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidOptionsError

__all__ = ["DEFAULT_OPTIONS", "GeneratorOptions", "GeneratorOverrides"]

# Defaults applied to any option missing from a loosely typed mapping.
DEFAULT_OPTIONS: Dict[str, Any] = {
    "number_of_items": 1,
    "base_level": 1.0,
    "level_variance": 0.0,
    "affix_chance": 0.5,
    "linear": True,
    "scaling_factor": 1.0,
}


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass(frozen=True)
class GeneratorOptions:
    number_of_items: int = 1
    base_level: float = 1.0
    level_variance: float = 0.0
    affix_chance: float = 0.5
    linear: bool = True
    scaling_factor: float = 1.0

    # -----------------
    # Construction
    # -----------------
    @classmethod
    def from_dict(cls, d: Optional[Mapping[str, Any]] = None, **defaults: Any) -> "GeneratorOptions":
        """Build options from ``d`` filling gaps from ``defaults`` then :data:`DEFAULT_OPTIONS`.

        Unknown keys are ignored so hosts can pass richer dictionaries.
        """
        merged = dict(DEFAULT_OPTIONS)
        merged.update({k: v for k, v in defaults.items() if k in DEFAULT_OPTIONS})
        for key, value in (d or {}).items():
            if key in DEFAULT_OPTIONS and value is not None:
                merged[key] = value
        try:
            return cls(
                number_of_items=int(merged["number_of_items"]),
                base_level=float(merged["base_level"]),
                level_variance=float(merged["level_variance"]),
                affix_chance=float(merged["affix_chance"]),
                linear=_as_bool(merged["linear"]),
                scaling_factor=float(merged["scaling_factor"]),
            )
        except (TypeError, ValueError) as exc:
            raise InvalidOptionsError(f"Invalid generator option: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    # -----------------
    # Validation
    # -----------------
    def validate(self) -> None:
        for key in ("base_level", "level_variance", "scaling_factor"):
            if not math.isfinite(getattr(self, key)):
                raise InvalidOptionsError(f"{key} must be a finite number.")
        if self.number_of_items < 0:
            raise InvalidOptionsError("number_of_items must be >= 0.")
        if self.level_variance < 0:
            raise InvalidOptionsError("level_variance must be >= 0.")
        if not (0.0 <= self.affix_chance <= 1.0):
            raise InvalidOptionsError("affix_chance must be between 0.0 and 1.0.")
        if not self.linear and self.scaling_factor < 0:
            raise InvalidOptionsError(
                "Exponential scaling requires a scaling_factor >= 0 "
                f"(got {self.scaling_factor})."
            )


@dataclass(frozen=True)
class GeneratorOverrides:
    """Forced selections; ``None`` means draw from the registry as usual."""

    quality: Optional[str] = None
    item_type: Optional[str] = None
    subtype: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def empty(cls) -> "GeneratorOverrides":
        return cls()

    @classmethod
    def from_dict(cls, d: Optional[Mapping[str, Any]] = None) -> "GeneratorOverrides":
        d = dict(d or {})
        if "item_type" not in d and "type" in d:
            d["item_type"] = d["type"]
        known = {f.name for f in fields(cls)}
        return cls(**{k: (None if v is None else str(v)) for k, v in d.items() if k in known})

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))
