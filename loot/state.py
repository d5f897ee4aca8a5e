"""Mutable registry state consumed by the generation pipeline.

:class:`GeneratorState` is filled through setter calls (or a registry
document) during setup.  Setters never fail: a zero weight or an empty name
list is legal and only surfaces as an error when a draw finds nothing left to
select.  The state is not synchronised; hosts must finish mutating it before
generating from several threads.

Registry documents are JSON objects of the form::

    {
      "qualities": {"common": 9, "rare": 1},
      "types": {"sword": 1},
      "subtypes": {"sword": {"long": 1}},
      "names": [{"type": "sword", "subtype": "long", "names": ["Old Blade"]}],
      "attributes": [{"type": "sword", "subtype": "long", "name": "damage",
                      "initial_value": 10, "min": 0, "max": 100, "required": true}]
    }

Object key order is preserved and becomes registry insertion order.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from .catalog import AttributeCatalog, NameCatalog
from .item import ItemAttribute
from .registry import WeightedRegistry

__all__ = ["GeneratorState"]


class GeneratorState:
    def __init__(self) -> None:
        self.qualities: WeightedRegistry[str] = WeightedRegistry("quality")
        self.item_types: WeightedRegistry[str] = WeightedRegistry("item_type")
        self.subtypes: Dict[str, WeightedRegistry[str]] = {}
        self.attributes = AttributeCatalog()
        self.names = NameCatalog()

    # -----------------
    # Registration
    # -----------------
    def set_quality(self, name: str, weight: int) -> None:
        self.qualities.set(name, weight)

    def set_item_type(self, name: str, weight: int) -> None:
        self.item_types.set(name, weight)

    def set_item_subtype(self, item_type: str, subtype: str, weight: int) -> None:
        registry = self.subtypes.get(item_type)
        if registry is None:
            registry = self.subtypes[item_type] = WeightedRegistry(f"subtype:{item_type}")
        registry.set(subtype, weight)

    def set_attribute(self, item_type: str, subtype: str, attribute: ItemAttribute) -> None:
        """Register ``attribute``; empty ``item_type``/``subtype`` match everything."""
        self.attributes.set(item_type, subtype, attribute)

    def set_item_names(self, item_type: str, subtype: str, names: Iterable[str]) -> None:
        self.names.set(item_type, subtype, names)

    def subtypes_for(self, item_type: str) -> WeightedRegistry[str]:
        """Return the subtype registry of ``item_type`` (empty if none registered)."""
        registry = self.subtypes.get(item_type)
        if registry is None:
            return WeightedRegistry(f"subtype:{item_type}")
        return registry

    def is_empty(self) -> bool:
        return not (
            len(self.qualities)
            or len(self.item_types)
            or self.subtypes
            or len(self.attributes)
            or len(self.names)
        )

    # -----------------
    # Documents
    # -----------------
    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "GeneratorState":
        state = cls()
        state.update_from_dict(d)
        return state

    @classmethod
    def from_json(cls, path: str | Path) -> "GeneratorState":
        with Path(path).open("r", encoding="utf-8") as f:
            d = json.load(f)
        if not isinstance(d, dict):
            raise ValueError(f"Registry document {path} must be a JSON object.")
        return cls.from_dict(d)

    def update_from_dict(self, d: Mapping[str, Any]) -> None:
        """Apply every registration found in document ``d`` to this state."""
        for name, weight in _mapping(d, "qualities").items():
            self.set_quality(str(name), _weight(weight, f"qualities[{name!r}]"))
        for name, weight in _mapping(d, "types").items():
            self.set_item_type(str(name), _weight(weight, f"types[{name!r}]"))
        for item_type, subs in _mapping(d, "subtypes").items():
            if not isinstance(subs, dict):
                raise ValueError(f"subtypes[{item_type!r}] must map subtype names to weights.")
            for subtype, weight in subs.items():
                self.set_item_subtype(
                    str(item_type), str(subtype), _weight(weight, f"subtypes[{item_type!r}][{subtype!r}]")
                )
        for idx, row in enumerate(_rows(d, "names")):
            names = row.get("names")
            if not isinstance(names, list):
                raise ValueError(f"names[{idx}] must have a 'names' list.")
            self.set_item_names(str(row.get("type", "")), str(row.get("subtype", "")), names)
        for idx, row in enumerate(_rows(d, "attributes")):
            try:
                attribute = ItemAttribute.from_dict(row)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"attributes[{idx}]: {exc}") from exc
            self.set_attribute(str(row.get("type", "")), str(row.get("subtype", "")), attribute)

    def to_dict(self) -> Dict[str, Any]:
        names: List[Dict[str, Any]] = [
            {"type": key.type_name, "subtype": key.subtype_name, "names": values}
            for key, values in self.names
        ]
        attributes: List[Dict[str, Any]] = [
            {"type": key.type_name, "subtype": key.subtype_name, **attribute.to_dict()}
            for key, attribute in self.attributes
        ]
        return {
            "qualities": self.qualities.to_dict(),
            "types": self.item_types.to_dict(),
            "subtypes": {t: reg.to_dict() for t, reg in self.subtypes.items()},
            "names": names,
            "attributes": attributes,
        }

    def to_json(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


def _mapping(d: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = d.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be an object mapping names to weights.")
    return value


def _rows(d: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    value = d.get(key) or []
    if not isinstance(value, list) or not all(isinstance(r, dict) for r in value):
        raise ValueError(f"'{key}' must be a list of objects.")
    return value


def _weight(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{where} must be an integer weight, got {value!r}.")
    return int(value)
