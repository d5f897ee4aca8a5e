from __future__ import annotations

"""Attribute and name catalogs keyed by ``(type, subtype)`` with wildcards.

An empty string in either key component matches every value of that
component.  A lookup for a concrete ``(type, subtype)`` pair gathers entries
from four keys, ordered from most to least specific::

    (type, subtype)  >  (type, "")  >  ("", subtype)  >  ("", "")

When two keys provide an attribute with the same name, the more specific key
wins.
"""

from typing import Dict, Iterable, Iterator, List, NamedTuple, Tuple

from .item import ItemAttribute

__all__ = ["WILDCARD", "RegistryKey", "lookup_keys", "AttributeCatalog", "NameCatalog"]

WILDCARD = ""


class RegistryKey(NamedTuple):
    type_name: str
    subtype_name: str

    @property
    def specificity(self) -> int:
        """Return 3 for exact keys down to 0 for the full wildcard."""
        score = 0
        if self.type_name != WILDCARD:
            score += 2
        if self.subtype_name != WILDCARD:
            score += 1
        return score


def lookup_keys(item_type: str, subtype: str) -> List[RegistryKey]:
    """Return the distinct keys matching ``(item_type, subtype)``, most specific first."""
    candidates = [
        RegistryKey(item_type, subtype),
        RegistryKey(item_type, WILDCARD),
        RegistryKey(WILDCARD, subtype),
        RegistryKey(WILDCARD, WILDCARD),
    ]
    keys: List[RegistryKey] = []
    for key in candidates:
        if key not in keys:
            keys.append(key)
    return keys


class AttributeCatalog:
    """Attribute templates registered per :class:`RegistryKey`."""

    def __init__(self) -> None:
        self._entries: Dict[RegistryKey, Dict[str, ItemAttribute]] = {}

    def set(self, item_type: str, subtype: str, attribute: ItemAttribute) -> None:
        """Store ``attribute``, replacing any same-named one under the same key."""
        key = RegistryKey(item_type or WILDCARD, subtype or WILDCARD)
        self._entries.setdefault(key, {})[attribute.name] = attribute

    def get(self, item_type: str, subtype: str) -> List[ItemAttribute]:
        """Return only the attributes stored under the exact key."""
        return list(self._entries.get(RegistryKey(item_type, subtype), {}).values())

    def lookup_attributes(self, item_type: str, subtype: str) -> List[ItemAttribute]:
        resolved: Dict[str, ItemAttribute] = {}
        for key in lookup_keys(item_type, subtype):
            for name, attribute in self._entries.get(key, {}).items():
                if name not in resolved:
                    resolved[name] = attribute
        return list(resolved.values())

    def keys(self) -> List[RegistryKey]:
        return list(self._entries)

    def __iter__(self) -> Iterator[Tuple[RegistryKey, ItemAttribute]]:
        for key, attributes in self._entries.items():
            for attribute in attributes.values():
                yield key, attribute

    def __len__(self) -> int:
        return sum(len(attrs) for attrs in self._entries.values())


class NameCatalog:
    """Candidate display names registered per :class:`RegistryKey`."""

    def __init__(self) -> None:
        self._entries: Dict[RegistryKey, List[str]] = {}

    def set(self, item_type: str, subtype: str, names: Iterable[str]) -> None:
        key = RegistryKey(item_type or WILDCARD, subtype or WILDCARD)
        self._entries[key] = [str(n) for n in names]

    def get(self, item_type: str, subtype: str) -> List[str]:
        return list(self._entries.get(RegistryKey(item_type, subtype), []))

    def lookup_names(self, item_type: str, subtype: str) -> List[str]:
        names: List[str] = []
        seen = set()
        for key in lookup_keys(item_type, subtype):
            for name in self._entries.get(key, []):
                if name not in seen:
                    seen.add(name)
                    names.append(name)
        return names

    def keys(self) -> List[RegistryKey]:
        return list(self._entries)

    def __iter__(self) -> Iterator[Tuple[RegistryKey, List[str]]]:
        for key, names in self._entries.items():
            yield key, list(names)

    def __len__(self) -> int:
        return len(self._entries)
