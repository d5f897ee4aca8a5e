# loot/__init__.py
from .errors import (
    GenerationError,
    EmptyRegistryError,
    NoNameCandidatesError,
    InvalidOptionsError,
)
from .sampler import Sampler
from .registry import WeightedRegistry
from .item import ItemAttribute, GeneratedItem
from .catalog import RegistryKey, AttributeCatalog, NameCatalog
from .options import DEFAULT_OPTIONS, GeneratorOptions, GeneratorOverrides
from .state import GeneratorState
from .pipeline import generate_item, generate_loot
from .generator import LootGenerator

__all__ = [
    "GenerationError", "EmptyRegistryError", "NoNameCandidatesError", "InvalidOptionsError",
    "Sampler", "WeightedRegistry",
    "ItemAttribute", "GeneratedItem",
    "RegistryKey", "AttributeCatalog", "NameCatalog",
    "DEFAULT_OPTIONS", "GeneratorOptions", "GeneratorOverrides",
    "GeneratorState",
    "generate_item", "generate_loot",
    "LootGenerator",
]
