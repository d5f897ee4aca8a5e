from __future__ import annotations

"""Default generator options, seed and registry location.

Option defaults come from the engine, overlaid with ``loot_defaults.json``
beside this module when that file exists.  The seed and registry path are read
from the ``LOOT_SEED`` and ``LOOT_REGISTRY`` environment variables.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from loot.options import DEFAULT_OPTIONS

__all__ = ["DEFAULTS_FILE", "get_default_options", "get_seed", "get_registry_path"]

logger = logging.getLogger(__name__)

# Location of the optional option defaults file.
DEFAULTS_FILE = Path(__file__).with_name("loot_defaults.json")

# Internal cache of the merged option defaults.
_OPTIONS_CACHE: Dict[str, Any] | None = None


def _load_file() -> Dict[str, Any]:
    try:
        with DEFAULTS_FILE.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Malformed option defaults in {DEFAULTS_FILE}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{DEFAULTS_FILE} must contain a JSON object")
    return {k: v for k, v in data.items() if k in DEFAULT_OPTIONS}


def get_default_options(force_reload: bool = False) -> Dict[str, Any]:
    """Return cached generator option defaults."""
    global _OPTIONS_CACHE
    if _OPTIONS_CACHE is None or force_reload:
        merged = dict(DEFAULT_OPTIONS)
        if DEFAULTS_FILE.exists():
            merged.update(_load_file())
        _OPTIONS_CACHE = merged
    return dict(_OPTIONS_CACHE)


def get_seed() -> Optional[int]:
    """Return the integer in ``LOOT_SEED`` or ``None`` when unset or invalid."""
    raw = os.getenv("LOOT_SEED")
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning("Ignoring non-integer LOOT_SEED %r", raw)
        return None


def get_registry_path() -> Optional[Path]:
    raw = os.getenv("LOOT_REGISTRY")
    if isinstance(raw, str) and raw.strip():
        return Path(raw.strip())
    return None
