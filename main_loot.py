"""Generate loot from a registry document and print it as JSON.

Usage:
  python main_loot.py --registry assets/registries/armory.json --count 5 --seed 7

Options not given on the command line come from ``--options`` (a JSON file),
then from ``config/loot_defaults.json``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from config import loot as loot_cfg
from loot import GenerationError, GeneratorOptions, GeneratorOverrides, GeneratorState, LootGenerator

logger = logging.getLogger(__name__)


def _read_options(path: Optional[str]) -> Dict[str, Any]:
    if not path:
        return {}
    with Path(path).open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Options file {path} must contain a JSON object")
    return data


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate weighted random loot")
    ap.add_argument("--registry", help="Registry JSON document (default: $LOOT_REGISTRY)")
    ap.add_argument("--options", help="JSON file with generator options")
    ap.add_argument("--count", type=int, dest="number_of_items", help="Number of items")
    ap.add_argument("--level", type=float, dest="base_level", help="Base item level")
    ap.add_argument("--variance", type=float, dest="level_variance", help="Level variance")
    ap.add_argument("--affix-chance", type=float, dest="affix_chance", help="Optional attribute chance")
    ap.add_argument(
        "--exponential",
        action="store_const",
        const=False,
        dest="linear",
        help="Scale attributes exponentially instead of linearly",
    )
    ap.add_argument("--scaling-factor", type=float, dest="scaling_factor", help="Per-level scaling")
    ap.add_argument("--quality", help="Force the quality")
    ap.add_argument("--type", dest="item_type", help="Force the item type")
    ap.add_argument("--subtype", help="Force the subtype")
    ap.add_argument("--name", help="Force the display name")
    ap.add_argument("--seed", type=int, default=None, help="Random seed (default: $LOOT_SEED)")
    ap.add_argument("--context", default="main", help="Tag attached to log records")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON")
    ap.add_argument("--log-level", default="WARNING", help="Logging level")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    registry = Path(args.registry) if args.registry else loot_cfg.get_registry_path()
    if registry is None or not registry.is_file():
        print(f"[error] registry not found: {registry}", file=sys.stderr)
        return 2

    try:
        file_options = _read_options(args.options)
        state = GeneratorState.from_json(registry)
    except (OSError, ValueError) as exc:
        print(f"[error] could not load input: {exc}", file=sys.stderr)
        return 2

    options = loot_cfg.get_default_options()
    options.update(file_options)
    for key in GeneratorOptions.__dataclass_fields__:
        value = getattr(args, key, None)
        if value is not None:
            options[key] = value

    overrides = GeneratorOverrides(
        quality=args.quality,
        item_type=args.item_type,
        subtype=args.subtype,
        name=args.name,
    )
    seed = args.seed if args.seed is not None else loot_cfg.get_seed()

    generator = LootGenerator(state, seed=seed)
    try:
        opts = GeneratorOptions.from_dict(options)
        items = generator.generate_loot(opts, overrides, args.context)
    except GenerationError as exc:
        logger.error("Loot generation failed: %s", exc)
        return 1

    payload = [item.to_dict() for item in items]
    print(json.dumps(payload, indent=2 if args.pretty else None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
