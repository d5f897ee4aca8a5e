from __future__ import annotations

"""Turn generator options and overrides into a batch of generated items.

Each item is produced independently:

1. roll a level around ``base_level``;
2. pick quality, item type and subtype (override or weighted draw);
3. pick a display name (override or uniform pick among candidates);
4. roll the attributes registered for the type/subtype pair, scaling each by
   level and clamping it into the template's ``[min, max]`` range.

A failure on any item aborts the whole batch; callers never receive a
partial list.
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence, Union

import numpy as np

from .errors import GenerationError, NoNameCandidatesError
from .item import GeneratedItem, ItemAttribute
from .options import GeneratorOptions, GeneratorOverrides
from .sampler import Sampler
from .state import GeneratorState

__all__ = [
    "roll_level",
    "level_multiplier",
    "scale_attribute",
    "roll_attributes",
    "generate_item",
    "generate_loot",
]

logger = logging.getLogger(__name__)

OptionsLike = Union[GeneratorOptions, Mapping[str, Any], None]
OverridesLike = Union[GeneratorOverrides, Mapping[str, Any], None]


# ---------------------------------------------------------------------------
# Level and attribute helpers


def roll_level(options: GeneratorOptions, sampler: Sampler) -> float:
    """Return ``base_level`` offset by up to ``±level_variance``; never clamped."""
    variance = options.level_variance
    return options.base_level + sampler.uniform(-variance, variance)


def level_multiplier(level: float, options: GeneratorOptions) -> float:
    """Return the growth applied to a level 1 value at ``level``.

    Linear growth adds ``scaling_factor`` per level above 1; exponential
    growth multiplies by ``scaling_factor`` per level.  Exponential overflow
    saturates to ``inf`` and is later clamped by the attribute bounds.
    """
    steps = level - 1.0
    if options.linear:
        return 1.0 + steps * options.scaling_factor
    with np.errstate(over="ignore", divide="ignore"):
        return float(np.power(np.float64(options.scaling_factor), steps))


def scale_attribute(template: ItemAttribute, level: float, options: GeneratorOptions) -> float:
    """Return the clamped value of ``template`` at ``level``."""
    raw = template.initial_value * template.scaling_factor
    if raw == 0.0:
        value = 0.0
    else:
        value = raw * level_multiplier(level, options)
    return float(np.clip(value, template.min, template.max))


def roll_attributes(
    templates: Sequence[ItemAttribute],
    level: float,
    options: GeneratorOptions,
    sampler: Sampler,
) -> Dict[str, float]:
    """Return ``name -> value`` for the templates that pass their inclusion roll.

    Required templates are always kept and consume no randomness.  Optional
    ones are kept with probability ``template.chance * options.affix_chance``;
    dropped ones are omitted rather than defaulted.
    """
    attributes: Dict[str, float] = {}
    for template in templates:
        if not template.required and not sampler.chance(template.chance * options.affix_chance):
            continue
        attributes[template.name] = scale_attribute(template, level, options)
    return attributes


# ---------------------------------------------------------------------------
# Item generation


def generate_item(
    state: GeneratorState,
    options: GeneratorOptions,
    overrides: GeneratorOverrides,
    sampler: Sampler,
) -> GeneratedItem:
    """Generate a single item; raises :class:`~loot.errors.GenerationError` on failure."""

    level = roll_level(options, sampler)

    quality = overrides.quality
    if quality is None:
        quality = state.qualities.draw(sampler)

    item_type = overrides.item_type
    if item_type is None:
        item_type = state.item_types.draw(sampler)

    subtype = overrides.subtype
    if subtype is None:
        subtype = state.subtypes_for(item_type).draw(sampler)

    name = overrides.name
    if name is None:
        candidates = state.names.lookup_names(item_type, subtype)
        if not candidates:
            raise NoNameCandidatesError(item_type, subtype)
        name = candidates[sampler.index(len(candidates))]

    templates = state.attributes.lookup_attributes(item_type, subtype)
    attributes = roll_attributes(templates, level, options, sampler)

    return GeneratedItem(
        name=name,
        quality=quality,
        item_type=item_type,
        subtype=subtype,
        attributes=attributes,
    )


def generate_loot(
    state: GeneratorState,
    options: OptionsLike = None,
    overrides: OverridesLike = None,
    context: str = "main",
    *,
    sampler: Sampler,
) -> List[GeneratedItem]:
    """Generate ``options.number_of_items`` items from ``state``.

    Parameters
    ----------
    state:
        Registries to draw from.  Only read during the call.
    options:
        :class:`GeneratorOptions` or a loose mapping of option values.
    overrides:
        :class:`GeneratorOverrides` or a mapping of forced selections;
        ``None`` forces nothing.
    context:
        Opaque tag attached to log records only.
    sampler:
        Random source; advancing it is the only side effect of the call.

    Raises
    ------
    GenerationError
        On invalid options or when any item cannot be generated.  No partial
        batch is returned.
    """

    if not isinstance(options, GeneratorOptions):
        options = GeneratorOptions.from_dict(options)
    options.validate()
    if not isinstance(overrides, GeneratorOverrides):
        overrides = GeneratorOverrides.from_dict(overrides)

    items: List[GeneratedItem] = []
    for idx in range(options.number_of_items):
        try:
            item = generate_item(state, options, overrides, sampler)
        except GenerationError as exc:
            logger.debug("[%s] item %d of %d failed: %s", context, idx + 1, options.number_of_items, exc)
            raise
        logger.debug(
            "[%s] item %d: %s (%s %s/%s) %d attribute(s)",
            context,
            idx + 1,
            item.name,
            item.quality,
            item.item_type,
            item.subtype,
            len(item.attributes),
        )
        items.append(item)

    logger.info("[%s] generated %d item(s)", context, len(items))
    return items
