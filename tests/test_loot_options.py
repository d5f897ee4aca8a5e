import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from loot.errors import GenerationError, InvalidOptionsError
from loot.item import ItemAttribute
from loot.options import GeneratorOptions, GeneratorOverrides


def test_from_dict_defaults():
    opts = GeneratorOptions.from_dict({})
    assert opts == GeneratorOptions(
        number_of_items=1,
        base_level=1.0,
        level_variance=0.0,
        affix_chance=0.5,
        linear=True,
        scaling_factor=1.0,
    )
    assert GeneratorOptions.from_dict(None) == opts


def test_from_dict_partial_and_loose_values():
    opts = GeneratorOptions.from_dict(
        {"number_of_items": "3", "base_level": 5, "linear": "false", "colour": "red", "affix_chance": None}
    )
    assert opts.number_of_items == 3
    assert opts.base_level == 5.0
    assert opts.linear is False
    assert opts.affix_chance == 0.5


def test_from_dict_explicit_defaults():
    opts = GeneratorOptions.from_dict({"base_level": 2}, number_of_items=4, base_level=9)
    assert opts.number_of_items == 4
    assert opts.base_level == 2.0


def test_from_dict_rejects_unparseable_value():
    with pytest.raises(InvalidOptionsError):
        GeneratorOptions.from_dict({"number_of_items": "many"})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"number_of_items": -1},
        {"level_variance": -0.5},
        {"affix_chance": 1.5},
        {"affix_chance": -0.1},
        {"linear": False, "scaling_factor": -2.0},
        {"base_level": float("nan")},
        {"base_level": float("inf")},
        {"level_variance": float("inf")},
        {"scaling_factor": float("nan")},
        {"linear": False, "scaling_factor": float("inf")},
    ],
)
def test_validate_rejects_out_of_range(kwargs):
    with pytest.raises(InvalidOptionsError) as excinfo:
        GeneratorOptions(**kwargs).validate()
    assert isinstance(excinfo.value, GenerationError)
    assert isinstance(excinfo.value, ValueError)


def test_validate_accepts_linear_zero_scaling():
    GeneratorOptions(linear=True, scaling_factor=0.0).validate()
    GeneratorOptions(linear=True, scaling_factor=-0.5).validate()


def test_validate_accepts_exponential_zero_scaling():
    GeneratorOptions(linear=False, scaling_factor=0.0).validate()


def test_overrides_from_dict():
    forced = GeneratorOverrides.from_dict({"type": "sword", "quality": "rare", "extra": 1})
    assert forced == GeneratorOverrides(quality="rare", item_type="sword")
    assert not forced.is_empty()
    assert GeneratorOverrides.empty().is_empty()
    assert GeneratorOverrides.from_dict(None) == GeneratorOverrides.empty()


def test_attribute_defaults_and_invariants():
    attr = ItemAttribute(name="damage", initial_value=10, min=0, max=100)
    assert attr.required is False
    assert attr.scaling_factor == 1.0
    assert attr.chance == 1.0
    with pytest.raises(ValueError):
        ItemAttribute(name="damage", initial_value=10, min=5, max=1)
    with pytest.raises(ValueError):
        ItemAttribute(name="damage", initial_value=10, min=0, max=1, chance=1.2)


def test_attribute_from_dict_missing_field():
    with pytest.raises(ValueError, match="max"):
        ItemAttribute.from_dict({"name": "damage", "initial_value": 1, "min": 0})
