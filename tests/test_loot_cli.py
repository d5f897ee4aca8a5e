import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import main_loot

ARMORY = Path(__file__).resolve().parent.parent / "assets" / "registries" / "armory.json"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv("LOOT_SEED", raising=False)
    monkeypatch.delenv("LOOT_REGISTRY", raising=False)


def _run(capsys, *argv):
    code = main_loot.main(list(argv))
    return code, capsys.readouterr()


def test_cli_prints_requested_items(capsys):
    code, out = _run(capsys, "--registry", str(ARMORY), "--count", "4", "--seed", "7")
    assert code == 0
    items = json.loads(out.out)
    assert len(items) == 4
    assert all(set(it) == {"name", "quality", "type", "subtype", "attributes"} for it in items)


def test_cli_is_deterministic_for_a_seed(capsys):
    args = ("--registry", str(ARMORY), "--count", "10", "--level", "6", "--variance", "3", "--seed", "11")
    _, first = _run(capsys, *args)
    _, second = _run(capsys, *args)
    assert first.out == second.out


def test_cli_reads_registry_and_seed_from_env(capsys, monkeypatch):
    monkeypatch.setenv("LOOT_REGISTRY", str(ARMORY))
    monkeypatch.setenv("LOOT_SEED", "3")
    _, first = _run(capsys, "--count", "3")
    _, second = _run(capsys, "--count", "3", "--seed", "3")
    assert first.out == second.out


def test_cli_options_file_and_overrides(tmp_path, capsys):
    opts = tmp_path / "opts.json"
    opts.write_text(json.dumps({"number_of_items": 2, "affix_chance": 0.0}), encoding="utf-8")
    code, out = _run(
        capsys,
        "--registry", str(ARMORY),
        "--options", str(opts),
        "--type", "weapon",
        "--subtype", "bow",
        "--quality", "rare",
        "--seed", "1",
        "--pretty",
    )
    assert code == 0
    items = json.loads(out.out)
    assert len(items) == 2
    for item in items:
        assert (item["type"], item["subtype"], item["quality"]) == ("weapon", "bow", "rare")
        assert set(item["attributes"]) == {"range", "damage", "durability"}


def test_cli_missing_registry(tmp_path, capsys):
    code, out = _run(capsys, "--registry", str(tmp_path / "nope.json"))
    assert code == 2
    assert "registry not found" in out.err


def test_cli_generation_failure(tmp_path, capsys):
    registry = tmp_path / "reg.json"
    registry.write_text(json.dumps({"qualities": {"common": 1}}), encoding="utf-8")
    code, out = _run(capsys, "--registry", str(registry), "--seed", "0")
    assert code == 1
    assert out.out == ""


def test_cli_registry_not_json(tmp_path, capsys):
    registry = tmp_path / "reg.json"
    registry.write_text("{not json", encoding="utf-8")
    code, out = _run(capsys, "--registry", str(registry))
    assert code == 2
    assert "[error]" in out.err
    assert out.out == ""


def test_cli_registry_wrong_shape(tmp_path, capsys):
    registry = tmp_path / "reg.json"
    registry.write_text(json.dumps({"qualities": ["common"]}), encoding="utf-8")
    code, out = _run(capsys, "--registry", str(registry))
    assert code == 2
    assert "[error]" in out.err


@pytest.mark.parametrize("content", ["[1, 2]", "nope"])
def test_cli_bad_options_file(tmp_path, capsys, content):
    opts = tmp_path / "opts.json"
    opts.write_text(content, encoding="utf-8")
    code, out = _run(capsys, "--registry", str(ARMORY), "--options", str(opts))
    assert code == 2
    assert "[error]" in out.err


def test_cli_options_file_missing(tmp_path, capsys):
    code, out = _run(capsys, "--registry", str(ARMORY), "--options", str(tmp_path / "missing.json"))
    assert code == 2
    assert "[error]" in out.err
