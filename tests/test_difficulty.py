import pytest

from smart_horses.core import Side
from smart_horses.difficulty import (
    DEFAULT_DIFFICULTIES,
    DifficultyConfig,
    build_search,
    load_difficulties,
    parse_difficulties,
    resolve_difficulty,
)
from smart_horses.evaluation import PositionalEvaluator, ScoreDifferenceEvaluator


def test_default_table_depths():
    assert [d.depth for d in DEFAULT_DIFFICULTIES.values()] == [2, 4, 6]
    assert resolve_difficulty("amateur").depth == 4


def test_default_tiers_use_positional_heuristic():
    assert {d.heuristic for d in DEFAULT_DIFFICULTIES.values()} == {"positional"}
    assert DifficultyConfig("plain", depth=1).heuristic == "positional"


def test_unknown_difficulty():
    with pytest.raises(KeyError, match="beginner"):
        resolve_difficulty("grandmaster")


@pytest.mark.parametrize("depth", [0, -1, 2.5, "3", True])
def test_depth_must_be_positive_integer(depth):
    with pytest.raises(ValueError):
        DifficultyConfig("broken", depth=depth)


def test_unknown_heuristic_rejected():
    with pytest.raises(ValueError):
        parse_difficulties({"easy": {"depth": 1, "heuristic": "astrology"}})


def test_load_difficulties_from_yaml(tmp_path):
    path = tmp_path / "difficulties.yaml"
    path.write_text(
        "difficulties:\n"
        "  easy:\n"
        "    depth: 1\n"
        "  hard:\n"
        "    depth: 3\n"
        "    heuristic: score_difference\n"
    )
    table = load_difficulties(path)

    assert list(table) == ["easy", "hard"]
    assert table["easy"] == DifficultyConfig("easy", depth=1, heuristic="positional")
    assert table["hard"].heuristic == "score_difference"


def test_load_bare_mapping(tmp_path):
    path = tmp_path / "flat.yaml"
    path.write_text("quick:\n  depth: 2\n")
    assert load_difficulties(path)["quick"].depth == 2


def test_missing_depth(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("quick:\n  heuristic: score\n")
    with pytest.raises(ValueError):
        load_difficulties(path)


@pytest.mark.parametrize(
    "text",
    [
        "difficulties:\n",
        "- beginner\n- expert\n",
        "difficulties:\n  - depth: 2\n",
        "just a string\n",
    ],
)
def test_malformed_yaml_raises_value_error(tmp_path, text):
    path = tmp_path / "malformed.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_difficulties(path)


def test_shipped_config_loads():
    from pathlib import Path

    table = load_difficulties(Path(__file__).resolve().parents[1] / "configs" / "difficulties.yaml")
    assert set(table) == {"beginner", "amateur", "expert"}


def test_build_search_uses_table_entry():
    engine = build_search("beginner", Side.SECOND)
    assert engine.depth == 2
    assert engine.maximizing_side == Side.SECOND
    assert isinstance(engine.evaluator, PositionalEvaluator)

    custom = build_search(DifficultyConfig("deep", depth=3, heuristic="score_difference"), Side.FIRST)
    assert custom.depth == 3
    assert isinstance(custom.evaluator, ScoreDifferenceEvaluator)
    assert custom.evaluator.side == Side.FIRST
