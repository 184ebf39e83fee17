from pathlib import Path

import pytest

from phrasebreak.config import load_config
from phrasebreak.engine import MlBreakEngine
from phrasebreak.model_store import ModelStore, load_model
from scripts.evaluate_model import evaluate_lines, summarize
from scripts.inspect_model import family_summary, feature_family, weight_table


@pytest.fixture
def demo_engine(project_root: Path) -> MlBreakEngine:
    return MlBreakEngine.from_config(load_config(str(project_root / "config.yaml")))


def test_evaluate_lines_against_reference(demo_engine):
    lines = ["私は 東京に 行きます", "私は 東京 に行きます", ""]

    scores, disagreements = evaluate_lines(demo_engine, lines)

    assert list(scores["line"]) == [1, 2]
    assert list(scores["f1"]) == [1.0, 0.5]
    assert list(disagreements["offset"]) == [4, 5]
    assert set(disagreements["line"]) == {2}


def test_summarize_micro_and_macro(demo_engine):
    scores, _ = evaluate_lines(demo_engine, ["私は 東京に 行きます", "私は 東京 に行きます"])

    summary = summarize(scores)

    assert summary["lines"] == 2
    assert summary["precision"] == pytest.approx(0.75)
    assert summary["recall"] == pytest.approx(0.75)
    assert summary["macro_f1"] == pytest.approx(0.75)


def test_summarize_empty_frame(demo_engine):
    scores, disagreements = evaluate_lines(demo_engine, [])

    assert summarize(scores)["lines"] == 0
    assert disagreements.empty


@pytest.mark.parametrize(
    "key, family",
    [("UW4:の", "UW4"), ("pos(-1)=A", "pos(-1)"), ("BB2:062071", "BB2"), ("bare", "bare")],
)
def test_feature_family(key, family):
    assert feature_family(key) == family


def test_family_summary_groups_weights(project_root: Path):
    table = weight_table(load_model(project_root / "models" / "ja_demo_model.json"))
    summary = family_summary(table)

    assert len(table) == 15
    assert summary.loc["UW3", "count"] == 9
    assert summary.loc["TW1", "min"] == -11000
    assert summary.index[0] == "UW3"


def test_weight_table_of_tiny_model(tiny_store: ModelStore):
    table = weight_table(tiny_store)

    assert sorted(table["key"]) == ["pos(-1)=A", "pos(0)=B"]
    assert table["weight"].sum() == 2
