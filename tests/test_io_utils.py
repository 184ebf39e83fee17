import json
from pathlib import Path

import pytest

from phrasebreak.io_utils import load_lines, load_model_resource, save_breaks


def test_load_model_resource_parses_json(tmp_path: Path) -> None:
    path = tmp_path / "model.json"
    path.write_text(json.dumps({"weights": {"a": 1}, "bias": 0}), encoding="utf-8")

    assert load_model_resource(str(path)) == {"weights": {"a": 1}, "bias": 0}


def test_load_model_resource_allows_consistent_duplicates(tmp_path: Path, capsys) -> None:
    path = tmp_path / "model.json"
    path.write_text('{"weights": {"a": 1, "a": 1}, "bias": 0}', encoding="utf-8")

    assert load_model_resource(str(path))["weights"] == {"a": 1}
    assert "Warning: Duplicate key 'a'" in capsys.readouterr().out


def test_load_model_resource_rejects_conflicting_duplicates(tmp_path: Path) -> None:
    path = tmp_path / "model.json"
    path.write_text('{"weights": {"a": 1, "a": 2}, "bias": 0}', encoding="utf-8")

    with pytest.raises(ValueError, match="Duplicate key 'a'"):
        load_model_resource(str(path))


def test_load_model_resource_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_model_resource(str(tmp_path / "missing.json"))


def test_load_lines_strips_newlines(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    path.write_text("私は猫\n\n東京\n", encoding="utf-8")

    assert load_lines(str(path)) == ["私は猫", "", "東京"]


def test_load_lines_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_lines(str(tmp_path / "missing.txt"))


def test_save_breaks_writes_expected_structure(tmp_path: Path) -> None:
    out_path = tmp_path / "out.json"

    save_breaks(str(out_path), ["私は東京", ""], [[2], []])

    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["lines"][0] == {"text": "私は東京", "breaks": [2], "phrases": ["私は", "東京"]}
    assert data["lines"][1] == {"text": "", "breaks": [], "phrases": []}
    assert "私は" in out_path.read_text(encoding="utf-8")
