from pathlib import Path

import pytest

from phrasebreak.config import Config, load_config
from phrasebreak.errors import ConfigError
from phrasebreak.types import DEFAULT_CLOSE_PUNCT


def test_load_config_reads_settings_and_resolves_model_path(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
paths:
  model: models/ja.json
key_scheme: budoux-v1
normalization: NFC
edge_breaks: true
char_classes:
  digit_or_open_punct_or_alphabet:
    categories: [Nd]
    chars: "（"
""".strip(),
        encoding="utf-8",
    )

    cfg = load_config(str(config_path))

    assert cfg.model_path == str(tmp_path / "models" / "ja.json")
    assert cfg.key_scheme == "budoux-v1"
    assert cfg.normalization == "NFC"
    assert cfg.edge_breaks is True
    assert cfg.digit_or_open_punct_or_alphabet.contains("（")
    assert cfg.digit_or_open_punct_or_alphabet.contains("3")
    assert not cfg.digit_or_open_punct_or_alphabet.contains("A")
    assert cfg.close_punct == DEFAULT_CLOSE_PUNCT


def test_load_config_keeps_absolute_model_path(tmp_path: Path) -> None:
    model = tmp_path / "elsewhere" / "model.json"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"paths:\n  model: {model.as_posix()}\n", encoding="utf-8")

    assert Path(load_config(str(config_path)).model_path) == model


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")

    cfg = load_config(str(config_path))

    assert cfg == Config()
    assert cfg.model_path is None


def test_load_config_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_load_config_rejects_non_dict_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- not a mapping", encoding="utf-8")

    with pytest.raises(TypeError):
        load_config(str(config_path))


def test_load_config_rejects_broken_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("paths: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(config_path))


@pytest.mark.parametrize(
    "body",
    [
        "normalization: NFX",
        "char_classes: [Nd]",
        "char_classes:\n  close_punct: Pe",
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, body: str) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(str(config_path))


def test_project_config_loads(project_root: Path) -> None:
    cfg = load_config(str(project_root / "config.yaml"))

    assert Path(cfg.model_path).name == "ja_demo_model.json"
    assert cfg.key_scheme is None
