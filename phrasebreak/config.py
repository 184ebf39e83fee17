"""Manages the loading and validation of engine configuration.

This module defines the `Config` dataclass, which holds every setting the
phrase-break engine reads: where the model lives, which feature-key scheme to
use, how input text is normalized, and the two character classes the engine
is constructed with. `load_config` reads these settings from a `config.yaml`
file and resolves the model path relative to that file.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .errors import ConfigError
from .types import (
    CharClass,
    DEFAULT_CLOSE_PUNCT,
    DEFAULT_DIGIT_OR_OPEN_PUNCT_OR_ALPHABET,
)

NORMALIZATION_FORMS = ("NFC", "NFD", "NFKC", "NFKD", "none")


@dataclass
class Config:
    """
    A typed configuration object that holds all settings for the engine.

    Attributes:
        paths: Paths to model files; `paths["model"]` is the model resource.
               Relative paths are resolved against the config file by
               `load_config`.
        key_scheme: Overrides the key scheme named inside the model resource.
                    None means "trust the model".
        normalization: Unicode normalization form applied by the convenience
                       `segment` entry point, or "none".
        edge_breaks: Also report breaks at the range edges when the
                     neighbouring characters call for one.
        digit_or_open_punct_or_alphabet: Characters that start a new phrase
                     right after the range (digits, open punctuation, letters).
        close_punct: Characters that end a phrase right before the range.
    """
    paths: dict[str, str] = field(default_factory=dict)
    key_scheme: Optional[str] = None
    normalization: str = "NFKC"
    edge_breaks: bool = False
    digit_or_open_punct_or_alphabet: CharClass = DEFAULT_DIGIT_OR_OPEN_PUNCT_OR_ALPHABET
    close_punct: CharClass = DEFAULT_CLOSE_PUNCT

    @property
    def model_path(self) -> Optional[str]:
        return self.paths.get("model")


def _char_class(raw: Any, fallback: CharClass, name: str) -> CharClass:
    if raw is None:
        return fallback
    if not isinstance(raw, dict):
        raise ConfigError(f"char_classes.{name} must be a mapping with 'categories' and/or 'chars'.")
    return CharClass.build(
        categories=[str(c) for c in raw.get("categories", [])],
        chars=str(raw.get("chars", "")),
    )


def load_config(path: str = "config.yaml") -> Config:
    """
    Loads and validates a YAML configuration file into a Config object.

    Args:
        path: The path to the `config.yaml` file.

    Returns:
        A fully populated `Config` object.

    Raises:
        FileNotFoundError: If the specified `config.yaml` file cannot be found.
        ConfigError: If the YAML cannot be parsed or a value is invalid.
        TypeError: If the root of the YAML file is not a dictionary.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing YAML file at {path}: {e}")

    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    paths: Dict[str, str] = {str(k): str(v) for k, v in (y.get("paths") or {}).items()}
    model = paths.get("model")
    if model and not Path(model).is_absolute():
        paths["model"] = str(Path(path).parent / model)

    normalization = str(y.get("normalization", "NFKC"))
    if normalization not in NORMALIZATION_FORMS:
        raise ConfigError(
            f"normalization must be one of {', '.join(NORMALIZATION_FORMS)}, got '{normalization}'."
        )

    classes = y.get("char_classes") or {}
    if not isinstance(classes, dict):
        raise ConfigError("char_classes must be a mapping.")

    return Config(
        paths=paths,
        key_scheme=y.get("key_scheme"),
        normalization=normalization,
        edge_breaks=bool(y.get("edge_breaks", False)),
        digit_or_open_punct_or_alphabet=_char_class(
            classes.get("digit_or_open_punct_or_alphabet"),
            DEFAULT_DIGIT_OR_OPEN_PUNCT_OR_ALPHABET,
            "digit_or_open_punct_or_alphabet",
        ),
        close_punct=_char_class(classes.get("close_punct"), DEFAULT_CLOSE_PUNCT, "close_punct"),
    )
