"""Test configuration helpers for ensuring local imports resolve."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()

from phrasebreak.model_store import ModelStore  # noqa: E402


@pytest.fixture
def tiny_store() -> ModelStore:
    """The two-feature model that breaks "ABX" after "A" and nowhere else."""
    return ModelStore.from_resource(
        {"format": "linear", "weights": {"pos(-1)=A": 1, "pos(0)=B": 1}, "bias": -1}
    )


@pytest.fixture
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]
