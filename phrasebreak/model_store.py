"""Loading and lookup of the trained phrase-break model.

Two serialized layouts are accepted:

1.  **Linear JSON** (`"format": "linear"`): an explicit weight table and bias,

        {"format": "linear", "scheme": "positional-v1",
         "weights": {"pos(-1)=A": 1, "pos(0)=B": 1}, "bias": -1}

2.  **BudouX resource**: the parallel `modelKeys` / `modelValues` arrays that
    BudouX exports and ICU ships as its Japanese phrase model. BudouX decides
    a break when the weights of the features that fire outweigh the weights
    of those that do not. The loader folds that rule into the linear form by
    doubling every weight and using the negated total as the bias, so the
    decision is again `score > 0`.

Whatever the layout, the result is a frozen `Model` whose weight table is a
read-only mapping. Lookups of unknown keys weigh zero.
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .errors import ModelLoadError
from .features import KeyScheme, get_scheme
from .io_utils import load_model_resource
from .types import Model

LINEAR_FORMAT = "linear"
BUDOUX_FORMAT = "budoux"
DEFAULT_LINEAR_SCHEME = "positional-v1"
DEFAULT_BUDOUX_SCHEME = "budoux-v1"


def _as_weight(value: Any, what: str) -> int:
    # bool is an int subclass but never a valid weight
    if isinstance(value, bool) or not isinstance(value, int):
        raise ModelLoadError(f"{what} must be an integer, got {value!r}.")
    return value


def _detect_format(resource: Mapping[str, Any]) -> str:
    declared = resource.get("format")
    if declared is not None:
        if declared not in (LINEAR_FORMAT, BUDOUX_FORMAT):
            raise ModelLoadError(f"Unknown model format '{declared}'.")
        return declared
    if "modelKeys" in resource or "modelValues" in resource:
        return BUDOUX_FORMAT
    if "weights" in resource:
        return LINEAR_FORMAT
    raise ModelLoadError("Model resource has neither 'weights' nor 'modelKeys'/'modelValues'.")


def _parse_linear(resource: Mapping[str, Any]) -> tuple[Dict[str, int], int]:
    weights = resource.get("weights")
    if not isinstance(weights, dict) or not weights:
        raise ModelLoadError("Linear model needs a non-empty 'weights' object.")
    if "bias" not in resource:
        raise ModelLoadError("Linear model is missing its 'bias'.")
    table = {}
    for key, value in weights.items():
        table[str(key)] = _as_weight(value, f"Weight for '{key}'")
    return table, _as_weight(resource["bias"], "Model bias")


def _parse_budoux(resource: Mapping[str, Any]) -> tuple[Dict[str, int], int]:
    keys = resource.get("modelKeys")
    values = resource.get("modelValues")
    if not isinstance(keys, list) or not isinstance(values, list):
        raise ModelLoadError("BudouX model needs 'modelKeys' and 'modelValues' arrays.")
    if not keys:
        raise ModelLoadError("BudouX model has no features.")
    if len(keys) != len(values):
        raise ModelLoadError(
            f"Truncated model: {len(keys)} keys but {len(values)} values."
        )

    table: Dict[str, int] = {}
    total = 0
    for key, value in zip(keys, values):
        if not isinstance(key, str):
            raise ModelLoadError(f"Feature key {key!r} is not a string.")
        weight = _as_weight(value, f"Weight for '{key}'")
        if key in table:
            if table[key] != 2 * weight:
                raise ModelLoadError(f"Duplicate feature '{key}' with conflicting weights.")
            print(f"Warning: Duplicate feature '{key}' in model; keeping the first entry.")
            continue
        table[key] = 2 * weight
        total += weight
    return table, -total


class ModelStore:
    """
    Read-only access to a trained model's weights and bias.

    A store is built once, usually through `from_resource` or `load_model`,
    and never changes afterwards, so one instance can be shared by any
    number of concurrent readers.

    Attributes:
        model: The frozen `Model` value holding the weights, bias and scheme.
        source: Where the model came from, for error messages.
    """

    def __init__(self, model: Model, source: str = "<memory>"):
        try:
            self._scheme = get_scheme(model.scheme)
        except KeyError as e:
            raise ModelLoadError(f"Model from {source}: {e.args[0]}") from e
        self.model = model
        self.source = source

    @classmethod
    def from_resource(
        cls,
        resource: Any,
        *,
        scheme: Optional[str] = None,
        source: str = "<memory>",
    ) -> "ModelStore":
        """
        Builds a store from a deserialized model resource.

        Args:
            resource: The parsed JSON object (see the module docstring).
            scheme: Overrides the key scheme named by the resource.
            source: A label for error messages, usually the file path.

        Returns:
            A frozen `ModelStore`.

        Raises:
            ModelLoadError: If the resource is empty, truncated, or
                inconsistent, or names an unknown key scheme.
        """
        if not isinstance(resource, dict) or not resource:
            raise ModelLoadError(f"Model resource from {source} is empty or not an object.")
        fmt = _detect_format(resource)
        if fmt == BUDOUX_FORMAT:
            weights, bias = _parse_budoux(resource)
            default_scheme = DEFAULT_BUDOUX_SCHEME
        else:
            weights, bias = _parse_linear(resource)
            default_scheme = DEFAULT_LINEAR_SCHEME
        chosen = scheme or resource.get("scheme") or default_scheme
        return cls(Model(weights=weights, bias=bias, scheme=str(chosen)), source=source)

    @property
    def scheme(self) -> KeyScheme:
        return self._scheme

    def lookup(self, key: str) -> int:
        """Returns the weight of `key`, or 0 if the model does not know it."""
        return self.model.weights.get(key, 0)

    def bias(self) -> int:
        return self.model.bias

    def __len__(self) -> int:
        return len(self.model.weights)

    def __contains__(self, key: str) -> bool:
        return key in self.model.weights

    def __repr__(self) -> str:
        return f"ModelStore(source={self.source!r}, scheme={self.model.scheme!r}, features={len(self)})"


def load_model(path: Union[str, Path], scheme: Optional[str] = None) -> ModelStore:
    """
    Loads a model resource file into a `ModelStore`.

    Raises:
        ModelLoadError: If the file is missing, is not valid JSON, or holds
            a malformed model. The underlying error is chained.
    """
    try:
        resource = load_model_resource(str(path))
    except FileNotFoundError as e:
        raise ModelLoadError(str(e)) from e
    except ValueError as e:
        raise ModelLoadError(f"Corrupt model resource {path}: {e}") from e
    return ModelStore.from_resource(resource, scheme=scheme, source=str(path))
