"""Provides utility functions for reading model resources and writing breaks.

Model resources are JSON files. `load_model_resource` parses them with a
duplicate-key check, because a JSON object that repeats a feature key with a
different weight is a corrupt model rather than something to silently
resolve. `load_lines` and `save_breaks` handle the plain-text input and the
JSON output used by the command-line tools.
"""
import json
from typing import Any, Dict, List, Sequence, Tuple


def _reject_conflicting_duplicates(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in pairs:
        if key in out:
            if out[key] != value:
                raise ValueError(f"Duplicate key '{key}' with conflicting values {out[key]!r} and {value!r}")
            print(f"Warning: Duplicate key '{key}' in model resource; keeping the first entry.")
            continue
        out[key] = value
    return out


def load_model_resource(path: str) -> Any:
    """
    Loads a serialized model resource from a JSON file.

    Args:
        path: The path to the model JSON file.

    Returns:
        The parsed JSON value. Shape validation is left to the model store.

    Raises:
        FileNotFoundError: If the file at the specified path does not exist.
        ValueError: If the file is empty, is not valid JSON, or repeats a key
                    with a conflicting value.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Model resource not found at: {path}")

    if not raw.strip():
        raise ValueError(f"Model resource {path} is empty")
    try:
        return json.loads(raw, object_pairs_hook=_reject_conflicting_duplicates)
    except json.JSONDecodeError as e:
        raise ValueError(f"Error decoding JSON from {path}: {e}")


def load_lines(path: str) -> List[str]:
    """
    Reads a UTF-8 text file into a list of lines without their newlines.

    Raises:
        FileNotFoundError: If the file at the specified path does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except FileNotFoundError:
        raise FileNotFoundError(f"Input text not found at: {path}")


def save_breaks(path: str, lines: Sequence[str], breaks: Sequence[Sequence[int]]) -> None:
    """
    Saves per-line break offsets and the resulting phrases to a JSON file.

    The root of the JSON is an object with a single key, "lines", holding one
    entry per input line with its text, break offsets and phrases.
    """
    entries = []
    for text, offsets in zip(lines, breaks):
        cuts = [0, *offsets, len(text)]
        entries.append({
            "text": text,
            "breaks": list(offsets),
            "phrases": [text[a:b] for a, b in zip(cuts, cuts[1:]) if b > a],
        })

    with open(path, "w", encoding="utf-8") as f:
        json.dump({"lines": entries}, f, ensure_ascii=False, indent=2)
