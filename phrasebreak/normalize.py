"""Range normalization with a normalized-to-native offset map.

The engine scores a normalized copy of the range but must report breaks in
the caller's text. `normalize_range` produces both the normalized string and
the map that ties every normalized offset back to a native one.

Normalization works on clusters: a starter character plus any following
characters that decompose to a combining mark (this covers halfwidth kana
voicing marks, which NFKC folds into the preceding kana). Every character a
cluster normalizes to maps to the cluster's native start, so a break can
never land inside a cluster in native coordinates.
"""
from __future__ import annotations
from typing import Iterator, List, Optional, Tuple
import unicodedata

from .errors import InputError


def _attaches_to_previous(ch: str) -> bool:
    decomposed = unicodedata.normalize("NFKD", ch)
    return bool(decomposed) and unicodedata.combining(decomposed[0]) != 0


def _clusters(text: str, start: int, end: int) -> Iterator[Tuple[int, int]]:
    cluster_start = start
    for i in range(start + 1, end):
        if not _attaches_to_previous(text[i]):
            yield cluster_start, i
            cluster_start = i
    if end > start:
        yield cluster_start, end


def normalize_range(
    text: str, start: int, end: int, form: str = "NFKC"
) -> Tuple[str, Optional[List[int]]]:
    """
    Normalizes `text[start:end]` and records where each character came from.

    Args:
        text: The full native text.
        start: Native offset of the range start.
        end: Native offset of the range end.
        form: A `unicodedata` normalization form, or "none" to pass the
              range through unchanged.

    Returns:
        A tuple `(normalized, index_map)`. `index_map[i]` is the native
        offset of normalized offset `i`, and `index_map[len(normalized)]` is
        `end`. With form "none" the map is None (identity).

    Raises:
        InputError: If the range does not fit inside `text`.
    """
    if not 0 <= start <= end <= len(text):
        raise InputError(f"Range [{start}, {end}) is outside a text of length {len(text)}.")
    if form == "none":
        return text[start:end], None

    pieces: List[str] = []
    index_map: List[int] = []
    for a, b in _clusters(text, start, end):
        normalized = unicodedata.normalize(form, text[a:b])
        pieces.append(normalized)
        index_map.extend([a] * len(normalized))
    index_map.append(end)
    return "".join(pieces), index_map
