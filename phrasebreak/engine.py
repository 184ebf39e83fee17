"""Phrase-break engine: drives the feature window across a range.

The break-iteration driver hands `MlBreakEngine.divide_up_range` a range of
the caller's text together with a normalized copy of that range and, when
normalization changed offsets, a map from normalized to native offsets. The
engine walks every interior boundary of the normalized string with a sliding
six-element window, lets the `Scorer` accept or reject it, and reports the
accepted boundaries in native coordinates.

After construction an engine holds only immutable state (the model store and
the two character classes), so one instance can serve concurrent callers
without locking. Every call owns its own window and boundary list.
"""
from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Union
from pathlib import Path

from .config import Config
from .errors import EngineUnusableError, InputError, ModelLoadError
from .features import init_window, iter_code_points
from .model_store import ModelStore, load_model
from .normalize import normalize_range
from .scorer import Scorer
from .types import EMPTY, CharClass, Element, Model

ModelSource = Union[ModelStore, str, Path, None]


def _as_char_class(chars: Union[CharClass, Iterable[str]]) -> CharClass:
    if isinstance(chars, CharClass):
        return chars
    return CharClass.build(chars=chars)


def _validate_index_map(index_map: Sequence[int], normalized: str, range_start: int, range_end: int) -> None:
    if len(index_map) != len(normalized) + 1:
        raise InputError(
            f"Index map has {len(index_map)} entries; a normalized string of length "
            f"{len(normalized)} needs {len(normalized) + 1}."
        )
    if index_map[0] != range_start or index_map[-1] != range_end:
        raise InputError(
            f"Index map runs from {index_map[0]!r} to {index_map[-1]!r}; it must start at {range_start} and end at {range_end}."
        )
    prev = range_start
    for i, native in enumerate(index_map):
        if isinstance(native, bool) or not isinstance(native, int):
            raise InputError(f"Index map entry {i} is not an integer: {native!r}.")
        if native < prev or native > range_end:
            raise InputError(
                f"Index map entry {i} ({native}) is out of order or outside [{range_start}, {range_end}]."
            )
        prev = native


class MlBreakEngine:
    """
    A machine-learned phrase-break engine for unsegmented scripts.

    Args:
        digit_or_open_punct_or_alphabet: Characters that start a new phrase
            when they follow a range (digits, open punctuation, letters). A
            `CharClass` or any iterable of characters.
        close_punct: Characters that close a phrase right before a range.
        model: A `ModelStore`, a path to a model resource, or None to use
            `config.paths["model"]`.
        config: Engine settings; defaults to `Config()`.
        strict: When True (the default) a model that cannot be loaded raises
            `ModelLoadError` from the constructor. When False the error is
            kept in `load_error` and every evaluation call fails instead.

    Raises:
        ModelLoadError: If `strict` and the model cannot be loaded.
    """

    def __init__(
        self,
        digit_or_open_punct_or_alphabet: Union[CharClass, Iterable[str]],
        close_punct: Union[CharClass, Iterable[str]],
        model: ModelSource = None,
        *,
        config: Optional[Config] = None,
        strict: bool = True,
    ):
        self.config = config or Config()
        self.digit_or_open_punct_or_alphabet = _as_char_class(digit_or_open_punct_or_alphabet)
        self.close_punct = _as_char_class(close_punct)
        self.load_error: Optional[ModelLoadError] = None
        self.store: Optional[ModelStore] = None
        self.scorer: Optional[Scorer] = None

        try:
            self.store = self._load_model(model)
        except ModelLoadError as e:
            if strict:
                raise
            self.load_error = e
        else:
            self.scorer = Scorer(self.store)

    @classmethod
    def from_config(cls, cfg: Config, model: ModelSource = None, *, strict: bool = True) -> "MlBreakEngine":
        """Builds an engine from the character classes and model named in `cfg`."""
        return cls(
            cfg.digit_or_open_punct_or_alphabet,
            cfg.close_punct,
            model,
            config=cfg,
            strict=strict,
        )

    def _load_model(self, model: ModelSource) -> ModelStore:
        scheme = self.config.key_scheme
        if isinstance(model, ModelStore):
            if scheme and scheme != model.model.scheme:
                base = model.model
                return ModelStore(Model(base.weights, base.bias, scheme), source=model.source)
            return model
        path = model if model is not None else self.config.model_path
        if not path:
            raise ModelLoadError("No model resource given and none configured under paths.model.")
        return load_model(path, scheme=scheme)

    @property
    def usable(self) -> bool:
        return self.scorer is not None

    def _require_usable(self) -> Scorer:
        if self.scorer is None:
            raise EngineUnusableError("Engine has no model; construction failed.") from self.load_error
        return self.scorer

    def _scan(self, scorer: Scorer, normalized: str) -> List[int]:
        # Interior boundaries only: offsets strictly between 0 and len(normalized).
        boundary: List[int] = []
        if not normalized:
            return boundary
        window, consumed = init_window(normalized)
        position = window.units_at(2)
        remaining = iter_code_points(normalized, consumed)
        while position < len(normalized):
            scorer.evaluate_breakpoint(window, position, boundary)
            nxt = next(remaining, None)
            if nxt is None:
                window.slide(EMPTY, 0)
            else:
                ch, units = nxt
                window.slide(Element.of(ch), units)
            position += window.units_at(2)
        return boundary

    def divide_up_range(
        self,
        text: str,
        range_start: int,
        range_end: int,
        found_breaks: List[int],
        normalized: str,
        index_map: Optional[Sequence[int]] = None,
    ) -> int:
        """
        Finds the phrase breaks inside one range of `text`.

        Args:
            text: The caller's full native text.
            range_start: Native offset where the range starts.
            range_end: Native offset where the range ends.
            found_breaks: Receives the accepted breaks, in native offsets and
                          increasing order. Existing entries are left alone.
            normalized: The normalized text of the range.
            index_map: `index_map[i]` is the native offset of normalized
                       offset `i`, with one extra entry for the end. None
                       means the normalized string is the range verbatim.

        Returns:
            The number of breaks appended to `found_breaks`.

        Raises:
            EngineUnusableError: If the engine's model failed to load.
            InputError: If the range, the normalized text or the index map
                        is invalid. Breaks appended before the failing step
                        stay in `found_breaks`.
        """
        scorer = self._require_usable()

        if not 0 <= range_start <= range_end <= len(text):
            raise InputError(f"Range [{range_start}, {range_end}) is outside a text of length {len(text)}.")
        if index_map is None:
            if len(normalized) != range_end - range_start:
                raise InputError(
                    f"Normalized text has length {len(normalized)} but the range spans "
                    f"{range_end - range_start} and no index map was given."
                )
        else:
            _validate_index_map(index_map, normalized, range_start, range_end)

        boundary = self._scan(scorer, normalized)

        appended = 0
        edges = self.config.edge_breaks and range_end > range_start
        if edges and range_start > 0 and self.close_punct.contains(text[range_start - 1]):
            found_breaks.append(range_start)
            appended += 1

        prev_native = range_start
        for pos in boundary:
            native = index_map[pos] if index_map is not None else range_start + pos
            # Normalization can expand one native character into several, so
            # distinct boundaries may share a native offset; keep the first.
            if native <= prev_native or native >= range_end:
                continue
            found_breaks.append(native)
            appended += 1
            prev_native = native

        if edges and range_end < len(text) and self.digit_or_open_punct_or_alphabet.contains(text[range_end]):
            found_breaks.append(range_end)
            appended += 1
        return appended

    def segment(self, text: str) -> List[int]:
        """Normalizes all of `text` and returns its phrase breaks in native offsets."""
        normalized, index_map = normalize_range(text, 0, len(text), self.config.normalization)
        breaks: List[int] = []
        self.divide_up_range(text, 0, len(text), breaks, normalized, index_map)
        return breaks

    def split(self, text: str) -> List[str]:
        """Returns `text` cut into phrases."""
        cuts = [0, *self.segment(text), len(text)]
        return [text[a:b] for a, b in zip(cuts, cuts[1:]) if b > a]

    def __repr__(self) -> str:
        state = repr(self.store) if self.usable else f"unusable: {self.load_error}"
        return f"MlBreakEngine({state})"
