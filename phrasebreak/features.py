"""Sliding feature window and the feature-key schemes that read it.

The window always holds six `Element`s. Slot `k` holds the character at
offset `k - 3` from the candidate boundary, so a boundary sits between slots
2 and 3. Edges of the range are padded with the empty sentinel element.

How a window turns into feature keys is a contract with whatever trained the
model, so it lives behind `KeyScheme`. Schemes are registered by name and the
model resource says which one it was trained with.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from collections import deque
from typing import Dict, Iterator, List, Sequence, Tuple

from .errors import InputError
from .types import EMPTY, Element

WINDOW_SIZE = 6
BOUNDARY_SLOT = 3  # first slot after the candidate boundary


def iter_code_points(text: str, start: int = 0) -> Iterator[Tuple[str, int]]:
    """
    Yields `(character, code_units)` pairs from `text`, starting at `start`.

    A well-formed surrogate pair (as produced by decoding UTF-16 with
    `surrogatepass`) is combined into one character spanning two units. A
    lone surrogate makes the text malformed.

    Raises:
        InputError: On a lone surrogate.
    """
    i = start
    n = len(text)
    while i < n:
        cp = ord(text[i])
        if 0xD800 <= cp <= 0xDBFF and i + 1 < n and 0xDC00 <= ord(text[i + 1]) <= 0xDFFF:
            low = ord(text[i + 1])
            yield chr(0x10000 + ((cp - 0xD800) << 10) + (low - 0xDC00)), 2
            i += 2
            continue
        if 0xD800 <= cp <= 0xDFFF:
            raise InputError(f"Malformed text: lone surrogate U+{cp:04X} at offset {i}.")
        yield text[i], 1
        i += 1


class FeatureWindow:
    """Fixed-size window of six elements with an O(1) slide."""

    __slots__ = ("_elements", "_units")

    def __init__(self, elements: Sequence[Element] = (), units: Sequence[int] = ()) -> None:
        padded = list(elements) + [EMPTY] * (WINDOW_SIZE - len(elements))
        if len(padded) != WINDOW_SIZE:
            raise ValueError(f"A feature window holds exactly {WINDOW_SIZE} elements, got {len(elements)}.")
        unit_list = list(units) + [0] * (WINDOW_SIZE - len(units))
        self._elements = deque(padded, maxlen=WINDOW_SIZE)
        self._units = deque(unit_list[:WINDOW_SIZE], maxlen=WINDOW_SIZE)

    def slide(self, element: Element, units: int = 1) -> None:
        """Drops the leftmost element and appends `element` on the right."""
        self._elements.append(element)
        self._units.append(units if not element.is_empty else 0)

    def units_at(self, slot: int) -> int:
        """Code units the character in `slot` occupies in the source text."""
        return self._units[slot]

    def __getitem__(self, slot: int) -> Element:
        return self._elements[slot]

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return WINDOW_SIZE

    def characters(self) -> str:
        return "".join(e.character or "_" for e in self._elements)

    def __repr__(self) -> str:
        return f"FeatureWindow({self.characters()!r})"


def init_window(text: str) -> Tuple[FeatureWindow, int]:
    """
    Builds the window for the first candidate boundary of `text`.

    Slots 0 and 1 are sentinels because nothing precedes the range. The first
    four characters of `text` fill slots 2 to 5; shorter texts leave the
    remaining slots as sentinels.

    Args:
        text: The normalized string of the range.

    Returns:
        A tuple of the window and the number of code units consumed by the
        characters placed in it. All later position accounting continues
        from that offset.

    Raises:
        InputError: If `text` is malformed.
    """
    elements: List[Element] = [EMPTY, EMPTY]
    units: List[int] = [0, 0]
    consumed = 0
    for ch, width in iter_code_points(text):
        elements.append(Element.of(ch))
        units.append(width)
        consumed += width
        if len(elements) == WINDOW_SIZE:
            break
    return FeatureWindow(elements, units), consumed


class KeyScheme(ABC):
    """Turns a feature window into the list of model lookup keys."""

    name = "base"

    @abstractmethod
    def keys(self, window: FeatureWindow) -> List[str]:
        ...


class PositionalScheme(KeyScheme):
    """
    One character key and one block key per window slot.

    Keys look like `pos(-1)=A` and `blk(-1)=001`, where the number is the
    slot's offset from the boundary. Sentinel slots produce keys with empty
    content (`pos(-3)=`), which only weigh anything if the model lists them.
    """

    name = "positional-v1"

    def keys(self, window: FeatureWindow) -> List[str]:
        out = []
        for slot, element in enumerate(window):
            offset = slot - BOUNDARY_SLOT
            out.append(f"pos({offset})={element.character}")
            out.append(f"blk({offset})={element.ublock}")
        return out


class BudouxScheme(KeyScheme):
    """
    The BudouX phrase-model feature layout.

    Unigrams UW1-UW6 cover slots 0-5, bigrams BW1-BW3 cover the slot pairs
    around the boundary, and trigrams TW1-TW4 cover every run of three slots.
    UB, BB and TB are the same shapes over block codes. An n-gram touching a
    sentinel slot is left out.
    """

    name = "budoux-v1"

    UNIGRAMS = tuple((f"{i + 1}", (i,)) for i in range(WINDOW_SIZE))
    BIGRAMS = (("1", (1, 2)), ("2", (2, 3)), ("3", (3, 4)))
    TRIGRAMS = (("1", (0, 1, 2)), ("2", (1, 2, 3)), ("3", (2, 3, 4)), ("4", (3, 4, 5)))

    def keys(self, window: FeatureWindow) -> List[str]:
        elements = list(window)
        out = []
        for prefix, groups in (("U", self.UNIGRAMS), ("B", self.BIGRAMS), ("T", self.TRIGRAMS)):
            for suffix, slots in groups:
                if any(elements[s].is_empty for s in slots):
                    continue
                chars = "".join(elements[s].character for s in slots)
                blocks = "".join(elements[s].ublock for s in slots)
                out.append(f"{prefix}W{suffix}:{chars}")
                out.append(f"{prefix}B{suffix}:{blocks}")
        return out


SCHEMES: Dict[str, KeyScheme] = {}


def register_scheme(scheme: KeyScheme) -> KeyScheme:
    """Makes `scheme` available to models that name it."""
    SCHEMES[scheme.name] = scheme
    return scheme


def get_scheme(name: str) -> KeyScheme:
    try:
        return SCHEMES[name]
    except KeyError:
        known = ", ".join(sorted(SCHEMES))
        raise KeyError(f"Unknown feature-key scheme '{name}' (known: {known}).") from None


register_scheme(PositionalScheme())
register_scheme(BudouxScheme())
