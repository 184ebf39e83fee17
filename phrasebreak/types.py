from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional
import unicodedata

from .blocks import BLOCK_CODE_WIDTH, unicode_block
from .errors import InputError

__all__ = ["Element", "Model", "CharClass", "EMPTY"]


@dataclass(frozen=True)
class Element:
    """
    A character paired with its Unicode block code.

    Elements are the units held by the sliding feature window. The block code
    is stored in its normalized form: the decimal block id, zero-padded to
    three digits. The sentinel element used to pad the window near the edges
    of a range has an empty character and an empty block code. A character given
    without a block code is classified with `unicode_block`.

    Attributes:
        character: A single code point, or "" for the sentinel.
        ublock: The three-digit block code, or "" for the sentinel.
    """
    character: str = ""
    ublock: str = ""

    def __post_init__(self) -> None:
        if len(self.character) > 1:
            raise InputError(f"Element holds one code point, got {self.character!r}.")
        code = str(self.ublock)
        if self.character and not code:
            code = unicode_block(self.character)
        if code and (not code.isdigit() or len(code.lstrip("0")) > BLOCK_CODE_WIDTH):
            raise InputError(f"Block code {self.ublock!r} is not a decimal of at most {BLOCK_CODE_WIDTH} digits.")
        if code:
            code = code[-BLOCK_CODE_WIDTH:].zfill(BLOCK_CODE_WIDTH)
        object.__setattr__(self, "ublock", code)

    @classmethod
    def of(cls, ch: str) -> "Element":
        """Builds the element for `ch`, classifying it with `unicode_block`."""
        if not ch:
            return EMPTY
        return cls(ch, unicode_block(ch))

    @classmethod
    def empty(cls) -> "Element":
        return EMPTY

    @property
    def length(self) -> int:
        """Number of digits stored in the block code (0 for the sentinel)."""
        return len(self.ublock)

    @property
    def is_empty(self) -> bool:
        return not self.character


EMPTY = Element()


@dataclass(frozen=True)
class Model:
    """
    A trained linear phrase-break model.

    The weight table and the bias are kept in one frozen value so they can
    only ever be replaced together.

    Attributes:
        weights: Read-only mapping from feature key to integer weight.
        bias: The constant term added to every score.
        scheme: Name of the feature-key scheme the weights were trained with.
    """
    weights: Mapping[str, int]
    bias: int
    scheme: str

    def __post_init__(self) -> None:
        # always copy: a proxy passed in may still be backed by the caller's dict
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))


@dataclass(frozen=True)
class CharClass:
    """
    An immutable character class defined by general categories plus extras.

    Attributes:
        categories: Unicode general categories (e.g. "Nd", "Ps") in the class.
        chars: Individual characters that belong to the class regardless of
               their category.
    """
    categories: frozenset = field(default_factory=frozenset)
    chars: frozenset = field(default_factory=frozenset)

    @classmethod
    def build(cls, categories: Iterable[str] = (), chars: Iterable[str] = ()) -> "CharClass":
        return cls(frozenset(categories), frozenset(chars))

    def contains(self, ch: Optional[str]) -> bool:
        if not ch:
            return False
        return ch in self.chars or unicodedata.category(ch) in self.categories

    __contains__ = contains


DEFAULT_DIGIT_OR_OPEN_PUNCT_OR_ALPHABET = CharClass.build(
    categories=("Nd", "Ps", "Pi", "Lu", "Ll", "Lt"),
)
DEFAULT_CLOSE_PUNCT = CharClass.build(
    categories=("Pe", "Pf"),
    chars="、。，．！？",
)
