from __future__ import annotations
from typing import List

from .features import FeatureWindow
from .model_store import ModelStore


class Scorer:
    """
    Decides whether a candidate boundary is a phrase break.

    The Scorer is the linear classifier at the heart of the engine. For a
    given feature window it asks the model's key scheme for the feature keys,
    sums their learned weights, and adds the model's bias. A boundary is
    accepted when that score is strictly positive.

    The Scorer only reads the model, so one instance can serve any number of
    concurrent range evaluations.

    Attributes:
        store: The `ModelStore` providing weights, bias and the key scheme.
    """
    def __init__(self, store: ModelStore):
        self.store = store

    def feature_keys(self, window: FeatureWindow) -> List[str]:
        return self.store.scheme.keys(window)

    def score(self, window: FeatureWindow) -> int:
        """
        Calculates the raw linear score of the boundary inside `window`.

        Keys the model does not know contribute nothing, which is also how
        sentinel slots near the edges of a range stay neutral unless the
        model encodes them explicitly.

        Args:
            window: The six-element window centred on the candidate boundary.

        Returns:
            The sum of the matched weights plus the model bias.
        """
        lookup = self.store.lookup
        return sum(lookup(key) for key in self.feature_keys(window)) + self.store.bias()

    def evaluate_breakpoint(self, window: FeatureWindow, index: int, boundary: List[int]) -> bool:
        """
        Scores one candidate boundary and records it if accepted.

        Args:
            window: The current feature window.
            index: The candidate boundary in normalized-string code units.
            boundary: The list of accepted boundaries; `index` is appended
                      to it when the candidate is accepted.

        Returns:
            True if the boundary was accepted.
        """
        if self.score(window) > 0:
            boundary.append(index)
            return True
        return False
