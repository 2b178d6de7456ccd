"""
Alias-method sampling for weighted categorical choices.

Builds a table in O(n) (Vose's method) so that each draw of a category index
costs O(1), no matter how many categories a unit defines.

Example:
    table = AliasTable([0.7, 0.2, 0.1])
    rng = random.Random(42)
    index = table.next(rng)  # 0 about 70% of the time
"""

import math
import random
from collections.abc import Sequence

from ..errors import ConfigurationError


class AliasTable:
    """
    Weighted categorical sampler using the alias method.

    Weights are relative; they do not need to sum to 1. Each slot keeps a
    threshold probability and an alias index: a draw picks a uniform slot and
    returns the slot itself when a uniform fraction falls below the threshold,
    otherwise the slot's alias.
    """

    def __init__(self, weights: Sequence[float]):
        if not weights:
            raise ConfigurationError("alias table requires at least one weight")
        for i, w in enumerate(weights):
            if not math.isfinite(w) or w < 0:
                raise ConfigurationError(f"weight {i} must be a non-negative number, got {w}")
        total = math.fsum(weights)
        if total <= 0:
            raise ConfigurationError("weights must sum to a positive number")

        n = len(weights)
        self.weights = [float(w) for w in weights]
        self.prob = [0.0] * n
        self.alias = list(range(n))

        scaled = [w * n / total for w in weights]
        small = [i for i, p in enumerate(scaled) if p < 1.0]
        large = [i for i, p in enumerate(scaled) if p >= 1.0]

        while small and large:
            less = small.pop()
            more = large.pop()
            self.prob[less] = scaled[less]
            self.alias[less] = more
            scaled[more] = (scaled[more] + scaled[less]) - 1.0
            if scaled[more] < 1.0:
                small.append(more)
            else:
                large.append(more)

        # Whatever remains is 1 up to rounding error
        for i in large:
            self.prob[i] = 1.0
        for i in small:
            self.prob[i] = 1.0

    def __len__(self) -> int:
        return len(self.prob)

    def next(self, rng: random.Random) -> int:
        """Draw a category index."""
        slot = rng.randrange(len(self.prob))
        if rng.random() < self.prob[slot]:
            return slot
        return self.alias[slot]

    def probabilities(self) -> list[float]:
        """Normalized probability of each index, reconstructed from the table."""
        n = len(self.prob)
        out = [0.0] * n
        for slot in range(n):
            out[slot] += self.prob[slot] / n
            out[self.alias[slot]] += (1.0 - self.prob[slot]) / n
        return out
