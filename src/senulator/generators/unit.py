"""
Measurable units and the bounded random walk that produces their readings.

A unit owns an ordered list of categories (a weight plus a value range), an
optional floor and ceiling, a sampling interval and a running total. At each
step a category is drawn with the alias method, a delta is drawn inside that
category's span, and the delta is reflected when it would carry the running
total past the ceiling or below the floor.
"""

import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..errors import ConfigurationError
from ..statistics.alias import AliasTable
from .record import Record, RecordFactory


@dataclass(frozen=True)
class Category:
    """A weighted value range a reading may fall into."""

    weight: float
    lower: float
    upper: float

    @property
    def span(self) -> float:
        return self.upper - self.lower


@dataclass
class Unit:
    """
    An individual measurable unit.

    Attributes:
        name: Human readable unit name (e.g. "volume")
        symbol: Unit symbol copied into every record (e.g. "m3")
        categories: Ordered categories; index i is the alias table's index i
        interval: Sampling period in seconds, must be > 0
        reading: Running total of applied deltas; persists across runs
        use_floor/floor: Reflect deltas that would take the total below floor
        use_ceiling/ceiling: Reflect deltas that would take the total above ceiling
    """

    name: str
    symbol: str
    categories: list[Category]
    interval: int
    reading: float = 0.0
    use_floor: bool = False
    floor: float = 0.0
    use_ceiling: bool = False
    ceiling: float = 0.0
    initial_reading: float = field(init=False, repr=False)
    table: AliasTable = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if isinstance(self.interval, bool) or not isinstance(self.interval, int):
            raise ConfigurationError(f"unit '{self.name}': interval must be an integer")
        if self.interval <= 0:
            raise ConfigurationError(f"unit '{self.name}': interval must be > 0")
        self.categories = list(self.categories)
        self.initial_reading = self.reading
        try:
            self.table = AliasTable(self.probability)
        except ConfigurationError as e:
            raise ConfigurationError(f"unit '{self.name}': {e}") from e

    @classmethod
    def from_mapping(
        cls,
        name: str,
        symbol: str,
        probability: Sequence[float],
        categories: Mapping[int, Sequence[float]],
        interval: int,
        **kwargs: Any,
    ) -> "Unit":
        """
        Build a unit from a weights list and an index -> [lower, upper] map.

        Every index referenced by probability must have a range.
        """
        merged: list[Category] = []
        for index, weight in enumerate(probability):
            bounds = categories.get(index)
            if bounds is None:
                raise ConfigurationError(f"unit '{name}': category {index} has no range")
            if len(bounds) != 2:
                raise ConfigurationError(
                    f"unit '{name}': category {index} range must be [lower, upper]"
                )
            merged.append(Category(weight=weight, lower=bounds[0], upper=bounds[1]))
        return cls(name=name, symbol=symbol, categories=merged, interval=interval, **kwargs)

    @property
    def probability(self) -> list[float]:
        """Category weights in index order."""
        return [c.weight for c in self.categories]

    def alias_table(self) -> AliasTable:
        """Category sampler built from the weights at construction."""
        return self.table

    def iterations(self, duration: int) -> int:
        """Number of samples that fit in a window of the given duration."""
        return duration // self.interval

    def reset(self, reading: float | None = None) -> None:
        """Restore the running total (to its initial value unless one is given)."""
        self.reading = self.initial_reading if reading is None else reading

    def step(self, reading: float, table: AliasTable, rng: random.Random) -> tuple[float, float]:
        """
        Draw one delta and apply it to a running total.

        Returns (delta, new_reading). The delta is drawn from [0, upper - lower)
        of the chosen category. Ceiling and floor checks are independent, so a
        delta that trips both is negated twice.
        """
        category = self.categories[table.next(rng)]

        delta = rng.random() * category.span
        if self.use_ceiling and reading + delta > self.ceiling:
            delta = -delta
        if self.use_floor and reading - delta < self.floor:
            delta = -delta
        return delta, reading + delta

    def walk(
        self,
        factory: RecordFactory,
        start: int,
        duration: int,
        rng: random.Random,
    ) -> tuple[list[Record], float]:
        """
        Generate this unit's records for a window.

        Returns (records, final_total). The unit's own reading is left as is;
        callers commit the total once the whole run succeeded.
        """
        reading = self.reading
        records: list[Record] = []
        for i in range(self.iterations(duration)):
            delta, reading = self.step(reading, self.table, rng)
            records.append(factory.create(delta, self.symbol, start + i * self.interval))
        return records, reading
