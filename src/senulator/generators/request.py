"""
Generation requests: one time window, base metadata and a set of units.

The request validates its window and units once, derives the duration and a
record-count hint, then walks every unit in declaration order and concatenates
their records. A failure in any unit aborts the whole request; no partial
record set is returned.
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from ..errors import BackwardsWindowError, NoUnitsError, SenulatorError, UnitGenerationError
from .record import Record, RecordFactory
from .unit import Unit

logger = logging.getLogger(__name__)

DEFAULT_VERSION = 10


@dataclass
class GenerationRequest:
    """Parameters shared by every unit of one generation run."""

    name: str
    start: int
    end: int
    units: list[Unit]
    version: int = DEFAULT_VERSION
    debug: bool = False
    duration: int = field(init=False)
    record_count: int = field(init=False)
    records: list[Record] = field(init=False, default_factory=list)

    def __post_init__(self):
        # Time running backwards is tolerated by SenML, not here
        if self.end < self.start:
            raise BackwardsWindowError(self.start, self.end)
        if not self.units:
            raise NoUnitsError()
        self.units = list(self.units)
        self.duration = self.end - self.start
        self.record_count = sum(unit.iterations(self.duration) for unit in self.units)

    @classmethod
    def create(
        cls,
        name: str,
        start: int,
        end: int,
        units: list[Unit],
        version: int = DEFAULT_VERSION,
        debug: bool = False,
    ) -> "GenerationRequest":
        """Validate the configuration and return a normalized request."""
        request = cls(name=name, start=start, end=end, units=units, version=version, debug=debug)
        logger.debug(
            "Created request %s: window=%ds units=%d record_count=%d",
            request.name,
            request.duration,
            len(request.units),
            request.record_count,
        )
        return request

    @property
    def factory(self) -> RecordFactory:
        return RecordFactory(name=self.name, start=self.start, version=self.version)

    def generate(
        self,
        rng: random.Random | None = None,
        max_workers: int | None = None,
    ) -> list[Record]:
        """
        Generate records for every unit.

        Args:
            rng: Randomness source; a time-seeded one is created when omitted
            max_workers: When > 1, walk units on a thread pool. Each unit then
                gets its own Random seeded from rng in declaration order.

        Returns:
            Records of all units, in unit declaration order and time order.

        Raises:
            UnitGenerationError: if any unit fails; records stays empty and
                no unit reading is updated.
        """
        rng = rng or random.Random()
        self.records = []

        if max_workers and max_workers > 1 and len(self.units) > 1:
            per_unit = self._generate_parallel(rng, max_workers)
        else:
            per_unit = [self._generate_unit(unit, rng) for unit in self.units]

        records: list[Record] = []
        for unit, (unit_records, reading) in zip(self.units, per_unit, strict=True):
            records.extend(unit_records)
            unit.reading = reading
        self.records = records

        logger.info(
            "Generated %d records for %s across %d units",
            len(records),
            self.name,
            len(self.units),
        )
        return self.records

    def _generate_parallel(
        self, rng: random.Random, max_workers: int
    ) -> list[tuple[list[Record], float]]:
        seeds = [rng.getrandbits(64) for _ in self.units]
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [
                pool.submit(self._generate_unit, unit, random.Random(seed))
                for unit, seed in zip(self.units, seeds, strict=True)
            ]
            return [f.result() for f in futures]

    def _generate_unit(self, unit: Unit, rng: random.Random) -> tuple[list[Record], float]:
        try:
            records, reading = unit.walk(self.factory, self.start, self.duration, rng)
        except SenulatorError as e:
            logger.error("Unit %s failed: %s", unit.name, e)
            raise UnitGenerationError(unit.name, str(e)) from e

        level = logging.INFO if self.debug else logging.DEBUG
        logger.log(
            level,
            "Final %s reading: %f",
            unit.name,
            reading,
            extra={"unit.name": unit.name, "unit.reading": reading},
        )
        return records, reading
