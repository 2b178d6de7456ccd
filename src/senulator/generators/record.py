"""
Measurement records and the factory that stamps them with base metadata.

Every record produced by one request shares the same base name, base time
(the window start) and base version; only the time offset, value and unit
symbol vary. Field names follow SenML (RFC 8428) when serialized.
"""

from dataclasses import dataclass
from typing import Any

from ..errors import InvalidTimestampError


@dataclass(frozen=True)
class Record:
    """A single time-stamped measurement."""

    base_name: str
    base_time: float
    base_version: int
    time: float
    value: float
    unit: str

    def to_senml(self) -> dict[str, Any]:
        """Return the record as a SenML label/value mapping."""
        return {
            "bn": self.base_name,
            "bt": self.base_time,
            "bver": self.base_version,
            "t": self.time,
            "v": self.value,
            "u": self.unit,
        }

    @property
    def absolute_time(self) -> float:
        """Base time plus offset, in seconds."""
        return self.base_time + self.time


@dataclass(frozen=True)
class RecordFactory:
    """Create records for one request window."""

    name: str
    start: int
    version: int

    def create(self, value: float, symbol: str, timestamp: int) -> Record:
        """
        Build a record for an absolute timestamp.

        Raises:
            InvalidTimestampError: if timestamp is before the window start.
        """
        if timestamp < self.start:
            raise InvalidTimestampError(timestamp, self.start)
        return Record(
            base_name=self.name,
            base_time=float(self.start),
            base_version=self.version,
            time=float(timestamp - self.start),
            value=value,
            unit=symbol,
        )
