"""Tests for records and the record factory."""

import pytest

from senulator.errors import InvalidTimestampError
from senulator.generators.record import Record, RecordFactory


def test_create_stamps_base_metadata() -> None:
    """Records carry base name, base time, base version and an offset."""
    factory = RecordFactory(name="urn:dev:ow:1", start=1000, version=10)
    record = factory.create(2.5, "m3", 1900)
    assert record == Record(
        base_name="urn:dev:ow:1",
        base_time=1000.0,
        base_version=10,
        time=900.0,
        value=2.5,
        unit="m3",
    )
    assert record.absolute_time == 1900.0


def test_create_at_window_start_has_zero_offset() -> None:
    """A timestamp equal to the start is valid and has offset 0."""
    record = RecordFactory(name="n", start=50, version=1).create(0.0, "Cel", 50)
    assert record.time == 0.0


def test_create_before_start_fails() -> None:
    """A timestamp earlier than the window start is rejected."""
    factory = RecordFactory(name="n", start=100, version=1)
    with pytest.raises(InvalidTimestampError) as exc_info:
        factory.create(1.0, "m3", 99)
    assert exc_info.value.timestamp == 99
    assert exc_info.value.start == 100


def test_to_senml_labels() -> None:
    """SenML labels map one-to-one onto record fields."""
    record = RecordFactory(name="dev", start=10, version=5).create(-1.5, "kWh", 70)
    assert record.to_senml() == {
        "bn": "dev",
        "bt": 10.0,
        "bver": 5,
        "t": 60.0,
        "v": -1.5,
        "u": "kWh",
    }
