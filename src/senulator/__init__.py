"""
Senulator - synthetic sensor telemetry generation.

This package generates realistic, random measurement series for one or more
units over a fixed time window and emits them as SenML-shaped records.
"""

__version__ = "1.0.0"

from .errors import (
    BackwardsWindowError,
    ConfigurationError,
    InvalidTimestampError,
    NoUnitsError,
    SenulatorError,
    UnitGenerationError,
)
from .generators import Category, GenerationRequest, Record, RecordFactory, Unit
from .statistics import AliasTable

__all__ = [
    "AliasTable",
    "Category",
    "Unit",
    "Record",
    "RecordFactory",
    "GenerationRequest",
    "SenulatorError",
    "ConfigurationError",
    "BackwardsWindowError",
    "NoUnitsError",
    "InvalidTimestampError",
    "UnitGenerationError",
]
