"""Record generators: units, record factory and generation requests."""

from .log_generator import GenerationLogger
from .record import Record, RecordFactory
from .request import GenerationRequest
from .unit import Category, Unit

__all__ = [
    "Category",
    "Unit",
    "Record",
    "RecordFactory",
    "GenerationRequest",
    "GenerationLogger",
]
