"""
Exceptions raised while configuring or running a generation request.

Configuration errors are raised before any generation work starts; the
remaining errors abort the generation call without returning partial output.
"""


class SenulatorError(Exception):
    """Base class for all senulator errors."""

    pass


class ConfigurationError(SenulatorError):
    """Raised when a request, unit or sampler is configured incorrectly."""

    pass


class BackwardsWindowError(ConfigurationError):
    """Raised when the window end time is before its start time."""

    def __init__(self, start: int, end: int):
        super().__init__(f"end time before start time (start={start}, end={end})")
        self.start = start
        self.end = end


class NoUnitsError(ConfigurationError):
    """Raised when a request has no units to generate."""

    def __init__(self) -> None:
        super().__init__("no units provided")


class InvalidTimestampError(SenulatorError):
    """Raised when a record timestamp precedes the window start."""

    def __init__(self, timestamp: int, start: int):
        super().__init__(f"record time before start time (time={timestamp}, start={start})")
        self.timestamp = timestamp
        self.start = start


class UnitGenerationError(SenulatorError):
    """Raised when a unit's record set could not be generated."""

    def __init__(self, unit: str, reason: str = ""):
        message = f"failed to generate unit record set: {unit}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.unit = unit
